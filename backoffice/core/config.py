"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the back-office."""

    app_name: str = "Delivery Back-office API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./backoffice.db")
    jwt_secret_key: str = getenv("JWT_SECRET_KEY", "dev-only-change-me-to-a-long-random-secret")
    jwt_algorithm: str = getenv("JWT_ALGORITHM", "HS256")
    jwt_expire_minutes: int = int(getenv("JWT_EXPIRE_MINUTES", "60"))
    session_secret: str = getenv("SESSION_SECRET", "dev-session-secret-change-me")
    admin_email: str = getenv("ADMIN_EMAIL", "")
    admin_password: str = getenv("ADMIN_PASSWORD", "")
    receipt_footer: str = getenv("RECEIPT_FOOTER", "Obrigado pela preferência!")


settings: Settings = Settings()
