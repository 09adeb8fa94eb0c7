"""Password hashing and back-office authentication.

Operators authenticate with either a bearer JWT (API clients) or the signed
session cookie set at login (browser).
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from backoffice.auth import AuthSession, get_auth_session
from backoffice.core.config import settings
from backoffice.db.session import get_db
from backoffice.models.user import User

pwd_context: CryptContext = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer_scheme: HTTPBearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User) -> str:
    """Sign a token for an operator; ``sub`` carries the user id."""
    expires_at: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    claims: dict[str, Any] = {"sub": str(user.id), "email": user.email, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """Return the user id carried by a token, raising 401 when it is unusable."""
    try:
        claims: dict[str, Any] = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise _unauthorized("Token inválido ou expirado.") from exc

    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise _unauthorized("Token inválido ou expirado.") from exc


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the logged-in operator from a bearer token or the session cookie."""
    if credentials is not None:
        user_id: int = decode_access_token(credentials.credentials)
    else:
        current = auth_session.current_session()
        if current is None:
            raise _unauthorized("Faça login para continuar.")
        user_id = int(current["user_id"])

    user: User | None = db.get(User, user_id)
    if user is None or not user.is_active:
        raise _unauthorized("Usuário não encontrado ou inativo.")
    return user
