"""User service operations."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from backoffice.models.user import User


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email.strip().lower()).limit(1))


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(
    db: Session,
    email: str,
    hashed_password: str,
    full_name: str | None = None,
) -> User:
    user = User(email=email.strip().lower(), password_hash=hashed_password, full_name=full_name, is_active=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def mark_login(db: Session, user: User) -> None:
    user.last_login_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)


def update_profile(
    db: Session,
    user: User,
    *,
    full_name: str | None = None,
    hashed_password: str | None = None,
) -> User:
    """Persist name and/or password changes for the given user."""
    if full_name is not None:
        user.full_name = full_name.strip() or None
    if hashed_password is not None:
        user.password_hash = hashed_password
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
