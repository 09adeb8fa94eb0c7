"""Authentication endpoints (session cookie + API JWT)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backoffice.auth import AuthSession, get_auth_session
from backoffice.core.security import create_access_token, get_current_user, get_password_hash, verify_password
from backoffice.db.session import get_db
from backoffice.models.user import User
from backoffice.schemas.auth import AuthUserResponse, LoginRequest, ProfileUpdate, TokenResponse
from backoffice.services.user_service import get_user_by_email, mark_login, update_profile

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    auth_session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db),
) -> TokenResponse:
    user: User | None = get_user_by_email(db=db, email=payload.email)
    if user is None or not user.is_active or not verify_password(payload.password, user.password_hash):
        logger.info("[AUTH] Failed login for %s.", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password")
    auth_session.login(user)
    mark_login(db, user)
    logger.info("[AUTH] user_id=%s logged in.", user.id)
    return TokenResponse(access_token=create_access_token(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(auth_session: AuthSession = Depends(get_auth_session)) -> Response:
    auth_session.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=AuthUserResponse)
def me(current_user: User = Depends(get_current_user)) -> AuthUserResponse:
    return AuthUserResponse.model_validate(current_user)


@router.patch("/profile", response_model=AuthUserResponse)
def edit_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    auth_session: AuthSession = Depends(get_auth_session),
    db: Session = Depends(get_db),
) -> AuthUserResponse:
    """Change the logged-in user's name and/or password."""
    hashed_password: str | None = None
    if payload.new_password:
        if not payload.current_password or not verify_password(payload.current_password, current_user.password_hash):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Senha atual incorreta")
        hashed_password = get_password_hash(payload.new_password)

    user = update_profile(db, current_user, full_name=payload.full_name, hashed_password=hashed_password)
    if auth_session.current_session() is not None:
        auth_session.login(user)
    logger.info("[AUTH] Profile updated for user_id=%s (password_changed=%s).", user.id, hashed_password is not None)
    return AuthUserResponse.model_validate(user)
