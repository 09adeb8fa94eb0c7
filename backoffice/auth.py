"""Explicit per-request authentication session for back-office users."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from fastapi import Request

from backoffice.models.user import User

SessionUser = dict[str, Any]


class AuthSession:
    """Login state stored in the signed session cookie of one request.

    Handlers receive this object through ``Depends(get_auth_session)`` instead
    of reading a module-level "current user".
    """

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self._store = store

    def login(self, user: User) -> SessionUser:
        """Bind user to the session, replacing any previous login."""
        self._store.clear()
        self._store["user_id"] = user.id
        self._store["email"] = user.email
        self._store["full_name"] = user.full_name
        return {"user_id": user.id, "email": user.email, "full_name": user.full_name}

    def logout(self) -> None:
        self._store.clear()

    def current_session(self) -> SessionUser | None:
        """Return the logged-in user snapshot, or None when anonymous."""
        user_id = self._store.get("user_id")
        email = self._store.get("email")
        if user_id and email:
            return {"user_id": user_id, "email": email, "full_name": self._store.get("full_name")}
        return None


def get_auth_session(request: Request) -> AuthSession:
    """FastAPI dependency building the session object for the current request."""
    return AuthSession(request.session)
