"""FastAPI entrypoint for the delivery restaurant back-office."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from backoffice.api.v1.api import api_router
from backoffice.core.config import settings
from backoffice.db import session as db_session
from backoffice.db.base import Base
from backoffice.db.migrations import ensure_sqlite_schema
from backoffice.db.seed import ensure_seed_data
from backoffice.services.store import StoreWriteError

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    same_site="lax",
    https_only=False,
    max_age=60 * 60 * 24 * 7,
)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    if not os.getenv("SESSION_SECRET"):
        logger.warning("SESSION_SECRET not set; using development fallback secret.")
    Base.metadata.create_all(bind=db_session.engine)
    ensure_sqlite_schema(db_session.engine)
    with db_session.SessionLocal() as session:
        try:
            ensure_seed_data(session)
        except Exception:
            logger.exception("[BOOTSTRAP] Seed/bootstrap failed; continuing startup.")


@app.exception_handler(StoreWriteError)
def store_write_error_handler(request: Request, exc: StoreWriteError) -> JSONResponse:
    logger.exception("[STORE] Write failed on %s %s.", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Não foi possível salvar as alterações."},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
