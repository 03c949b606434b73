"""FastAPI dependency utilities."""

from __future__ import annotations

import hmac
import logging

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agrilink.config import get_settings
from agrilink.domain.entities import User
from agrilink.infrastructure.database import get_db
from agrilink.infrastructure.i18n import LOCALE_COOKIE_NAME, ResolvedLocale, resolve_locale
from agrilink.infrastructure.repositories import UserRepository
from agrilink.infrastructure.security import decode_access_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthorized() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized()
    return user


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user or fail with ``401``."""

    if not token:
        raise _unauthorized()
    return resolve_current_user(token, db)


def get_optional_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the authenticated user, or ``None`` for anonymous callers.

    Invalid tokens and failed user lookups both leave the caller anonymous.
    """

    if not token:
        return None
    try:
        return resolve_current_user(token, db)
    except HTTPException:
        return None
    except SQLAlchemyError:
        logger.exception("Session lookup failed; treating caller as anonymous")
        db.rollback()
        return None


def get_request_locale(request: Request) -> ResolvedLocale:
    """Resolve the locale carried by the request's locale cookie."""

    return resolve_locale(request.cookies.get(LOCALE_COOKIE_NAME))


def verify_cron_secret(authorization: str | None = Header(default=None)) -> None:
    """Accept only calls bearing the configured ``CRON_SECRET``."""

    cron_secret = get_settings().cron_secret
    expected = f"Bearer {cron_secret}" if cron_secret else None
    if expected is None or authorization is None or not hmac.compare_digest(
        authorization, expected
    ):
        logger.warning("Rejected scheduled job call with missing or invalid secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
