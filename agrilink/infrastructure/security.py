"""Security helpers for signing and reading session tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from agrilink.config import get_settings

ALGORITHM = "HS256"

settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_user_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Return a session token whose subject is ``user_id``."""

    return create_access_token({"sub": str(user_id)}, expires_delta=expires_delta)


__all__ = ["create_access_token", "create_user_token", "decode_access_token"]
