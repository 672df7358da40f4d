"""Token creation and verification service."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from tcg_catalog.config import get_settings


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as described by a verified access token."""

    subject: str
    scopes: tuple[str, ...] = ()


def create_access_token(
    subject: str,
    scopes: Iterable[str] = (),
    expires_delta: timedelta | None = None,
) -> str:
    """Create an access token for a subject."""
    settings = get_settings()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode: dict[str, object] = {
        "sub": subject,
        "exp": expire,
        "type": "access",
        "scope": " ".join(scopes),
    }
    if settings.JWT_AUDIENCE:
        to_encode["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> Principal | None:
    """Verify an access token and return its principal if valid."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except InvalidTokenError:
        return None

    # Reject refresh tokens or anything else that is not an access token
    if payload.get("type", "access") != "access":
        return None
    subject = payload.get("sub")
    if not subject:
        return None
    scopes = tuple(str(payload.get("scope", "")).split())
    return Principal(subject=str(subject), scopes=scopes)
