"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tcg_catalog.exceptions import CredentialsException
from tcg_catalog.infrastructure.identity.auth.token_service import (
    Principal,
    verify_access_token,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Principal:
    """
    Get the authenticated caller from the bearer token.

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise CredentialsException

    principal = verify_access_token(credentials.credentials)
    if principal is None:
        raise CredentialsException
    return principal

