"""HTTP-level exceptions for the catalog API."""

from fastapi import HTTPException
from starlette import status

CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="The JWT token is missing, invalid or expired. Please log in again.",
    headers={"WWW-Authenticate": "Bearer"},
)
