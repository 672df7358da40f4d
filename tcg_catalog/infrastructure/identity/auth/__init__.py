from .token_service import Principal, create_access_token, verify_access_token

__all__ = ["Principal", "create_access_token", "verify_access_token"]
