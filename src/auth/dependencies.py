"""Bearer token validation for tool endpoints (FastAPI dependency)."""

import hmac

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.config import Settings, get_settings

_bearer = HTTPBearer(auto_error=False)


async def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    settings: Settings = Depends(get_settings),
) -> None:
    """Check ``Authorization: Bearer`` against TOOL_BEARER_TOKEN, if one is configured."""
    if not settings.tool_bearer_token:
        return
    if credentials is None or not hmac.compare_digest(
        credentials.credentials, settings.tool_bearer_token
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token",
        )
