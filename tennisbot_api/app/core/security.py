"""
Access control for the administrator routes.

The storefront has no user accounts.  Administrator endpoints are
guarded by a single static bearer token configured through
``ADMIN_TOKEN``; when the variable is empty the guard lets every request
through.
"""

import hmac
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


security = HTTPBearer(auto_error=False)


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """Dependency that enforces the administrator token.

    Raises HTTP 401 when a token is configured and the request does not
    carry it in the ``Authorization: Bearer`` header.
    """
    expected = settings.admin_token
    if not expected:
        return
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(credentials.credentials.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token",
            headers={"WWW-Authenticate": "Bearer"},
        )
