# Standard library imports
from typing import Optional

# External package imports
from fastapi import Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.services.ownership_enforcer import OwnershipEnforcer
from ...domain.exceptions import TokenError
from ...domain.models.token import Identity
from ...di.container import get_container


# Errors are raised by get_current_identity so they keep the {"error": ...} shape
security_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security_scheme),
) -> Identity:
    """
    FastAPI dependency resolving the caller from the Authorization header

    Args:
        request: Incoming request
        credentials: HTTP Bearer token credentials, None if the header is
            absent or does not carry a bearer token

    Returns:
        Identity of the authenticated caller

    Raises:
        TokenError: Rendered as 401 by the error handlers
    """
    token: Optional[str] = None
    if credentials is not None:
        token = credentials.credentials
    elif request.headers.get("Authorization", "").strip():
        raise TokenError(TokenError.INVALID)

    container = get_container()
    enforcer = container.get(OwnershipEnforcer)
    return await enforcer.authenticate(token)
