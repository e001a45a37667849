"""
Authentication Dependencies

FastAPI dependencies resolving the calling wallet from a session token.
The collections enforce their own access rules against the caller address.
"""

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.enums import CallerRole
from api.services.token_service import InvalidTokenError, TokenService


# HTTP Bearer security scheme for Swagger UI
bearer_scheme = HTTPBearer(auto_error=False)


class CallerContext:
    """
    Context object returned by authentication dependency.
    """

    def __init__(self, address: str, role: CallerRole):
        """
        Initialize caller context.

        Args:
            address: Wallet address the session acts as
            role: Caller role (HOLDER or ADMIN)
        """
        self.address = address
        self.role = role


async def get_caller_from_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None
) -> CallerContext:
    """
    FastAPI dependency to authenticate the calling wallet from a JWT token.

    Usage in endpoints:
        @router.post("/protected-endpoint")
        async def my_endpoint(caller: CallerContext = Depends(get_caller_from_token)):
            ...

    Args:
        credentials: HTTP Bearer credentials from Authorization header

    Returns:
        CallerContext with the wallet address and role

    Raises:
        HTTPException 401: If authentication fails
    """
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Please provide a Bearer token."
        )

    try:
        payload = TokenService.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    address = payload.get("sub")
    if not address or not payload.get("jti"):
        raise HTTPException(status_code=401, detail="Invalid token payload")

    try:
        role = CallerRole(payload.get("role"))
    except ValueError:
        raise HTTPException(
            status_code=401,
            detail=f"Invalid caller role in token: {payload.get('role')}"
        )

    return CallerContext(address=address, role=role)


async def require_admin_session(
    caller: Annotated[CallerContext, Depends(get_caller_from_token)]
) -> CallerContext:
    """
    Require an administrator session for endpoint access

    Holder sessions are turned away here; the collections still check the
    caller address against their administrator.

    Raises:
        HTTPException: 403 Forbidden if the session is not an admin session
    """
    if caller.role != CallerRole.ADMIN:
        raise HTTPException(
            status_code=403,
            detail="Admin access required. This endpoint requires an administrator session."
        )

    return caller
