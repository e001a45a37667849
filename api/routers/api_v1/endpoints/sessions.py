"""
Session Endpoints

Opens wallet sessions. The operator backend vouches for the wallet with the
API key and receives a Bearer token bound to the wallet address.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.config import settings
from api.enums import CallerRole
from api.schemas.session import ErrorResponse, SessionCreateRequest, SessionResponse
from api.services.collection_service import CollectionService, get_collection_service
from api.services.token_service import TokenService
from api.utils.addresses import InvalidAddressError, normalize_address
from api.utils.security import get_api_key


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=SessionResponse,
    summary="Open a wallet session",
    description="Issue a session token acting as the given wallet address. Requires the operator API key.",
    responses={
        401: {"model": ErrorResponse, "description": "Invalid or missing API key"},
        422: {"model": ErrorResponse, "description": "Invalid address"},
    },
)
async def create_session(
    request: SessionCreateRequest,
    api_key: str = Depends(get_api_key),
    service: CollectionService = Depends(get_collection_service),
) -> SessionResponse:
    """
    Open a session for a wallet.

    The session role is **admin** when the address is the collection
    administrator and **holder** otherwise.
    """
    try:
        address = normalize_address(request.address, settings.network)
    except InvalidAddressError as e:
        raise HTTPException(status_code=422, detail=str(e))

    role = CallerRole.ADMIN if address == service.administrator else CallerRole.HOLDER
    token, jti, expires_at = TokenService.create_session_token(address, role)
    logger.info(f"Opened {role.value} session for {address}")

    return SessionResponse(access_token=token, address=address, role=role, expires_at=expires_at)
