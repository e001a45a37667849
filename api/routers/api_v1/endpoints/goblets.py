"""
Goblet Endpoints

Yearly goblet minting against a complete gemstone set, the administrator
backfill path, metadata URIs and supply status.
"""

import logging

from fastapi import APIRouter, Depends, Path

from api.dependencies.auth import CallerContext, get_caller_from_token, require_admin_session
from api.enums import Collection
from api.schemas.gemstone import (
    BalanceResponse,
    OperatorApprovalRequest,
    OperatorApprovalResponse,
    TransferRequest,
    TransferResponse,
)
from api.schemas.goblet import (
    GobletCidResponse,
    GobletCidUpdateRequest,
    GobletMintResponse,
    GobletStatusResponse,
    GobletUriResponse,
)
from api.schemas.session import ErrorResponse
from api.services.collection_service import CollectionService, get_collection_service
from api.utils.addresses import parse_request_address
from goblet_contracts.types import MAX_GOBLET_SUPPLY
from goblet_contracts.util import in_minting_window


logger = logging.getLogger(__name__)

router = APIRouter()


def _mint_response(service: CollectionService, token_id: int, owner: str) -> GobletMintResponse:
    return GobletMintResponse(
        token_id=token_id,
        owner=owner,
        calendar_year=service.goblets.calendar_year(token_id),
        uri=service.goblets.uri(token_id),
    )


@router.post(
    "/mint",
    response_model=GobletMintResponse,
    summary="Mint a goblet",
    description=(
        "Redeem one complete set of six gemstones held by the caller and mint a goblet. "
        "Each wallet can mint once per yearly window, for three years."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Not eligible to mint goblet"},
        409: {"model": ErrorResponse, "description": "Already minted a goblet this year"},
        410: {"model": ErrorResponse, "description": "Minting window closed or supply exhausted"},
    },
)
async def mint_goblet(
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> GobletMintResponse:
    token_id = service.mint_goblet(caller.address)
    return _mint_response(service, token_id, caller.address)


@router.post(
    "/owner-mint",
    response_model=GobletMintResponse,
    summary="Administrator goblet mint",
    description="Mint the next goblet to the administrator, bypassing eligibility and the yearly window.",
    responses={
        403: {"model": ErrorResponse, "description": "Caller is not the administrator"},
        410: {"model": ErrorResponse, "description": "Supply exhausted"},
    },
)
async def owner_goblet_mint(
    caller: CallerContext = Depends(require_admin_session),
    service: CollectionService = Depends(get_collection_service),
) -> GobletMintResponse:
    token_id = service.owner_goblet_mint(caller.address)
    return _mint_response(service, token_id, caller.address)


@router.post(
    "/transfer",
    response_model=TransferResponse,
    summary="Transfer goblets",
    responses={
        400: {"model": ErrorResponse, "description": "Insufficient balance"},
        403: {"model": ErrorResponse, "description": "Caller is not owner nor approved"},
    },
)
async def transfer_goblet(
    request: TransferRequest,
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> TransferResponse:
    sender = parse_request_address(request.sender) if request.sender else caller.address
    recipient = parse_request_address(request.recipient)
    service.transfer_goblet(caller.address, sender, recipient, request.token_id, request.amount)
    return TransferResponse(
        collection=Collection.GOBLET.value,
        sender=sender,
        recipient=recipient,
        token_id=request.token_id,
        amount=request.amount,
    )


@router.get(
    "/status",
    response_model=GobletStatusResponse,
    summary="Goblet supply and minting window",
)
async def get_goblet_status(
    service: CollectionService = Depends(get_collection_service),
) -> GobletStatusResponse:
    index = service.goblets.current_year_index()
    return GobletStatusResponse(
        total_supply=service.goblets.total_supply,
        max_supply=MAX_GOBLET_SUPPLY,
        year_index=index,
        minting_open=in_minting_window(index) and service.goblets.total_supply < MAX_GOBLET_SUPPLY,
        cid=service.goblets.cid,
    )


@router.put(
    "/cid",
    response_model=GobletCidResponse,
    summary="Update goblet metadata CID",
    description="Replace the CID of all goblet metadata URIs, including already minted goblets (administrator only).",
    responses={403: {"model": ErrorResponse, "description": "Caller is not the administrator"}},
)
async def update_goblet_cid(
    request: GobletCidUpdateRequest,
    caller: CallerContext = Depends(require_admin_session),
    service: CollectionService = Depends(get_collection_service),
) -> GobletCidResponse:
    service.update_goblet_cid(caller.address, request.cid)
    return GobletCidResponse(cid=service.goblets.cid)


@router.get(
    "/{address}/balances/{token_id}",
    response_model=BalanceResponse,
    summary="Get goblet balance",
)
async def get_goblet_balance(
    address: str = Path(..., description="Wallet address"),
    token_id: int = Path(..., description="Goblet id"),
    service: CollectionService = Depends(get_collection_service),
) -> BalanceResponse:
    holder = parse_request_address(address)
    return BalanceResponse(address=holder, token_id=token_id, balance=service.goblets.balance_of(holder, token_id))


@router.get(
    "/{token_id}/uri",
    response_model=GobletUriResponse,
    summary="Get goblet metadata URI",
    responses={404: {"model": ErrorResponse, "description": "Goblet not minted"}},
)
async def get_goblet_uri(
    token_id: int = Path(..., description="Goblet id"),
    service: CollectionService = Depends(get_collection_service),
) -> GobletUriResponse:
    return GobletUriResponse(token_id=token_id, uri=service.goblets.uri(token_id))


@router.put(
    "/operators",
    response_model=OperatorApprovalResponse,
    summary="Set goblet operator approval",
    responses={403: {"model": ErrorResponse, "description": "Cannot approve self"}},
)
async def set_goblet_operator(
    request: OperatorApprovalRequest,
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> OperatorApprovalResponse:
    operator = parse_request_address(request.operator)
    service.set_goblet_operator(caller.address, operator, request.approved)
    return OperatorApprovalResponse(
        collection=Collection.GOBLET.value,
        owner=caller.address,
        operator=operator,
        approved=request.approved,
    )
