"""
Gemstone Endpoints

Whitelist administration, whitelisted minting, transfers and goblet
eligibility for the gemstone collection.
"""

import logging

from fastapi import APIRouter, Depends, Path

from api.dependencies.auth import CallerContext, get_caller_from_token, require_admin_session
from api.enums import Collection
from api.schemas.gemstone import (
    BalanceResponse,
    EligibilityResponse,
    GemstoneCidResponse,
    GemstoneCidUpdateRequest,
    GemstoneMintRequest,
    GemstoneMintResponse,
    GemstoneUriResponse,
    OperatorApprovalRequest,
    OperatorApprovalResponse,
    TransferRequest,
    TransferResponse,
    WhitelistRequest,
    WhitelistResponse,
)
from api.schemas.session import ErrorResponse
from api.services.collection_service import CollectionService, get_collection_service
from api.utils.addresses import parse_request_address
from goblet_contracts.util import to_gem_type


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/whitelist",
    response_model=WhitelistResponse,
    summary="Whitelist an address",
    description="Admit an address to mint one gemstone of a type (administrator only).",
    responses={
        403: {"model": ErrorResponse, "description": "Caller is not the administrator"},
        409: {"model": ErrorResponse, "description": "Address already whitelisted for this type"},
        422: {"model": ErrorResponse, "description": "Unknown gem type or invalid address"},
    },
)
async def admit_to_whitelist(
    request: WhitelistRequest,
    caller: CallerContext = Depends(require_admin_session),
    service: CollectionService = Depends(get_collection_service),
) -> WhitelistResponse:
    address = parse_request_address(request.address)
    service.admit_to_whitelist(caller.address, address, request.gem_type)
    gem = to_gem_type(request.gem_type)
    return WhitelistResponse(address=address, gem_type=int(gem), gem_name=gem.display_name)


@router.post(
    "/mint",
    response_model=GemstoneMintResponse,
    summary="Mint a whitelisted gemstone",
    description="Mint the gemstone the caller is whitelisted for. Each whitelist entry mints once.",
    responses={
        403: {"model": ErrorResponse, "description": "Caller is not whitelisted for this type"},
        409: {"model": ErrorResponse, "description": "Whitelist entry already used"},
        410: {"model": ErrorResponse, "description": "All gemstones of this type are minted"},
    },
)
async def mint_gemstone(
    request: GemstoneMintRequest,
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> GemstoneMintResponse:
    token_id = service.mint_gemstone(caller.address, request.gem_type)
    gem = to_gem_type(request.gem_type)
    uri = service.gemstones.uri(token_id) if service.gemstones.unredeemed_cid else None
    return GemstoneMintResponse(
        token_id=token_id,
        gem_type=int(gem),
        gem_name=gem.display_name,
        owner=caller.address,
        uri=uri,
    )


@router.post(
    "/transfer",
    response_model=TransferResponse,
    summary="Transfer gemstones",
    description="Transfer gemstones from the caller, or from a holder the caller operates for.",
    responses={
        400: {"model": ErrorResponse, "description": "Insufficient balance"},
        403: {"model": ErrorResponse, "description": "Caller is not owner nor approved"},
    },
)
async def transfer_gemstone(
    request: TransferRequest,
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> TransferResponse:
    sender = parse_request_address(request.sender) if request.sender else caller.address
    recipient = parse_request_address(request.recipient)
    service.transfer_gemstone(caller.address, sender, recipient, request.token_id, request.amount)
    return TransferResponse(
        collection=Collection.GEMSTONE.value,
        sender=sender,
        recipient=recipient,
        token_id=request.token_id,
        amount=request.amount,
    )


@router.get(
    "/{address}/balances/{token_id}",
    response_model=BalanceResponse,
    summary="Get gemstone balance",
)
async def get_gemstone_balance(
    address: str = Path(..., description="Wallet address"),
    token_id: int = Path(..., description="Gemstone token id"),
    service: CollectionService = Depends(get_collection_service),
) -> BalanceResponse:
    holder = parse_request_address(address)
    return BalanceResponse(address=holder, token_id=token_id, balance=service.gemstones.balance_of(holder, token_id))


@router.get(
    "/{address}/eligibility",
    response_model=EligibilityResponse,
    summary="Check goblet eligibility",
    description="List the six gemstones a goblet mint would redeem for this address right now.",
)
async def get_eligibility(
    address: str = Path(..., description="Wallet address"),
    service: CollectionService = Depends(get_collection_service),
) -> EligibilityResponse:
    holder = parse_request_address(address)
    selection = service.eligibility(holder)
    return EligibilityResponse(
        address=holder,
        eligible=selection is not None,
        token_ids=list(selection) if selection else [],
    )


@router.get(
    "/cid",
    response_model=GemstoneCidResponse,
    summary="Get gemstone metadata CIDs",
)
async def get_gemstone_cid(
    service: CollectionService = Depends(get_collection_service),
) -> GemstoneCidResponse:
    return GemstoneCidResponse(
        unredeemed_cid=service.gemstones.unredeemed_cid,
        redeemed_cid=service.gemstones.redeemed_cid,
    )


@router.put(
    "/cid",
    response_model=GemstoneCidResponse,
    summary="Update gemstone metadata CID",
    description="Replace the CID of redeemed or unredeemed gemstone metadata (administrator only).",
    responses={403: {"model": ErrorResponse, "description": "Caller is not the administrator"}},
)
async def update_gemstone_cid(
    request: GemstoneCidUpdateRequest,
    caller: CallerContext = Depends(require_admin_session),
    service: CollectionService = Depends(get_collection_service),
) -> GemstoneCidResponse:
    service.update_gemstone_cid(caller.address, request.cid, request.redeemed)
    return GemstoneCidResponse(
        unredeemed_cid=service.gemstones.unredeemed_cid,
        redeemed_cid=service.gemstones.redeemed_cid,
    )


@router.get(
    "/{token_id}/uri",
    response_model=GemstoneUriResponse,
    summary="Get gemstone metadata URI",
    responses={404: {"model": ErrorResponse, "description": "Gemstone not minted"}},
)
async def get_gemstone_uri(
    token_id: int = Path(..., description="Gemstone token id"),
    service: CollectionService = Depends(get_collection_service),
) -> GemstoneUriResponse:
    return GemstoneUriResponse(
        token_id=token_id,
        uri=service.gemstones.uri(token_id),
        is_redeemed=service.gemstones.is_redeemed(token_id),
    )


@router.put(
    "/operators",
    response_model=OperatorApprovalResponse,
    summary="Set gemstone operator approval",
    responses={403: {"model": ErrorResponse, "description": "Cannot approve self"}},
)
async def set_gemstone_operator(
    request: OperatorApprovalRequest,
    caller: CallerContext = Depends(get_caller_from_token),
    service: CollectionService = Depends(get_collection_service),
) -> OperatorApprovalResponse:
    operator = parse_request_address(request.operator)
    service.set_gemstone_operator(caller.address, operator, request.approved)
    return OperatorApprovalResponse(
        collection=Collection.GEMSTONE.value,
        owner=caller.address,
        operator=operator,
        approved=request.approved,
    )
