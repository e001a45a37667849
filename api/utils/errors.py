"""
Collection Error Responses

Maps collection errors to HTTP responses. Every rejected operation left the
collections untouched, so clients may retry once the precondition holds.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from goblet_contracts.errors import CollectionError


logger = logging.getLogger(__name__)


ERROR_STATUS_CODES: dict[str, int] = {
    "NotAuthorized": 403,
    "NotAdmitted": 403,
    "AlreadyAdmitted": 409,
    "AlreadyMinted": 409,
    "AlreadyMintedThisYear": 409,
    "UnknownGemType": 422,
    "InvalidAmount": 422,
    "InsufficientBalance": 400,
    "NotEligible": 400,
    "NotEligibleToMintGoblet": 400,
    "OutOfMintingWindow": 410,
    "SupplyExhausted": 410,
    "UnknownToken": 404,
}


def status_code_for(error: CollectionError) -> int:
    return ERROR_STATUS_CODES.get(error.code, 400)


async def collection_error_handler(request: Request, exc: CollectionError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CollectionError, collection_error_handler)
