"""
Goblet Schemas

Pydantic models for goblet-related API requests and responses.
"""

from pydantic import BaseModel, Field


class GobletMintResponse(BaseModel):
    token_id: int = Field(description="Minted goblet id")
    owner: str
    calendar_year: int
    uri: str


class GobletUriResponse(BaseModel):
    token_id: int
    uri: str


class GobletCidUpdateRequest(BaseModel):
    cid: str = Field(description="New content identifier", min_length=1)


class GobletCidResponse(BaseModel):
    cid: str


class GobletStatusResponse(BaseModel):
    """Supply and minting window status"""

    total_supply: int
    max_supply: int
    year_index: int = Field(description="Current minting year index since the epoch")
    minting_open: bool
    cid: str
