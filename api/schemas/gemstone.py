"""
Gemstone Schemas

Pydantic models for gemstone-related API requests and responses.
"""

from pydantic import BaseModel, Field


class WhitelistRequest(BaseModel):
    """Admit an address to mint one gemstone of a type"""

    address: str = Field(description="Wallet address to admit")
    gem_type: int = Field(description="Gem type (0=Amethyst .. 5=Ruby)")


class WhitelistResponse(BaseModel):
    address: str
    gem_type: int
    gem_name: str


class GemstoneMintRequest(BaseModel):
    """Mint the caller's whitelisted gemstone of a type"""

    gem_type: int = Field(description="Gem type (0=Amethyst .. 5=Ruby)")


class GemstoneMintResponse(BaseModel):
    token_id: int = Field(description="Minted gemstone token id")
    gem_type: int
    gem_name: str
    owner: str
    uri: str | None = Field(None, description="Metadata URI, when a CID is configured")


class TransferRequest(BaseModel):
    """Move tokens out of a wallet the caller owns or operates"""

    sender: str | None = Field(None, description="Holder to move from (defaults to the caller)")
    recipient: str = Field(description="Destination wallet address")
    token_id: int = Field(description="Token id")
    amount: int = Field(1, description="Units to move")


class TransferResponse(BaseModel):
    collection: str
    sender: str
    recipient: str
    token_id: int
    amount: int


class BalanceResponse(BaseModel):
    address: str
    token_id: int
    balance: int


class EligibilityResponse(BaseModel):
    """Gemstones a goblet mint would redeem right now"""

    address: str
    eligible: bool
    token_ids: list[int] = Field(default_factory=list, description="One id per gem type, in type order")


class GemstoneUriResponse(BaseModel):
    token_id: int
    uri: str
    is_redeemed: bool


class GemstoneCidUpdateRequest(BaseModel):
    cid: str = Field(description="New content identifier", min_length=1)
    redeemed: bool = Field(False, description="Update the CID of redeemed gemstones instead")


class GemstoneCidResponse(BaseModel):
    unredeemed_cid: str
    redeemed_cid: str


class OperatorApprovalRequest(BaseModel):
    """Allow or revoke an operator moving all of the caller's tokens"""

    operator: str = Field(description="Operator wallet address")
    approved: bool = Field(True, description="Grant (true) or revoke (false)")


class OperatorApprovalResponse(BaseModel):
    collection: str
    owner: str
    operator: str
    approved: bool
