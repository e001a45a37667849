"""
Session Schemas

Pydantic models for wallet session requests and responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from api.enums import CallerRole


class SessionCreateRequest(BaseModel):
    """Request to open a session acting as a wallet address"""

    address: str = Field(description="Wallet address (bech32)", min_length=1)


class SessionResponse(BaseModel):
    """Session token issued for a wallet"""

    access_token: str = Field(description="JWT access token (Bearer)")
    token_type: str = Field("bearer", description="Token type")
    address: str = Field(description="Normalized wallet address")
    role: CallerRole = Field(description="Caller role")
    expires_at: datetime = Field(description="Token expiration time")


class ErrorResponse(BaseModel):
    """Error response"""

    detail: str = Field(description="Error message")
    code: str | None = Field(None, description="Collection error code")
