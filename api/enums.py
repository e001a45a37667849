"""
Shared Enums

Single source of truth for enums used across API schemas, tokens and
business logic.
"""

from enum import Enum


# ============================================================================
# Blockchain Enums
# ============================================================================


class NetworkType(str, Enum):
    """Blockchain network types"""

    TESTNET = "testnet"
    MAINNET = "mainnet"


class CallerRole(str, Enum):
    """
    Caller roles carried in session tokens

    - HOLDER: Regular wallet, can mint its own gemstones and goblets
    - ADMIN: The collection administrator wallet
    """

    HOLDER = "holder"
    ADMIN = "admin"


# ============================================================================
# Collection Enums
# ============================================================================


class Collection(str, Enum):
    """Token collections served by the API"""

    GEMSTONE = "gemstone"
    GOBLET = "goblet"
