from typing import Optional

from goblet_contracts.errors import UnknownGemType
from goblet_contracts.types import *

################################################
# Gemstone identifiers
################################################
def to_gem_type(value: int) -> GemType:
    """Coerce an integer to a GemType, raising UnknownGemType when out of range"""
    try:
        return GemType(value)
    except ValueError:
        raise UnknownGemType(f"Unknown gem type: {value}")


def gemstone_token_id(gem_type: GemType, slot: int) -> int:
    """
    Token id of the `slot`-th gemstone (1-based) of a given type.

    Type `t` owns the contiguous range [t*50+1, t*50+50].
    """
    assert 1 <= slot <= GEMS_PER_TYPE, f"Slot {slot} outside 1..{GEMS_PER_TYPE}"
    return int(gem_type) * GEMS_PER_TYPE + slot


def gem_type_of(token_id: int) -> Optional[GemType]:
    """Return the GemType owning a token id, or None if the id is outside every range"""
    if token_id < 1 or token_id > len(GemType) * GEMS_PER_TYPE:
        return None
    return GemType((token_id - 1) // GEMS_PER_TYPE)


def gemstone_slot(token_id: int) -> int:
    return (token_id - 1) % GEMS_PER_TYPE + 1


################################################
# Minting windows
################################################
def year_index(epoch: int, now: int, window_seconds: int = YEAR_SECONDS) -> int:
    """
    Number of full windows elapsed between `epoch` and `now`.

    Negative when `now` precedes the epoch; callers treat that as outside
    the minting window.
    """
    return (now - epoch) // window_seconds


def in_minting_window(index: int) -> bool:
    return 0 <= index < MINTING_YEARS


def goblet_year_index(token_id: int) -> int:
    """Year bucket of a goblet id: 1-50 -> 0, 51-100 -> 1, 101-150 -> 2"""
    return (token_id - 1) // GOBLETS_PER_YEAR


def calendar_year(token_id: int, first_year: int = FIRST_CALENDAR_YEAR) -> int:
    return first_year + goblet_year_index(token_id)


################################################
# URIs
################################################
def goblet_metadata_filename(token_id: int, first_year: int = FIRST_CALENDAR_YEAR) -> str:
    return f"{token_id}_{calendar_year(token_id, first_year)}.json"


def gemstone_metadata_filename(token_id: int) -> str:
    """Multi-token `{id}` substitution format: 64 lowercase hex characters"""
    return f"{token_id:064x}.json"


def ipfs_uri(cid: str, filename: str) -> str:
    return f"{IPFS_SCHEME}{cid}/{filename}"
