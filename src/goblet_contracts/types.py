from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

################################################
# Constants
################################################
GEMS_PER_TYPE = 50
GOBLETS_PER_YEAR = 50
MINTING_YEARS = 3
MAX_GOBLET_SUPPLY = GOBLETS_PER_YEAR * MINTING_YEARS

FIRST_CALENDAR_YEAR = 2022
YEAR_SECONDS = 365 * 24 * 3600

DEFAULT_GOBLET_CID = "QmSczXio2CCNkcTwbJPmHqbPv6oSv1C1ax61ebQuWhTLFj"
IPFS_SCHEME = "ipfs://"


################################################
# Gemstone Types
################################################
class GemType(IntEnum):
    """The six gemstone categories; a full set is required for a goblet"""

    AMETHYST = 0
    SAPPHIRE = 1
    EMERALD = 2
    CITRINE = 3
    AMBER = 4
    RUBY = 5

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def first_token_id(self) -> int:
        return self.value * GEMS_PER_TYPE + 1

    @property
    def last_token_id(self) -> int:
        return self.value * GEMS_PER_TYPE + GEMS_PER_TYPE


@dataclass()
class WhitelistEntry:
    address: str
    gem_type: GemType
    minted_token_id: Optional[int] = None  # Set once the entry is consumed

    @property
    def consumed(self) -> bool:
        return self.minted_token_id is not None


# Six gemstone ids ordered by GemType
EligibilitySet = Tuple[int, int, int, int, int, int]
