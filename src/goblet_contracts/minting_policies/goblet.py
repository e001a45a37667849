"""
Goblet Minter

One goblet per holder per yearly window, paid for with a complete set of
six redeemed gemstones. Goblet ids run 1..150 and their metadata URIs are
computed from the id and the current CID.
"""

import logging
from typing import Optional, Protocol, Set, Tuple

from goblet_contracts.clock import Clock, SystemClock
from goblet_contracts.errors import (
    AlreadyMintedThisYear,
    NotAuthorized,
    NotEligible,
    NotEligibleToMintGoblet,
    OutOfMintingWindow,
    SupplyExhausted,
    UnknownToken,
)
from goblet_contracts.ledger import MultiTokenLedger
from goblet_contracts.types import (
    DEFAULT_GOBLET_CID,
    FIRST_CALENDAR_YEAR,
    MAX_GOBLET_SUPPLY,
    YEAR_SECONDS,
    EligibilitySet,
)
from goblet_contracts.util import (
    calendar_year,
    goblet_metadata_filename,
    in_minting_window,
    ipfs_uri,
    year_index,
)


logger = logging.getLogger(__name__)


class RedemptionLedger(Protocol):
    def check_and_redeem(self, address: str) -> EligibilitySet:
        ...


class GobletMinter(MultiTokenLedger):
    """
    Goblet collection state.

    Two mint paths exist on purpose: `mint_goblet` is time-windowed and
    gemstone-gated, `owner_goblet_mint` is the administrator's backfill and
    only respects the supply cap.
    """

    collection_name = "goblet"

    def __init__(
        self,
        administrator: str,
        clock: Optional[Clock] = None,
        cid: str = DEFAULT_GOBLET_CID,
        epoch: Optional[int] = None,
        window_seconds: int = YEAR_SECONDS,
        first_calendar_year: int = FIRST_CALENDAR_YEAR,
    ):
        """
        Args:
            administrator: Address allowed to backfill and update the CID
            clock: Time source; defaults to the system clock
            cid: Content identifier prefixing every metadata URI
            epoch: Start of year index 0; defaults to construction time
            window_seconds: Length of one minting year
            first_calendar_year: Calendar year of goblets 1-50
        """
        if window_seconds <= 0:
            raise ValueError(f"Window length must be positive, got {window_seconds}")

        super().__init__(administrator)
        self.clock = clock or SystemClock()
        self.cid = cid
        self.epoch = self.clock.now() if epoch is None else epoch
        self.window_seconds = window_seconds
        self.first_calendar_year = first_calendar_year
        self.total_supply = 0
        self._yearly_mints: Set[Tuple[str, int]] = set()

    # ------------------------------------------------------------------
    # Minting windows
    # ------------------------------------------------------------------

    def current_year_index(self) -> int:
        return year_index(self.epoch, self.clock.now(), self.window_seconds)

    def has_minted_in_year(self, address: str, index: int) -> bool:
        return (address, index) in self._yearly_mints

    # ------------------------------------------------------------------
    # Minting
    # ------------------------------------------------------------------

    def _issue(self, recipient: str) -> int:
        if self.total_supply >= MAX_GOBLET_SUPPLY:
            raise SupplyExhausted(f"All {MAX_GOBLET_SUPPLY} goblets are minted")
        self.total_supply += 1
        token_id = self.total_supply
        self._credit(recipient, token_id)
        return token_id

    def mint_goblet(self, caller: str, holder: str, ledger: RedemptionLedger) -> int:
        """
        Mint a goblet to `holder` in exchange for a full gemstone set.

        Args:
            caller: Authenticated caller; must be the holder
            holder: Address whose gemstones are redeemed and who receives the goblet
            ledger: Gemstone ledger to redeem against

        Returns:
            int: The new goblet id

        Raises:
            NotAuthorized: Caller is minting for another address
            OutOfMintingWindow: Current year index outside 0..2
            AlreadyMintedThisYear: Holder already minted in this window
            SupplyExhausted: All 150 goblets exist
            NotEligibleToMintGoblet: Holder lacks a complete unredeemed set
        """
        if caller != holder:
            raise NotAuthorized(f"{caller} cannot mint a goblet for {holder}")

        index = self.current_year_index()
        if not in_minting_window(index):
            raise OutOfMintingWindow(f"Goblets cannot be minted anymore (year index {index})")
        if self.has_minted_in_year(holder, index):
            raise AlreadyMintedThisYear(f"{holder} already minted a goblet in year {index}")
        # Checked before redemption so a rejected mint never spends gemstones
        if self.total_supply >= MAX_GOBLET_SUPPLY:
            raise SupplyExhausted(f"All {MAX_GOBLET_SUPPLY} goblets are minted")

        try:
            redeemed = ledger.check_and_redeem(holder)
        except NotEligible as e:
            raise NotEligibleToMintGoblet(f"Not eligible to mint goblet: {e.message}") from e

        token_id = self._issue(holder)
        self._yearly_mints.add((holder, index))
        logger.info(
            f"Minted goblet {token_id} to {holder} in year {index} redeeming gemstones {list(redeemed)}"
        )
        return token_id

    def owner_goblet_mint(self, caller: str) -> int:
        """
        Administrator backfill: mint the next goblet to the administrator.

        Skips eligibility and the yearly window; the calendar year still
        follows the id.
        """
        self._require_administrator(caller)
        token_id = self._issue(caller)
        logger.info(f"Administrator minted goblet {token_id}")
        return token_id

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def update_cid(self, caller: str, value: str) -> None:
        self._require_administrator(caller)
        self.cid = value
        logger.info(f"Goblet CID set to {value}")

    def exists(self, token_id: int) -> bool:
        return 1 <= token_id <= self.total_supply

    def calendar_year(self, token_id: int) -> int:
        return calendar_year(token_id, self.first_calendar_year)

    def uri(self, token_id: int) -> str:
        """
        Metadata URI of a minted goblet, computed from the current CID.

        Raises:
            UnknownToken: The id is outside 1..150 or not minted yet
        """
        if not self.exists(token_id):
            raise UnknownToken(f"Goblet {token_id} does not exist")
        return ipfs_uri(self.cid, goblet_metadata_filename(token_id, self.first_calendar_year))
