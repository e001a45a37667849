"""
Collection Service

Owns the in-memory gemstone ledger and goblet minter behind the API and
serializes every state change through one lock, so a goblet mint's
redemption and issuance are never interleaved with another request.
"""

import logging
import threading

from api.config import settings
from api.utils.addresses import normalize_address
from goblet_contracts.clock import Clock, SystemClock
from goblet_contracts.minting_policies.gemstone import GemstoneLedger
from goblet_contracts.minting_policies.goblet import GobletMinter
from goblet_contracts.types import EligibilitySet


logger = logging.getLogger(__name__)


class CollectionService:
    """
    Thread-safe facade over the gemstone and goblet collections.

    Reads go straight to the collections; writes hold the lock for the
    whole operation.
    """

    def __init__(
        self,
        administrator: str,
        clock: Clock | None = None,
        goblet_cid: str = settings.goblet_cid,
        gemstone_cid: str = settings.gemstone_cid,
        gemstone_redeemed_cid: str = settings.gemstone_redeemed_cid,
        minting_epoch: int | None = settings.minting_epoch,
        year_window_seconds: int = settings.year_window_seconds,
        first_calendar_year: int = settings.first_calendar_year,
    ):
        self.clock = clock or SystemClock()
        self.gemstones = GemstoneLedger(
            administrator,
            unredeemed_cid=gemstone_cid,
            redeemed_cid=gemstone_redeemed_cid,
        )
        self.goblets = GobletMinter(
            administrator,
            clock=self.clock,
            cid=goblet_cid,
            epoch=minting_epoch,
            window_seconds=year_window_seconds,
            first_calendar_year=first_calendar_year,
        )
        self._lock = threading.RLock()

    @property
    def administrator(self) -> str:
        return self.gemstones.administrator

    # ------------------------------------------------------------------
    # Gemstones
    # ------------------------------------------------------------------

    def admit_to_whitelist(self, caller: str, address: str, gem_type: int) -> None:
        with self._lock:
            self.gemstones.admit_to_whitelist(caller, address, gem_type)

    def mint_gemstone(self, caller: str, gem_type: int) -> int:
        with self._lock:
            return self.gemstones.mint_whitelisted(caller, caller, gem_type)

    def transfer_gemstone(self, caller: str, sender: str, recipient: str, token_id: int, amount: int) -> None:
        with self._lock:
            self.gemstones.transfer(caller, sender, recipient, token_id, amount)

    def eligibility(self, address: str) -> EligibilitySet | None:
        return self.gemstones.is_eligible_to_mint_goblet(address)

    def set_gemstone_operator(self, caller: str, operator: str, approved: bool) -> None:
        with self._lock:
            self.gemstones.set_approval_for_all(caller, operator, approved)

    def update_gemstone_cid(self, caller: str, value: str, redeemed: bool) -> None:
        with self._lock:
            self.gemstones.update_cid(caller, value, redeemed=redeemed)

    # ------------------------------------------------------------------
    # Goblets
    # ------------------------------------------------------------------

    def mint_goblet(self, caller: str) -> int:
        with self._lock:
            return self.goblets.mint_goblet(caller, caller, self.gemstones)

    def owner_goblet_mint(self, caller: str) -> int:
        with self._lock:
            return self.goblets.owner_goblet_mint(caller)

    def transfer_goblet(self, caller: str, sender: str, recipient: str, token_id: int, amount: int) -> None:
        with self._lock:
            self.goblets.transfer(caller, sender, recipient, token_id, amount)

    def set_goblet_operator(self, caller: str, operator: str, approved: bool) -> None:
        with self._lock:
            self.goblets.set_approval_for_all(caller, operator, approved)

    def update_goblet_cid(self, caller: str, value: str) -> None:
        with self._lock:
            self.goblets.update_cid(caller, value)


# Global instance
_collection_service: CollectionService | None = None


def get_collection_service() -> CollectionService:
    """
    Get or create the global collection service instance.

    Returns:
        Global CollectionService instance
    """
    global _collection_service
    if _collection_service is None:
        administrator = normalize_address(settings.admin_address, settings.network)
        _collection_service = CollectionService(administrator)
        logger.info(f"Collection service started, administrator {administrator}")
    return _collection_service
