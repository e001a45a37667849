"""
Gemstone Ledger

Whitelist-gated minting of the six gemstone types, and the redemption
primitive the goblet minter spends complete sets through.
"""

import logging
from typing import Dict, Optional, Set, Tuple

from goblet_contracts.errors import (
    AlreadyAdmitted,
    AlreadyMinted,
    NotAdmitted,
    NotAuthorized,
    NotEligible,
    SupplyExhausted,
    UnknownToken,
)
from goblet_contracts.ledger import MultiTokenLedger
from goblet_contracts.types import GEMS_PER_TYPE, EligibilitySet, GemType, WhitelistEntry
from goblet_contracts.util import (
    gem_type_of,
    gemstone_metadata_filename,
    gemstone_slot,
    gemstone_token_id,
    ipfs_uri,
    to_gem_type,
)


logger = logging.getLogger(__name__)


class GemstoneLedger(MultiTokenLedger):
    """
    Gemstone collection state.

    Whitelist entries are single-use tickets for one (address, GemType)
    pair. Redemption marks belong to the token id, so a redeemed gemstone
    stays redeemed whoever holds it.
    """

    collection_name = "gemstone"

    def __init__(self, administrator: str, unredeemed_cid: str = "", redeemed_cid: str = ""):
        """
        Args:
            administrator: Address allowed to admit addresses and set CIDs
            unredeemed_cid: Metadata CID for gemstones not yet spent on a goblet
            redeemed_cid: Metadata CID for spent gemstones
        """
        super().__init__(administrator)
        self.unredeemed_cid = unredeemed_cid
        self.redeemed_cid = redeemed_cid
        self._whitelist: Dict[Tuple[str, GemType], WhitelistEntry] = {}
        self._next_slot: Dict[GemType, int] = {gem_type: 1 for gem_type in GemType}
        self._redeemed: Set[int] = set()

    # ------------------------------------------------------------------
    # Whitelist
    # ------------------------------------------------------------------

    def admit_to_whitelist(self, caller: str, address: str, gem_type: int) -> WhitelistEntry:
        """
        Admit `address` to mint one gemstone of `gem_type`.

        Raises:
            NotAuthorized: Caller is not the administrator
            UnknownGemType: gem_type outside 0..5
            AlreadyAdmitted: The pair was admitted before
        """
        self._require_administrator(caller)
        gem = to_gem_type(gem_type)
        key = (address, gem)
        if key in self._whitelist:
            raise AlreadyAdmitted(f"{address} is already whitelisted for {gem.display_name}")

        entry = WhitelistEntry(address=address, gem_type=gem)
        self._whitelist[key] = entry
        logger.info(f"Whitelisted {address} for {gem.display_name}")
        return entry

    def is_whitelisted(self, address: str, gem_type: int) -> bool:
        return (address, to_gem_type(gem_type)) in self._whitelist

    def whitelist_entry(self, address: str, gem_type: int) -> Optional[WhitelistEntry]:
        return self._whitelist.get((address, to_gem_type(gem_type)))

    # ------------------------------------------------------------------
    # Minting
    # ------------------------------------------------------------------

    def mint_whitelisted(self, caller: str, address: str, gem_type: int) -> int:
        """
        Mint the gemstone a whitelist entry entitles `address` to.

        Args:
            caller: Authenticated caller; must be `address` itself
            address: Whitelisted holder
            gem_type: Gemstone type to mint

        Returns:
            int: The newly minted token id

        Raises:
            NotAuthorized: Caller is minting for another address
            UnknownGemType: gem_type outside 0..5
            NotAdmitted: No whitelist entry for the pair
            AlreadyMinted: The entry was already used
            SupplyExhausted: All 50 slots of the type are taken
        """
        if caller != address:
            raise NotAuthorized(f"{caller} cannot mint on behalf of {address}")
        gem = to_gem_type(gem_type)
        entry = self._whitelist.get((address, gem))
        if entry is None:
            raise NotAdmitted(f"{address} is not whitelisted for {gem.display_name}")
        if entry.consumed:
            raise AlreadyMinted(
                f"{address} already minted {gem.display_name} #{entry.minted_token_id}"
            )
        slot = self._next_slot[gem]
        if slot > GEMS_PER_TYPE:
            raise SupplyExhausted(f"All {GEMS_PER_TYPE} {gem.display_name} gemstones are minted")

        token_id = gemstone_token_id(gem, slot)
        self._next_slot[gem] = slot + 1
        entry.minted_token_id = token_id
        self._credit(address, token_id)
        logger.info(f"Minted {gem.display_name} token {token_id} to {address}")
        return token_id

    def minted_count(self, gem_type: int) -> int:
        return self._next_slot[to_gem_type(gem_type)] - 1

    def exists(self, token_id: int) -> bool:
        gem = gem_type_of(token_id)
        if gem is None:
            return False
        return gemstone_slot(token_id) < self._next_slot[gem]

    # ------------------------------------------------------------------
    # Redemption
    # ------------------------------------------------------------------

    def is_redeemed(self, token_id: int) -> bool:
        return token_id in self._redeemed

    def _lowest_redeemable(self, address: str, gem: GemType) -> Optional[int]:
        for token_id in range(gem.first_token_id, gem.last_token_id + 1):
            if token_id not in self._redeemed and self.balance_of(address, token_id) > 0:
                return token_id
        return None

    def is_eligible_to_mint_goblet(self, address: str) -> Optional[EligibilitySet]:
        """
        The six gemstones `address` would spend on a goblet right now.

        Picks the lowest-numbered unredeemed owned id of each type, in
        GemType order. Returns None unless every type is covered.
        """
        selected = []
        for gem in GemType:
            token_id = self._lowest_redeemable(address, gem)
            if token_id is None:
                return None
            selected.append(token_id)
        return tuple(selected)

    def check_and_redeem(self, address: str) -> EligibilitySet:
        """
        Spend one complete gemstone set held by `address`.

        The selection is computed before any mark is written, so either all
        six ids are marked redeemed or nothing changes.

        Raises:
            NotEligible: `address` lacks an unredeemed instance of some type
        """
        selection = self.is_eligible_to_mint_goblet(address)
        if selection is None:
            raise NotEligible(f"{address} does not hold an unredeemed set of all six gemstones")

        self._redeemed.update(selection)
        logger.info(f"Redeemed gemstones {list(selection)} held by {address}")
        return selection

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def update_cid(self, caller: str, value: str, redeemed: bool = False) -> None:
        self._require_administrator(caller)
        if redeemed:
            self.redeemed_cid = value
        else:
            self.unredeemed_cid = value
        logger.info(f"Gemstone {'redeemed' if redeemed else 'unredeemed'} CID set to {value}")

    def uri(self, token_id: int) -> str:
        """
        Metadata URI of a minted gemstone.

        Redeemed gemstones resolve under the redeemed CID so marketplaces
        show their IsRedeemed trait.

        Raises:
            UnknownToken: The id was never minted
        """
        if not self.exists(token_id):
            raise UnknownToken(f"Gemstone {token_id} does not exist")
        cid = self.redeemed_cid if self.is_redeemed(token_id) else self.unredeemed_cid
        return ipfs_uri(cid, gemstone_metadata_filename(token_id))
