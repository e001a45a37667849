"""
Tests for the gemstone whitelist ledger and its redemption primitive
"""

import pytest

from collection_helpers import ADMIN, ALICE, BOB, CAROL, whitelist_and_mint
from goblet_contracts.errors import (
    AlreadyAdmitted,
    AlreadyMinted,
    InsufficientBalance,
    InvalidAmount,
    NotAdmitted,
    NotAuthorized,
    NotEligible,
    SupplyExhausted,
    UnknownGemType,
    UnknownToken,
)
from goblet_contracts.minting_policies.gemstone import GemstoneLedger
from goblet_contracts.types import GemType


class LedgerCommon:
    """Common setup used in ledger tests"""

    def setup_method(self):
        """Setup method called before each test"""
        self.ledger = GemstoneLedger(ADMIN, unredeemed_cid="QmUnredeemed", redeemed_cid="QmRedeemed")


class TestWhitelist(LedgerCommon):
    def test_admit_creates_entry(self):
        entry = self.ledger.admit_to_whitelist(ADMIN, ALICE, GemType.EMERALD)

        assert entry.address == ALICE
        assert entry.gem_type == GemType.EMERALD
        assert not entry.consumed
        assert self.ledger.is_whitelisted(ALICE, 2)
        assert not self.ledger.is_whitelisted(ALICE, 3)

    def test_admit_twice_fails(self):
        self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)

        with pytest.raises(AlreadyAdmitted):
            self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)

    def test_admit_same_type_for_different_addresses(self):
        self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)
        self.ledger.admit_to_whitelist(ADMIN, BOB, 0)

        assert self.ledger.is_whitelisted(BOB, 0)

    @pytest.mark.parametrize("gem_type", [-1, 6, 42])
    def test_admit_unknown_gem_type(self, gem_type):
        with pytest.raises(UnknownGemType):
            self.ledger.admit_to_whitelist(ADMIN, ALICE, gem_type)

    def test_non_admin_cannot_admit(self):
        with pytest.raises(NotAuthorized):
            self.ledger.admit_to_whitelist(ALICE, BOB, 0)

        assert not self.ledger.is_whitelisted(BOB, 0)


class TestWhitelistMint(LedgerCommon):
    def test_mint_before_admission_fails(self):
        with pytest.raises(NotAdmitted):
            self.ledger.mint_whitelisted(ALICE, ALICE, 0)

    def test_mint_once_after_admission(self):
        self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)

        token_id = self.ledger.mint_whitelisted(ALICE, ALICE, 0)

        assert token_id == 1
        assert self.ledger.balance_of(ALICE, 1) == 1
        assert self.ledger.whitelist_entry(ALICE, 0).minted_token_id == 1

        with pytest.raises(AlreadyMinted):
            self.ledger.mint_whitelisted(ALICE, ALICE, 0)
        assert self.ledger.balance_of(ALICE, 1) == 1

    def test_mint_only_for_self(self):
        self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)

        with pytest.raises(NotAuthorized):
            self.ledger.mint_whitelisted(BOB, ALICE, 0)

        assert self.ledger.balance_of(ALICE, 1) == 0
        assert not self.ledger.whitelist_entry(ALICE, 0).consumed

    def test_mint_requires_matching_type(self):
        self.ledger.admit_to_whitelist(ADMIN, ALICE, 0)

        with pytest.raises(NotAdmitted):
            self.ledger.mint_whitelisted(ALICE, ALICE, 1)

    def test_token_ids_follow_type_ranges(self):
        minted = whitelist_and_mint(self.ledger, ALICE, [0, 1, 2, 3, 4])

        assert minted == [1, 51, 101, 151, 201]
        for token_id in minted:
            assert self.ledger.balance_of(ALICE, token_id) == 1
        assert self.ledger.balance_of(ALICE, 251) == 0

    def test_slots_are_sequential_across_addresses(self):
        alice_ids = whitelist_and_mint(self.ledger, ALICE)
        bob_ids = whitelist_and_mint(self.ledger, BOB)
        carol_ids = whitelist_and_mint(self.ledger, CAROL)

        assert alice_ids == [1, 51, 101, 151, 201, 251]
        assert bob_ids == [2, 52, 102, 152, 202, 252]
        assert carol_ids == [3, 53, 103, 153, 203, 253]
        assert self.ledger.minted_count(GemType.RUBY) == 3

    def test_type_supply_is_capped_at_fifty(self):
        for i in range(50):
            whitelist_and_mint(self.ledger, f"holder_{i}", [GemType.AMBER])
        assert self.ledger.minted_count(GemType.AMBER) == 50

        self.ledger.admit_to_whitelist(ADMIN, ALICE, GemType.AMBER)
        with pytest.raises(SupplyExhausted):
            self.ledger.mint_whitelisted(ALICE, ALICE, GemType.AMBER)
        assert not self.ledger.whitelist_entry(ALICE, GemType.AMBER).consumed


class TestTransfer(LedgerCommon):
    def test_transfer_moves_balance(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        self.ledger.transfer(ALICE, ALICE, BOB, 1, 1)

        assert self.ledger.balance_of(ALICE, 1) == 0
        assert self.ledger.balance_of(BOB, 1) == 1

    def test_transfer_insufficient_balance(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        with pytest.raises(InsufficientBalance):
            self.ledger.transfer(ALICE, ALICE, BOB, 1, 2)
        with pytest.raises(InsufficientBalance):
            self.ledger.transfer(ALICE, ALICE, BOB, 51, 1)

        assert self.ledger.balance_of(ALICE, 1) == 1

    def test_transfer_invalid_amount(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        with pytest.raises(InvalidAmount):
            self.ledger.transfer(ALICE, ALICE, BOB, 1, 0)

    def test_transfer_requires_owner_or_operator(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        with pytest.raises(NotAuthorized):
            self.ledger.transfer(BOB, ALICE, BOB, 1, 1)

        self.ledger.set_approval_for_all(ALICE, BOB, True)
        assert self.ledger.is_approved_for_all(ALICE, BOB)
        self.ledger.transfer(BOB, ALICE, CAROL, 1, 1)
        assert self.ledger.balance_of(CAROL, 1) == 1

        self.ledger.set_approval_for_all(ALICE, BOB, False)
        with pytest.raises(NotAuthorized):
            self.ledger.transfer(BOB, ALICE, CAROL, 1, 1)

    def test_cannot_approve_self(self):
        with pytest.raises(NotAuthorized):
            self.ledger.set_approval_for_all(ALICE, ALICE, True)


class TestEligibility(LedgerCommon):
    def test_complete_set_is_eligible(self):
        whitelist_and_mint(self.ledger, ALICE)

        assert self.ledger.is_eligible_to_mint_goblet(ALICE) == (1, 51, 101, 151, 201, 251)

    def test_incomplete_set_is_not_eligible(self):
        whitelist_and_mint(self.ledger, ALICE, [0, 1, 5])

        assert self.ledger.is_eligible_to_mint_goblet(ALICE) is None
        assert self.ledger.is_eligible_to_mint_goblet(BOB) is None

    def test_eligibility_is_read_only(self):
        whitelist_and_mint(self.ledger, ALICE)

        first = self.ledger.is_eligible_to_mint_goblet(ALICE)
        second = self.ledger.is_eligible_to_mint_goblet(ALICE)

        assert first == second
        assert not any(self.ledger.is_redeemed(token_id) for token_id in first)

    def test_lowest_unredeemed_id_is_selected(self):
        whitelist_and_mint(self.ledger, ALICE)
        whitelist_and_mint(self.ledger, BOB)
        for token_id in (2, 52, 102, 152, 202, 252):
            self.ledger.transfer(BOB, BOB, ALICE, token_id, 1)

        assert self.ledger.is_eligible_to_mint_goblet(ALICE) == (1, 51, 101, 151, 201, 251)
        self.ledger.check_and_redeem(ALICE)
        assert self.ledger.is_eligible_to_mint_goblet(ALICE) == (2, 52, 102, 152, 202, 252)

    def test_set_assembled_from_transfers(self):
        whitelist_and_mint(self.ledger, ALICE, [0, 1, 2])
        whitelist_and_mint(self.ledger, BOB, [3, 4, 5])
        for token_id in (151, 201, 251):
            self.ledger.transfer(BOB, BOB, ALICE, token_id, 1)

        assert self.ledger.is_eligible_to_mint_goblet(ALICE) == (1, 51, 101, 151, 201, 251)


class TestCheckAndRedeem(LedgerCommon):
    def test_redeem_marks_all_six(self):
        whitelist_and_mint(self.ledger, ALICE)

        redeemed = self.ledger.check_and_redeem(ALICE)

        assert redeemed == (1, 51, 101, 151, 201, 251)
        for token_id in redeemed:
            assert self.ledger.is_redeemed(token_id)
            assert self.ledger.balance_of(ALICE, token_id) == 1

    def test_second_redeem_fails_with_balances_unchanged(self):
        whitelist_and_mint(self.ledger, ALICE)
        self.ledger.check_and_redeem(ALICE)

        with pytest.raises(NotEligible):
            self.ledger.check_and_redeem(ALICE)

        assert self.ledger.balance_of(ALICE, 1) == 1
        assert self.ledger.is_eligible_to_mint_goblet(ALICE) is None

    def test_incomplete_set_mutates_nothing(self):
        whitelist_and_mint(self.ledger, ALICE, [0, 1, 2, 3, 4])

        with pytest.raises(NotEligible):
            self.ledger.check_and_redeem(ALICE)

        for token_id in (1, 51, 101, 151, 201):
            assert not self.ledger.is_redeemed(token_id)

    def test_redeemed_gemstone_stays_redeemed_after_transfer(self):
        whitelist_and_mint(self.ledger, ALICE)
        self.ledger.check_and_redeem(ALICE)
        whitelist_and_mint(self.ledger, BOB, [1, 2, 3, 4, 5])

        # Bob receives Alice's spent amethyst; it cannot complete his set
        self.ledger.transfer(ALICE, ALICE, BOB, 1, 1)

        assert self.ledger.balance_of(BOB, 1) == 1
        assert self.ledger.is_redeemed(1)
        assert self.ledger.is_eligible_to_mint_goblet(BOB) is None
        with pytest.raises(NotEligible):
            self.ledger.check_and_redeem(BOB)
        assert not self.ledger.is_redeemed(52)


class TestGemstoneUri(LedgerCommon):
    def test_uri_switches_cid_on_redemption(self):
        whitelist_and_mint(self.ledger, ALICE)
        expected_file = f"{51:064x}.json"

        assert self.ledger.uri(51) == f"ipfs://QmUnredeemed/{expected_file}"
        self.ledger.check_and_redeem(ALICE)
        assert self.ledger.uri(51) == f"ipfs://QmRedeemed/{expected_file}"

    def test_uri_unknown_token(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        with pytest.raises(UnknownToken):
            self.ledger.uri(2)
        with pytest.raises(UnknownToken):
            self.ledger.uri(0)
        with pytest.raises(UnknownToken):
            self.ledger.uri(301)

    def test_update_cid(self):
        whitelist_and_mint(self.ledger, ALICE, [0])

        self.ledger.update_cid(ADMIN, "QmFresh")
        self.ledger.update_cid(ADMIN, "QmSpent", redeemed=True)

        assert self.ledger.uri(1).startswith("ipfs://QmFresh/")
        assert self.ledger.redeemed_cid == "QmSpent"

    def test_non_admin_cannot_update_cid(self):
        with pytest.raises(NotAuthorized):
            self.ledger.update_cid(ALICE, "QmHijack")

        assert self.ledger.unredeemed_cid == "QmUnredeemed"
