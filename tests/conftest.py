"""
Pytest configuration for collection tests

Fixtures shared by the gemstone ledger and goblet minter tests.
"""

import pytest

from collection_helpers import ADMIN
from goblet_contracts.clock import ManualClock
from goblet_contracts.minting_policies.gemstone import GemstoneLedger
from goblet_contracts.minting_policies.goblet import GobletMinter


@pytest.fixture
def clock():
    """Clock starting at 2022-01-01T00:00:00Z"""
    return ManualClock()


@pytest.fixture
def ledger():
    return GemstoneLedger(ADMIN, unredeemed_cid="QmUnredeemed", redeemed_cid="QmRedeemed")


@pytest.fixture
def minter(clock):
    return GobletMinter(ADMIN, clock=clock)
