"""
Goblet Collection Core

Gemstone whitelist ledger and goblet minter, free of any transport or
persistence concerns.
"""

from .clock import Clock, ManualClock, SystemClock
from .minting_policies.gemstone import GemstoneLedger
from .minting_policies.goblet import GobletMinter
from .types import GemType


__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "GemstoneLedger",
    "GobletMinter",
    "GemType",
]
