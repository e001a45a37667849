"""
Multi-token Ledger

Balance bookkeeping shared by the gemstone and goblet collections: sparse
balances keyed by (address, token id), transfers and operator approvals.
"""

import logging
from typing import Dict, Tuple

from goblet_contracts.errors import InsufficientBalance, InvalidAmount, NotAuthorized


logger = logging.getLogger(__name__)


class MultiTokenLedger:
    """
    Base ledger for a collection with a single administrator.

    Subclasses mint through `_credit`; nothing else creates units.
    """

    collection_name = "collection"

    def __init__(self, administrator: str):
        """
        Args:
            administrator: Address allowed to run administrative operations
        """
        self.administrator = administrator
        self._balances: Dict[Tuple[str, int], int] = {}
        self._approvals: Dict[Tuple[str, str], bool] = {}

    # ------------------------------------------------------------------
    # Access control
    # ------------------------------------------------------------------

    def is_administrator(self, caller: str) -> bool:
        return caller == self.administrator

    def _require_administrator(self, caller: str) -> None:
        if not self.is_administrator(caller):
            raise NotAuthorized(f"{caller} is not the {self.collection_name} administrator")

    # ------------------------------------------------------------------
    # Balances
    # ------------------------------------------------------------------

    def balance_of(self, address: str, token_id: int) -> int:
        return self._balances.get((address, token_id), 0)

    def _credit(self, address: str, token_id: int, amount: int = 1) -> None:
        key = (address, token_id)
        self._balances[key] = self._balances.get(key, 0) + amount

    def _debit(self, address: str, token_id: int, amount: int) -> None:
        key = (address, token_id)
        remaining = self._balances.get(key, 0) - amount
        if remaining:
            self._balances[key] = remaining
        else:
            self._balances.pop(key, None)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def set_approval_for_all(self, caller: str, operator: str, approved: bool) -> None:
        """Allow or revoke `operator` moving every token owned by `caller`"""
        if caller == operator:
            raise NotAuthorized("Cannot set approval status for self")
        self._approvals[(caller, operator)] = approved
        logger.info(f"{self.collection_name}: {caller} set operator {operator} approved={approved}")

    def is_approved_for_all(self, owner: str, operator: str) -> bool:
        return self._approvals.get((owner, operator), False)

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def transfer(self, caller: str, sender: str, recipient: str, token_id: int, amount: int = 1) -> None:
        """
        Move `amount` units of `token_id` from `sender` to `recipient`.

        Args:
            caller: Authenticated caller; must be the sender or an approved operator
            sender: Current holder
            recipient: New holder
            token_id: Token to move
            amount: Units to move (at least 1)

        Raises:
            NotAuthorized: Caller is neither the sender nor an approved operator
            InvalidAmount: Amount below 1
            InsufficientBalance: Sender holds fewer than `amount` units
        """
        if caller != sender and not self.is_approved_for_all(sender, caller):
            raise NotAuthorized(f"{caller} is not owner nor approved for {sender}")
        if amount < 1:
            raise InvalidAmount(f"Transfer amount must be positive, got {amount}")
        held = self.balance_of(sender, token_id)
        if held < amount:
            raise InsufficientBalance(
                f"{sender} holds {held} of token {token_id}, cannot transfer {amount}"
            )

        self._debit(sender, token_id, amount)
        self._credit(recipient, token_id, amount)
        logger.info(
            f"{self.collection_name}: transferred {amount} x token {token_id} from {sender} to {recipient}"
        )
