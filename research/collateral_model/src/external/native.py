"""Base currency balances (the chain's native coin)"""
from collections import defaultdict
from typing import Dict

from ..errors import InsufficientBalanceError
from ..fixed_point import checked_add
from ..utils.logging import setup_logger

logger = setup_logger("collateral_model.native")


class NativeLedger:
    """Native balances per address with plain transfers"""

    def __init__(self):
        self._balances: Dict[str, int] = defaultdict(int)

    def balance_of(self, address: str) -> int:
        return self._balances.get(address, 0)

    def mint_to(self, address: str, amount: int) -> None:
        """Fund an address out of thin air (test and simulation setup)"""
        self._balances[address] = checked_add(self._balances[address], amount)

    def transfer(self, sender: str, receiver: str, amount: int) -> None:
        if self.balance_of(sender) < amount:
            raise InsufficientBalanceError(
                f"{sender} holds {self.balance_of(sender)}, cannot send {amount}"
            )
        self._balances[sender] -= amount
        self._balances[receiver] = checked_add(self._balances[receiver], amount)
        logger.debug("native transfer %s -> %s: %d", sender, receiver, amount)

    def snapshot(self) -> Dict[str, int]:
        return dict(self._balances)

    def restore(self, state: Dict[str, int]) -> None:
        self._balances = defaultdict(int, state)
