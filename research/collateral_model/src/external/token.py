"""Mintable/burnable synthetic asset token stand-in"""
from collections import defaultdict
from typing import Dict, Set, Tuple

from ..errors import InsufficientBalanceError, UnauthorizedError
from ..fixed_point import checked_add
from ..utils.logging import setup_logger

logger = setup_logger("collateral_model.token")


class MintableToken:
    """Balances and allowances, with mint/burn restricted to granted minters"""

    def __init__(self, name: str, symbol: str):
        self.name = name
        self.symbol = symbol
        self.total_supply = 0
        self._balances: Dict[str, int] = defaultdict(int)
        self._allowances: Dict[Tuple[str, str], int] = defaultdict(int)
        self._minters: Set[str] = set()

    def grant_minter(self, address: str) -> None:
        self._minters.add(address)

    def is_minter(self, address: str) -> bool:
        return address in self._minters

    def _require_minter(self, caller: str) -> None:
        if caller not in self._minters:
            raise UnauthorizedError(f"{caller} is not a minter of {self.symbol}")

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def approve(self, owner: str, spender: str, amount: int) -> None:
        self._allowances[(owner, spender)] = amount

    def transfer(self, sender: str, receiver: str, amount: int) -> None:
        if self.balance_of(sender) < amount:
            raise InsufficientBalanceError(f"{sender} holds {self.balance_of(sender)} {self.symbol}")
        self._balances[sender] -= amount
        self._balances[receiver] = checked_add(self._balances[receiver], amount)

    def mint(self, caller: str, account: str, amount: int) -> None:
        self._require_minter(caller)
        self._balances[account] = checked_add(self._balances[account], amount)
        self.total_supply = checked_add(self.total_supply, amount)
        logger.debug("mint %d %s to %s", amount, self.symbol, account)

    def burn_from(self, caller: str, account: str, amount: int) -> None:
        self._require_minter(caller)
        allowed = self.allowance(account, caller)
        if allowed < amount:
            raise InsufficientBalanceError(
                f"{account} allowed {caller} to spend {allowed} {self.symbol}, burn needs {amount}"
            )
        if self.balance_of(account) < amount:
            raise InsufficientBalanceError(
                f"{account} holds {self.balance_of(account)} {self.symbol}, burn needs {amount}"
            )
        self._allowances[(account, caller)] = allowed - amount
        self._balances[account] -= amount
        self.total_supply -= amount
        logger.debug("burn %d %s from %s", amount, self.symbol, account)

    def snapshot(self):
        return (self.total_supply, dict(self._balances), dict(self._allowances), set(self._minters))

    def restore(self, state) -> None:
        total_supply, balances, allowances, minters = state
        self.total_supply = total_supply
        self._balances = defaultdict(int, balances)
        self._allowances = defaultdict(int, allowances)
        self._minters = set(minters)
