"""Yield vault stand-in with a settable exchange rate"""
from collections import defaultdict
from typing import Dict, Tuple

from ..errors import InsufficientBalanceError, InvalidPriceError
from ..fixed_point import checked_add, checked_mul
from ..constants import SCALE, DEFAULT_VAULT_EXCHANGE_RATE, VAULT_ADDRESS
from ..utils.logging import setup_logger
from .native import NativeLedger

logger = setup_logger("collateral_model.vault")


class ExchangeRateVault:
    """Issues shares at `amount * SCALE / exchange_rate` and redeems at the inverse.

    Yield accrual is modelled by raising the exchange rate; the vault is then
    topped up from `yield_source` through `accrue`.
    """

    def __init__(self, native: NativeLedger, exchange_rate: int = DEFAULT_VAULT_EXCHANGE_RATE,
                 address: str = VAULT_ADDRESS):
        self.native = native
        self.address = address
        self._exchange_rate = 0
        self._shares: Dict[str, int] = defaultdict(int)
        self.set_exchange_rate(exchange_rate)

    def exchange_rate(self) -> int:
        return self._exchange_rate

    def set_exchange_rate(self, rate: int) -> None:
        if rate <= 0:
            raise InvalidPriceError(f"Exchange rate must be positive, got {rate}")
        self._exchange_rate = rate

    def accrue(self, new_rate: int, yield_source: str) -> None:
        """Raise the exchange rate and pull the matching base currency in"""
        total_shares = sum(self._shares.values())
        owed = checked_mul(total_shares, new_rate) // SCALE
        held = self.native.balance_of(self.address)
        if owed > held:
            self.native.transfer(yield_source, self.address, owed - held)
        self.set_exchange_rate(new_rate)

    def share_balance_of(self, holder: str) -> int:
        return self._shares.get(holder, 0)

    def total_shares(self) -> int:
        return sum(self._shares.values())

    def deposit(self, amount: int, sender: str) -> int:
        shares = checked_mul(amount, SCALE) // self._exchange_rate
        self.native.transfer(sender, self.address, amount)
        self._shares[sender] = checked_add(self._shares[sender], shares)
        logger.debug("vault deposit from %s: %d base -> %d shares", sender, amount, shares)
        return shares

    def redeem(self, shares: int, receiver: str) -> int:
        if self.share_balance_of(receiver) < shares:
            raise InsufficientBalanceError(
                f"{receiver} holds {self.share_balance_of(receiver)} shares, cannot redeem {shares}"
            )
        amount = checked_mul(shares, self._exchange_rate) // SCALE
        self._shares[receiver] -= shares
        self.native.transfer(self.address, receiver, amount)
        logger.debug("vault redeem to %s: %d shares -> %d base", receiver, shares, amount)
        return amount

    def snapshot(self) -> Tuple[int, Dict[str, int]]:
        return self._exchange_rate, dict(self._shares)

    def restore(self, state: Tuple[int, Dict[str, int]]) -> None:
        self._exchange_rate, shares = state
        self._shares = defaultdict(int, shares)
