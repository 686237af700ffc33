"""Interfaces the engine consumes from its external collaborators"""
from typing import Any, Protocol, runtime_checkable


class PriceOracle(Protocol):
    def price(self) -> int:
        """Synthetic tokens per one unit of base currency, scaled by SCALE"""
        ...


class YieldVault(Protocol):
    address: str

    def deposit(self, amount: int, sender: str) -> int:
        """Pull amount of base currency from sender, return shares issued"""
        ...

    def redeem(self, shares: int, receiver: str) -> int:
        """Burn shares held by receiver, return base currency sent to receiver"""
        ...

    def share_balance_of(self, holder: str) -> int:
        ...

    def exchange_rate(self) -> int:
        ...


class AssetToken(Protocol):
    def mint(self, caller: str, account: str, amount: int) -> None:
        ...

    def burn_from(self, caller: str, account: str, amount: int) -> None:
        """Burn from account using the allowance account granted to caller"""
        ...

    def balance_of(self, account: str) -> int:
        ...


class NativeCurrency(Protocol):
    def balance_of(self, address: str) -> int:
        ...

    def transfer(self, sender: str, receiver: str, amount: int) -> None:
        ...


@runtime_checkable
class Transactional(Protocol):
    """Collaborator whose state can be captured and put back on rollback"""

    def snapshot(self) -> Any:
        ...

    def restore(self, state: Any) -> None:
        ...
