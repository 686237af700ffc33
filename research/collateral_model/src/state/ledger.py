"""Per-account collateral ledger"""
from typing import Dict, Iterator

from .position import Position


class CollateralLedger:
    """Mapping of account -> Position.

    Pure storage with no validation. Reads hand out copies so a caller cannot
    mutate a stored position without going through set().
    """

    def __init__(self):
        self._positions: Dict[str, Position] = {}

    def get(self, account: str) -> Position:
        position = self._positions.get(account)
        if position is None:
            return Position()
        return position.copy()

    def set(self, account: str, position: Position) -> None:
        self._positions[account] = position.copy()

    def accounts(self) -> Iterator[str]:
        return iter(list(self._positions))

    def __contains__(self, account: str) -> bool:
        return account in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def snapshot(self) -> Dict[str, Position]:
        return {account: position.copy() for account, position in self._positions.items()}

    def restore(self, snapshot: Dict[str, Position]) -> None:
        self._positions = {account: position.copy() for account, position in snapshot.items()}
