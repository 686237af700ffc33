"""Position state management"""
from dataclasses import dataclass, replace

from ..fixed_point import checked_add, to_base_value


@dataclass
class Position:
    """Collateral, vault shares and minted debt held by one account"""
    collateral_balance: int = 0  # base currency deposited
    vault_share_balance: int = 0  # vault shares held on the account's behalf
    debt_balance: int = 0  # synthetic tokens minted against the position

    def copy(self) -> "Position":
        return replace(self)

    def is_empty(self) -> bool:
        return not (self.collateral_balance or self.vault_share_balance or self.debt_balance)

    def debt_value_in_base(self, price: int) -> int:
        """Base currency value of the outstanding debt at the given oracle price"""
        return to_base_value(self.debt_balance, price)

    def update_collateral(self, amount_change: int) -> None:
        """Update position collateral"""
        if amount_change > 0:
            self.collateral_balance = checked_add(self.collateral_balance, amount_change)
        else:
            if self.collateral_balance < abs(amount_change):
                raise ValueError("Insufficient collateral")
            self.collateral_balance -= abs(amount_change)

    def update_shares(self, amount_change: int) -> None:
        """Update vault share balance"""
        if amount_change > 0:
            self.vault_share_balance = checked_add(self.vault_share_balance, amount_change)
        else:
            if self.vault_share_balance < abs(amount_change):
                raise ValueError("Insufficient vault shares")
            self.vault_share_balance -= abs(amount_change)

    def update_debt(self, amount_change: int) -> None:
        """Update position debt"""
        if amount_change > 0:
            self.debt_balance = checked_add(self.debt_balance, amount_change)
        else:
            if self.debt_balance < abs(amount_change):
                raise ValueError("Insufficient debt")
            self.debt_balance -= abs(amount_change)
