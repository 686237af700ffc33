"""Mint synthetic asset against deposited collateral"""
from ..errors import InsufficientCollateralError, InvalidAmountError


def mint_asset(engine, account: str, amount: int) -> None:
    if amount <= 0:
        raise InvalidAmountError("Mint amount must be positive")

    price = engine.oracle.price()
    position = engine.ledger.get(account)
    position.update_debt(amount)

    # Check the intended debt as a whole so that flooring each part separately
    # cannot push the committed position past the limit
    debt_value = position.debt_value_in_base(price)
    max_borrowable = engine.config.max_borrowable(position.collateral_balance)
    if debt_value > max_borrowable:
        raise InsufficientCollateralError(
            f"Debt value {debt_value} would exceed borrow limit {max_borrowable} for {account}"
        )

    engine.ledger.set(account, position)
    engine.token.mint(engine.address, account, amount)
