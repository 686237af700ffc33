"""Burn synthetic asset to pay down debt"""
from ..errors import ExcessiveBurnError, InvalidAmountError


def burn_asset(engine, account: str, amount: int) -> None:
    if amount <= 0:
        raise InvalidAmountError("Burn amount must be positive")

    position = engine.ledger.get(account)
    if amount > position.debt_balance:
        raise ExcessiveBurnError(
            f"Cannot burn {amount}, {account} only owes {position.debt_balance}"
        )
    position.update_debt(-amount)

    engine.ledger.set(account, position)
    # Needs an allowance from account to the engine
    engine.token.burn_from(engine.address, account, amount)
