"""Withdraw collateral that is not backing debt"""
from ..errors import CollateralLockedError, InsufficientBalanceError, InvalidAmountError
from ..fixed_point import pro_rata


def withdraw_collateral(engine, account: str, amount: int) -> int:
    """Release `amount` of collateral, return the base currency sent to `account`"""
    if amount <= 0:
        raise InvalidAmountError("Withdraw amount must be positive")

    position = engine.ledger.get(account)
    if amount > position.collateral_balance:
        raise InsufficientBalanceError(
            f"Cannot withdraw {amount}, {account} deposited {position.collateral_balance}"
        )

    remaining = position.collateral_balance - amount
    debt_value = position.debt_value_in_base(engine.oracle.price())
    if engine.config.max_borrowable(remaining) < debt_value:
        raise CollateralLockedError(
            f"Remaining collateral {remaining} cannot back debt worth {debt_value}"
        )

    shares = pro_rata(position.vault_share_balance, amount, position.collateral_balance)
    position.update_collateral(-amount)
    position.update_shares(-shares)
    engine.ledger.set(account, position)

    redeemed = engine.vault.redeem(shares, engine.address)
    engine.native.transfer(engine.address, account, redeemed)
    return redeemed
