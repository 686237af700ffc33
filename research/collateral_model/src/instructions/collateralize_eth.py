"""Deposit base currency as collateral and park it in the yield vault"""
from ..errors import InvalidAmountError


def collateralize_eth(engine, account: str, value: int) -> int:
    """Lock `value` base currency for `account`, return the vault shares credited

    Deposits only improve solvency, so no debt check is made. A deposit too
    small for the vault to issue a share is still recorded; its collateral is
    released with the last share on a full withdrawal.
    """
    if value <= 0:
        raise InvalidAmountError("Collateral deposit must be positive")

    position = engine.ledger.get(account)
    position.update_collateral(value)
    engine.ledger.set(account, position)

    # The payable value arrives with the call, then goes straight to the vault
    engine.native.transfer(account, engine.address, value)
    shares_before = engine.vault.share_balance_of(engine.address)
    engine.vault.deposit(value, engine.address)
    shares = engine.vault.share_balance_of(engine.address) - shares_before
    position = engine.ledger.get(account)
    position.update_shares(shares)
    engine.ledger.set(account, position)
    return shares
