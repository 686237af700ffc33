"""Collateral and mint engine

Users lock base currency, the engine parks it in a yield vault and lets them
mint the synthetic asset up to the loan-to-value limit derived from the
oracle price. Every operation is all-or-nothing: on any error the ledger and
every collaborator are put back exactly as they were.
"""
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Type, Union

from .errors import CollateralLockedError, InsufficientCollateralError, ProtocolError, ReentrancyError
from .fixed_point import parse_amount
from .interfaces import AssetToken, NativeCurrency, PriceOracle, Transactional, YieldVault
from .constants import ENGINE_ADDRESS
from .state.engine_config import EngineConfig
from .state.ledger import CollateralLedger
from .state.position import Position
from .instructions.collateralize_eth import collateralize_eth
from .instructions.mint_asset import mint_asset
from .instructions.burn_asset import burn_asset
from .instructions.withdraw_collateral import withdraw_collateral
from .utils.logging import setup_logger

logger = setup_logger("collateral_model.engine")

Amount = Union[int, str]


class CollateralAndMint:
    def __init__(
        self,
        token: AssetToken,
        oracle: PriceOracle,
        vault: YieldVault,
        native: NativeCurrency,
        config: Optional[EngineConfig] = None,
        address: str = ENGINE_ADDRESS,
    ):
        self.token = token
        self.oracle = oracle
        self.vault = vault
        self.native = native
        self.config = config if config is not None else EngineConfig()
        self.address = address
        self.ledger = CollateralLedger()

        self._lock = threading.Lock()
        self._owner: Optional[int] = None

    # ------------------------------------------------------------------
    # Transaction guard
    # ------------------------------------------------------------------

    def _participants(self) -> List[Transactional]:
        seen = set()
        participants = []
        for obj in (self.ledger, self.token, self.vault, self.native, self.oracle):
            if id(obj) in seen or not isinstance(obj, Transactional):
                continue
            seen.add(id(obj))
            participants.append(obj)
        return participants

    @contextmanager
    def _transaction(self, operation: str, account: str) -> Iterator[None]:
        """Run one operation exclusively, rolling everything back if it raises

        Re-entry is only detected on the calling thread. A collaborator that calls
        back from another thread and waits on it blocks on the lock instead.
        """
        if self._owner == threading.get_ident():
            raise ReentrancyError(f"{operation} re-entered the engine for {account}")

        with self._lock:
            self._owner = threading.get_ident()
            participants = self._participants()
            saved = [(p, p.snapshot()) for p in participants]
            try:
                yield
            except BaseException as e:
                for participant, state in saved:
                    participant.restore(state)
                logger.warning("%s rejected for %s: %s", operation, account, e)
                raise
            finally:
                self._owner = None

    def _assert_solvent(self, account: str,
                        error: Type[ProtocolError] = InsufficientCollateralError) -> None:
        position = self.ledger.get(account)
        debt_value = position.debt_value_in_base(self.oracle.price())
        max_borrowable = self.config.max_borrowable(position.collateral_balance)
        if debt_value > max_borrowable:
            raise error(f"{account} is insolvent: debt {debt_value} > limit {max_borrowable}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def collateralize_eth(self, account: str, value: Amount) -> int:
        """Deposit `value` base currency as collateral. Returns vault shares credited."""
        value = parse_amount(value)
        with self._transaction("collateralize_eth", account):
            shares = collateralize_eth(self, account, value)
        logger.info("%s collateralized %d (%d vault shares)", account, value, shares)
        return shares

    def mint_asset(self, account: str, amount: Amount) -> None:
        amount = parse_amount(amount)
        with self._transaction("mint_asset", account):
            mint_asset(self, account, amount)
            self._assert_solvent(account)
        logger.info("%s minted %d", account, amount)

    def burn_asset(self, account: str, amount: Amount) -> None:
        amount = parse_amount(amount)
        with self._transaction("burn_asset", account):
            burn_asset(self, account, amount)
        logger.info("%s burned %d", account, amount)

    def withdraw_collateral(self, account: str, amount: Amount) -> int:
        """Withdraw `amount` of collateral. Returns base currency paid out."""
        amount = parse_amount(amount)
        with self._transaction("withdraw_collateral", account):
            redeemed = withdraw_collateral(self, account, amount)
            self._assert_solvent(account, CollateralLockedError)
        logger.info("%s withdrew %d collateral (%d paid out)", account, amount, redeemed)
        return redeemed

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def position(self, account: str) -> Position:
        return self.ledger.get(account)

    def collateral_balance(self, account: str) -> int:
        return self.ledger.get(account).collateral_balance

    def debt_balance(self, account: str) -> int:
        return self.ledger.get(account).debt_balance

    def collateral_used_eth(self, account: str) -> int:
        """Base currency value of the account's outstanding debt"""
        return self.ledger.get(account).debt_value_in_base(self.oracle.price())

    def current_borrow_limit_eth(self, account: str) -> int:
        """How much more debt, in base currency, the account may take on"""
        position = self.ledger.get(account)
        max_borrowable = self.config.max_borrowable(position.collateral_balance)
        return max(0, max_borrowable - position.debt_value_in_base(self.oracle.price()))

    def ceth(self, account: str) -> int:
        """Vault shares held on behalf of the account"""
        return self.ledger.get(account).vault_share_balance

    def ceth_current_balance(self) -> int:
        """Vault shares held by the engine across all accounts"""
        return self.vault.share_balance_of(self.address)

    def land_index_price(self) -> int:
        return self.oracle.price()

    def collateral_requirement_percent(self) -> int:
        return self.config.collateral_requirement_bps
