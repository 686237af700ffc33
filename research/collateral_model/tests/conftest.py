"""Shared fixtures: an engine wired to in-memory collaborators"""
import pytest

from collateral_model.src.constants import SCALE
from collateral_model.src.engine import CollateralAndMint
from collateral_model.src.external.native import NativeLedger
from collateral_model.src.external.oracle import StaticPriceOracle
from collateral_model.src.external.token import MintableToken
from collateral_model.src.external.vault import ExchangeRateVault
from collateral_model.src.state.engine_config import EngineConfig

# Land index tokens per ETH
LAND_INDEX_PRICE = 37_674_562_290_713_460
ACCOUNTS = ["alice", "bob", "carol"]

@pytest.fixture
def native():
    ledger = NativeLedger()
    for account in ACCOUNTS:
        ledger.mint_to(account, 10 * SCALE)
    return ledger

@pytest.fixture
def oracle():
    return StaticPriceOracle(LAND_INDEX_PRICE)

@pytest.fixture
def vault(native):
    return ExchangeRateVault(native)

@pytest.fixture
def token():
    return MintableToken("Decentraland Index", "dLand")

@pytest.fixture
def engine(token, oracle, vault, native):
    engine = CollateralAndMint(token, oracle, vault, native, EngineConfig(collateral_requirement_bps=6000))
    token.grant_minter(engine.address)
    return engine
