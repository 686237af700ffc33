# Fixed point scale factors
SCALE = 1_000_000_000_000_000_000  # 1e18, shared by balances, shares and prices
BPS_SCALE = 10_000  # Basis points (100% = 10000)
UINT256_MAX = 2**256 - 1

# Collateral constants
DEFAULT_COLLATERAL_REQUIREMENT_BPS = 6000  # 60% kept as buffer -> 40% max LTV
MIN_COLLATERAL_REQUIREMENT_BPS = 0
MAX_COLLATERAL_REQUIREMENT_BPS = BPS_SCALE

# Vault constants
DEFAULT_VAULT_EXCHANGE_RATE = 2 * SCALE  # 1 share redeems 2 base units

# Addresses of the in-memory collaborators
ENGINE_ADDRESS = "collateral_and_mint"
VAULT_ADDRESS = "yield_vault"
