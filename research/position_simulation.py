import logging
import numpy as np
import matplotlib.pyplot as plt
from dataclasses import dataclass, replace
from typing import List, Optional
import pandas as pd
from pathlib import Path
from datetime import datetime

from collateral_model.src.constants import SCALE, DEFAULT_COLLATERAL_REQUIREMENT_BPS
from collateral_model.src.engine import CollateralAndMint
from collateral_model.src.external.native import NativeLedger
from collateral_model.src.external.oracle import StaticPriceOracle
from collateral_model.src.external.token import MintableToken
from collateral_model.src.external.vault import ExchangeRateVault
from collateral_model.src.fixed_point import to_token_amount
from collateral_model.src.state.engine_config import EngineConfig
from collateral_model.src.utils.logging import setup_logger

# Land index tokens per ETH observed when the index launched
INITIAL_INDEX_PRICE = 37_674_562_290_713_460
BORROWER = "borrower"

@dataclass
class SimulationParams:
    initial_price: int = INITIAL_INDEX_PRICE
    price_volatility: float = 0.01
    simulation_days: int = 100
    steps_per_day: int = 24  # hourly steps
    random_seed: Optional[int] = None
    experiment_name: str = "default"
    collateral_requirement_bps: int = DEFAULT_COLLATERAL_REQUIREMENT_BPS
    deposit: int = SCALE  # 1 ETH
    utilization_bps: int = 10_000  # share of the free borrow limit minted each step
    rebalance: bool = True  # burn back under the limit when the price moves against us

class PositionSimulation:
    """Drives one borrower through a random walk of the oracle price.

    The borrower deposits once, then on every step mints into whatever borrow
    limit is free and, if rebalancing, burns whatever debt the price move left
    uncovered.
    """

    def __init__(self, params: SimulationParams):
        self.params = params
        self.rng = np.random.default_rng(params.random_seed)

        self.native = NativeLedger()
        self.oracle = StaticPriceOracle(params.initial_price)
        self.vault = ExchangeRateVault(self.native)
        self.token = MintableToken("Decentraland Index", "dLand")
        self.engine = CollateralAndMint(
            self.token,
            self.oracle,
            self.vault,
            self.native,
            EngineConfig(collateral_requirement_bps=params.collateral_requirement_bps),
        )
        self.token.grant_minter(self.engine.address)

        self.native.mint_to(BORROWER, params.deposit)
        self.engine.collateralize_eth(BORROWER, params.deposit)

    def _borrow(self, price: int) -> None:
        limit = self.engine.current_borrow_limit_eth(BORROWER)
        amount = to_token_amount(limit * self.params.utilization_bps // 10_000, price)
        if amount > 0:
            self.engine.mint_asset(BORROWER, amount)

    def _rebalance(self, price: int) -> int:
        position = self.engine.position(BORROWER)
        max_borrowable = self.engine.config.max_borrowable(position.collateral_balance)
        excess = self.engine.collateral_used_eth(BORROWER) - max_borrowable
        if excess <= 0:
            return 0
        # Round up so the burn covers the whole shortfall
        amount = min(position.debt_balance, -(-excess * price // SCALE))
        self.token.approve(BORROWER, self.engine.address, amount)
        self.engine.burn_asset(BORROWER, amount)
        return amount

    def simulate(self) -> pd.DataFrame:
        current_price = float(self.params.initial_price)
        total_steps = self.params.simulation_days * self.params.steps_per_day
        rows = []

        for step in range(total_steps):
            # Simulate price movement with Brownian motion
            price_change = self.rng.normal(0, self.params.price_volatility)
            current_price = max(current_price * (1 + price_change), 1.0)
            price = int(current_price)
            self.oracle.set_price(price)

            burned = self._rebalance(price) if self.params.rebalance else 0
            self._borrow(price)

            position = self.engine.position(BORROWER)
            used = self.engine.collateral_used_eth(BORROWER)
            max_borrowable = self.engine.config.max_borrowable(position.collateral_balance)
            rows.append({
                "step": step,
                "time_days": step / self.params.steps_per_day,
                "price": price,
                "debt": position.debt_balance,
                "burned": burned,
                "collateral_used_eth": used,
                "max_borrowable_eth": max_borrowable,
                "borrow_limit_eth": self.engine.current_borrow_limit_eth(BORROWER),
                "health": max_borrowable / used if used else np.inf,
                "underwater": used > max_borrowable,
            })

        return pd.DataFrame(rows)

    def plot_results(self, results: pd.DataFrame, output_dir: Optional[Path] = None) -> Path:
        output_dir = output_dir or Path('research/results') / self.params.experiment_name
        output_dir.mkdir(parents=True, exist_ok=True)

        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8))

        # Plot price
        ax1.plot(results["time_days"], results["price"] / SCALE, label='Index tokens per ETH')
        ax1.set_ylabel('Price')
        ax1.set_title('Oracle Price Over Time')
        ax1.legend()
        ax1.grid(True)

        # Plot debt value against the limit
        ax2.plot(results["time_days"], results["collateral_used_eth"] / SCALE, label='Collateral used (ETH)')
        ax2.plot(results["time_days"], results["max_borrowable_eth"] / SCALE, label='Max borrowable (ETH)',
                 color='r', linestyle='--', alpha=0.5)
        ax2.set_ylabel('ETH')
        ax2.set_xlabel('Time (days)')
        ax2.set_title('Debt Value Against Borrow Limit')
        ax2.legend()
        ax2.grid(True)

        plt.tight_layout()

        plot_name = f"requirement_{self.params.collateral_requirement_bps}_vol_{self.params.price_volatility}"
        if self.params.random_seed is not None:
            plot_name += f"_seed_{self.params.random_seed}"

        path = output_dir / f"{plot_name}.png"
        plt.savefig(path)
        plt.close(fig)
        return path

def summarize(results: pd.DataFrame) -> dict:
    return {
        "underwater_share": float(results["underwater"].mean()),
        "min_health": float(results["health"].min()),
        "total_burned": int(results["burned"].sum()),
        "final_debt": int(results["debt"].iloc[-1]),
    }

def compare_collateral_requirements(requirements_bps: List[int], base_params: SimulationParams,
                                    output_dir: Optional[Path] = None) -> pd.DataFrame:
    """Run the same price path at several collateral requirements and plot health side by side"""
    output_dir = output_dir or Path('research/results/collateral_requirement_comparison')
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 6))
    summary = []

    for bps in requirements_bps:
        # Same seed -> same price path for every requirement
        params = replace(base_params, collateral_requirement_bps=bps)
        results = PositionSimulation(params).simulate()
        summary.append({"collateral_requirement_bps": bps, **summarize(results)})

        used_share = results["collateral_used_eth"] / results["max_borrowable_eth"].replace(0, np.nan)
        ax.plot(results["time_days"], used_share * 100, label=f"requirement {bps / 100:.0f}%")

    ax.axhline(y=100, color='r', linestyle='--', alpha=0.3)
    ax.set_ylabel('Debt value / max borrowable (%)')
    ax.set_xlabel('Time (days)')
    ax.set_title('Borrow Limit Utilization')
    ax.legend(bbox_to_anchor=(1.05, 1), loc='upper left')
    ax.grid(True, alpha=0.3)

    seed_text = f"Random Seed: {base_params.random_seed}" if base_params.random_seed is not None else "No Seed"
    fig.text(0.02, 0.02, seed_text, fontsize=8, alpha=0.7)

    plt.tight_layout()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    plt.savefig(output_dir / f"requirement_comparison_{timestamp}.png", bbox_inches='tight', dpi=150)
    plt.close(fig)

    return pd.DataFrame(summary)

def main():
    # one INFO line per mint is too chatty for a sweep
    setup_logger("collateral_model.engine", logging.WARNING)

    base_params = SimulationParams(
        experiment_name="collateral_requirement_comparison",
        random_seed=57,
        simulation_days=100,
        rebalance=False,
    )

    summary = compare_collateral_requirements([2000, 4000, 6000, 8000], base_params)
    print(summary.to_string(index=False))

    # # single run for testing
    # params = SimulationParams(experiment_name="single_run", random_seed=42)
    # sim = PositionSimulation(params)
    # sim.plot_results(sim.simulate())

if __name__ == "__main__":
    main()
