from __future__ import annotations

import logging
from typing import Iterable, Tuple

import pandas as pd

from .config import BASIS_POINT, DEFAULT_COMPOUNDING
from .portfolio import price_portfolio

logger = logging.getLogger(__name__)

DEFAULT_SHOCKS_BP = (-50, -25, 25, 50)


def scenario_name(shock_bp: float) -> str:
    return f"PAR_{shock_bp:+g}bp"


def run_rate_scenarios(
    portfolio: pd.DataFrame,
    rate: float,
    compounding: str = DEFAULT_COMPOUNDING,
    shocks_bp: Iterable[float] = DEFAULT_SHOCKS_BP,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Reprice the book under parallel shifts of the flat rate.

    Returns (per_bond, summary): per_bond carries the base price, one price
    column per scenario and a matching *_PnL column; summary totals the PnL.
    """
    base = price_portfolio(portfolio, rate, compounding)[["bond_id", "price"]].rename(columns={"price": "base"})

    per_bond = base.copy()
    for bp in shocks_bp:
        name = scenario_name(bp)
        shocked_rate = rate + bp * BASIS_POINT
        logger.debug("Scenario %s: rate %s -> %s", name, rate, shocked_rate)

        px = price_portfolio(portfolio, shocked_rate, compounding)[["bond_id", "price"]].rename(columns={"price": name})
        per_bond = per_bond.merge(px, on="bond_id", how="left", validate="one_to_one")
        per_bond[name + "_PnL"] = per_bond[name] - per_bond["base"]

    pnl_cols = [c for c in per_bond.columns if c.endswith("_PnL")]
    summary = pd.DataFrame({"scenario": pnl_cols, "total_pnl": [per_bond[c].sum() for c in pnl_cols]})

    return per_bond, summary
