from __future__ import annotations

import logging

import pandas as pd

from .bonds import Bond, price_bond
from .config import BASIS_POINT, DEFAULT_COMPOUNDING
from .portfolio import price_portfolio

logger = logging.getLogger(__name__)


def bond_dv01(bond: Bond, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> float:
    """Price change for a +1bp move in the flat rate (negative for a long bond)."""
    base = price_bond(bond, rate, compounding)
    up = price_bond(bond, rate + BASIS_POINT, compounding)
    return up - base


def modified_duration(bond: Bond, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> float:
    base = price_bond(bond, rate, compounding)
    return -bond_dv01(bond, rate, compounding) / (base * BASIS_POINT)


def bond_convexity(bond: Bond, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> float:
    h = BASIS_POINT
    base = price_bond(bond, rate, compounding)
    up = price_bond(bond, rate + h, compounding)
    down = price_bond(bond, rate - h, compounding)
    return (up + down - 2 * base) / (base * h**2)


def compute_portfolio_dv01(portfolio: pd.DataFrame, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> pd.DataFrame:
    base = price_portfolio(portfolio, rate, compounding)
    shocked = price_portfolio(portfolio, rate + BASIS_POINT, compounding)

    out = base[["bond_id", "price"]].merge(
        shocked[["bond_id", "price"]],
        on="bond_id",
        suffixes=("_base", "_up1bp"),
        validate="one_to_one",
    )

    out["dv01"] = out["price_up1bp"] - out["price_base"]
    logger.debug("Portfolio DV01 total=%s", out["dv01"].sum())
    return out


def compute_portfolio_convexity(portfolio: pd.DataFrame, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> pd.DataFrame:
    h = BASIS_POINT
    base = price_portfolio(portfolio, rate, compounding)
    price_up = price_portfolio(portfolio, rate + h, compounding)
    price_down = price_portfolio(portfolio, rate - h, compounding)

    out = base[["bond_id", "price"]].merge(
        price_up[["bond_id", "price"]], on="bond_id", suffixes=("_base", "_up"), validate="one_to_one"
    ).merge(
        price_down[["bond_id", "price"]], on="bond_id", validate="one_to_one"
    )
    out = out.rename(columns={"price": "price_down"})

    out["convexity"] = (out["price_up"] + out["price_down"] - 2 * out["price_base"]) / (out["price_base"] * h**2)
    return out[["bond_id", "convexity"]]


def duration_from_dv01(dv01_df: pd.DataFrame) -> pd.DataFrame:
    df = dv01_df.copy()
    df["mod_duration"] = -df["dv01"] / (df["price_base"] * BASIS_POINT)
    return df[["bond_id", "mod_duration"]]
