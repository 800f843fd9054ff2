from __future__ import annotations

import logging
from typing import List

import numpy as np
import pandas as pd

from .bonds import Bond, bond_cashflows, price_bond
from .config import DEFAULT_COMPOUNDING
from .utils import check_compounding

logger = logging.getLogger(__name__)

STATIC_COLUMNS = ["bond_id", "periods", "coupon", "principal"]


def _check_columns(portfolio: pd.DataFrame) -> None:
    missing = [c for c in STATIC_COLUMNS if c not in portfolio.columns]
    if missing:
        raise ValueError(f"Portfolio is missing columns: {missing}")

    dupes = portfolio["bond_id"][portfolio["bond_id"].duplicated()].unique().tolist()
    if dupes:
        raise ValueError(f"Portfolio has duplicate bond_id values: {dupes}")


def qc_flags_for_row(periods: int, coupon: float, principal: float) -> List[str]:
    flags: List[str] = []

    if periods < 1:
        flags.append("NO_SCHEDULE")

    if coupon == 0.0:
        flags.append("ZERO_COUPON")
    elif coupon < 0.0:
        flags.append("NEGATIVE_COUPON")

    if principal <= 0.0:
        flags.append("BAD_PRINCIPAL")

    return flags


def build_cashflow_table(portfolio: pd.DataFrame) -> pd.DataFrame:
    """One row per payment: coupons on periods 1..n, principal added on period n."""
    _check_columns(portfolio)
    rows = []

    for _, r in portfolio.iterrows():
        bond_id = str(r["bond_id"])
        n = int(r["periods"])
        c = float(r["coupon"])
        face = float(r["principal"])

        if n < 1:
            continue

        times = range(1, n + 1)
        for t, cf in zip(times, bond_cashflows(times, c, face)):
            rows.append((bond_id, n, c, face, t, float(cf)))

    return pd.DataFrame(rows, columns=STATIC_COLUMNS + ["time", "cashflow"])


def price_portfolio(
    portfolio: pd.DataFrame,
    rate: float,
    compounding: str = DEFAULT_COMPOUNDING,
) -> pd.DataFrame:
    """
    Price every bond in the book at a single flat rate.

    Bonds with no payment dates get a NaN price and a NO_SCHEDULE flag
    instead of failing the whole book.
    """
    _check_columns(portfolio)
    compounding = check_compounding(compounding)
    if portfolio.empty:
        raise ValueError("Portfolio is empty.")

    prices = []
    flag_list = []
    for _, r in portfolio.iterrows():
        n = int(r["periods"])
        c = float(r["coupon"])
        face = float(r["principal"])

        flags = qc_flags_for_row(n, c, face)
        if "NO_SCHEDULE" in flags:
            prices.append(np.nan)
        else:
            bond = Bond.from_periods(n, c, face, bond_id=str(r["bond_id"]))
            prices.append(price_bond(bond, rate, compounding))

        flag_list.append("|".join(flags) if flags else "")

    out = portfolio[STATIC_COLUMNS].copy().reset_index(drop=True)
    out["price"] = np.array(prices, dtype=float)
    out["price_per_100"] = 100.0 * out["price"] / out["principal"]
    out["flags"] = flag_list

    logger.debug("Priced %s bond(s) at rate=%s (%s)", len(out), rate, compounding)
    return out


def make_sample_portfolio(n: int = 20, seed: int = 7) -> pd.DataFrame:
    """
    Synthetic book of fixed-coupon bonds for demo/testing.

    - Periods: 1..20 (semiannual up to 10Y)
    - Coupons: uniform in [0.5%, 4%] per period
    - Principal: 100
    """
    rng = np.random.default_rng(seed)

    return pd.DataFrame({
        "bond_id": [f"BOND_{i:03d}" for i in range(n)],
        "periods": rng.integers(1, 21, size=n),
        "coupon": rng.uniform(0.005, 0.04, size=n),
        "principal": 100.0,
    })
