from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from .config import DEFAULT_COMPOUNDING
from .utils import check_compounding, discount_factor, int_pow, validate_schedule


def present_value_discrete(times: Sequence[int], amounts: Sequence[float], rate: float) -> float:
    """
    Present value of a cash-flow schedule under periodic compounding:

        PV = sum_i amount_i / (1 + rate) ** time_i

    The power is taken with integer exponentiation, not a real-valued pow.
    Raises InvalidInput if the schedule is malformed. An empty schedule is worth 0.0.
    """
    times, amounts = validate_schedule(times, amounts)
    growth = 1.0 + np.float64(rate)

    pv = np.float64(0.0)
    for t, cash in zip(times, amounts):
        pv += cash / int_pow(growth, t)
    return float(pv)


def present_value_continuous(times: Sequence[int], amounts: Sequence[float], rate: float) -> float:
    """
    Present value of a cash-flow schedule under continuous compounding:

        PV = sum_i amount_i / exp(time_i * rate)
    """
    times, amounts = validate_schedule(times, amounts)
    r = np.float64(rate)

    pv = np.float64(0.0)
    for t, cash in zip(times, amounts):
        pv += cash / np.exp(float(t) * r)
    return float(pv)


def present_value(
    times: Sequence[int],
    amounts: Sequence[float],
    rate: float,
    compounding: str = DEFAULT_COMPOUNDING,
) -> float:
    if check_compounding(compounding) == "discrete":
        return present_value_discrete(times, amounts, rate)
    return present_value_continuous(times, amounts, rate)


def cashflow_table(
    times: Sequence[int],
    amounts: Sequence[float],
    rate: float,
    compounding: str = DEFAULT_COMPOUNDING,
) -> pd.DataFrame:
    """One row per cash flow with its discount factor and discounted amount."""
    compounding = check_compounding(compounding)
    times, amounts = validate_schedule(times, amounts)

    dfs = np.array([discount_factor(t, rate, compounding) for t in times], dtype=float)

    return pd.DataFrame(
        {
            "time": np.array(times, dtype=np.int64),
            "amount": amounts,
            "discount_factor": dfs,
            "present_value": amounts * dfs,
        }
    )
