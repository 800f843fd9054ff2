from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .config import DEFAULT_COMPOUNDING
from .errors import InvalidInput
from .present_value import present_value_continuous, present_value_discrete
from .utils import check_compounding, coupon_stream, int_pow, maturity_time, validate_times


@dataclass(frozen=True)
class Bond:
    times: Tuple[int, ...]
    coupon: float              # fraction of principal paid per period
    principal: float = 100.0
    bond_id: str = ""

    def __post_init__(self):
        object.__setattr__(self, "times", validate_times(self.times))

    @classmethod
    def from_periods(cls, periods: int, coupon: float, principal: float = 100.0, bond_id: str = "") -> "Bond":
        """Bond paying on periods 1..periods."""
        return cls(tuple(range(1, int(periods) + 1)), coupon, principal, bond_id)

    @property
    def maturity(self) -> int:
        return maturity_time(self.times)


def bond_price_discrete(times: Sequence[int], coupon: float, principal: float, rate: float) -> float:
    """
    Coupon stream discounted with periodic compounding, plus principal
    repaid at the last time point:

        P = PV_discrete(times, principal * coupon) + principal / (1 + rate) ** T

    Raises EmptyScheduleError if times is empty.
    """
    times = validate_times(times)
    maturity = maturity_time(times)

    payments = coupon_stream(len(times), principal * coupon)
    price = present_value_discrete(times, payments, rate)
    price += principal / int_pow(1.0 + np.float64(rate), maturity)
    return float(price)


def bond_price_continuous(times: Sequence[int], coupon: float, principal: float, rate: float) -> float:
    """As bond_price_discrete, with exp(rate * t) discounting."""
    times = validate_times(times)
    maturity = maturity_time(times)

    payments = coupon_stream(len(times), principal * coupon)
    price = present_value_continuous(times, payments, rate)
    price += principal / np.exp(float(maturity) * np.float64(rate))
    return float(price)


def bond_cashflows(times: Sequence[int], coupon: float, principal: float) -> np.ndarray:
    """Amount paid on each date: coupon everywhere, principal added on the last."""
    times = validate_times(times)
    maturity_time(times)

    cfs = coupon_stream(len(times), principal * coupon)
    cfs[-1] += principal
    return cfs


def price_bond(bond: Bond, rate: float, compounding: str = DEFAULT_COMPOUNDING) -> float:
    if check_compounding(compounding) == "discrete":
        return bond_price_discrete(bond.times, bond.coupon, bond.principal, rate)
    return bond_price_continuous(bond.times, bond.coupon, bond.principal, rate)


class BondPricer:
    """Flat-rate pricer that also checks the schedule ordering."""

    def __init__(self, rate: float, compounding: str = DEFAULT_COMPOUNDING):
        self.rate = float(rate)
        self.compounding = check_compounding(compounding)

    def validate(self, bond: Bond) -> None:
        times = bond.times
        maturity_time(times)
        if any(times[i] > times[i + 1] for i in range(len(times) - 1)):
            raise InvalidInput(f"{bond.bond_id or 'bond'}: decreasing schedule {times}.")

    def price(self, bond: Bond) -> float:
        self.validate(bond)
        return price_bond(bond, self.rate, self.compounding)
