"""
Cash-flow valuation

Modules:
- present_value: discrete/continuous present value of a cash-flow schedule
- bonds: fixed-coupon bond pricing built on the present-value reducers
- portfolio: DataFrame book expansion + per-bond pricing
- risk: DV01/duration/convexity by flat-rate bumps
- scenarios: parallel rate shock runners
- utils: schedule validation, integer power, discount factors
- cli: command-line front end
"""
from .errors import EmptyScheduleError, InvalidInput
from .present_value import present_value_continuous, present_value_discrete
from .bonds import bond_price_continuous, bond_price_discrete

__all__ = [
    "InvalidInput",
    "EmptyScheduleError",
    "present_value_discrete",
    "present_value_continuous",
    "bond_price_discrete",
    "bond_price_continuous",
]
