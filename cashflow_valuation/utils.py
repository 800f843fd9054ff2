from __future__ import annotations

import operator
from typing import Sequence, Tuple

import numpy as np

from .config import COMPOUNDINGS
from .errors import InvalidInput, EmptyScheduleError


def check_compounding(compounding: str) -> str:
    """Normalise a compounding name, rejecting anything unsupported."""
    name = str(compounding).strip().lower()
    if name not in COMPOUNDINGS:
        raise ValueError(f"Unsupported compounding: {compounding!r} (expected one of {COMPOUNDINGS})")
    return name


def validate_times(times: Sequence[int]) -> Tuple[int, ...]:
    """
    Time points as a tuple of non-negative ints.

    numpy integer scalars are accepted; floats and bools are not.
    """
    arr = np.asarray(times, dtype=object)
    if arr.ndim != 1:
        raise InvalidInput(f"times must be one-dimensional, got shape {arr.shape}")

    out = []
    for i, t in enumerate(arr):
        if isinstance(t, (bool, np.bool_)):
            raise InvalidInput(f"times[{i}] is a boolean: {t!r}")
        try:
            t = operator.index(t)
        except TypeError:
            raise InvalidInput(f"times[{i}] is not an integer: {t!r}") from None
        if t < 0:
            raise InvalidInput(f"times[{i}] is negative: {t}")
        out.append(t)
    return tuple(out)


def validate_schedule(times: Sequence[int], amounts: Sequence[float]) -> Tuple[Tuple[int, ...], np.ndarray]:
    """Validate paired times/amounts and return (times, float64 amounts)."""
    t = validate_times(times)
    try:
        raw = np.asarray(amounts)
    except ValueError as exc:
        raise InvalidInput(f"amounts must be a flat sequence: {exc}") from None
    if raw.size and raw.dtype.kind not in "biuf":
        raise InvalidInput(f"amounts must be real numbers, got dtype {raw.dtype}")
    a = raw.astype(float)

    if a.ndim != 1:
        raise InvalidInput(f"amounts must be one-dimensional, got shape {a.shape}")
    if len(t) != a.size:
        raise InvalidInput(f"times and amounts differ in length: {len(t)} != {a.size}")
    return t, a


def int_pow(base: float, exp: int) -> float:
    """
    base ** exp for a non-negative integer exponent by repeated squaring.

    Multiplication only; never calls a real-valued pow().
    """
    if exp == 0:
        return 1.0

    while exp & 1 == 0:
        base = base * base
        exp >>= 1
    if exp == 1:
        return base

    acc = base
    while exp > 1:
        exp >>= 1
        base = base * base
        if exp & 1 == 1:
            acc = acc * base
    return acc


def discount_factor(time: int, rate: float, compounding: str = "discrete") -> float:
    """Single-period-count discount factor D(t) under a flat rate."""
    compounding = check_compounding(compounding)
    r = np.float64(rate)
    if compounding == "discrete":
        return float(1.0 / int_pow(1.0 + r, time))
    return float(1.0 / np.exp(float(time) * r))


def coupon_stream(n: int, amount: float) -> np.ndarray:
    """n copies of a coupon amount."""
    return np.full(n, amount, dtype=float)


def maturity_time(times: Sequence[int]) -> int:
    """Last entry of a non-empty schedule."""
    if len(times) == 0:
        raise EmptyScheduleError("Cash flow times is empty: no maturity for principal repayment.")
    return times[-1]
