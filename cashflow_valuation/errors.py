from __future__ import annotations


class InvalidInput(ValueError):
    """Cash-flow schedule is malformed (length mismatch, bad time points)."""


class EmptyScheduleError(ValueError):
    """Bond schedule has no time points, so maturity cannot be determined."""
