# config.py
# Purpose: package-wide constants and logging settings

from __future__ import annotations

import os

COMPOUNDINGS = ("discrete", "continuous")
DEFAULT_COMPOUNDING = "discrete"

# 1bp in decimal rate units, used for finite-difference risk
BASIS_POINT = 1e-4

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("CASHFLOW_VALUATION_LOG_LEVEL", "INFO").upper()
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
