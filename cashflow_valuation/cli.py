"""
Command-line front end.

    cashflow-valuation pv --times 1 2 3 --amounts 100 100 100 --rate 0.015
    cashflow-valuation bond --periods 6 --coupon 0.0055 --principal 100 --rate 0.0075 --compounding continuous
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .bonds import Bond, BondPricer
from .config import COMPOUNDINGS, DEFAULT_COMPOUNDING, LOG_FORMAT, LOG_LEVEL, LOG_LEVELS
from .errors import EmptyScheduleError, InvalidInput
from .present_value import cashflow_table, present_value

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cashflow-valuation", description="Present value and bond pricing at a flat rate.")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL,
        help="logging level (default from CASHFLOW_VALUATION_LOG_LEVEL)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    pv = sub.add_parser("pv", help="present value of a cash-flow schedule")
    pv.add_argument("--times", type=int, nargs="*", default=[], help="periods of each cash flow")
    pv.add_argument("--amounts", type=float, nargs="*", default=[], help="cash amount at each period")
    pv.add_argument("--rate", type=float, required=True, help="market rate per period, e.g. 0.015")
    pv.add_argument("--compounding", choices=COMPOUNDINGS, default=DEFAULT_COMPOUNDING)
    pv.add_argument("--table", action="store_true", help="also print the per-cash-flow breakdown")

    bond = sub.add_parser("bond", help="price of a fixed-coupon bond")
    when = bond.add_mutually_exclusive_group(required=True)
    when.add_argument("--times", type=int, nargs="+", help="coupon payment periods, maturity last")
    when.add_argument("--periods", type=int, help="pay on periods 1..N")
    bond.add_argument("--coupon", type=float, required=True, help="coupon per period as a fraction of principal")
    bond.add_argument("--principal", type=float, default=100.0)
    bond.add_argument("--rate", type=float, required=True, help="market rate per period")
    bond.add_argument("--compounding", choices=COMPOUNDINGS, default=DEFAULT_COMPOUNDING)

    return p


def _run_pv(args: argparse.Namespace) -> None:
    value = present_value(args.times, args.amounts, args.rate, args.compounding)
    logger.info("Present value (%s) = %s", args.compounding, value)
    print(f"{value:.10f}")

    if args.table:
        print(cashflow_table(args.times, args.amounts, args.rate, args.compounding).to_string(index=False))


def _run_bond(args: argparse.Namespace) -> None:
    if args.periods is not None:
        bond = Bond.from_periods(args.periods, args.coupon, args.principal)
    else:
        bond = Bond(tuple(args.times), args.coupon, args.principal)

    price = BondPricer(args.rate, args.compounding).price(bond)
    logger.info("Bond price (%s) = %s", args.compounding, price)
    print(f"{price:.10f}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    logger.info("Program args: %s", sys.argv[1:] if argv is None else argv)

    if args.rate <= -1.0:
        logger.warning("rate=%s is at or below -1: discount factors are undefined or negative", args.rate)

    try:
        if args.command == "pv":
            _run_pv(args)
        else:
            _run_bond(args)
    except (InvalidInput, EmptyScheduleError) as e:
        logger.error("Invalid input: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
