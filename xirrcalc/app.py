#!/usr/bin/env python3
"""
XIRR Command Line Application

Calculates the annualised rate of return of dated cash flows given on the
command line. Deposits are negative, withdrawals and the final value are
positive.

Usage:
    xirrcalc DATE=AMOUNT DATE=AMOUNT ... [--days-per-year N] [--guess G]

Examples:
    xirrcalc 2010-01-01=-1000 2011-01-01=1100
    xirrcalc 2016-01-15=-1000 2016-02-08=-2500 2016-04-17=-1000 2016-08-24=5050
    xirrcalc 2010-01-01=-1000 2011-01-01=900 --days-per-year actual_360
"""

import argparse
import logging
import sys
from typing import List

from .config.settings import settings
from .config.xirr_config import XIRRConfig
from .calculators.xirr_calculator import XIRRCalculator
from .errors import InvalidTransactionsError, NewtonRaphsonError
from .models.enums import DayCount, GuessStrategy
from .models.transaction import Transaction

logger = logging.getLogger(__name__)


def parse_transaction(text: str) -> Transaction:
    """Parse a DATE=AMOUNT argument."""
    when, sep, amount = text.rpartition("=")
    if not sep or not when or not amount:
        raise argparse.ArgumentTypeError(f"expected DATE=AMOUNT, got {text!r}")
    try:
        return Transaction.from_string(amount, when, settings.date_format)
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"invalid transaction {text!r}: {e}")


def parse_days_per_year(text: str) -> float:
    """Accept a number or a convention name such as actual_360."""
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return DayCount.from_string(text).value
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_guess_strategy(text: str) -> GuessStrategy:
    try:
        return GuessStrategy.from_string(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: List[str] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="xirrcalc",
        description="Extended Internal Rate of Return calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s 2010-01-01=-1000 2011-01-01=1100
    %(prog)s 2010-01-01=-1000 2011-01-01=900 --days-per-year 360
    %(prog)s 2010-01-01=-1000 2011-01-01=1100 --probe 0.05

Exit codes:
    0  rate calculated
    1  invalid transactions or Newton-Raphson failure
    2  bad arguments
        """
    )

    parser.add_argument(
        "transactions",
        nargs="+",
        type=parse_transaction,
        metavar="DATE=AMOUNT",
        help="Cash flow, e.g. 2010-01-01=-1000 (negative for deposits)"
    )

    parser.add_argument(
        "--days-per-year", "-d",
        type=parse_days_per_year,
        default=None,
        help=f"Day count denominator or convention name (default: {settings.days_per_year:g})"
    )

    parser.add_argument(
        "--tolerance", "-t",
        type=float,
        default=None,
        help=f"Newton-Raphson tolerance (default: {settings.newton_raphson_tolerance:g})"
    )

    parser.add_argument(
        "--max-iterations", "-n",
        type=int,
        default=None,
        help=f"Newton-Raphson iteration limit (default: {settings.newton_raphson_max_iterations})"
    )

    parser.add_argument(
        "--guess", "-g",
        type=float,
        default=None,
        help="Initial rate guess (default: derived from the cash flows)"
    )

    parser.add_argument(
        "--guess-strategy",
        type=parse_guess_strategy,
        default=None,
        help="How to derive the initial guess: return_over_deposits or sign_of_total"
    )

    parser.add_argument(
        "--probe",
        type=float,
        metavar="RATE",
        help="Print present value and derivative at RATE instead of solving"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def build_config(args) -> XIRRConfig:
    """Settings defaults overridden by command line options."""
    return XIRRConfig.from_settings().with_overrides(
        tolerance=args.tolerance,
        max_iterations=args.max_iterations,
        days_per_year=args.days_per_year,
        initial_guess=args.guess,
        guess_strategy=args.guess_strategy,
    )


def run_calculation(args) -> int:
    """Run the calculation and print the result."""
    config = build_config(args)
    calculator = XIRRCalculator(args.transactions, config)

    if args.verbose:
        summary = calculator.summary
        print(f"Transactions: {summary.count}")
        print(f"Date range: {summary.start} to {summary.end}")
        print(f"Deposits: {float(summary.deposits):,.2f}")
        print(f"Net cash flow: {float(summary.total):,.2f}")
        print()

    if args.probe is not None:
        print(f"Present value at {args.probe!r}: {calculator.present_value(args.probe)!r}")
        print(f"Derivative at {args.probe!r}: {calculator.derivative(args.probe)!r}")
        return 0

    rate = calculator.xirr()
    print(f"XIRR: {rate!r} ({rate:.4%})")
    return 0


def main(argv: List[str] = None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        exit_code = run_calculation(args)
        sys.exit(exit_code)
    except (InvalidTransactionsError, NewtonRaphsonError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
