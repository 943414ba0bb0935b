"""CLI for the mortgage payment calculator.

Usage:
    python -m mortgage_calc.cli
    python -m mortgage_calc.cli --principal '$450,000' --down-payment 90000 --rate 6.25 --term 30
    python -m mortgage_calc.cli --tax 350 --insurance 120
    python -m mortgage_calc.cli --down-payment='-$5000'

Flags take the same raw text the web form does; values that don't parse
are ignored and the default is kept. A value starting with "-" must be
attached with "=" (--down-payment=-$5000), otherwise argparse reads it as a flag.
"""

import argparse
import logging
import sys

from mortgage_calc.engine.form import FormController
from mortgage_calc.engine.formatting import format_currency
from mortgage_calc.logging_setup import configure_logging
from mortgage_calc.models.loan import AmortizationResult, LoanParameters

logger = logging.getLogger(__name__)

# argparse dest -> loan field
FLAG_FIELDS = {
    "principal": "principal",
    "down_payment": "down_payment",
    "rate": "annual_rate_pct",
    "term": "term_years",
    "tax": "monthly_property_tax",
    "insurance": "monthly_insurance",
}


def print_report(params: LoanParameters, result: AmortizationResult) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Mortgage Payment Summary")
    print(f"{'=' * 60}")
    print(f"  Loan Amount:          {format_currency(params.principal)}")
    print(f"  Down Payment:         {format_currency(params.down_payment)}")
    print(f"  Interest Rate:        {params.annual_rate_pct:g}%")
    print(f"  Term:                 {params.term_years:g} years")
    print()
    print(f"  Monthly Payment (P&I):  {format_currency(result.monthly_payment)}")
    print(f"  Total Monthly Payment:  {format_currency(result.monthly_with_extras)}")
    print()
    print(f"  Principal Loan Amount:  {format_currency(params.financed_amount)}")
    print(f"  Total Interest Paid:    {format_currency(result.total_interest)}")
    print(f"  Total Cost of Loan:     {format_currency(result.total_payment)}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-rate mortgage payment calculator")
    parser.add_argument("--principal", help="Loan amount / purchase price (default: $300,000)")
    parser.add_argument("--down-payment", dest="down_payment", help="Down payment (default: $60,000)")
    parser.add_argument("--rate", help="Annual interest rate in percent (default: 3.5)")
    parser.add_argument("--term", help="Loan term in years (default: 30)")
    parser.add_argument("--tax", help="Monthly property tax (default: 0)")
    parser.add_argument("--insurance", help="Monthly insurance (default: 0)")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Logging level (default: from settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    controller = FormController()
    for dest, field in FLAG_FIELDS.items():
        raw = getattr(args, dest)
        if raw is None:
            continue
        if not controller.edit(field, raw):
            logger.warning("Ignoring --%s %r: not a number", dest.replace("_", "-"), raw)

    print_report(controller.params, controller.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
