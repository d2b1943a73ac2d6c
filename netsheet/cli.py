"""CLI for a buyer's closing cost and ownership net sheet.

Usage:
    python -m netsheet.cli --price 400000 --down-percent 20 --rate 6.5 --term 30 --state CA
    python -m netsheet.cli --price 350000 --down-amount 17500 --state TX --live-rate
    python -m netsheet.cli --price 500000 --state NY --schedule
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal, InvalidOperation

from netsheet.config import settings
from netsheet.data.fred import FREDClient
from netsheet.engine.amortization import amortization_schedule, yearly_debt_summary
from netsheet.engine.net_sheet import build_net_sheet
from netsheet.errors import MortgageEngineError
from netsheet.models.loan import LoanConfiguration
from netsheet.models.results import NetSheet

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _cents(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value.replace(",", "").replace("$", ""))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_net_sheet(sheet: NetSheet) -> None:
    c = sheet.config
    _header(f"Net Sheet: {_dollar(c.home_price)} home in {sheet.state.name}")
    print(f"  Down Payment:     {_dollar(c.down_payment_amount)} ({float(c.down_payment_percent):.2f}%)")
    print(f"  Loan Amount:      {_dollar(c.loan_amount)}")
    print(f"  Rate / Term:      {float(c.interest_rate):.3f}% / {c.loan_term_years} years")

    _header("Cash to Close")
    for name, value in sheet.closing_costs.items().items():
        print(f"  {name.replace('_', ' ').title():<30}{_cents(value):>14}")
    print(f"  {'Total Closing Costs':<30}{_cents(sheet.closing_cost_total):>14}")
    print(f"  {'Down Payment':<30}{_cents(c.down_payment_amount):>14}")
    print(f"  {'Total Cash Needed':<30}{_cents(sheet.cash_to_close):>14}")

    m = sheet.monthly_payment
    _header("Monthly Payment")
    print(f"  Principal:        {_cents(m.principal)}")
    print(f"  Interest:         {_cents(m.interest)}")
    print(f"  PMI:              {_cents(m.pmi)}")
    print(f"  Property Tax:     {_cents(m.taxes)}")
    print(f"  Insurance:        {_cents(m.insurance)}")
    print(f"  HOA:              {_cents(m.hoa)}")
    print(f"  Total:            {_cents(m.total)}")

    p = sheet.projection
    _header("Cost of Ownership")
    print(f"  Utilities:        {_cents(sheet.recurring.utilities)}/mo")
    print(f"  Maintenance:      {_cents(sheet.recurring.maintenance)}/mo")
    print(f"  First Year:       {_dollar(p.yearly_total)}")
    print(f"  Five Years:       {_dollar(p.five_year_total)}")
    print(f"  {f'{p.years} Years:':<18}{_dollar(p.n_year_total)}")
    print()


def print_schedule(sheet: NetSheet) -> None:
    c = sheet.config
    schedule = amortization_schedule(c.loan_amount, c.interest_rate, c.loan_term_years)
    _header("Amortization by Year")
    print(f"  {'Year':>4}  {'Principal':>12}  {'Interest':>12}  {'Balance':>12}")
    for y in yearly_debt_summary(schedule):
        print(
            f"  {y.year:>4}  {_dollar(y.principal):>12}  "
            f"{_dollar(y.interest):>12}  {_dollar(y.ending_balance):>12}"
        )
    print(f"\n  Total interest over the loan: {_dollar(schedule.total_interest)}")
    print()


async def _live_rate(loan_term_years: int) -> Decimal:
    rates = await FREDClient().get_mortgage_rates()
    quote = rates.for_term(loan_term_years)
    print(f"  Market rate: {float(quote.rate):.3f}% ({quote.source})")
    return quote.rate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Closing cost and ownership net sheet")
    parser.add_argument("--price", type=_decimal, default=settings.default_home_price, help="Home price")
    down = parser.add_mutually_exclusive_group()
    down.add_argument("--down-percent", type=_decimal, help="Down payment, percent of price")
    down.add_argument("--down-amount", type=_decimal, help="Down payment in dollars")
    parser.add_argument("--rate", type=_decimal, default=settings.default_interest_rate, help="Annual rate, percent")
    parser.add_argument("--term", type=int, default=settings.default_loan_term_years, help="Loan term in years")
    parser.add_argument("--state", default=settings.default_state, help="Two-letter state code")
    parser.add_argument("--years", type=int, default=30, help="Projection horizon in years (default: 30)")
    parser.add_argument("--hoa", type=_decimal, help="Monthly HOA dues")
    parser.add_argument("--utilities", type=_decimal, help="Monthly utilities")
    parser.add_argument("--live-rate", action="store_true", help="Use the current FRED rate instead of --rate")
    parser.add_argument("--schedule", action="store_true", help="Also print the yearly amortization schedule")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    rate = asyncio.run(_live_rate(args.term)) if args.live_rate else args.rate
    state = args.state.upper()

    default_params = {}
    if args.hoa is not None:
        default_params["hoa_monthly"] = args.hoa
    if args.utilities is not None:
        default_params["utilities_monthly"] = args.utilities

    try:
        if args.down_amount is not None:
            config = LoanConfiguration.from_down_payment_amount(
                args.price, args.down_amount, rate, args.term, state
            )
        else:
            percent = args.down_percent
            if percent is None:
                percent = settings.default_down_payment_percent
            config = LoanConfiguration.from_down_payment_percent(
                args.price, percent, rate, args.term, state
            )
        sheet = build_net_sheet(config, projection_years=args.years, **default_params)
    except MortgageEngineError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_net_sheet(sheet)
    if args.schedule:
        print_schedule(sheet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
