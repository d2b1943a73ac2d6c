"""Month-by-month amortization schedule.

Pure functions: Decimal in, dataclass out. No I/O.

This is separate from the flat projection in engine.mortgage and never
feeds into it. Amounts here are rounded to cents per period, the way a
lender's schedule reads.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from netsheet.engine.mortgage import monthly_principal_and_interest
from netsheet.errors import ErrorKind, MortgageEngineError

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    payments: list[AmortizationPayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


def amortization_schedule(
    loan_amount: Decimal,
    interest_rate: Decimal,
    term_years: int,
    hold_years: int | None = None,
) -> AmortizationSchedule:
    """Generate full or partial amortization schedule.

    Args:
        loan_amount: Amount borrowed
        interest_rate: Annual interest rate in percent (e.g. 6.5)
        term_years: Loan term in years
        hold_years: If provided, only generate schedule for this many years
    """
    if hold_years is not None and not 0 < hold_years <= term_years:
        raise MortgageEngineError(
            ErrorKind.INVALID_TERM,
            f"Hold period must be between 1 and {term_years} years, got {hold_years}",
        )
    pmt = monthly_principal_and_interest(loan_amount, interest_rate, term_years).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    r = interest_rate / 100 / 12
    n_periods = (hold_years or term_years) * 12
    last_period = term_years * 12

    payments: list[AmortizationPayment] = []
    balance = loan_amount
    total_interest = Decimal("0")
    total_principal = Decimal("0")

    for period in range(1, n_periods + 1):
        interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)
        principal_paid = pmt - interest

        # Final payment clears whatever rounding left behind
        if principal_paid > balance or period == last_period:
            principal_paid = balance
            actual_payment = interest + principal_paid
        else:
            actual_payment = pmt

        balance -= principal_paid
        total_interest += interest
        total_principal += principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=actual_payment,
            principal=principal_paid,
            interest=interest,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return AmortizationSchedule(
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )


def yearly_debt_summary(schedule: AmortizationSchedule) -> list[AmortizationYear]:
    """Roll the schedule up into 12-payment loan years."""
    years: list[AmortizationYear] = []
    for start in range(0, len(schedule.payments), 12):
        chunk = schedule.payments[start:start + 12]
        years.append(AmortizationYear(
            year=start // 12 + 1,
            principal=sum((p.principal for p in chunk), Decimal("0")),
            interest=sum((p.interest for p in chunk), Decimal("0")),
            debt_service=sum((p.payment for p in chunk), Decimal("0")),
            ending_balance=chunk[-1].balance,
        ))
    return years
