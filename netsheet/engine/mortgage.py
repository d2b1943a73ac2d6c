"""Monthly payment, closing cost and ownership-cost projection.

Pure functions: Decimal in, dataclass out. No I/O, no rounding.
Rates are annual percentages (6.5 means 6.5%).
"""

from decimal import Decimal

from netsheet.errors import ErrorKind, MortgageEngineError
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts
from netsheet.models.results import MonthlyPaymentBreakdown, ProjectionResult

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWELVE = Decimal("12")
PMI_THRESHOLD_PCT = Decimal("20")  # Down payment at or above this waives PMI
MAX_TERM_YEARS = 50


def _check_loan_amount(loan_amount: Decimal) -> None:
    if not loan_amount.is_finite() or loan_amount < 0:
        raise MortgageEngineError(
            ErrorKind.INVALID_LOAN_AMOUNT,
            f"Loan amount must be finite and non-negative, got {loan_amount}",
        )


def _check_rate(name: str, rate: Decimal) -> None:
    if not rate.is_finite() or rate < 0:
        raise MortgageEngineError(
            ErrorKind.INVALID_RATE, f"{name} must be finite and non-negative, got {rate}"
        )


def _check_fees(costs: dict[str, Decimal]) -> None:
    for name, value in costs.items():
        if not value.is_finite() or value < 0:
            raise MortgageEngineError(
                ErrorKind.INVALID_FEE, f"{name} must be finite and non-negative, got {value}"
            )


def monthly_principal_and_interest(
    loan_amount: Decimal, interest_rate: Decimal, term_years: int
) -> Decimal:
    """Fixed monthly P&I payment.

    M = P * [r(1+r)^n] / [(1+r)^n - 1], or P / n when the rate is zero.
    """
    _check_loan_amount(loan_amount)
    _check_rate("Interest rate", interest_rate)
    if not 0 < term_years <= MAX_TERM_YEARS:
        raise MortgageEngineError(
            ErrorKind.INVALID_TERM,
            f"Loan term must be between 1 and {MAX_TERM_YEARS} years, got {term_years}",
        )
    n = term_years * 12

    r = interest_rate / HUNDRED / TWELVE
    if r > 0:
        factor = (1 + r) ** n
        return loan_amount * (r * factor) / (factor - 1)
    return loan_amount / n


def compute_monthly_payment(
    config: LoanConfiguration, recurring: RecurringCosts
) -> MonthlyPaymentBreakdown:
    """Full monthly payment: first-period P&I split plus escrowed costs.

    principal/interest are the split of payment #1. pmi, taxes, insurance
    and hoa are taken from `recurring` as given.
    """
    _check_fees(recurring.items())
    loan_amount = config.loan_amount
    payment = monthly_principal_and_interest(
        loan_amount, config.interest_rate, config.loan_term_years
    )
    interest = loan_amount * (config.interest_rate / HUNDRED / TWELVE)
    principal = payment - interest

    pmi = recurring.mortgage_insurance
    taxes = recurring.property_tax
    insurance = recurring.homeowners_insurance
    hoa = recurring.hoa_fees

    return MonthlyPaymentBreakdown(
        principal=principal,
        interest=interest,
        pmi=pmi,
        taxes=taxes,
        insurance=insurance,
        hoa=hoa,
        total=principal + interest + pmi + taxes + insurance + hoa,
    )


def compute_closing_cost_total(costs: ClosingCosts) -> Decimal:
    items = costs.items()
    _check_fees(items)
    return sum(items.values(), ZERO)


def compute_cash_to_close(down_payment_amount: Decimal, closing_cost_total: Decimal) -> Decimal:
    """Down payment plus closing costs."""
    if not down_payment_amount.is_finite() or down_payment_amount < 0:
        raise MortgageEngineError(
            ErrorKind.INVALID_LOAN_AMOUNT,
            f"Down payment must be finite and non-negative, got {down_payment_amount}",
        )
    _check_fees({"closing_cost_total": closing_cost_total})
    return down_payment_amount + closing_cost_total


def compute_projection(
    monthly: MonthlyPaymentBreakdown,
    recurring: RecurringCosts,
    years: int,
    *,
    cash_to_close: Decimal,
) -> ProjectionResult:
    """Flat multi-year cost of ownership.

    Month one's P&I split, escrow, utilities and maintenance repeat unchanged
    every month. No amortization, inflation or PMI cancellation.
    """
    if years < 0:
        raise MortgageEngineError(
            ErrorKind.INVALID_TERM, f"Projection years must be non-negative, got {years}"
        )
    _check_fees({"utilities": recurring.utilities, "maintenance": recurring.maintenance})

    yearly_pi = (monthly.principal + monthly.interest) * 12
    yearly_other = (
        monthly.taxes
        + monthly.insurance
        + monthly.pmi
        + monthly.hoa
        + recurring.utilities
        + recurring.maintenance
    ) * 12
    yearly_total = yearly_pi + yearly_other

    return ProjectionResult(
        upfront_cash_to_close=cash_to_close,
        yearly_total=yearly_total,
        five_year_total=yearly_total * 5,
        n_year_total=yearly_total * years,
        years=years,
    )


def derive_pmi(
    loan_amount: Decimal, down_payment_percent: Decimal, pmi_rate: Decimal
) -> Decimal:
    """Monthly PMI: charged only when the down payment is strictly below 20%."""
    _check_loan_amount(loan_amount)
    _check_rate("PMI rate", pmi_rate)
    if not down_payment_percent.is_finite() or not 0 <= down_payment_percent <= HUNDRED:
        raise MortgageEngineError(
            ErrorKind.INVALID_DOWN_PAYMENT,
            f"Down payment percent must be between 0 and 100, got {down_payment_percent}",
        )
    if down_payment_percent < PMI_THRESHOLD_PCT:
        return loan_amount * pmi_rate / HUNDRED / TWELVE
    return ZERO
