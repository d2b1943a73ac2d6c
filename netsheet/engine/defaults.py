"""Default recurring and closing costs for a loan in a given state.

These are starting values only. Once a caller overrides a field, the
override is used as-is and never re-derived.
"""

from decimal import Decimal

from netsheet.data.state_taxes import StateTaxRates
from netsheet.engine.mortgage import derive_pmi
from netsheet.errors import ErrorKind, MortgageEngineError
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts

HUNDRED = Decimal("100")
TWELVE = Decimal("12")

# Annual rates, percent of home price (PMI: percent of loan amount)
DEFAULT_PMI_RATE = Decimal("0.5")
DEFAULT_HOME_INSURANCE_RATE = Decimal("0.35")
DEFAULT_MAINTENANCE_RATE = Decimal("1")

# Monthly
DEFAULT_HOA_MONTHLY = Decimal("0")
DEFAULT_UTILITIES_MONTHLY = Decimal("300")

# Closing fees
DEFAULT_ORIGINATION_PCT = Decimal("1")  # Percent of home price
DEFAULT_APPRAISAL_FEE = Decimal("500")
DEFAULT_CREDIT_REPORT_FEE = Decimal("25")
DEFAULT_TITLE_SERVICES = Decimal("1200")
DEFAULT_HOME_INSPECTION = Decimal("400")
DEFAULT_OTHER_FEES = Decimal("500")


def _check_rates(**rates: Decimal) -> None:
    for name, rate in rates.items():
        if not rate.is_finite() or rate < 0:
            raise MortgageEngineError(
                ErrorKind.INVALID_RATE, f"{name} must be finite and non-negative, got {rate}"
            )


def _check_amounts(**amounts: Decimal) -> None:
    for name, amount in amounts.items():
        if not amount.is_finite() or amount < 0:
            raise MortgageEngineError(
                ErrorKind.INVALID_FEE, f"{name} must be finite and non-negative, got {amount}"
            )


def _annual_pct_to_monthly(base: Decimal, rate: Decimal) -> Decimal:
    return base * rate / HUNDRED / TWELVE


def derive_recurring_costs(
    config: LoanConfiguration,
    state: StateTaxRates,
    *,
    pmi_rate: Decimal = DEFAULT_PMI_RATE,
    insurance_rate: Decimal = DEFAULT_HOME_INSURANCE_RATE,
    maintenance_rate: Decimal = DEFAULT_MAINTENANCE_RATE,
    hoa_monthly: Decimal = DEFAULT_HOA_MONTHLY,
    utilities_monthly: Decimal = DEFAULT_UTILITIES_MONTHLY,
) -> RecurringCosts:
    """Monthly escrow and upkeep costs derived from price, loan and state."""
    _check_rates(
        pmi_rate=pmi_rate,
        insurance_rate=insurance_rate,
        maintenance_rate=maintenance_rate,
        property_tax_rate=state.property_tax_rate,
    )
    _check_amounts(hoa_monthly=hoa_monthly, utilities_monthly=utilities_monthly)

    price = config.home_price
    return RecurringCosts(
        property_tax=_annual_pct_to_monthly(price, state.property_tax_rate),
        homeowners_insurance=_annual_pct_to_monthly(price, insurance_rate),
        mortgage_insurance=derive_pmi(config.loan_amount, config.down_payment_percent, pmi_rate),
        hoa_fees=hoa_monthly,
        utilities=utilities_monthly,
        maintenance=_annual_pct_to_monthly(price, maintenance_rate),
    )


def derive_closing_costs(
    config: LoanConfiguration,
    state: StateTaxRates,
    *,
    origination_pct: Decimal = DEFAULT_ORIGINATION_PCT,
    appraisal_fee: Decimal = DEFAULT_APPRAISAL_FEE,
    credit_report_fee: Decimal = DEFAULT_CREDIT_REPORT_FEE,
    title_services: Decimal = DEFAULT_TITLE_SERVICES,
    home_inspection: Decimal = DEFAULT_HOME_INSPECTION,
    other: Decimal = DEFAULT_OTHER_FEES,
) -> ClosingCosts:
    """Buyer closing costs: lender and third-party fees plus state charges."""
    _check_rates(origination_pct=origination_pct, transfer_tax_rate=state.transfer_tax_rate)
    _check_amounts(
        appraisal_fee=appraisal_fee,
        credit_report_fee=credit_report_fee,
        title_services=title_services,
        home_inspection=home_inspection,
        other=other,
        recording_fees=state.recording_fees,
    )

    price = config.home_price
    return ClosingCosts(
        loan_origination=price * origination_pct / HUNDRED,
        appraisal_fee=appraisal_fee,
        credit_report_fee=credit_report_fee,
        title_services=title_services,
        government_recording_charges=state.recording_fees,
        transfer_taxes=price * state.transfer_tax_rate / HUNDRED,
        home_inspection=home_inspection,
        other=other,
    )
