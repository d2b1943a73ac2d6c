"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from netsheet.engine.mortgage import MAX_TERM_YEARS


# ---- Request schemas ----

class NetSheetRequest(BaseModel):
    home_price: Decimal = Field(..., description="Purchase price in dollars")
    down_payment_percent: Decimal | None = Field(None, description="Down payment, percent of price")
    down_payment_amount: Decimal | None = Field(None, description="Down payment in dollars")
    interest_rate: Decimal = Field(..., description="Annual rate in percent, e.g. 6.5")
    loan_term_years: int = Field(30, gt=0, le=MAX_TERM_YEARS)
    state: str = Field(..., min_length=2, max_length=2, description="Two-letter state code")
    projection_years: int = 30

    # Default derivation tuning
    pmi_rate: Decimal | None = None
    insurance_rate: Decimal | None = None
    maintenance_rate: Decimal | None = None
    hoa_monthly: Decimal | None = None
    utilities_monthly: Decimal | None = None

    # Advanced mode: per-field overrides, used verbatim
    recurring_overrides: dict[str, Decimal] | None = None
    closing_overrides: dict[str, Decimal] | None = None

    @model_validator(mode="after")
    def _one_down_payment(self) -> "NetSheetRequest":
        if (self.down_payment_percent is None) == (self.down_payment_amount is None):
            raise ValueError("Provide exactly one of down_payment_percent or down_payment_amount")
        return self

    def default_params(self) -> dict[str, Decimal]:
        params = {
            "pmi_rate": self.pmi_rate,
            "insurance_rate": self.insurance_rate,
            "maintenance_rate": self.maintenance_rate,
            "hoa_monthly": self.hoa_monthly,
            "utilities_monthly": self.utilities_monthly,
        }
        return {k: v for k, v in params.items() if v is not None}


class AmortizationRequest(BaseModel):
    loan_amount: Decimal
    interest_rate: Decimal
    loan_term_years: int = Field(30, gt=0, le=MAX_TERM_YEARS)
    hold_years: int | None = None


# ---- Response schemas ----

class StateTaxResponse(BaseModel):
    code: str
    name: str
    property_tax_rate: Decimal
    transfer_tax_rate: Decimal
    recording_fees: Decimal


class MonthlyPaymentResponse(BaseModel):
    principal: Decimal
    interest: Decimal
    pmi: Decimal
    taxes: Decimal
    insurance: Decimal
    hoa: Decimal
    total: Decimal


class RecurringCostsResponse(BaseModel):
    property_tax: Decimal
    homeowners_insurance: Decimal
    mortgage_insurance: Decimal
    hoa_fees: Decimal
    utilities: Decimal
    maintenance: Decimal


class ClosingCostsResponse(BaseModel):
    loan_origination: Decimal
    appraisal_fee: Decimal
    credit_report_fee: Decimal
    title_services: Decimal
    government_recording_charges: Decimal
    transfer_taxes: Decimal
    home_inspection: Decimal
    other: Decimal
    total: Decimal


class UpfrontCostsResponse(BaseModel):
    down_payment: Decimal
    closing_costs: Decimal
    total_cash_needed: Decimal


class ProjectionResponse(BaseModel):
    years: int
    yearly_total: Decimal
    five_year_total: Decimal
    n_year_total: Decimal


class NetSheetResponse(BaseModel):
    state: StateTaxResponse
    home_price: Decimal
    down_payment_percent: Decimal
    loan_amount: Decimal
    interest_rate: Decimal
    loan_term_years: int
    pmi_required: bool

    upfront_costs: UpfrontCostsResponse
    monthly_payment: MonthlyPaymentResponse
    recurring_costs: RecurringCostsResponse
    closing_costs: ClosingCostsResponse
    projection: ProjectionResponse


class AmortizationPaymentResponse(BaseModel):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class AmortizationYearResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class AmortizationResponse(BaseModel):
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    yearly: list[AmortizationYearResponse]
    payments: list[AmortizationPaymentResponse]


class RateQuoteResponse(BaseModel):
    rate: Decimal
    as_of: date | None = None
    source: str
    is_fallback: bool


class MortgageRatesResponse(BaseModel):
    thirty_year_fixed: RateQuoteResponse
    fifteen_year_fixed: RateQuoteResponse
    estimated_apr_30y: Decimal
    historical_context: str
    recommendation: str
