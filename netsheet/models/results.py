from dataclasses import dataclass, field
from decimal import Decimal

from netsheet.data.state_taxes import StateTaxRates
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts


@dataclass(frozen=True)
class MonthlyPaymentBreakdown:
    # P&I split is as of payment #1
    principal: Decimal
    interest: Decimal
    pmi: Decimal
    taxes: Decimal
    insurance: Decimal
    hoa: Decimal
    total: Decimal

    @property
    def principal_and_interest(self) -> Decimal:
        return self.principal + self.interest


@dataclass(frozen=True)
class ProjectionResult:
    """Flat cost projection: month-one costs repeated for every month."""
    upfront_cash_to_close: Decimal
    yearly_total: Decimal
    five_year_total: Decimal
    n_year_total: Decimal
    years: int


@dataclass(frozen=True)
class NetSheet:
    """Everything a buyer's net sheet shows, computed from one configuration."""
    config: LoanConfiguration
    state: StateTaxRates
    recurring: RecurringCosts
    closing_costs: ClosingCosts
    monthly_payment: MonthlyPaymentBreakdown
    closing_cost_total: Decimal
    cash_to_close: Decimal
    projection: ProjectionResult
    recurring_overrides: frozenset[str] = frozenset()
    closing_overrides: frozenset[str] = frozenset()
    # Keyword tuning passed to the default derivation, reapplied on recompute
    default_params: dict[str, Decimal] = field(default_factory=dict)
