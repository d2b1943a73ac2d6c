"""Net sheet orchestrator: composes the engine modules into a buyer's net sheet.

Pure computation. No I/O. LoanConfiguration in, NetSheet out.

Recompute order on every input change:
    1. loan amount and PMI eligibility (carried by LoanConfiguration)
    2. state-dependent recurring and closing costs
    3. monthly payment
    4. closing cost total and cash to close
    5. projection
"""

import logging
from dataclasses import fields, replace
from decimal import Decimal
from typing import Any

from netsheet.data.state_taxes import get_state_tax_rates
from netsheet.engine.defaults import derive_closing_costs, derive_recurring_costs
from netsheet.engine.mortgage import (
    compute_cash_to_close,
    compute_closing_cost_total,
    compute_monthly_payment,
    compute_projection,
)
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts
from netsheet.models.results import NetSheet

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION_YEARS = 30

_RECURRING_PARAMS = {"pmi_rate", "insurance_rate", "maintenance_rate", "hoa_monthly", "utilities_monthly"}
_CLOSING_PARAMS = {
    "origination_pct", "appraisal_fee", "credit_report_fee",
    "title_services", "home_inspection", "other",
}


def _apply_overrides(record: Any, overrides: dict[str, Decimal] | None) -> Any:
    if not overrides:
        return record
    known = {f.name for f in fields(record)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(
            f"Unknown {type(record).__name__} fields: {', '.join(sorted(unknown))}"
        )
    return replace(record, **overrides)


def build_net_sheet(
    config: LoanConfiguration,
    *,
    recurring_overrides: dict[str, Decimal] | None = None,
    closing_overrides: dict[str, Decimal] | None = None,
    projection_years: int = DEFAULT_PROJECTION_YEARS,
    **default_params: Decimal,
) -> NetSheet:
    """Build a complete net sheet from a loan configuration.

    Overrides replace derived recurring/closing fields verbatim. Extra keyword
    arguments tune the default derivation (e.g. pmi_rate, title_services).
    """
    unknown = set(default_params) - _RECURRING_PARAMS - _CLOSING_PARAMS
    if unknown:
        raise ValueError(f"Unknown default parameters: {', '.join(sorted(unknown))}")

    state = get_state_tax_rates(config.state_code)

    recurring = derive_recurring_costs(
        config, state, **{k: v for k, v in default_params.items() if k in _RECURRING_PARAMS}
    )
    recurring = _apply_overrides(recurring, recurring_overrides)

    closing = derive_closing_costs(
        config, state, **{k: v for k, v in default_params.items() if k in _CLOSING_PARAMS}
    )
    closing = _apply_overrides(closing, closing_overrides)

    monthly = compute_monthly_payment(config, recurring)
    closing_total = compute_closing_cost_total(closing)
    cash_to_close = compute_cash_to_close(config.down_payment_amount, closing_total)
    projection = compute_projection(
        monthly, recurring, projection_years, cash_to_close=cash_to_close
    )

    logger.debug(
        "Net sheet %s: loan=%s monthly=%s cash_to_close=%s",
        config.state_code, config.loan_amount, monthly.total, cash_to_close,
    )

    return NetSheet(
        config=config,
        state=state,
        recurring=recurring,
        closing_costs=closing,
        monthly_payment=monthly,
        closing_cost_total=closing_total,
        cash_to_close=cash_to_close,
        projection=projection,
        recurring_overrides=frozenset(recurring_overrides or ()),
        closing_overrides=frozenset(closing_overrides or ()),
        default_params=dict(default_params),
    )


def recompute_net_sheet(
    sheet: NetSheet,
    config: LoanConfiguration,
    *,
    projection_years: int | None = None,
    **default_params: Decimal,
) -> NetSheet:
    """Rebuild a net sheet for a changed configuration.

    Fields the user overrode keep their overridden values and the tuning
    passed to the original build is reapplied, merged with any new tuning.
    Everything else is re-derived from the new configuration.
    """
    recurring_overrides = {
        name: getattr(sheet.recurring, name) for name in sheet.recurring_overrides
    }
    closing_overrides = {
        name: getattr(sheet.closing_costs, name) for name in sheet.closing_overrides
    }
    return build_net_sheet(
        config,
        recurring_overrides=recurring_overrides,
        closing_overrides=closing_overrides,
        projection_years=(
            sheet.projection.years if projection_years is None else projection_years
        ),
        **{**sheet.default_params, **default_params},
    )
