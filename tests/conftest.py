"""Canonical test fixtures used across all engine tests.

Fixture: $400K home in California, 20% down, 6.5% rate, 30yr fixed.
"""

import pytest
from decimal import Decimal

from netsheet.data.state_taxes import get_state_tax_rates
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts


@pytest.fixture
def canonical_config() -> LoanConfiguration:
    """$400K home, 20% down, $320K loan."""
    return LoanConfiguration.from_down_payment_percent(
        home_price=Decimal("400000"),
        down_payment_percent=Decimal("20"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        state_code="CA",
    )


@pytest.fixture
def low_down_config() -> LoanConfiguration:
    """$400K home, 10% down: PMI applies."""
    return LoanConfiguration.from_down_payment_percent(
        home_price=Decimal("400000"),
        down_payment_percent=Decimal("10"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        state_code="CA",
    )


@pytest.fixture
def california():
    return get_state_tax_rates("CA")


@pytest.fixture
def canonical_recurring() -> RecurringCosts:
    """Round monthly figures for hand-checkable totals."""
    return RecurringCosts(
        property_tax=Decimal("250"),
        homeowners_insurance=Decimal("120"),
        mortgage_insurance=Decimal("0"),
        hoa_fees=Decimal("75"),
        utilities=Decimal("300"),
        maintenance=Decimal("330"),
    )


@pytest.fixture
def canonical_closing() -> ClosingCosts:
    return ClosingCosts(
        loan_origination=Decimal("4000"),
        appraisal_fee=Decimal("500"),
        credit_report_fee=Decimal("25"),
        title_services=Decimal("1200"),
        government_recording_charges=Decimal("225"),
        transfer_taxes=Decimal("440"),
        home_inspection=Decimal("400"),
        other=Decimal("500"),
    )
