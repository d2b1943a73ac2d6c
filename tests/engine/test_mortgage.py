"""Tests for the monthly payment, closing cost and projection engine."""

from dataclasses import replace
from decimal import Decimal

import pytest

from netsheet.engine.mortgage import (
    MAX_TERM_YEARS,
    compute_cash_to_close,
    compute_closing_cost_total,
    compute_monthly_payment,
    compute_projection,
    derive_pmi,
    monthly_principal_and_interest,
)
from netsheet.errors import ErrorKind, MortgageEngineError
from netsheet.models.loan import ClosingCosts, LoanConfiguration, RecurringCosts

EPSILON = Decimal("1e-9")


class TestMonthlyPrincipalAndInterest:
    def test_standard_30_year(self):
        """$320K loan at 6.5% for 30 years."""
        pmt = monthly_principal_and_interest(Decimal("320000"), Decimal("6.5"), 30)
        assert abs(pmt - Decimal("2022.62")) < Decimal("0.01")

    def test_zero_rate_is_straight_line(self):
        pmt = monthly_principal_and_interest(Decimal("120000"), Decimal("0"), 10)
        assert pmt == Decimal("1000.00")

    def test_zero_loan(self):
        pmt = monthly_principal_and_interest(Decimal("0"), Decimal("6.5"), 30)
        assert pmt == 0

    def test_shorter_term_costs_more_per_month(self):
        pmt_30 = monthly_principal_and_interest(Decimal("300000"), Decimal("6.5"), 30)
        pmt_15 = monthly_principal_and_interest(Decimal("300000"), Decimal("6.5"), 15)
        assert pmt_15 > pmt_30

    def test_zero_term_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            monthly_principal_and_interest(Decimal("300000"), Decimal("6.5"), 0)
        assert exc.value.kind is ErrorKind.INVALID_TERM

    def test_max_term_accepted(self):
        pmt = monthly_principal_and_interest(Decimal("300000"), Decimal("6.5"), MAX_TERM_YEARS)
        assert pmt > 0

    @pytest.mark.parametrize("term", [MAX_TERM_YEARS + 1, 10**8])
    def test_term_above_cap_rejected(self, term):
        with pytest.raises(MortgageEngineError) as exc:
            monthly_principal_and_interest(Decimal("320000"), Decimal("6.5"), term)
        assert exc.value.kind is ErrorKind.INVALID_TERM

    def test_negative_loan_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            monthly_principal_and_interest(Decimal("-1"), Decimal("6.5"), 30)
        assert exc.value.kind is ErrorKind.INVALID_LOAN_AMOUNT

    def test_non_finite_loan_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            monthly_principal_and_interest(Decimal("NaN"), Decimal("6.5"), 30)
        assert exc.value.kind is ErrorKind.INVALID_LOAN_AMOUNT

    def test_negative_rate_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            monthly_principal_and_interest(Decimal("300000"), Decimal("-0.5"), 30)
        assert exc.value.kind is ErrorKind.INVALID_RATE


class TestComputeMonthlyPayment:
    def test_first_month_split(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        # 320000 * 6.5% / 12
        assert abs(m.interest - Decimal("1733.333333")) < Decimal("0.000001")
        assert abs(m.principal + m.interest - Decimal("2022.62")) < Decimal("0.01")
        assert abs(m.principal - Decimal("289.29")) < Decimal("0.01")

    def test_escrow_copied_verbatim(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        assert m.taxes == Decimal("250")
        assert m.insurance == Decimal("120")
        assert m.pmi == Decimal("0")
        assert m.hoa == Decimal("75")

    def test_total_is_sum_of_parts(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        parts = m.principal + m.interest + m.pmi + m.taxes + m.insurance + m.hoa
        assert abs(m.total - parts) < EPSILON

    def test_total_excludes_utilities_and_maintenance(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        expected = m.principal_and_interest + Decimal("250") + Decimal("120") + Decimal("75")
        assert abs(m.total - expected) < EPSILON

    def test_zero_rate(self, canonical_recurring):
        config = LoanConfiguration.from_down_payment_percent(
            Decimal("150000"), Decimal("20"), Decimal("0"), 10, "TX"
        )
        m = compute_monthly_payment(config, canonical_recurring)
        assert config.loan_amount == Decimal("120000")
        assert m.principal == Decimal("1000.00")
        assert m.interest == 0

    def test_paid_off_home(self, canonical_recurring):
        config = LoanConfiguration.from_down_payment_percent(
            Decimal("400000"), Decimal("100"), Decimal("6.5"), 30, "CA"
        )
        m = compute_monthly_payment(config, canonical_recurring)
        assert m.principal == 0
        assert m.interest == 0
        assert m.total == Decimal("445")

    def test_negative_recurring_cost_rejected(self, canonical_config, canonical_recurring):
        bad = replace(canonical_recurring, hoa_fees=Decimal("-10"))
        with pytest.raises(MortgageEngineError) as exc:
            compute_monthly_payment(canonical_config, bad)
        assert exc.value.kind is ErrorKind.INVALID_FEE

    def test_negative_loan_amount_rejected(self, canonical_recurring):
        # Built directly to bypass the down payment checks
        config = LoanConfiguration(
            home_price=Decimal("400000"),
            down_payment_amount=Decimal("450000"),
            down_payment_percent=Decimal("112.5"),
            interest_rate=Decimal("6.5"),
            loan_term_years=30,
            state_code="CA",
        )
        with pytest.raises(MortgageEngineError) as exc:
            compute_monthly_payment(config, canonical_recurring)
        assert exc.value.kind is ErrorKind.INVALID_LOAN_AMOUNT

    def test_idempotent(self, canonical_config, canonical_recurring):
        first = compute_monthly_payment(canonical_config, canonical_recurring)
        second = compute_monthly_payment(canonical_config, canonical_recurring)
        assert first == second


class TestClosingCostTotal:
    def test_sum_of_parts(self, canonical_closing):
        assert compute_closing_cost_total(canonical_closing) == Decimal("7290")

    def test_single_field_change_moves_total_exactly(self, canonical_closing):
        base = compute_closing_cost_total(canonical_closing)
        bumped = replace(canonical_closing, title_services=Decimal("1200") + Decimal("137.45"))
        assert compute_closing_cost_total(bumped) - base == Decimal("137.45")

    def test_empty_costs(self):
        assert compute_closing_cost_total(ClosingCosts()) == 0

    def test_negative_fee_rejected(self, canonical_closing):
        bad = replace(canonical_closing, appraisal_fee=Decimal("-500"))
        with pytest.raises(MortgageEngineError) as exc:
            compute_closing_cost_total(bad)
        assert exc.value.kind is ErrorKind.INVALID_FEE

    def test_infinite_fee_rejected(self, canonical_closing):
        bad = replace(canonical_closing, other=Decimal("Infinity"))
        with pytest.raises(MortgageEngineError) as exc:
            compute_closing_cost_total(bad)
        assert exc.value.kind is ErrorKind.INVALID_FEE


class TestCashToClose:
    def test_down_payment_plus_closing(self):
        assert compute_cash_to_close(Decimal("80000"), Decimal("7290")) == Decimal("87290")

    def test_monotonic_in_down_payment(self):
        base = compute_cash_to_close(Decimal("80000"), Decimal("7290"))
        more = compute_cash_to_close(Decimal("80000") + Decimal("2500.50"), Decimal("7290"))
        assert more - base == Decimal("2500.50")

    def test_negative_closing_total_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            compute_cash_to_close(Decimal("80000"), Decimal("-1"))
        assert exc.value.kind is ErrorKind.INVALID_FEE


class TestProjection:
    def test_yearly_total_hand_checked(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        p = compute_projection(m, canonical_recurring, 30, cash_to_close=Decimal("87290"))
        # escrow 250 + 120 + 0 + 75, utilities 300, maintenance 330
        expected = m.principal_and_interest * 12 + Decimal("1075") * 12
        assert abs(p.yearly_total - expected) < EPSILON
        assert p.upfront_cash_to_close == Decimal("87290")

    @pytest.mark.parametrize("years", [0, 1, 7, 15, 30, 40])
    def test_scaling_is_exact(self, canonical_config, canonical_recurring, years):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        p = compute_projection(m, canonical_recurring, years, cash_to_close=Decimal("0"))
        assert p.five_year_total == p.yearly_total * 5
        assert p.n_year_total == p.yearly_total * years
        assert p.years == years

    def test_flat_projection_ignores_amortization(self, canonical_config, canonical_recurring):
        """Every year costs the same: no P&I shift, inflation or PMI removal."""
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        p10 = compute_projection(m, canonical_recurring, 10, cash_to_close=Decimal("0"))
        p20 = compute_projection(m, canonical_recurring, 20, cash_to_close=Decimal("0"))
        assert p20.n_year_total == p10.n_year_total * 2

    def test_negative_years_rejected(self, canonical_config, canonical_recurring):
        m = compute_monthly_payment(canonical_config, canonical_recurring)
        with pytest.raises(MortgageEngineError) as exc:
            compute_projection(m, canonical_recurring, -1, cash_to_close=Decimal("0"))
        assert exc.value.kind is ErrorKind.INVALID_TERM


class TestDerivePMI:
    def test_exactly_20_percent_waives_pmi(self):
        assert derive_pmi(Decimal("320000"), Decimal("20"), Decimal("0.5")) == 0

    def test_just_below_20_percent_charges_pmi(self):
        pmi = derive_pmi(Decimal("320040"), Decimal("19.99"), Decimal("0.5"))
        assert pmi > 0
        assert pmi == Decimal("320040") * Decimal("0.5") / 100 / 12
        assert pmi == Decimal("133.35")

    def test_ten_percent_down(self):
        assert derive_pmi(Decimal("360000"), Decimal("10"), Decimal("0.5")) == Decimal("150")

    def test_no_partial_pmi_above_threshold(self):
        assert derive_pmi(Decimal("300000"), Decimal("25"), Decimal("0.5")) == 0

    def test_negative_pmi_rate_rejected(self):
        with pytest.raises(MortgageEngineError) as exc:
            derive_pmi(Decimal("360000"), Decimal("10"), Decimal("-0.5"))
        assert exc.value.kind is ErrorKind.INVALID_RATE

    @pytest.mark.parametrize("percent", [Decimal("NaN"), Decimal("-5"), Decimal("101")])
    def test_invalid_down_payment_percent_rejected(self, percent):
        with pytest.raises(MortgageEngineError) as exc:
            derive_pmi(Decimal("320000"), percent, Decimal("0.5"))
        assert exc.value.kind is ErrorKind.INVALID_DOWN_PAYMENT

    def test_full_cash_purchase_has_no_pmi(self):
        assert derive_pmi(Decimal("0"), Decimal("100"), Decimal("0.5")) == 0
