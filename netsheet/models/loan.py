from dataclasses import dataclass, fields, replace
from decimal import Decimal

from netsheet.errors import ErrorKind, MortgageEngineError

HUNDRED = Decimal("100")


def _check_home_price(home_price: Decimal) -> None:
    if not home_price.is_finite() or home_price <= 0:
        raise MortgageEngineError(
            ErrorKind.INVALID_HOME_PRICE,
            f"Home price must be a positive amount, got {home_price}",
        )


@dataclass(frozen=True)
class LoanConfiguration:
    """Immutable loan inputs. Rates are in percent (6.5 means 6.5%).

    down_payment_amount and down_payment_percent always describe the same
    down payment; build instances through the from_*/with_* helpers to keep
    them in sync. The percent is the source of truth for PMI eligibility.
    """
    home_price: Decimal
    down_payment_amount: Decimal
    down_payment_percent: Decimal
    interest_rate: Decimal  # Annual, percent
    loan_term_years: int
    state_code: str

    @classmethod
    def from_down_payment_percent(
        cls,
        home_price: Decimal,
        down_payment_percent: Decimal,
        interest_rate: Decimal,
        loan_term_years: int,
        state_code: str,
    ) -> "LoanConfiguration":
        _check_home_price(home_price)
        if not down_payment_percent.is_finite() or not (0 <= down_payment_percent <= HUNDRED):
            raise MortgageEngineError(
                ErrorKind.INVALID_DOWN_PAYMENT,
                f"Down payment percent must be between 0 and 100, got {down_payment_percent}",
            )
        return cls(
            home_price=home_price,
            down_payment_amount=home_price * down_payment_percent / HUNDRED,
            down_payment_percent=down_payment_percent,
            interest_rate=interest_rate,
            loan_term_years=loan_term_years,
            state_code=state_code,
        )

    @classmethod
    def from_down_payment_amount(
        cls,
        home_price: Decimal,
        down_payment_amount: Decimal,
        interest_rate: Decimal,
        loan_term_years: int,
        state_code: str,
    ) -> "LoanConfiguration":
        _check_home_price(home_price)
        if not down_payment_amount.is_finite() or not (0 <= down_payment_amount <= home_price):
            raise MortgageEngineError(
                ErrorKind.INVALID_DOWN_PAYMENT,
                f"Down payment must be between 0 and the home price, got {down_payment_amount}",
            )
        return cls(
            home_price=home_price,
            down_payment_amount=down_payment_amount,
            down_payment_percent=down_payment_amount / home_price * HUNDRED,
            interest_rate=interest_rate,
            loan_term_years=loan_term_years,
            state_code=state_code,
        )

    def with_home_price(self, home_price: Decimal) -> "LoanConfiguration":
        """New price, same down payment percent (the amount follows)."""
        return self.from_down_payment_percent(
            home_price, self.down_payment_percent, self.interest_rate,
            self.loan_term_years, self.state_code,
        )

    def with_down_payment_percent(self, percent: Decimal) -> "LoanConfiguration":
        return self.from_down_payment_percent(
            self.home_price, percent, self.interest_rate,
            self.loan_term_years, self.state_code,
        )

    def with_down_payment_amount(self, amount: Decimal) -> "LoanConfiguration":
        return self.from_down_payment_amount(
            self.home_price, amount, self.interest_rate,
            self.loan_term_years, self.state_code,
        )

    def with_interest_rate(self, interest_rate: Decimal) -> "LoanConfiguration":
        return replace(self, interest_rate=interest_rate)

    def with_loan_term(self, loan_term_years: int) -> "LoanConfiguration":
        return replace(self, loan_term_years=loan_term_years)

    def with_state(self, state_code: str) -> "LoanConfiguration":
        return replace(self, state_code=state_code)

    @property
    def loan_amount(self) -> Decimal:
        return self.home_price - self.down_payment_amount

    @property
    def loan_to_value(self) -> Decimal:
        return self.loan_amount / self.home_price


@dataclass
class RecurringCosts:
    """Monthly ownership costs.

    Defaults are derived from the loan and state (see engine.defaults), but
    every field may be overridden and is then used as given.
    """
    property_tax: Decimal = Decimal("0")
    homeowners_insurance: Decimal = Decimal("0")
    mortgage_insurance: Decimal = Decimal("0")  # PMI
    hoa_fees: Decimal = Decimal("0")
    utilities: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")

    def items(self) -> dict[str, Decimal]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ClosingCosts:
    """One-time fees paid at purchase."""
    loan_origination: Decimal = Decimal("0")
    appraisal_fee: Decimal = Decimal("0")
    credit_report_fee: Decimal = Decimal("0")
    title_services: Decimal = Decimal("0")
    government_recording_charges: Decimal = Decimal("0")  # State flat fee
    transfer_taxes: Decimal = Decimal("0")
    home_inspection: Decimal = Decimal("0")
    other: Decimal = Decimal("0")

    def items(self) -> dict[str, Decimal]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
