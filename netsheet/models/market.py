from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class RateQuote:
    rate: Decimal  # Annual, percent
    as_of: date | None
    source: str
    is_fallback: bool = False


@dataclass(frozen=True)
class MortgageRates:
    thirty_year_fixed: RateQuote
    fifteen_year_fixed: RateQuote

    def for_term(self, loan_term_years: int) -> RateQuote:
        """Closest published product for a loan term (15y for terms up to 15)."""
        if loan_term_years <= 15:
            return self.fifteen_year_fixed
        return self.thirty_year_fixed
