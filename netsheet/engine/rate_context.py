"""Plain-language context for a quoted 30-year fixed rate."""

from decimal import Decimal

# APR usually runs 0.10-0.25 points above the note rate once fees are included
APR_SPREAD = Decimal("0.15")

_HISTORICAL_BANDS: list[tuple[Decimal, str]] = [
    (Decimal("4.0"), "Historically low - well below long-term averages"),
    (Decimal("5.5"), "Below historical average - comparable to post-2008 normal rates"),
    (Decimal("7.0"), "Near historical average - similar to pre-2008 typical rates"),
    (Decimal("9.0"), "Above average - higher than most of the past 20 years"),
]
_HISTORICAL_HIGH = "Historically high - comparable to early 1990s levels"

_RECOMMENDATION_BANDS: list[tuple[Decimal, str]] = [
    (Decimal("5.0"), "Consider locking in these historically favorable rates. Fixed-rate loans are attractive."),
    (Decimal("6.5"), "Rates are reasonable by historical standards. Consider both fixed and adjustable options."),
    (Decimal("8.0"), "Rates are somewhat elevated. Consider adjustable-rate mortgages if you plan to refinance within 5-7 years."),
]
_RECOMMENDATION_HIGH = (
    "Rates are high. Consider making a larger down payment to reduce loan amount "
    "or exploring adjustable-rate options."
)


def estimate_apr(rate: Decimal) -> Decimal:
    return rate + APR_SPREAD


def historical_context(rate: Decimal) -> str:
    for upper, label in _HISTORICAL_BANDS:
        if rate < upper:
            return label
    return _HISTORICAL_HIGH


def rate_recommendation(rate: Decimal) -> str:
    for upper, label in _RECOMMENDATION_BANDS:
        if rate < upper:
            return label
    return _RECOMMENDATION_HIGH
