"""Market data routes."""

from fastapi import APIRouter, Depends

from netsheet.api.deps import get_rate_source
from netsheet.api.schemas import MortgageRatesResponse, RateQuoteResponse
from netsheet.data.base import RateSource
from netsheet.engine.rate_context import estimate_apr, historical_context, rate_recommendation
from netsheet.models.market import RateQuote

router = APIRouter(prefix="/api/v1/market", tags=["market"])


def _quote(q: RateQuote) -> RateQuoteResponse:
    return RateQuoteResponse(rate=q.rate, as_of=q.as_of, source=q.source, is_fallback=q.is_fallback)


@router.get("/rates", response_model=MortgageRatesResponse)
async def get_rates(rates_source: RateSource = Depends(get_rate_source)):
    """Current 30y/15y fixed mortgage rates with historical context."""
    rates = await rates_source.get_mortgage_rates()
    thirty = rates.thirty_year_fixed.rate

    return MortgageRatesResponse(
        thirty_year_fixed=_quote(rates.thirty_year_fixed),
        fifteen_year_fixed=_quote(rates.fifteen_year_fixed),
        estimated_apr_30y=estimate_apr(thirty),
        historical_context=historical_context(thirty),
        recommendation=rate_recommendation(thirty),
    )
