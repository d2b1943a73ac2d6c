"""FRED API client for current mortgage rates."""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

import httpx

from netsheet.config import settings
from netsheet.models.market import MortgageRates, RateQuote

logger = logging.getLogger(__name__)

FRED_BASE_URL = "https://api.stlouisfed.org/fred"
FRED_SOURCE = "Federal Reserve Economic Data (FRED)"

# Freddie Mac Primary Mortgage Market Survey, weekly, percent
SERIES = {
    "mortgage_30y": "MORTGAGE30US",
    "mortgage_15y": "MORTGAGE15US",
}


class FREDClient:
    def __init__(self, api_key: str | None = None):
        self.api_key = api_key if api_key is not None else settings.fred_api_key

    async def _get_latest(self, series_id: str) -> tuple[Decimal, date] | None:
        """Fetch the most recent observation for a FRED series."""
        params = {
            "series_id": series_id,
            "api_key": self.api_key,
            "file_type": "json",
            "sort_order": "desc",
            "limit": 5,
        }
        try:
            async with httpx.AsyncClient(timeout=15.0) as client:
                resp = await client.get(
                    f"{FRED_BASE_URL}/series/observations", params=params
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("FRED request failed for %s: %s", series_id, e)
            return None

        for obs in data.get("observations", []):
            value = obs.get("value", ".")
            if value == ".":
                continue
            try:
                return Decimal(value), date.fromisoformat(obs["date"])
            except (InvalidOperation, KeyError, ValueError) as e:
                logger.warning("Skipping malformed FRED observation for %s: %s", series_id, e)
        return None

    async def _quote(self, series_key: str, fallback: Decimal) -> RateQuote:
        if not self.api_key:
            return RateQuote(
                rate=fallback, as_of=None,
                source="Default (API key not configured)", is_fallback=True,
            )
        latest = await self._get_latest(SERIES[series_key])
        if latest is None:
            return RateQuote(
                rate=fallback, as_of=None,
                source="Default (FRED unavailable)", is_fallback=True,
            )
        rate, as_of = latest
        return RateQuote(rate=rate, as_of=as_of, source=FRED_SOURCE)

    async def get_mortgage_rates(self) -> MortgageRates:
        """Current 30y and 15y fixed rates, each falling back independently."""
        if not self.api_key:
            logger.warning("FRED API key is not configured, using default mortgage rates")

        thirty = await self._quote("mortgage_30y", settings.fallback_rate_30y)
        fifteen = await self._quote("mortgage_15y", settings.fallback_rate_15y)

        if self.api_key and (thirty.is_fallback or fifteen.is_fallback):
            logger.info("Using partial FRED data with fallbacks for missing values")

        return MortgageRates(thirty_year_fixed=thirty, fifteen_year_fixed=fifteen)
