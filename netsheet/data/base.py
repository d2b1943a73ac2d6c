"""Protocol definitions for data sources.

Each protocol defines the interface that concrete data source implementations must satisfy.
"""

from typing import Protocol, runtime_checkable

from netsheet.models.market import MortgageRates


@runtime_checkable
class RateSource(Protocol):
    async def get_mortgage_rates(self) -> MortgageRates:
        """Current 30-year and 15-year fixed rates, in percent.

        Never raises for network problems; unavailable series come back as
        labelled fallback quotes.
        """
        ...
