"""FastAPI dependency injection."""

from netsheet.data.base import RateSource
from netsheet.data.fred import FREDClient


def get_rate_source() -> RateSource:
    return FREDClient()
