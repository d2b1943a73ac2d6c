from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # API Keys
    fred_api_key: str = ""

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Market rate fallbacks (percent) when FRED is unavailable
    fallback_rate_30y: Decimal = Decimal("6.8")
    fallback_rate_15y: Decimal = Decimal("6.2")

    # Default loan inputs for a fresh net sheet
    default_home_price: Decimal = Decimal("400000")
    default_down_payment_percent: Decimal = Decimal("20")
    default_interest_rate: Decimal = Decimal("6.5")
    default_loan_term_years: int = 30
    default_state: str = "CA"


settings = Settings()
