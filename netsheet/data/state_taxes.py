"""State-level property tax, transfer tax and recording fee table.

Property tax rate: effective annual rate, percent of home value.
Transfer tax rate: percent of purchase price, paid at closing.
Recording fees: flat government recording charge in dollars.

Where older copies of this table disagreed (NV transfer tax 0.51 vs 0.25,
NH 1.5 vs 0.75), the values below are canonical.
"""

from dataclasses import dataclass
from decimal import Decimal

from netsheet.errors import ErrorKind, MortgageEngineError


@dataclass(frozen=True)
class StateTaxRates:
    code: str
    name: str
    property_tax_rate: Decimal  # Annual, percent
    transfer_tax_rate: Decimal  # Percent of price
    recording_fees: Decimal  # Flat


def _rates(code: str, name: str, property_tax: str, transfer_tax: str, recording: str) -> StateTaxRates:
    return StateTaxRates(
        code=code,
        name=name,
        property_tax_rate=Decimal(property_tax),
        transfer_tax_rate=Decimal(transfer_tax),
        recording_fees=Decimal(recording),
    )


STATE_TAX_DATA: dict[str, StateTaxRates] = {r.code: r for r in (
    _rates("AL", "Alabama", "0.41", "0.1", "100"),
    _rates("AK", "Alaska", "1.19", "0", "150"),
    _rates("AZ", "Arizona", "0.62", "0", "100"),
    _rates("AR", "Arkansas", "0.62", "0.33", "75"),
    _rates("CA", "California", "0.73", "0.11", "225"),
    _rates("CO", "Colorado", "0.51", "0.01", "125"),
    _rates("CT", "Connecticut", "2.14", "1.25", "175"),
    _rates("DE", "Delaware", "0.57", "1.5", "100"),
    _rates("FL", "Florida", "0.89", "0.7", "125"),
    _rates("GA", "Georgia", "0.92", "0.1", "100"),
    _rates("HI", "Hawaii", "0.28", "0.1", "125"),
    _rates("ID", "Idaho", "0.69", "0", "100"),
    _rates("IL", "Illinois", "2.27", "0.1", "150"),
    _rates("IN", "Indiana", "0.85", "0", "100"),
    _rates("IA", "Iowa", "1.53", "0.16", "100"),
    _rates("KS", "Kansas", "1.41", "0", "125"),
    _rates("KY", "Kentucky", "0.86", "0.1", "100"),
    _rates("LA", "Louisiana", "0.55", "0", "125"),
    _rates("ME", "Maine", "1.3", "0.44", "100"),
    _rates("MD", "Maryland", "1.09", "0.5", "150"),
    _rates("MA", "Massachusetts", "1.17", "0.46", "175"),
    _rates("MI", "Michigan", "1.54", "0.86", "100"),
    _rates("MN", "Minnesota", "1.12", "0.33", "100"),
    _rates("MS", "Mississippi", "0.8", "0", "100"),
    _rates("MO", "Missouri", "0.97", "0", "125"),
    _rates("MT", "Montana", "0.84", "0", "100"),
    _rates("NE", "Nebraska", "1.73", "0.23", "100"),
    _rates("NV", "Nevada", "0.69", "0.25", "125"),
    _rates("NH", "New Hampshire", "2.18", "0.75", "125"),
    _rates("NJ", "New Jersey", "2.49", "1", "150"),
    _rates("NM", "New Mexico", "0.78", "0", "100"),
    _rates("NY", "New York", "1.72", "0.4", "200"),
    _rates("NC", "North Carolina", "0.84", "0.2", "125"),
    _rates("ND", "North Dakota", "0.98", "0", "100"),
    _rates("OH", "Ohio", "1.56", "0.1", "125"),
    _rates("OK", "Oklahoma", "0.9", "0", "100"),
    _rates("OR", "Oregon", "1.04", "0.1", "125"),
    _rates("PA", "Pennsylvania", "1.58", "1", "150"),
    _rates("RI", "Rhode Island", "1.63", "0.46", "125"),
    _rates("SC", "South Carolina", "0.57", "0.37", "100"),
    _rates("SD", "South Dakota", "1.22", "0.1", "100"),
    _rates("TN", "Tennessee", "0.72", "0.37", "100"),
    _rates("TX", "Texas", "1.8", "0", "125"),
    _rates("UT", "Utah", "0.66", "0", "100"),
    _rates("VT", "Vermont", "1.9", "0.5", "125"),
    _rates("VA", "Virginia", "0.8", "0.33", "150"),
    _rates("WA", "Washington", "0.98", "1.28", "175"),
    _rates("WV", "West Virginia", "0.59", "0.22", "100"),
    _rates("WI", "Wisconsin", "1.76", "0.3", "125"),
    _rates("WY", "Wyoming", "0.61", "0", "100"),
    _rates("DC", "District of Columbia", "0.56", "1.1", "200"),
)}


def get_state_tax_rates(state_code: str) -> StateTaxRates:
    """Look up a state by its exact two-letter uppercase code.

    Unknown codes raise; there is no national-average fallback.
    """
    try:
        return STATE_TAX_DATA[state_code]
    except KeyError:
        raise MortgageEngineError(
            ErrorKind.UNKNOWN_STATE, f"Unknown state code: {state_code!r}"
        ) from None


def list_states() -> list[StateTaxRates]:
    return [STATE_TAX_DATA[code] for code in sorted(STATE_TAX_DATA)]
