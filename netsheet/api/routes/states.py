"""State tax table routes."""

from fastapi import APIRouter

from netsheet.api.errors import engine_error
from netsheet.api.schemas import StateTaxResponse
from netsheet.data.state_taxes import StateTaxRates, get_state_tax_rates, list_states
from netsheet.errors import MortgageEngineError

router = APIRouter(prefix="/api/v1/states", tags=["states"])


def state_response(s: StateTaxRates) -> StateTaxResponse:
    return StateTaxResponse(
        code=s.code,
        name=s.name,
        property_tax_rate=s.property_tax_rate,
        transfer_tax_rate=s.transfer_tax_rate,
        recording_fees=s.recording_fees,
    )


@router.get("", response_model=list[StateTaxResponse])
async def get_states():
    return [state_response(s) for s in list_states()]


@router.get("/{code}", response_model=StateTaxResponse)
async def get_state(code: str):
    try:
        return state_response(get_state_tax_rates(code))
    except MortgageEngineError as e:
        raise engine_error(e)
