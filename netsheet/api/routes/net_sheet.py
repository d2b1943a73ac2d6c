"""Net sheet routes: the primary API entry point."""

import logging
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, HTTPException

from netsheet.api.errors import engine_error
from netsheet.api.routes.states import state_response
from netsheet.api.schemas import (
    AmortizationPaymentResponse,
    AmortizationRequest,
    AmortizationResponse,
    AmortizationYearResponse,
    ClosingCostsResponse,
    MonthlyPaymentResponse,
    NetSheetRequest,
    NetSheetResponse,
    ProjectionResponse,
    RecurringCostsResponse,
    UpfrontCostsResponse,
)
from netsheet.engine.amortization import amortization_schedule, yearly_debt_summary
from netsheet.engine.net_sheet import build_net_sheet
from netsheet.errors import MortgageEngineError
from netsheet.models.loan import LoanConfiguration
from netsheet.models.results import NetSheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["net-sheet"])

TWO_PLACES = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def _build_config(req: NetSheetRequest) -> LoanConfiguration:
    if req.down_payment_percent is not None:
        return LoanConfiguration.from_down_payment_percent(
            req.home_price, req.down_payment_percent, req.interest_rate,
            req.loan_term_years, req.state,
        )
    return LoanConfiguration.from_down_payment_amount(
        req.home_price, req.down_payment_amount, req.interest_rate,
        req.loan_term_years, req.state,
    )


def _sheet_to_response(sheet: NetSheet) -> NetSheetResponse:
    config = sheet.config
    m = sheet.monthly_payment
    r = sheet.recurring
    c = sheet.closing_costs
    p = sheet.projection

    return NetSheetResponse(
        state=state_response(sheet.state),
        home_price=_money(config.home_price),
        down_payment_percent=config.down_payment_percent,
        loan_amount=_money(config.loan_amount),
        interest_rate=config.interest_rate,
        loan_term_years=config.loan_term_years,
        pmi_required=m.pmi > 0,
        upfront_costs=UpfrontCostsResponse(
            down_payment=_money(config.down_payment_amount),
            closing_costs=_money(sheet.closing_cost_total),
            total_cash_needed=_money(sheet.cash_to_close),
        ),
        monthly_payment=MonthlyPaymentResponse(
            principal=_money(m.principal),
            interest=_money(m.interest),
            pmi=_money(m.pmi),
            taxes=_money(m.taxes),
            insurance=_money(m.insurance),
            hoa=_money(m.hoa),
            total=_money(m.total),
        ),
        recurring_costs=RecurringCostsResponse(
            **{name: _money(value) for name, value in r.items().items()}
        ),
        closing_costs=ClosingCostsResponse(
            **{name: _money(value) for name, value in c.items().items()},
            total=_money(sheet.closing_cost_total),
        ),
        projection=ProjectionResponse(
            years=p.years,
            yearly_total=_money(p.yearly_total),
            five_year_total=_money(p.five_year_total),
            n_year_total=_money(p.n_year_total),
        ),
    )


@router.post("/net-sheet", response_model=NetSheetResponse)
async def net_sheet(req: NetSheetRequest):
    """Loan inputs → monthly payment, cash to close and cost projection."""
    try:
        config = _build_config(req)
        sheet = build_net_sheet(
            config,
            recurring_overrides=req.recurring_overrides,
            closing_overrides=req.closing_overrides,
            projection_years=req.projection_years,
            **req.default_params(),
        )
    except MortgageEngineError as e:
        logger.info("Rejected net sheet request: %r", e)
        raise engine_error(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _sheet_to_response(sheet)


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(req: AmortizationRequest):
    """Month-by-month schedule with yearly totals."""
    try:
        schedule = amortization_schedule(
            req.loan_amount, req.interest_rate, req.loan_term_years, req.hold_years
        )
    except MortgageEngineError as e:
        raise engine_error(e)

    return AmortizationResponse(
        monthly_payment=schedule.monthly_payment,
        total_interest=schedule.total_interest,
        total_principal=schedule.total_principal,
        yearly=[
            AmortizationYearResponse(
                year=y.year,
                principal=y.principal,
                interest=y.interest,
                debt_service=y.debt_service,
                ending_balance=y.ending_balance,
            )
            for y in yearly_debt_summary(schedule)
        ],
        payments=[
            AmortizationPaymentResponse(
                period=p.period,
                payment=p.payment,
                principal=p.principal,
                interest=p.interest,
                balance=p.balance,
            )
            for p in schedule.payments
        ],
    )
