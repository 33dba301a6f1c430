"""Holdings endpoints: list, add, remove, import and export."""

from fastapi import APIRouter, Depends, Request, Response

from portfolio_tracker.api.deps import get_context
from portfolio_tracker.api.schemas import (
    HoldingCreateRequest,
    HoldingListResponse,
    HoldingResponse,
    ImportResponse,
)
from portfolio_tracker.app_context import AppContext
from portfolio_tracker.domain.models import Holding
from portfolio_tracker.jsonio import EXPORT_FILENAME

router = APIRouter(prefix="/api/holdings", tags=["holdings"])


def _to_response(holding: Holding) -> HoldingResponse:
    return HoldingResponse(
        id=holding.id,
        symbol=holding.symbol,
        shares=holding.shares,
        cost_per_share=holding.cost_per_share,
    )


@router.get("", response_model=HoldingListResponse)
def list_holdings(context: AppContext = Depends(get_context)) -> HoldingListResponse:
    """List holdings, newest first."""
    holdings = context.holdings
    return HoldingListResponse(
        holdings=[_to_response(h) for h in holdings],
        count=len(holdings),
    )


@router.post("", response_model=HoldingResponse, status_code=201)
async def add_holding(
    data: HoldingCreateRequest,
    context: AppContext = Depends(get_context),
) -> HoldingResponse:
    """Add a holding. Shares must be > 0 and cost per share >= 0."""
    holding = context.add_holding(data.symbol, data.shares, data.cost_per_share)
    return _to_response(holding)


@router.delete("/{holding_id}", status_code=204)
async def remove_holding(
    holding_id: str,
    context: AppContext = Depends(get_context),
) -> Response:
    """Remove a holding by id."""
    context.remove_holding(holding_id)
    return Response(status_code=204)


@router.get("/export")
def export_holdings(context: AppContext = Depends(get_context)) -> Response:
    """Download the holdings list as a JSON document."""
    return Response(
        content=context.export_holdings(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.post("/import", response_model=ImportResponse)
async def import_holdings(
    request: Request,
    context: AppContext = Depends(get_context),
) -> ImportResponse:
    """
    Replace all holdings with the JSON array in the request body.

    Anything other than a JSON array is ignored and the holdings stay as they were.
    """
    body = await request.body()
    imported = context.import_holdings(body.decode("utf-8", errors="replace"))
    if imported is None:
        return ImportResponse(imported=False, count=len(context.holdings))
    return ImportResponse(imported=True, count=len(imported))
