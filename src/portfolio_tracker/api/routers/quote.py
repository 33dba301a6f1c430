"""Quote lookup endpoint: GET /api/quote."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from portfolio_tracker.api.deps import get_quote_normalizer
from portfolio_tracker.api.schemas import ErrorResponse, QuoteBatchResponse, QuoteResponse
from portfolio_tracker.services import QuoteNormalizer

router = APIRouter(prefix="/api", tags=["quotes"])


@router.get(
    "/quote",
    response_model=QuoteBatchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No symbols given"},
        500: {"model": ErrorResponse, "description": "Upstream unreachable or unparsable"},
        502: {"model": ErrorResponse, "description": "Upstream returned a non-success status"},
    },
)
async def get_quote(
    symbols: Optional[str] = Query(None, description="Comma-separated symbols (max 50)"),
    symbol: Optional[str] = Query(None, description="Single symbol; used when symbols is absent"),
    normalizer: QuoteNormalizer = Depends(get_quote_normalizer),
) -> QuoteBatchResponse:
    """
    Return a normalized quote for every requested symbol.

    Symbols the upstream does not know still get an entry with the symbol as
    name and null price fields.
    """
    batch = await normalizer.get_quotes(symbols or symbol)
    return QuoteBatchResponse(
        symbols=batch.symbols,
        data={sym: QuoteResponse.from_quote(q) for sym, q in batch.data.items()},
    )
