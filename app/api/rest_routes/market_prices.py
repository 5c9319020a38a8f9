from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_request_context
from app.models.market_price import MarketPricesResponse
from app.models.user import RequestContext
from app.services.market_price_service import get_market_prices

router = APIRouter(prefix="/market-prices", tags=["Market Prices"])


@router.get("/", response_model=MarketPricesResponse)
async def get_market_prices_for_user(
    location: Optional[str] = Query(
        default=None, description="Village or town. Defaults to the user's village."
    ),
    crop: Optional[str] = Query(
        default=None, description="Crop of interest. Defaults to the user's crop."
    ),
    context: RequestContext = Depends(get_request_context),
):
    """
    Mandi prices near the farmer, the best price for their crop flagged,
    with a short summary in the farmer's language.
    """
    return await get_market_prices(context, location=location, crop=crop)
