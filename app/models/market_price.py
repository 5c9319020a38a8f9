from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceRecord(BaseModel):
    """A single mandi price from the bundled catalog."""

    model_config = ConfigDict(frozen=True)

    crop: str
    market: str
    location: str
    price: float = Field(ge=0)
    unit: str = "quintal"


class RankedPriceRecord(PriceRecord):
    is_best: bool = Field(
        default=False,
        description="True for the highest price of the farmer's crop in this selection.",
    )


class MarketAnalysis(BaseModel):
    summary: str = Field(
        description="A short, one-sentence, farmer-friendly summary of the prices."
    )


class MarketPricesResponse(BaseModel):
    location: str
    crop: Optional[str] = None
    prices: List[RankedPriceRecord]
    summary: str
