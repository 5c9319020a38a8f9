import json
import logging
from functools import lru_cache
from typing import List, Optional, Sequence

from pydantic import TypeAdapter

from app.core.ai_errors import ai_http_exception
from app.core.config import settings
from app.core.genai_client import ainvoke_structured
from app.models.market_price import (
    MarketAnalysis,
    MarketPricesResponse,
    PriceRecord,
    RankedPriceRecord,
)
from app.models.user import RequestContext
from app.prompts.market_analysis_system_prompt import MARKET_ANALYSIS_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

MAX_OTHER_MARKETS_FOR_CROP = 2
TARGET_SELECTION_SIZE = 3
MAX_SELECTION_SIZE = 5
FALLBACK_SELECTION_SIZE = 4
SUMMARY_FALLBACK = "Could not generate summary."

_catalog_adapter = TypeAdapter(List[PriceRecord])


@lru_cache(maxsize=None)
def load_price_catalog(path: str) -> tuple[PriceRecord, ...]:
    """Reads the bundled mandi price catalog. Cached per path."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("marketPrices", [])
    catalog = tuple(_catalog_adapter.validate_python(data))
    logger.info("Loaded %d market price records from %s", len(catalog), path)
    return catalog


def _same(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def _rank(records: Sequence[PriceRecord], best_index: Optional[int] = None) -> List[RankedPriceRecord]:
    return [
        RankedPriceRecord(**record.model_dump(), is_best=(idx == best_index))
        for idx, record in enumerate(records)
    ]


def select_prices(
    catalog: Sequence[PriceRecord],
    location: str,
    crop: Optional[str] = None,
) -> List[RankedPriceRecord]:
    """
    Picks the prices shown to a farmer: every record from their own location,
    up to two other markets trading their crop, and a few unrelated records so
    the list has at least three entries. Duplicated (market, crop) pairs are
    dropped and at most five records are returned.

    When nothing in the catalog matches the location or the crop, the first
    four catalog records are returned unranked.

    The highest price for the farmer's crop is flagged with `is_best`; on equal
    prices the earliest record wins.
    """
    crop = crop or None

    in_location = [r for r in catalog if _same(r.location, location)]
    remainder = [r for r in catalog if not _same(r.location, location)]

    other_prices_for_crop = (
        [r for r in remainder if _same(r.crop, crop)][:MAX_OTHER_MARKETS_FOR_CROP]
        if crop
        else []
    )

    if not in_location and not other_prices_for_crop:
        return _rank(catalog[:FALLBACK_SELECTION_SIZE])

    filler_slots = max(
        0, TARGET_SELECTION_SIZE - len(in_location) - len(other_prices_for_crop)
    )
    filler = [r for r in remainder if not crop or not _same(r.crop, crop)][:filler_slots]

    combined: List[PriceRecord] = []
    seen: set[tuple[str, str]] = set()
    for record in in_location + other_prices_for_crop + filler:
        key = (record.market, record.crop)
        if key in seen:
            continue
        seen.add(key)
        combined.append(record)
    combined = combined[:MAX_SELECTION_SIZE]

    if not combined:
        return _rank(catalog[:FALLBACK_SELECTION_SIZE])

    best_index = None
    if crop:
        for idx, record in enumerate(combined):
            if not _same(record.crop, crop):
                continue
            if best_index is None or record.price > combined[best_index].price:
                best_index = idx

    return _rank(combined, best_index)


async def get_market_prices(
    context: RequestContext,
    location: Optional[str] = None,
    crop: Optional[str] = None,
) -> MarketPricesResponse:
    location = location or context.user.village or settings.DEFAULT_LOCATION
    crop = crop or context.user.crop

    catalog = load_price_catalog(settings.MARKET_PRICES_PATH)
    prices = select_prices(catalog, location, crop)

    if not prices:
        logger.warning("Market price catalog is empty, skipping summary")
        return MarketPricesResponse(
            location=location, crop=crop, prices=[], summary=SUMMARY_FALLBACK
        )

    input_data = {
        "user_crop": crop,
        "prices": [p.model_dump(mode="json") for p in prices],
    }
    try:
        analysis: Optional[MarketAnalysis] = await ainvoke_structured(
            MarketAnalysis,
            MARKET_ANALYSIS_SYSTEM_PROMPT,
            input_data,
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Market price summary failed for location=%s crop=%s", location, crop)
        raise ai_http_exception(
            exc, "Could not fetch market prices. Please try again later."
        ) from exc

    summary = analysis.summary.strip() if analysis and analysis.summary else ""
    return MarketPricesResponse(
        location=location,
        crop=crop,
        prices=prices,
        summary=summary or SUMMARY_FALLBACK,
    )
