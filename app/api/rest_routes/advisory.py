from fastapi import APIRouter, Depends

from app.api.dependencies import get_request_context
from app.models.advisory import (
    AdvisoryResponse,
    CropAdvisoryRequest,
    FarmerAnswer,
    FarmerQuestionRequest,
    SoilAdvisoryRequest,
)
from app.models.user import RequestContext
from app.services.advisory_service import (
    answer_farmer_question,
    get_crop_advisory,
    get_soil_advisory,
)

router = APIRouter(prefix="/advisory", tags=["Advisory"])


@router.post("/question", response_model=FarmerAnswer)
async def ask_question(
    request: FarmerQuestionRequest,
    context: RequestContext = Depends(get_request_context),
):
    """Answer a typed or voice-transcribed question."""
    return await answer_farmer_question(context, request)


@router.post("/crop", response_model=AdvisoryResponse)
async def crop_advisory(
    request: CropAdvisoryRequest,
    context: RequestContext = Depends(get_request_context),
):
    """Fertilizer, soil, water and risk advice from soil test values."""
    return await get_crop_advisory(context, request)


@router.post("/soil", response_model=AdvisoryResponse)
async def soil_advisory(
    request: SoilAdvisoryRequest,
    context: RequestContext = Depends(get_request_context),
):
    return await get_soil_advisory(context, request)
