import logging
from typing import Optional

from fastapi import HTTPException, status

from app.core.ai_errors import ai_http_exception
from app.core.genai_client import ainvoke_structured
from app.models.advisory import (
    AdvisoryResponse,
    CropAdvisoryRequest,
    CropAdvisorySections,
    FarmerAnswer,
    FarmerQuestionRequest,
    SoilAdvisoryRequest,
)
from app.models.user import RequestContext
from app.prompts.crop_advisory_system_prompt import CROP_ADVISORY_SYSTEM_PROMPT
from app.prompts.farmer_question_system_prompt import FARMER_QUESTION_SYSTEM_PROMPT
from app.prompts.soil_advisory_system_prompt import SOIL_ADVISORY_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


def format_crop_advisory(sections: CropAdvisorySections) -> str:
    return "\n\n".join(
        [
            f"### Fertilizer Recommendations\n{sections.fertilizer_recommendations.strip()}",
            f"### Soil Amendments\n{sections.soil_amendments.strip()}",
            f"### Water Management\n{sections.water_management.strip()}",
            f"### Potential Issues\n{sections.potential_issues.strip()}",
        ]
    )


async def answer_farmer_question(
    context: RequestContext, request: FarmerQuestionRequest
) -> FarmerAnswer:
    try:
        answer: Optional[FarmerAnswer] = await ainvoke_structured(
            FarmerAnswer,
            FARMER_QUESTION_SYSTEM_PROMPT,
            request.model_dump(mode="json"),
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Answering farmer question failed for user_id=%s", context.user.id)
        raise ai_http_exception(
            exc, "Sorry, I could not answer that right now. Please try again."
        ) from exc

    if answer is None or not answer.answer.strip():
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate an answer from AI.",
        )
    return answer


async def get_crop_advisory(
    context: RequestContext, request: CropAdvisoryRequest
) -> AdvisoryResponse:
    try:
        sections: Optional[CropAdvisorySections] = await ainvoke_structured(
            CropAdvisorySections,
            CROP_ADVISORY_SYSTEM_PROMPT,
            request.model_dump(mode="json", exclude_none=True),
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Crop advisory failed for crop=%s", request.crop_name)
        raise ai_http_exception(
            exc, "Could not generate crop advisory. Please try again."
        ) from exc

    if sections is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate advisory from AI.",
        )
    return AdvisoryResponse(advice=format_crop_advisory(sections))


async def get_soil_advisory(
    context: RequestContext, request: SoilAdvisoryRequest
) -> AdvisoryResponse:
    try:
        advisory: Optional[AdvisoryResponse] = await ainvoke_structured(
            AdvisoryResponse,
            SOIL_ADVISORY_SYSTEM_PROMPT,
            request.model_dump(mode="json"),
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Soil advisory failed for soil_type=%s crop=%s", request.soil_type, request.crop)
        raise ai_http_exception(
            exc, "Could not generate soil advisory. Please try again."
        ) from exc

    if advisory is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get advisory from AI.",
        )
    return advisory
