import logging
from typing import Optional

from fastapi import HTTPException, status

from app.core.ai_errors import ai_http_exception
from app.core.genai_client import ainvoke_structured
from app.models.plant_health import (
    PlantDiagnosis,
    PlantDiagnosisRequest,
    PlantRemedies,
    PlantRemediesRequest,
)
from app.models.user import RequestContext
from app.prompts.plant_health_system_prompts import (
    PLANT_DISEASE_DIAGNOSIS_SYSTEM_PROMPT,
    PLANT_REMEDIES_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


async def diagnose_plant_disease(
    context: RequestContext, request: PlantDiagnosisRequest
) -> PlantDiagnosis:
    input_data = {"description": request.description}
    media_blocks = [{"type": "image_url", "image_url": request.photo_data_uri}]

    try:
        diagnosis: Optional[PlantDiagnosis] = await ainvoke_structured(
            PlantDiagnosis,
            PLANT_DISEASE_DIAGNOSIS_SYSTEM_PROMPT,
            input_data,
            language=context.language,
            media_blocks=media_blocks,
        )
    except Exception as exc:
        logger.exception("Plant disease diagnosis failed for user_id=%s", context.user.id)
        raise ai_http_exception(
            exc, "Could not diagnose the plant. Please try again."
        ) from exc

    if diagnosis is None or not diagnosis.disease.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                "Could not identify a disease from the photo. "
                "Please upload a clearer image of the affected leaves."
            ),
        )
    return diagnosis


async def get_plant_remedies(
    context: RequestContext, request: PlantRemediesRequest
) -> PlantRemedies:
    try:
        remedies: Optional[PlantRemedies] = await ainvoke_structured(
            PlantRemedies,
            PLANT_REMEDIES_SYSTEM_PROMPT,
            request.model_dump(mode="json", exclude_none=True),
            language=context.language,
        )
    except Exception as exc:
        logger.exception("Plant remedies failed for disease=%s", request.disease)
        raise ai_http_exception(
            exc, "Failed to get remedies. Please try again."
        ) from exc

    if remedies is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate remedies from AI.",
        )
    return remedies
