from fastapi import APIRouter, Depends

from app.api.dependencies import get_request_context
from app.models.plant_health import (
    PlantDiagnosis,
    PlantDiagnosisRequest,
    PlantRemedies,
    PlantRemediesRequest,
)
from app.models.user import RequestContext
from app.services.plant_health_service import (
    diagnose_plant_disease,
    get_plant_remedies,
)

router = APIRouter(prefix="/plant-health", tags=["Plant Health"])


@router.post("/diagnose", response_model=PlantDiagnosis)
async def diagnose(
    request: PlantDiagnosisRequest,
    context: RequestContext = Depends(get_request_context),
):
    """
    Diagnose a plant disease from a photo (data URI) and an optional description.
    """
    return await diagnose_plant_disease(context, request)


@router.post("/remedies", response_model=PlantRemedies)
async def remedies(
    request: PlantRemediesRequest,
    context: RequestContext = Depends(get_request_context),
):
    """Chemical and organic remedies for a diagnosed disease."""
    return await get_plant_remedies(context, request)
