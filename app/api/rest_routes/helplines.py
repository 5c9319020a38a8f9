from typing import List

from fastapi import APIRouter

from app.models.helpline import Helpline
from app.services.helpline_service import get_helplines

router = APIRouter(prefix="/helplines", tags=["Helplines"])


@router.get("/", response_model=List[Helpline])
async def list_helplines():
    """Government farmer helplines with tap-to-call numbers."""
    return get_helplines()
