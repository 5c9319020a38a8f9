from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.api.dependencies import get_request_context
from app.collections.feedback import save_feedback
from app.models.feedback import Feedback, FeedbackRequest
from app.models.user import RequestContext

router = APIRouter(prefix="/feedback", tags=["Feedback"])


class FeedbackStatusResponse(BaseModel):
    message: str


@router.post("/", response_model=FeedbackStatusResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    request: FeedbackRequest,
    context: RequestContext = Depends(get_request_context),
):
    """Thumbs up / down on the advice received."""
    await save_feedback(
        Feedback(
            user_id=context.user.id,
            helpful=request.helpful,
            comment=request.comment,
        )
    )
    return FeedbackStatusResponse(message="Thank you for your feedback!")
