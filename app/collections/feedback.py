from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.mongodb import get_feedback_collection
from app.models.feedback import Feedback


async def save_feedback(feedback: Feedback) -> Feedback:
    feedback_collection: AsyncIOMotorCollection = get_feedback_collection()
    payload = feedback.model_dump(mode="json", exclude_none=True, by_alias=True)
    await feedback_collection.insert_one(payload)
    return feedback
