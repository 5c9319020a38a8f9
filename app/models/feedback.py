from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field


class FeedbackRequest(BaseModel):
    helpful: bool = Field(..., description="Thumbs up (true) or thumbs down (false).")
    comment: Optional[str] = Field(default=None, max_length=1000)


class Feedback(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: str
    helpful: bool
    comment: Optional[str] = None
    timestamp: float = Field(default_factory=lambda: datetime.now().timestamp())
