from datetime import date, datetime
from enum import Enum
from typing import List
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field


class ExpenseCategory(str, Enum):
    SEEDS = "seeds"
    FERTILIZER = "fertilizer"
    PESTICIDE = "pesticide"
    LABOR = "labor"
    OTHER = "other"


class ExpenseCreateRequest(BaseModel):
    category: ExpenseCategory
    amount: float = Field(..., gt=0, description="Amount spent in rupees.")


class Expense(BaseModel):
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: str
    category: ExpenseCategory
    amount: float = Field(..., gt=0)
    spent_on: date = Field(default_factory=date.today)
    created_at: float = Field(
        default_factory=lambda: datetime.now().timestamp(),
        description="Unix timestamp used for ordering.",
    )


class ExpenseSummary(BaseModel):
    expenses: List[Expense]
    total: float
