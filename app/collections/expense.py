from typing import List

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.mongodb import get_expense_collection
from app.models.expense import Expense


async def save_expense(expense: Expense) -> Expense:
    expense_collection: AsyncIOMotorCollection = get_expense_collection()
    payload = expense.model_dump(mode="json", exclude_none=True, by_alias=True)
    await expense_collection.replace_one({"_id": expense.id}, payload, upsert=True)
    return expense


async def get_expenses_from_user_id(user_id: str) -> List[Expense]:
    """Newest first."""
    expense_collection: AsyncIOMotorCollection = get_expense_collection()
    items = expense_collection.find({"user_id": user_id}).sort("created_at", -1)
    return [Expense.model_validate(item) async for item in items]


async def delete_expense(expense_id: str, user_id: str) -> bool:
    expense_collection: AsyncIOMotorCollection = get_expense_collection()
    result = await expense_collection.delete_one({"_id": expense_id, "user_id": user_id})
    return result.deleted_count > 0


async def delete_expenses_from_user_id(user_id: str) -> int:
    expense_collection: AsyncIOMotorCollection = get_expense_collection()
    result = await expense_collection.delete_many({"user_id": user_id})
    return result.deleted_count
