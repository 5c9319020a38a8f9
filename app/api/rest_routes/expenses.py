from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_request_context
from app.collections.expense import (
    delete_expense,
    get_expenses_from_user_id,
    save_expense,
)
from app.models.expense import Expense, ExpenseCreateRequest, ExpenseSummary
from app.models.user import RequestContext

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post("/", response_model=Expense, status_code=status.HTTP_201_CREATED)
async def add_expense(
    request: ExpenseCreateRequest,
    context: RequestContext = Depends(get_request_context),
):
    """Record a farming expense dated today."""
    expense = Expense(
        user_id=context.user.id,
        category=request.category,
        amount=request.amount,
    )
    return await save_expense(expense)


@router.get("/", response_model=ExpenseSummary)
async def list_expenses(context: RequestContext = Depends(get_request_context)):
    """All expenses of the user, newest first, with the running total."""
    expenses = await get_expenses_from_user_id(context.user.id)
    return ExpenseSummary(
        expenses=expenses,
        total=round(sum(expense.amount for expense in expenses), 2),
    )


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_expense(
    expense_id: str,
    context: RequestContext = Depends(get_request_context),
):
    success = await delete_expense(expense_id, context.user.id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Expense with ID '{expense_id}' not found.",
        )
    return
