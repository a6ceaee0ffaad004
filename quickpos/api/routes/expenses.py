"""
Expense endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from quickpos.api.dependencies import get_expenses
from quickpos.application.dto.requests import AddExpenseRequest
from quickpos.application.dto.responses import ExpenseResponse
from quickpos.core.services import ExpenseLedger

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    day: date | None = Query(default=None),
    expenses: ExpenseLedger = Depends(get_expenses),
) -> list[ExpenseResponse]:
    return [ExpenseResponse.model_validate(e) for e in expenses.list_expenses(day)]


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    request: AddExpenseRequest,
    expenses: ExpenseLedger = Depends(get_expenses),
) -> ExpenseResponse:
    return ExpenseResponse.model_validate(expenses.add(request.description, request.amount))


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_expense(
    expense_id: str,
    expenses: ExpenseLedger = Depends(get_expenses),
) -> Response:
    expenses.remove(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
