"""
Admin Accounting Router

Profit & loss for a date range and expense tracking.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from medshop.auth import verify_admin
from medshop.errors import ERROR_EXPENSE_NOT_FOUND, ERROR_INVALID_DATE_RANGE
from medshop.logging import get_logger
from medshop.services.accounting import compute_profit_loss, current_month_range
from medshop.services.currency import get_store_currency
from medshop.services.database import Database
from medshop.services.money import format_money, to_float
from medshop.routers.deps import get_db
from medshop.routers.models import ExpenseCreate

logger = get_logger(__name__)
router = APIRouter(tags=["admin-accounting"])


def _expense_dict(expense) -> dict:
    return {
        "id": expense.id,
        "name": expense.name,
        "amount": to_float(expense.amount),
        "expense_date": expense.expense_date.isoformat(),
    }


@router.get("/accounting/pl")
async def get_profit_loss(
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    """
    P&L for paid orders and expenses in the range.

    Defaults to the current calendar month.
    """
    default_from, default_to = current_month_range(date.today())
    date_from = date_from or default_from
    date_to = date_to or default_to
    if date_from > date_to:
        raise HTTPException(status_code=400, detail=ERROR_INVALID_DATE_RANGE)

    try:
        orders = await db.get_paid_orders(date_from, date_to)
        expenses = await db.get_expenses(date_from, date_to)
    except Exception as e:
        logger.error(f"Failed to load accounting rows: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load accounting data")

    report = compute_profit_loss(orders, expenses)
    currency = get_store_currency(await db.get_store_settings())

    return {
        "date_from": date_from.isoformat(),
        "date_to": date_to.isoformat(),
        "currency": currency,
        "totals": report.to_dict(),
        "display": {
            "revenue": format_money(report.revenue, currency),
            "gross_profit": format_money(report.gross_profit, currency),
            "net_profit": format_money(report.net_profit, currency),
        },
        "expenses": [_expense_dict(e) for e in expenses],
    }


@router.post("/expenses", status_code=201)
async def create_expense(
    request: ExpenseCreate,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    """Record an expense."""
    try:
        expense = await db.create_expense(request.name.strip(), request.amount, request.expense_date)
    except Exception as e:
        logger.error(f"Failed to create expense: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create expense")
    return _expense_dict(expense)


@router.delete("/expenses/{expense_id}")
async def delete_expense(
    expense_id: str,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    """Delete an expense."""
    try:
        deleted = await db.delete_expense(expense_id)
    except Exception as e:
        logger.error(f"Failed to delete expense: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete expense")

    if not deleted:
        raise HTTPException(status_code=404, detail=ERROR_EXPENSE_NOT_FOUND)
    return {"success": True}
