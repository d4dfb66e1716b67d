"""Accounting Repository - Paid orders with costs, and expenses."""
from datetime import date
from decimal import Decimal
from typing import List

from medshop.services.models import Expense, PaidOrder
from medshop.services.money import to_float
from .base import BaseRepository


class AccountingRepository(BaseRepository):
    """Rows feeding the P&L report."""

    async def get_paid_orders(self, date_from: date, date_to: date) -> List[PaidOrder]:
        """Paid orders created within the range, with unit cost per line."""
        result = await (
            self.client.table("orders")
            .select("id, total, order_items(quantity, products(cost))")
            .eq("status", "paid")
            .gte("created_at", date_from.isoformat())
            .lte("created_at", date_to.isoformat())
            .execute()
        )
        return [PaidOrder(**row) for row in result.data or []]

    async def get_expenses(self, date_from: date, date_to: date) -> List[Expense]:
        """Expenses within the range, newest first."""
        result = await (
            self.client.table("expenses")
            .select("*")
            .gte("expense_date", date_from.isoformat())
            .lte("expense_date", date_to.isoformat())
            .order("expense_date", desc=True)
            .execute()
        )
        return [Expense(**row) for row in result.data or []]

    async def create_expense(self, name: str, amount: Decimal, expense_date: date) -> Expense:
        result = await self.client.table("expenses").insert({
            "name": name,
            "amount": to_float(amount),
            "expense_date": expense_date.isoformat(),
        }).execute()
        return Expense(**result.data[0])

    async def delete_expense(self, expense_id: str) -> bool:
        """Delete an expense. False when no row matched."""
        result = await self.client.table("expenses").delete().eq("id", expense_id).execute()
        return bool(result.data)
