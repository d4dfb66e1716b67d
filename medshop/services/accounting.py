"""
Profit & Loss calculations.

Reduces paid orders and expenses fetched for a date range into a single
report. Cost of goods uses the product's current unit cost; lines whose
product was deleted contribute no cost.
"""
import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Tuple

from medshop.services.models import Expense, PaidOrder
from medshop.services.money import divide, multiply, round_money, subtract, to_float


@dataclass(frozen=True)
class ProfitLossReport:
    revenue: Decimal
    cogs: Decimal
    gross_profit: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    orders_count: int

    @property
    def gross_margin_pct(self) -> Decimal:
        return _margin(self.gross_profit, self.revenue)

    @property
    def net_margin_pct(self) -> Decimal:
        return _margin(self.net_profit, self.revenue)

    def to_dict(self) -> dict:
        return {
            "revenue": to_float(self.revenue),
            "cogs": to_float(self.cogs),
            "gross_profit": to_float(self.gross_profit),
            "total_expenses": to_float(self.total_expenses),
            "net_profit": to_float(self.net_profit),
            "gross_margin_pct": to_float(self.gross_margin_pct),
            "net_margin_pct": to_float(self.net_margin_pct),
            "orders_count": self.orders_count,
        }


def _margin(profit: Decimal, revenue: Decimal) -> Decimal:
    if revenue <= 0:
        return Decimal("0")
    return round_money(multiply(divide(profit, revenue), 100))


def order_cost(order: PaidOrder) -> Decimal:
    """Cost of goods for one order."""
    return sum(
        (
            multiply(item.products.cost if item.products else 0, item.quantity)
            for item in order.order_items
        ),
        Decimal("0"),
    )


def compute_profit_loss(
    paid_orders: Iterable[PaidOrder],
    expenses: Iterable[Expense],
) -> ProfitLossReport:
    """Build the P&L report for already-filtered orders and expenses."""
    orders = list(paid_orders)
    revenue = sum((order.total for order in orders), Decimal("0"))
    cogs = sum((order_cost(order) for order in orders), Decimal("0"))
    total_expenses = sum((expense.amount for expense in expenses), Decimal("0"))

    gross_profit = subtract(revenue, cogs)
    return ProfitLossReport(
        revenue=revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        total_expenses=total_expenses,
        net_profit=subtract(gross_profit, total_expenses),
        orders_count=len(orders),
    )


def current_month_range(today: date) -> Tuple[date, date]:
    """First and last day of the month containing today."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)
