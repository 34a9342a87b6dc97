"""
Report Model
============

Daily/periodic sales summary. Figures are printed exactly as supplied.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ExpenseEntry:
    date: Any = None
    category: str = ""
    note: str = ""
    amount: Any = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExpenseEntry':
        return cls(
            date=data.get('date'),
            category=data.get('category', ''),
            note=data.get('note', ''),
            amount=data.get('amount', 0),
        )


@dataclass
class Report:
    company_name: str = ""
    from_date: Any = None
    to_date: Any = None

    # Revenue by payment channel
    total_revenue: Any = 0
    cash_revenue: Any = 0
    upi_revenue: Any = 0
    card_revenue: Any = 0

    # Expenses by payment channel
    total_expense: Any = 0
    cash_expense: Any = 0
    upi_expense: Any = 0

    cash_in_drawer: Any = 0

    expenses: List[ExpenseEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Report':
        """Create from request JSON. Nothing is validated here."""
        return cls(
            company_name=data.get('companyName', ''),
            from_date=data.get('fromDate'),
            to_date=data.get('toDate'),
            total_revenue=data.get('totalRevenue', 0),
            cash_revenue=data.get('cashRevenue', 0),
            upi_revenue=data.get('upiRevenue', 0),
            card_revenue=data.get('cardRevenue', 0),
            total_expense=data.get('totalExpense', 0),
            cash_expense=data.get('cashExpense', 0),
            upi_expense=data.get('upiExpense', 0),
            cash_in_drawer=data.get('cashInDrawer', 0),
            expenses=[ExpenseEntry.from_dict(e) for e in data.get('expenses') or []],
        )
