"""
Markit Print Service Models
"""

from .bill import Bill, LineItem, CompanyAddress, SplitPayment
from .report import Report, ExpenseEntry
from .label import LabelItem

__all__ = [
    'Bill', 'LineItem', 'CompanyAddress', 'SplitPayment',
    'Report', 'ExpenseEntry',
    'LabelItem',
]
