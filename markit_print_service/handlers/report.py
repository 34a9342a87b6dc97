"""
Report Handler
==============

Prints the sales/expense summary on the receipt printer. Figures are
printed as supplied; only expense dates are reformatted (DD-MM).
"""

import logging
from typing import Any

from .escpos import ESCPOSHandler
from ..commands import CommandSequence
from ..exceptions import PrintFailure
from ..formatting import REPORT_LAYOUT, format_day_month, pad_start, stringify
from ..models import Report

logger = logging.getLogger(__name__)

SUMMARY_LABEL_WIDTH = 16


class ReportHandler(ESCPOSHandler):
    """Handler for sales reports."""

    layout = REPORT_LAYOUT

    def parse(self, data: Any) -> Report:
        try:
            return Report.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise PrintFailure('Failed to print report', str(e)) from e

    def build(self, report: Report) -> CommandSequence:
        try:
            return self._compose(report)
        except (TypeError, ValueError) as e:
            logger.error('Cannot compose report: %s', e)
            raise PrintFailure('Failed to print report', str(e)) from e

    def _summary(self, seq: CommandSequence, label: str, value: Any):
        seq.text(f'{pad_start(label, SUMMARY_LABEL_WIDTH)}: {stringify(value)}')

    def _compose(self, report: Report) -> CommandSequence:
        layout = self.layout
        width = layout.line_width
        seq = CommandSequence()

        # Header
        seq.align('center')
        if report.company_name:
            seq.bold().size(True).text(report.company_name).size(False)
        (seq
         .bold()
         .text('SALES REPORT')
         .bold(False)
         .text(f'From: {stringify(report.from_date)}  To: {stringify(report.to_date)}')
         .line(width)
         .align('left'))

        # Revenue
        self._summary(seq, 'Total Revenue', report.total_revenue)
        self._summary(seq, 'Cash Revenue', report.cash_revenue)
        self._summary(seq, 'UPI Revenue', report.upi_revenue)
        self._summary(seq, 'Card Revenue', report.card_revenue)
        seq.line(width)

        # Expenses
        self._summary(seq, 'Total Expense', report.total_expense)
        self._summary(seq, 'Cash Expense', report.cash_expense)
        self._summary(seq, 'UPI Expense', report.upi_expense)
        seq.line(width)

        # Drawer
        seq.bold()
        self._summary(seq, 'Cash in Drawer', report.cash_in_drawer)
        seq.bold(False).line(width).feed(1)

        # Expense entries
        seq.align('center').bold().text('EXPENSES').bold(False).align('left').line(width)
        seq.text(layout.row(
            ('date', 'DATE'), ('category', 'CATEGORY'), ('note', 'NOTE'), ('amount', 'AMOUNT'),
        )).line(width)
        for entry in report.expenses:
            seq.text(layout.row(
                ('date', format_day_month(entry.date)),
                ('category', entry.category),
                ('note', entry.note),
                ('amount', entry.amount),
            ))
        if not report.expenses:
            seq.text('No expenses')

        return seq.line(width).feed(8).cut()
