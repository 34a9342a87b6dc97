import pytest

from markit_print_service.exceptions import PrintFailure
from markit_print_service.formatting import REPORT_LAYOUT
from markit_print_service.handlers import ReportHandler


def build(data):
    handler = ReportHandler()
    return handler.build(handler.parse(data))


def test_report_header_and_range(report):
    lines = build(report).lines()

    assert lines[:3] == ['Markit Store', 'SALES REPORT', 'From: 01-03-2024  To: 31-03-2024']


def test_summary_values_printed_as_supplied(report):
    lines = build(report).lines()

    assert 'Total Revenue'.ljust(16) + ': 15200.50' in lines
    assert 'UPI Revenue'.ljust(16) + ': 6200.5' in lines
    assert 'Cash Expense'.ljust(16) + ': 700' in lines
    assert 'Cash in Drawer'.ljust(16) + ': 7300' in lines


def test_expense_rows_in_input_order(report):
    lines = build(report).lines()

    header = REPORT_LAYOUT.row(('date', 'DATE'), ('category', 'CATEGORY'),
                               ('note', 'NOTE'), ('amount', 'AMOUNT'))
    first = '02-03  ' + 'Transport'.ljust(14) + 'Delivery van'.ljust(17) + '700'.ljust(10)
    second = '15-03  ' + 'Utilities'.ljust(14) + 'Power bill'.ljust(17) + '500'.ljust(10)
    assert lines.index(header) < lines.index(first) < lines.index(second)


def test_report_ends_with_cut(report):
    commands = list(build(report))
    assert commands[-1].op == 'cut'
    assert commands[-2].op == 'feed'


def test_report_without_expenses(report):
    report['expenses'] = []
    assert 'No expenses' in build(report).lines()


def test_malformed_expense_date_is_print_failure(report):
    report['expenses'][0]['date'] = 'last tuesday'
    with pytest.raises(PrintFailure) as exc:
        build(report)
    assert exc.value.status_code == 500


def test_report_must_be_object():
    with pytest.raises(PrintFailure):
        build(['not', 'a', 'report'])
