"""
Text Formatting
===============

Fixed-width column layout, money and date formatting, and UPI payment
links shared by the document builders.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import quote

from .config import RECEIPT_LINE_WIDTH

NAN = 'NaN'

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def stringify(value: Any) -> str:
    """Render a JSON value the way the frontend shows it."""
    if value is None:
        return ' '
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def pad_start(value: Any, width: int) -> str:
    """Left-justify value in a column of ``width`` characters.

    Values already at least ``width`` long are returned unchanged.
    """
    text = stringify(value)
    if len(text) >= width:
        return text
    return text + ' ' * (width - len(text))


def center(value: Any, width: int) -> str:
    """Center value in ``width`` characters; an odd extra space goes right."""
    text = stringify(value)
    if len(text) >= width:
        return text
    extra = width - len(text)
    left = extra // 2
    return ' ' * left + text + ' ' * (extra - left)


def format_money(amount: Any) -> str:
    """Format amount with two decimals, or ``'NaN'`` if it is not a number."""
    if amount is None or isinstance(amount, bool):
        return NAN
    try:
        number = float(amount)
    except (TypeError, ValueError):
        return NAN
    if not math.isfinite(number):
        return NAN
    return f'{number:.2f}'


def resolve_discount(discount: Any, subtotal: Any) -> float:
    """
    Turn the bill-level discount into an absolute amount.

    A negative discount is an absolute amount; anything else is a
    percentage of the subtotal.
    """
    discount = float(discount or 0)
    if discount < 0:
        return abs(discount)
    return float(subtotal or 0) * discount / 100


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into local time."""
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed


def format_timestamp(value: Any) -> str:
    """Format as ``DD-MM-YYYY hh:mm AM``."""
    return parse_datetime(value).strftime('%d-%m-%Y %I:%M %p')


def format_day_month(value: Any) -> str:
    """Format as ``DD-MM``."""
    if value is None:
        raise ValueError('date is required')
    return parse_datetime(value).strftime('%d-%m')


def build_upi_payload(upi_id: Any, holder: Any, invoice_number: Any, amount: Any) -> str:
    """Build the ``upi://pay`` link encoded into the receipt QR code."""
    note = quote(f'Payment for Invoice ID {stringify(invoice_number)}', safe=_URI_COMPONENT_SAFE)
    return (
        f'upi://pay?pa={stringify(upi_id)}&pn={stringify(holder)}'
        f'&tn={note}&am={stringify(amount)}&cu=INR'
    )


@dataclass(frozen=True)
class ColumnLayout:
    """Column widths for one document type."""

    widths: Mapping[str, int] = field(default_factory=dict)
    line_width: int = RECEIPT_LINE_WIDTH
    indent: int = 4

    def __post_init__(self):
        object.__setattr__(self, 'widths', MappingProxyType(dict(self.widths)))

    def cell(self, column: str, value: Any) -> str:
        return pad_start(value, self.widths[column])

    def row(self, *cells, indent: bool = False) -> str:
        """Join ``(column, value)`` pairs into one left-justified line."""
        prefix = ' ' * self.indent if indent else ''
        return prefix + ''.join(self.cell(column, value) for column, value in cells)


RECEIPT_LAYOUT = ColumnLayout({
    'sl': 4,
    'description': 24,
    'hsn': 10,
    'tax': 10,
    'qty': 4,
    'mrp': 10,
    'value': 10,
    'disc': 10,
    'tvalue': 10,
})

REPORT_LAYOUT = ColumnLayout({
    'date': 7,
    'category': 14,
    'note': 17,
    'amount': 10,
})
