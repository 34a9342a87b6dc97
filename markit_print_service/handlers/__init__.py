"""
Markit Print Service Handlers
=============================

Document handlers for the receipt (ESC/POS) and label (TSPL) printers.
"""

from .base import BaseHandler
from .escpos import ESCPOSHandler
from .receipt import ReceiptHandler
from .report import ReportHandler
from .tspl import TSPLHandler, LabelBatch

__all__ = [
    'BaseHandler', 'ESCPOSHandler', 'ReceiptHandler', 'ReportHandler',
    'TSPLHandler', 'LabelBatch',
]

# Handler registry
HANDLERS = {
    'bill': ReceiptHandler,
    'report': ReportHandler,
    'label': TSPLHandler,
}


def get_handler(document_type: str) -> type:
    """Get handler class by document type."""
    return HANDLERS.get(document_type)
