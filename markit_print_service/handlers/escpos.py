"""
ESC/POS Handler
===============

Shared pieces for documents printed on ESC/POS receipt printers:
escape sequences, the closing block and sending a command sequence.
"""

from typing import Any, Dict, Optional

from .base import BaseHandler
from ..commands import CommandSequence
from ..config import CUSTOMER_CARE, RETURN_POLICY_LINES, THANK_YOU_TEXT
from ..device import UsbGateway
from ..formatting import ColumnLayout


class ESCPOSHandler(BaseHandler):
    """Base for receipt-printer documents."""

    # ESC/POS commands
    LINE_FEED_10 = b'\x1b\x4a\x0a'  # ESC J n - feed n dots

    # Text formatting
    INVERT_ON = b'\x1d\x42\x01'  # GS B 1 - white on black
    INVERT_OFF = b'\x1d\x42\x00'

    layout: ColumnLayout = None

    def __init__(self, gateway_factory=UsbGateway, layout: ColumnLayout = None):
        super().__init__(gateway_factory)
        if layout is not None:
            self.layout = layout

    def closing_block(self, sequence: CommandSequence,
                      qr_payload: Optional[str] = None) -> CommandSequence:
        """
        Append the footer: optional payment QR, thanks, return policy, cut.

        Args:
            sequence: sequence to extend
            qr_payload: UPI link to print as QR code, or None
        """
        if qr_payload:
            (sequence
             .align('center')
             .feed(1)
             .text('Scan to pay via UPI')
             .qr(qr_payload))

        sequence.feed(1).align('center').text(THANK_YOU_TEXT).feed(1)
        for line in RETURN_POLICY_LINES:
            sequence.text(line)
        return (sequence
                .feed(2)
                .text(f'Customer care: {CUSTOMER_CARE}')
                .feed(8)
                .cut())

    def send(self, gateway: UsbGateway, job: CommandSequence) -> Dict[str, Any]:
        commands = len(job)
        gateway.send(job)
        return {
            'success': True,
            'commands': commands,
        }
