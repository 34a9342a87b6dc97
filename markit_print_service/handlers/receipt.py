"""
Receipt Handler
===============

Prints sales invoices (bills) on an 80mm ESC/POS receipt printer.

Layout (48 characters per line):
    header      company name, address, GSTIN
    metadata    invoice number, date, payment method, customer
    columns     SL DESCRIPTION HSN TAX
                    QTY MRP VALUE DISC T.VALUE
    items       two rows per line item, same columns
    totals      bold totals row, discount/round-off, grand total, savings
    closing     UPI QR (when paid by UPI), thanks, return policy, cut
"""

import logging
from typing import Any

from .escpos import ESCPOSHandler
from ..commands import CommandSequence
from ..exceptions import InvalidRequest
from ..formatting import (
    NAN, RECEIPT_LAYOUT, center, format_money, format_timestamp, stringify,
)
from ..models import Bill

logger = logging.getLogger(__name__)

# Width the DISC/ROUND OFF label is centred in
SUMMARY_LABEL_WIDTH = 38


def _money(value: Any, field: str) -> str:
    text = format_money(value)
    if text == NAN:
        raise ValueError(f'{field} is not a number: {value!r}')
    return text


class ReceiptHandler(ESCPOSHandler):
    """Handler for bill receipts."""

    layout = RECEIPT_LAYOUT

    def parse(self, data: Any) -> Bill:
        return Bill.from_dict(data)

    def build(self, bill: Bill) -> CommandSequence:
        """
        Compose the receipt.

        Raises:
            InvalidRequest: a money field is not numeric
        """
        try:
            return self._compose(bill)
        except (TypeError, ValueError) as e:
            logger.warning('Rejecting bill %s: %s', bill.invoice_number, e)
            raise InvalidRequest('Invalid bill data', str(e)) from e

    def _compose(self, bill: Bill) -> CommandSequence:
        layout = self.layout
        width = layout.line_width
        seq = CommandSequence()

        # Header
        (seq
         .align('center')
         .bold()
         .size(True)
         .text(bill.company_name)
         .bold(False)
         .size(False)
         .text(bill.company_address.formatted())
         .text(f'GSTIN:{bill.gstin} ')
         .feed(1)
         .line(width))

        # Invoice metadata
        (seq
         .align('left')
         .text(f'Invoice: #{stringify(bill.invoice_number)}')
         .raw(self.LINE_FEED_10)
         .text(f'Date  : {format_timestamp(bill.date)}')
         .raw(self.LINE_FEED_10)
         .text(f'Payment Method: {bill.payment_method}'))
        if bill.is_split:
            seq.text(f'  Cash: {_money(bill.split_payment.cash, "splitPayment.cash")}'
                     f'  UPI: {_money(bill.split_payment.upi, "splitPayment.upi")}')
        if bill.customer_name:
            seq.raw(self.LINE_FEED_10).text(f'Customer: {bill.customer_name}')
        if bill.customer_phone:
            seq.text(f'Phone   : {bill.customer_phone}')
        seq.line(width)

        # Column headers
        seq.text(layout.row(
            ('sl', 'SL'), ('description', 'DESCRIPTION'), ('hsn', 'HSN'), ('tax', 'TAX'),
        )).raw(self.LINE_FEED_10)
        seq.text(layout.row(
            ('qty', 'QTY'), ('mrp', 'MRP'), ('value', 'VALUE'),
            ('disc', 'DISC'), ('tvalue', 'T.VALUE'),
            indent=True,
        )).line(width)

        # Items
        for index, item in enumerate(bill.entries, start=1):
            seq.text(layout.row(
                ('sl', index),
                ('description', item.description),
                ('hsn', item.hsn),
                ('tax', f'{stringify(item.tax)}%'),
            )).raw(self.LINE_FEED_10)
            seq.text(layout.row(
                ('qty', item.qty),
                ('mrp', _money(item.mrp, f'entries[{index}].mrp')),
                ('value', _money(item.value, f'entries[{index}].value')),
                ('disc', f'{stringify(item.discount)}%'),
                ('tvalue', _money(item.tvalue, f'entries[{index}].tvalue')),
                indent=True,
            ))

        # Totals row lines up with QTY, VALUE, DISC and T.VALUE
        totals = (
            ' ' * layout.indent
            + layout.cell('qty', bill.tqty)
            + ' ' * layout.widths['mrp']
            + layout.cell('value', _money(bill.tvalue, 'tvalue'))
            + layout.cell('disc', _money(bill.tdiscount, 'tdiscount'))
            + layout.cell('tvalue', _money(bill.subtotal, 'subtotal'))
        )
        seq.line(width).bold().text(totals).bold(False).line(width)

        discount = bill.calculated_discount()
        seq.text(center('DISC/ROUND OFF(+/-)', SUMMARY_LABEL_WIDTH)
                 + _money(discount, 'discount')).feed(1)

        (seq
         .bold()
         .align('center')
         .size(True)
         .text(' GRAND TOTAL:' + _money(bill.grand_total, 'grandTotal'))
         .bold(False)
         .size(False)
         .feed(1))

        savings = discount + float(_money(bill.tdiscount, 'tdiscount'))
        (seq
         .line(width)
         .raw(self.INVERT_ON)
         .size(True)
         .bold()
         .text(' YOUR SAVING:' + format_money(savings))
         .raw(self.INVERT_OFF)
         .size(False)
         .bold(False)
         .line(width))

        return self.closing_block(seq, bill.upi_payload())
