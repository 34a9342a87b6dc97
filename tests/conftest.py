import copy

import pytest

from markit_print_service.app import app as flask_app
from markit_print_service.device import UsbGateway


class RecordingPrinter:
    """Stands in for escpos.printer.Usb and records every call."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.closed = False
        self.fail_on = fail_on

    def _record(self, name, *args, **kwargs):
        if name == self.fail_on:
            raise OSError(f'{name} failed')
        self.calls.append((name, args, kwargs))

    def text(self, txt):
        self._record('text', txt)

    def _raw(self, data):
        self._record('raw', data)

    def ln(self, count=1):
        self._record('ln', count)

    def qr(self, content, **kwargs):
        self._record('qr', content, **kwargs)

    def set(self, **kwargs):
        self._record('set', **kwargs)

    def cut(self):
        self._record('cut')

    def close(self):
        self.closed = True

    def names(self):
        return [name for name, _, _ in self.calls]

    def args_of(self, name):
        return [args[0] for n, args, _ in self.calls if n == name]

    @property
    def printed_text(self):
        return ''.join(self.args_of('text'))


class FakeDevice:
    """Gateway factory handing out gateways bound to one recording printer."""

    def __init__(self, printer=None):
        self.printer = printer or RecordingPrinter()
        self.opened = 0

    def _open(self):
        self.opened += 1
        return self.printer

    def __call__(self):
        return UsbGateway(printer_factory=self._open)


BILL = {
    'invoiceNumber': 'INV-1001',
    'date': '2024-03-05T14:07:00',
    'paymentMethod': 'upi',
    'companyName': 'Markit Store',
    'companyAddress': {
        'name': 'Markit',
        'street': 'MG Road',
        'locality': 'Camp',
        'city': 'Pune',
        'state': 'Maharashtra',
        'pincode': '411001',
    },
    'gstin': '27ABCDE1234F1Z5',
    'entries': [
        {
            'description': 'Basmati Rice 1kg',
            'hsn': '1006',
            'tax': 5,
            'qty': 2,
            'mrp': 100,
            'value': 200,
            'discount': 0,
            'tvalue': 200,
        },
    ],
    'tqty': 2,
    'tvalue': 200,
    'tdiscount': 0,
    'subtotal': 200,
    'discount': 5,
    'grandTotal': 190,
    'upiId': 'x@bank',
    'accHolderName': 'Shop',
}

REPORT = {
    'companyName': 'Markit Store',
    'fromDate': '01-03-2024',
    'toDate': '31-03-2024',
    'totalRevenue': '15200.50',
    'cashRevenue': 8000,
    'upiRevenue': 6200.5,
    'cardRevenue': 1000,
    'totalExpense': 1200,
    'cashExpense': 700,
    'upiExpense': 500,
    'cashInDrawer': 7300,
    'expenses': [
        {'date': '2024-03-02', 'category': 'Transport', 'note': 'Delivery van', 'amount': 700},
        {'date': '2024-03-15T10:00:00', 'category': 'Utilities', 'note': 'Power bill', 'amount': 500},
    ],
}


def make_label(**overrides):
    label = {
        'shopname': 'Markit Store',
        'barcode': '8901234567890',
        'code': 'TS01',
        'productName': 'Cotton T-Shirt',
        'name': 'Blue',
        'size': 'M',
        'brand': 'Acme',
        'sprice': 499,
    }
    label.update(overrides)
    return label


@pytest.fixture
def bill():
    return copy.deepcopy(BILL)


@pytest.fixture
def report():
    return copy.deepcopy(REPORT)


@pytest.fixture
def device():
    return FakeDevice()


@pytest.fixture
def client(device):
    flask_app.config['TESTING'] = True
    flask_app.config['GATEWAY_FACTORY'] = device
    with flask_app.test_client() as test_client:
        yield test_client
    flask_app.config['GATEWAY_FACTORY'] = UsbGateway
