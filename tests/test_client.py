import requests

from markit_print_service import client as client_module
from markit_print_service.client import PrintClient


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


def test_print_bill_posts_json(monkeypatch):
    sent = {}

    def post(url, json=None, timeout=None):
        sent.update(url=url, json=json, timeout=timeout)
        return FakeResponse({'success': True, 'message': 'Receipt printed successfully'})

    monkeypatch.setattr(client_module.requests, 'post', post)

    result = PrintClient('http://printer.local:3001/').print_bill({'invoiceNumber': 'INV-1'})

    assert result['success'] is True
    assert sent == {
        'url': 'http://printer.local:3001/api/print-bill',
        'json': {'invoiceNumber': 'INV-1'},
        'timeout': 60,
    }


def test_print_labels_sends_array(monkeypatch):
    sent = {}

    def post(url, json=None, timeout=None):
        sent.update(url=url, json=json)
        return FakeResponse({'success': True, 'printed': 1, 'skipped': 0})

    monkeypatch.setattr(client_module.requests, 'post', post)

    result = PrintClient().print_labels([{'barcode': '111'}])

    assert sent['url'] == 'http://localhost:3001/api/print-label'
    assert sent['json'] == [{'barcode': '111'}]
    assert result['printed'] == 1


def test_is_online(monkeypatch):
    monkeypatch.setattr(client_module.requests, 'get',
                        lambda url, timeout=None: FakeResponse({'status': 'online'}))
    assert PrintClient().is_online()


def test_connection_error(monkeypatch):
    def post(url, json=None, timeout=None):
        raise requests.exceptions.ConnectionError('refused')

    monkeypatch.setattr(client_module.requests, 'post', post)

    result = PrintClient('http://localhost:9').print_report({})
    assert result == {'success': False, 'error': 'Cannot connect to http://localhost:9'}
