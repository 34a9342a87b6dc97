"""
Markit Print Service Client
===========================

Python SDK for submitting jobs to a running print service.

Usage:
    from markit_print_service.client import PrintClient

    client = PrintClient('http://localhost:3001')

    if client.is_online():
        client.print_bill(bill)
        client.print_labels([label1, label2])
"""

import requests
from typing import Dict, Any, List


class PrintClient:
    """Client for Markit Print Service."""

    def __init__(self, base_url: str = 'http://localhost:3001', timeout: int = 60):
        """
        Initialize client.

        Args:
            base_url: Base URL of the print service
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, data: Any = None) -> Dict[str, Any]:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'GET':
                response = requests.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data, timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')

            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except ValueError as e:
            return {'success': False, 'error': str(e)}

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Check service health."""
        return self._request('GET', '/health')

    def is_online(self) -> bool:
        """Check if service is online."""
        result = self.health()
        return result.get('status') == 'online'

    # =========================================================================
    # Printing
    # =========================================================================

    def print_bill(self, bill: Dict[str, Any]) -> Dict[str, Any]:
        """
        Print an invoice receipt.

        Args:
            bill: Bill JSON (invoiceNumber, entries, totals, paymentMethod, ...)
        """
        return self._request('POST', '/api/print-bill', bill)

    def print_report(self, report: Dict[str, Any]) -> Dict[str, Any]:
        """Print a sales report."""
        return self._request('POST', '/api/print-report', report)

    def print_labels(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Print price labels.

        Args:
            items: Label dicts (shopname, barcode, productName, name, sprice, ...)

        Returns:
            Dict with 'printed' and 'skipped' counts on success
        """
        return self._request('POST', '/api/print-label', items)
