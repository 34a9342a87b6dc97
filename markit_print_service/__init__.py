"""
Markit Print Service
====================

Local print bridge between the Markit point-of-sale frontend and
USB-attached printers.

Supports:
- ESC/POS receipt printers (bills and sales reports)
- TSPL label printers (price labels with code 128 barcodes)

Usage:
    python -m markit_print_service

API Endpoints:
    GET  /health               - Health check
    POST /api/print-bill       - Print invoice receipt
    POST /api/print-report     - Print sales report
    POST /api/print-label      - Print price labels
"""

__version__ = '1.0.0'
__author__ = 'Markit'
