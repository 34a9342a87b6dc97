"""
Markit Print Service - Main Application
=======================================

Local print bridge for the Markit point-of-sale frontend.

Run: python -m markit_print_service
"""

import logging
import platform
import socket
import sys
from datetime import datetime

from flask import Flask, request, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import __version__
from .config import PORT, HOST, DEBUG, CORS_ORIGINS, LOG_LEVEL
from .device import UsbGateway
from .exceptions import PrintServiceError, InvalidRequest
from .handlers import get_handler

logger = logging.getLogger(__name__)

# =============================================================================
# Application Setup
# =============================================================================

app = Flask(__name__)
CORS(app, origins=CORS_ORIGINS, supports_credentials=True)

# Swapped for a fake in tests
app.config['GATEWAY_FACTORY'] = UsbGateway


# =============================================================================
# Error Handling
# =============================================================================

@app.errorhandler(PrintServiceError)
def handle_print_error(error: PrintServiceError):
    """Map print errors to their status code."""
    if isinstance(error, InvalidRequest):
        logger.warning('%s %s rejected: %s', request.method, request.path, error.details or error.message)
    else:
        logger.error('%s %s failed: %s (%s)', request.method, request.path, error.message, error.details)
    return jsonify(error.to_dict()), error.status_code


@app.errorhandler(Exception)
def handle_unexpected_error(error: Exception):
    """Last resort: report 500 without leaking internals."""
    if isinstance(error, HTTPException):
        return error
    logger.exception('Server error: %s', error)
    return jsonify({'success': False, 'error': 'Internal server error'}), 500


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.route('/api', methods=['GET'])
def api_info():
    """API info (JSON)."""
    return jsonify({
        'service': 'Markit Print Service',
        'version': __version__,
        'status': 'running',
        'endpoints': {
            'health': '/health',
            'print_bill': '/api/print-bill',
            'print_report': '/api/print-report',
            'print_label': '/api/print-label',
        }
    })


@app.route('/health', methods=['GET'])
def health():
    """Health check with system info."""
    return jsonify({
        'status': 'online',
        'version': __version__,
        'hostname': socket.gethostname(),
        'platform': platform.system(),
        'python': sys.version.split()[0],
        'timestamp': datetime.now().isoformat(),
    })


# =============================================================================
# Print API
# =============================================================================

def _print_document(document_type: str, message: str):
    """Run one print job and answer with the handler's result."""
    handler_class = get_handler(document_type)
    handler = handler_class(current_app.config['GATEWAY_FACTORY'])

    result = handler.print_job(request.get_json(silent=True))
    result['message'] = message

    logger.info('%s printed from %s', document_type.capitalize(), request.remote_addr)
    return jsonify(result)


@app.route('/api/print-bill', methods=['POST'])
def print_bill():
    """Print an invoice receipt (with UPI QR code for UPI payments)."""
    return _print_document('bill', 'Receipt printed successfully')


@app.route('/api/print-report', methods=['POST'])
def print_report():
    """Print a sales/expense report."""
    return _print_document('report', 'Report printed successfully')


@app.route('/api/print-label', methods=['POST'])
def print_label():
    """Print a batch of price labels. Incomplete items are skipped."""
    return _print_document('label', 'Labels printed successfully')


# =============================================================================
# Main
# =============================================================================

def main():
    """Run the service."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    print("=" * 60)
    print("  Markit Print Service")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Listening: http://{HOST}:{PORT}")
    print(f"  CORS origins: {', '.join(CORS_ORIGINS)}")
    print("=" * 60)
    print("  API Endpoints:")
    print("    GET  /health                - Health check")
    print("    GET  /api                   - Service info")
    print("    POST /api/print-bill        - Print invoice receipt")
    print("    POST /api/print-report      - Print sales report")
    print("    POST /api/print-label       - Print price labels")
    print("=" * 60)

    app.run(host=HOST, port=PORT, debug=DEBUG)


if __name__ == '__main__':
    main()
