"""
Markit Print Service Configuration
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('MARKIT_PRINT_PORT', 3001))
HOST = os.environ.get('MARKIT_PRINT_HOST', '0.0.0.0')
DEBUG = os.environ.get('MARKIT_PRINT_DEBUG', 'false').lower() == 'true'

# Frontends allowed to submit print jobs
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        'MARKIT_PRINT_CORS_ORIGINS', 'http://localhost:3000,https://markit.co.in'
    ).split(',')
    if origin.strip()
]

LOG_LEVEL = os.environ.get('MARKIT_PRINT_LOG_LEVEL', 'INFO').upper()

# =============================================================================
# USB Device
# =============================================================================

# bInterfaceClass of USB printers
USB_PRINTER_CLASS = 7

# Write timeout in milliseconds (0 = wait forever)
USB_TIMEOUT = 0

# python-escpos capability profile; it supplies the paper width used to
# center QR images
PRINTER_PROFILE = os.environ.get('MARKIT_PRINT_PROFILE', 'TM-T88V')

# =============================================================================
# Receipt Layout
# =============================================================================

# Characters per line on 80mm paper
RECEIPT_LINE_WIDTH = 48

QR_SIZE = 6

THANK_YOU_TEXT = 'Thank you for shopping!'
RETURN_POLICY_LINES = ['Returns accepted within 7 days', 'with original receipt']
CUSTOMER_CARE = '+91 9945923901'

# =============================================================================
# Label Geometry (TSPL)
# =============================================================================

LABEL_WIDTH_MM = 50
LABEL_HEIGHT_MM = 38
LABEL_GAP_MM = 3
LABEL_GAP_OFFSET_MM = 0.7
