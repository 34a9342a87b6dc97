"""
USB Device Gateway
==================

Opens the first USB printer found, streams one job to it and always closes
it again.

Usage:
    with UsbGateway() as gateway:
        gateway.send(sequence)      # ESC/POS command sequence
        gateway.write(tspl_bytes)   # raw bytes
"""

import logging
from typing import Callable, Optional, Tuple

import usb.core
import usb.util
from escpos.exceptions import DeviceNotFoundError
from escpos.exceptions import Error as ESCPOSError
from escpos.printer import Usb

from .commands import Command, CommandSequence
from .config import PRINTER_PROFILE, QR_SIZE, USB_PRINTER_CLASS, USB_TIMEOUT
from .exceptions import DeviceNotFound, DeviceOpenFailed, PrintFailure, PrintServiceError

logger = logging.getLogger(__name__)

# python-escpos defaults, used when the interface lists no IN endpoint
DEFAULT_IN_EP = 0x82
DEFAULT_OUT_EP = 0x01


def _printer_interface(device):
    """Return the first printer-class interface of ``device``, if any."""
    try:
        for configuration in device:
            interface = usb.util.find_descriptor(
                configuration, bInterfaceClass=USB_PRINTER_CLASS
            )
            if interface is not None:
                return interface
    except usb.core.USBError as e:
        logger.debug('Cannot read descriptors of %04x:%04x: %s',
                     device.idVendor, device.idProduct, e)
    return None


def find_printer_device():
    """
    Find the first attached USB printer.

    Raises:
        DeviceNotFound: no printer-class device is attached, or no USB
            backend (libusb) is available
    """
    try:
        device = usb.core.find(custom_match=lambda d: _printer_interface(d) is not None)
    except usb.core.NoBackendError as e:
        raise DeviceNotFound('Printer not found. Please check connection.',
                             'No USB backend available') from e

    if device is None:
        raise DeviceNotFound('Printer not found. Please check connection.')
    return device


def printer_endpoints(device) -> Tuple[int, int]:
    """Bulk (in, out) endpoint addresses of the printer interface."""
    interface = _printer_interface(device)
    if interface is None:
        return DEFAULT_IN_EP, DEFAULT_OUT_EP

    def _endpoint(direction):
        return usb.util.find_descriptor(
            interface,
            custom_match=lambda e: usb.util.endpoint_direction(e.bEndpointAddress) == direction,
        )

    ep_in = _endpoint(usb.util.ENDPOINT_IN)
    ep_out = _endpoint(usb.util.ENDPOINT_OUT)
    return (
        ep_in.bEndpointAddress if ep_in is not None else DEFAULT_IN_EP,
        ep_out.bEndpointAddress if ep_out is not None else DEFAULT_OUT_EP,
    )


def interface_number(device) -> int:
    """``bInterfaceNumber`` of the printer interface (0 if none is listed)."""
    interface = _printer_interface(device)
    return interface.bInterfaceNumber if interface is not None else 0


def open_usb_printer() -> Usb:
    """
    Claim the first USB printer as a python-escpos printer.

    ``Usb.open()`` only logs configuration errors, so the printer interface
    is claimed here to detect a device held by another process.

    Raises:
        DeviceNotFound: nothing attached
        DeviceOpenFailed: attached but busy or not accessible
    """
    device = find_printer_device()
    in_ep, out_ep = printer_endpoints(device)
    number = interface_number(device)

    try:
        printer = Usb(device.idVendor, device.idProduct,
                      timeout=USB_TIMEOUT, in_ep=in_ep, out_ep=out_ep,
                      profile=PRINTER_PROFILE)
        printer.open()
    except DeviceNotFoundError as e:
        logger.error('Printer %04x:%04x disappeared: %s',
                     device.idVendor, device.idProduct, e)
        raise DeviceNotFound('Printer not found. Please check connection.', str(e)) from e
    except (ESCPOSError, usb.core.USBError) as e:
        logger.error('Error opening printer %04x:%04x: %s',
                     device.idVendor, device.idProduct, e)
        raise DeviceOpenFailed('Could not open printer connection', str(e)) from e

    try:
        usb.util.claim_interface(printer.device, number)
    except usb.core.USBError as e:
        logger.error('Cannot claim interface %d of printer %04x:%04x: %s',
                     number, device.idVendor, device.idProduct, e)
        printer.close()
        raise DeviceOpenFailed('Could not open printer connection', str(e)) from e

    logger.info('Opened USB printer %04x:%04x (interface=%d, in=0x%02x, out=0x%02x)',
                device.idVendor, device.idProduct, number, in_ep, out_ep)
    return printer


class UsbGateway:
    """Scoped access to the USB printer for a single print job."""

    def __init__(self, printer_factory: Optional[Callable] = None):
        """
        Args:
            printer_factory: callable returning an opened python-escpos
                printer (defaults to the first attached USB printer)
        """
        self._printer_factory = printer_factory or open_usb_printer
        self.printer = None
        self.bytes_sent = 0

    def open(self) -> 'UsbGateway':
        self.printer = self._printer_factory()
        return self

    def close(self):
        """Release the device. Close errors are logged, not raised."""
        if self.printer is None:
            return
        try:
            self.printer.close()
        except Exception as e:
            logger.warning('Error closing printer: %s', e)
        finally:
            self.printer = None
            logger.debug('Printer connection closed')

    def __enter__(self) -> 'UsbGateway':
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _require_open(self):
        if self.printer is None:
            raise PrintFailure('Printer connection is not open')

    def write(self, data: bytes):
        """Stream raw bytes (e.g. a TSPL label block) to the printer."""
        self._require_open()
        try:
            self.printer._raw(data)
        except Exception as e:
            raise PrintFailure('Failed to write to printer', str(e)) from e
        self.bytes_sent += len(data)

    def send(self, sequence: CommandSequence):
        """Replay a command sequence on the printer. Consumes the sequence."""
        self._require_open()
        commands = sequence.consume()
        try:
            for command in commands:
                self._apply(command)
        except PrintServiceError:
            raise
        except Exception as e:
            raise PrintFailure('Failed to print document', str(e)) from e

    def _apply(self, command: Command):
        printer = self.printer
        op, value = command.op, command.value

        if op == 'text':
            printer.text(value + '\n')
        elif op == 'raw':
            printer._raw(value)
        elif op == 'feed':
            printer.ln(value)
        elif op == 'line':
            printer.text('-' * value + '\n')
        elif op == 'qr':
            # Image QR works on printers without native QR support
            printer.qr(value, size=QR_SIZE, native=False, center=True)
        elif op == 'align':
            printer.set(align=value)
        elif op == 'style':
            printer.set(bold=value)
        elif op == 'size':
            if value:
                printer.set(double_width=True, double_height=True)
            else:
                printer.set(normal_textsize=True)
        elif op == 'cut':
            printer.cut()
        else:
            raise PrintFailure(f'Unknown printer command: {op}')
