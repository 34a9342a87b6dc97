"""
Print Service Errors
====================

Every error carries the HTTP status the API answers with.
"""


class PrintServiceError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        data = {'success': False, 'error': self.message}
        if self.details:
            data['details'] = self.details
        return data


class InvalidRequest(PrintServiceError):
    """Job payload is missing required fields or holds unusable values."""

    status_code = 400


class DeviceNotFound(PrintServiceError):
    """No USB printer is attached."""


class DeviceOpenFailed(PrintServiceError):
    """A printer is attached but could not be claimed (busy or no permission)."""


class PrintFailure(PrintServiceError):
    """Composition or write failed after the device was opened."""
