"""
Base Handler
============

Abstract base class for document handlers. A handler turns a request
payload into printer commands and sends them through the USB gateway.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from ..device import UsbGateway


class BaseHandler(ABC):
    """Abstract base class for document handlers."""

    def __init__(self, gateway_factory: Callable[[], UsbGateway] = UsbGateway):
        """Initialize handler with the factory used to reach the printer."""
        self.gateway_factory = gateway_factory

    @abstractmethod
    def parse(self, data: Any) -> Any:
        """
        Convert request JSON into the document model.

        Raises:
            InvalidRequest: payload cannot be printed at all
        """
        pass

    @abstractmethod
    def build(self, document: Any) -> Any:
        """Compose printer commands for the document."""
        pass

    @abstractmethod
    def send(self, gateway: UsbGateway, job: Any) -> Dict[str, Any]:
        """
        Stream the composed job to an open gateway.

        Returns:
            Dict with success status and details
        """
        pass

    def print_job(self, data: Any) -> Dict[str, Any]:
        """Parse, compose and print. The device is opened only once composing succeeded."""
        document = self.parse(data)
        job = self.build(document)
        with self.gateway_factory() as gateway:
            return self.send(gateway, job)
