"""
Bosch Smart Home Controller API client.

This package provides a Python interface to the local REST API of a Bosch
Smart Home Controller, giving access to devices, rooms, scenarios and messages.
"""

__version__ = "0.1.0"

from .api_client import BoschShcController
from .base import BoschShcApi
from .models import (
    ShcDevice,
    ShcRoom,
    ShcScenario,
    ShcMessage,
    ShcErrorResponse,
    STATUS_AVAILABLE,
    STATUS_UNAVAILABLE,
)
from .exceptions import (
    ShcControllerError,
    ShcTransportError,
    ShcAPIError,
    ShcDataError,
    ShcMalformedErrorResponse,
)

__all__ = [
    "BoschShcController",
    "BoschShcApi",
    "ShcDevice",
    "ShcRoom",
    "ShcScenario",
    "ShcMessage",
    "ShcErrorResponse",
    "STATUS_AVAILABLE",
    "STATUS_UNAVAILABLE",
    "ShcControllerError",
    "ShcTransportError",
    "ShcAPIError",
    "ShcDataError",
    "ShcMalformedErrorResponse",
]
