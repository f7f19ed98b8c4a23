"""
Models for Bosch Smart Home devices.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import model_to_api_dict, require_identifier

STATUS_AVAILABLE = "AVAILABLE"
STATUS_UNAVAILABLE = "UNAVAILABLE"


@dataclass
class ShcDevice:
    """
    Represents a device paired with the Smart Home Controller.

    Devices are owned by the controller; the client only reads them. A device may
    be a child of another (root) device and exposes its functions through one or
    more device services.
    """
    # Identification
    id: str
    type: Optional[str] = field(default=None, metadata={"shc_api_field": "@type"})
    root_device_id: Optional[str] = field(default=None, metadata={"shc_api_field": "rootDeviceId"})
    device_service_ids: Optional[List[str]] = field(default=None, metadata={"shc_api_field": "deviceServiceIds"})

    # Hardware information
    manufacturer: Optional[str] = None
    device_model: Optional[str] = field(default=None, metadata={"shc_api_field": "deviceModel"})
    serial: Optional[str] = None
    profile: Optional[str] = None

    # Placement and state
    room_id: Optional[str] = field(default=None, metadata={"shc_api_field": "roomId"})
    name: Optional[str] = None
    status: Optional[str] = None

    # Store any extra fields that aren't explicitly defined
    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        require_identifier("ShcDevice", self.id)
        if self.device_service_ids is not None and not isinstance(self.device_service_ids, list):
            raise ValueError("deviceServiceIds must be a list")

    @property
    def is_available(self) -> bool:
        """Whether the controller currently reports the device as reachable."""
        return self.status == STATUS_AVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the ShcDevice to a dictionary.

        Returns:
            Dictionary keyed by the controller's JSON field names.
        """
        return model_to_api_dict(self)
