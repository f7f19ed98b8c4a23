"""
Data models for Bosch Smart Home Controller API responses.

Each model maps the controller's camelCase JSON fields onto snake_case
attributes through the ``shc_api_field`` field metadata. Fields returned by the
controller that a model does not define are kept in the ``_extra_fields``
dictionary, and ``to_dict()`` merges them back so no data is lost.
"""

from .device import ShcDevice, STATUS_AVAILABLE, STATUS_UNAVAILABLE
from .room import ShcRoom
from .scenario import ShcScenario
from .message import ShcMessage
from .error import ShcErrorResponse

__all__ = [
    "ShcDevice",
    "STATUS_AVAILABLE",
    "STATUS_UNAVAILABLE",
    "ShcRoom",
    "ShcScenario",
    "ShcMessage",
    "ShcErrorResponse",
]
