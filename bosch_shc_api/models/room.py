from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils import model_to_api_dict, require_identifier


@dataclass
class ShcRoom:
    """Represents a room defined on the controller (/smarthome/rooms)."""
    id: str
    type: Optional[str] = field(default=None, metadata={"shc_api_field": "@type"})
    icon_id: Optional[str] = field(default=None, metadata={"shc_api_field": "iconId"})
    name: Optional[str] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        require_identifier("ShcRoom", self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the dataclass instance to a dictionary."""
        return model_to_api_dict(self)
