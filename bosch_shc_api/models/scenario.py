from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import model_to_api_dict, require_identifier


@dataclass
class ShcScenario:
    """
    Represents a scenario (/smarthome/scenarios).

    ``actions`` is kept exactly as the controller sends it; the individual
    action descriptors are not interpreted.
    """
    id: str
    type: Optional[str] = field(default=None, metadata={"shc_api_field": "@type"})
    icon_id: Optional[str] = field(default=None, metadata={"shc_api_field": "iconId"})
    name: Optional[str] = None
    actions: Optional[List[Any]] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        require_identifier("ShcScenario", self.id)
        if self.actions is not None and not isinstance(self.actions, list):
            raise ValueError("actions must be a list")

    def to_dict(self) -> Dict[str, Any]:
        """Converts the dataclass instance to a dictionary."""
        return model_to_api_dict(self)
