from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils import model_to_api_dict


@dataclass
class ShcMessage:
    """
    Represents a status or event message (/smarthome/messages).

    The structure of messages is defined by the controller. Only the type
    discriminator and identifier are exposed as attributes; the rest of the
    payload is available through ``_extra_fields`` or ``to_dict()``.
    """
    id: Optional[str] = None
    type: Optional[str] = field(default=None, metadata={"shc_api_field": "@type"})

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a field of the message by its JSON name."""
        return self.to_dict().get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the dataclass instance to a dictionary."""
        return model_to_api_dict(self)
