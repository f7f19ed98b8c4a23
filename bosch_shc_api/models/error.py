from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils import model_to_api_dict


@dataclass
class ShcErrorResponse:
    """Body returned by the controller alongside a non-success status code."""
    type: Optional[str] = field(default=None, metadata={"shc_api_field": "@type"})
    error_code: Optional[str] = field(default=None, metadata={"shc_api_field": "errorCode"})
    status_code: Optional[int] = field(default=None, metadata={"shc_api_field": "statusCode"})

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if self.error_code is not None and not isinstance(self.error_code, str):
            raise ValueError(f"errorCode must be a string, got {self.error_code!r}")
        if self.status_code is not None and (
            isinstance(self.status_code, bool) or not isinstance(self.status_code, int)
        ):
            raise ValueError(f"statusCode must be an integer, got {self.status_code!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Converts the dataclass instance to a dictionary."""
        return model_to_api_dict(self)
