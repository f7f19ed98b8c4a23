"""
Utility functions for mapping controller JSON onto the model dataclasses.
"""

import dataclasses
import inspect
from typing import Any, Dict, List, Tuple, Type, TypeVar

from .logging import get_logger, log_extra_fields
from .exceptions import ShcDataError

logger = get_logger(__name__)

API_FIELD_KEY = "shc_api_field"

T = TypeVar("T")


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like '@type' or 'rootDeviceId') and Python attribute
    names (like 'type' or 'root_device_id').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping controller API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if API_FIELD_KEY in field.metadata:
            field_mapping[field.metadata[API_FIELD_KEY]] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of extra fields that don't map to the model
    """
    signature = inspect.signature(model_class.__init__)
    valid_params = set(signature.parameters.keys())
    valid_params.discard("self")
    valid_params.discard("_extra_fields")

    field_map = get_api_field_mapping(model_class)
    mapped_attrs = set(field_map.values())

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        if api_key in field_map and field_map[api_key] in valid_params:
            model_fields[field_map[api_key]] = value
        elif api_key in valid_params and api_key not in mapped_attrs:
            model_fields[api_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def model_to_api_dict(obj: Any) -> Dict[str, Any]:
    """
    Convert a model dataclass back to a dictionary keyed by API field names.

    Attributes left as None are omitted, and extra fields are merged back in,
    so the result mirrors the JSON object the model was decoded from.

    Args:
        obj: A model dataclass instance

    Returns:
        Dictionary representation using the controller's field names
    """
    result = {}
    for field in dataclasses.fields(obj):
        if field.name == "_extra_fields":
            continue
        value = getattr(obj, field.name)
        if value is None:
            continue
        result[field.metadata.get(API_FIELD_KEY, field.name)] = value

    result.update(getattr(obj, "_extra_fields", {}) or {})
    return result


def decode_record(data: Any, model_class: Type[T]) -> T:
    """
    Decode one JSON object into a model instance.

    Args:
        data: The parsed JSON value
        model_class: The dataclass model to build

    Returns:
        The model instance, with unknown fields kept in ``_extra_fields``

    Raises:
        ShcDataError: If the value is not an object or does not fit the model.
    """
    if not isinstance(data, dict):
        raise ShcDataError(
            f"Expected a JSON object for {model_class.__name__}, got {type(data).__name__}"
        )

    model_fields, extra_fields = map_api_data_to_model(data, model_class)
    try:
        record = model_class(**model_fields)
    except (TypeError, ValueError) as e:
        raise ShcDataError(
            f"Error creating {model_class.__name__} model from data: {data}. Error: {e}"
        ) from e

    record._extra_fields = extra_fields
    log_extra_fields(logger, model_class.__name__, model_fields.get("id"), extra_fields)
    return record


def decode_record_list(data: Any, model_class: Type[T]) -> List[T]:
    """
    Decode a JSON array into a list of model instances, preserving order.

    Raises:
        ShcDataError: If the value is not an array or any element fails to decode.
    """
    if not isinstance(data, list):
        raise ShcDataError(
            f"Expected a JSON array of {model_class.__name__}, got {type(data).__name__}"
        )
    return [decode_record(item, model_class) for item in data]


def require_identifier(model_name: str, value: Any) -> None:
    """Raise ValueError unless ``value`` is a non-empty string."""
    if not isinstance(value, str) or not value:
        raise ValueError(f"{model_name} id must be a non-empty string, got {value!r}")
