"""
Logger factory and debug helpers shared by the client modules.

The package never installs handlers; applications configure the
``bosch_shc_api`` logger themselves.
"""

import logging
import json
from typing import Any, Dict, Optional

ROOT_LOGGER = "bosch_shc_api"
TRUNCATED = "... [truncated]"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger below the ``bosch_shc_api`` namespace.

    Args:
        name: Module name such as ``__name__``. Names outside the package are
              nested under it; None returns the package logger itself.
    """
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def _shorten(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + TRUNCATED


def log_extra_fields(
    logger: logging.Logger,
    model_name: str,
    record_id: Optional[str],
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """Log, at debug level, the JSON fields a model keeps in ``_extra_fields``."""
    if not extra_fields or not logger.isEnabledFor(logging.DEBUG):
        return

    shown = {key: _shorten(json.dumps(value), max_length) for key, value in extra_fields.items()}
    logger.debug(f"{model_name} {record_id} carries undeclared fields: {shown}")


def log_api_response(
    logger: logging.Logger,
    url: str,
    body: bytes,
    status_code: int,
    max_length: Optional[int] = 500,
):
    """
    Log a raw response body at debug level.

    Args:
        logger: Logger to use
        url: The URL that was requested.
        body: Response body as received.
        status_code: HTTP status code of the response.
        max_length: Characters of the body to keep; None logs it whole.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    text = body.decode("utf-8", errors="replace")
    if max_length is not None:
        text = _shorten(text, max_length)
    logger.debug(f"Response from {url} (Status: {status_code}): {text}")
