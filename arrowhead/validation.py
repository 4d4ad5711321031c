"""Checks that incoming messages and request URIs match what a service expects."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

log = logging.getLogger(__name__)

_SERVICE_FIELD = "ServiceName"


def _as_object(obj: Any) -> Any:
    """Return a parsed JSON value for text input, or the object unchanged."""
    if isinstance(obj, (str, bytes, bytearray)):
        try:
            return json.loads(obj)
        except ValueError:
            return None
    return obj


def correct_service(obj: Any, service_name: str) -> bool:
    """Return True if ``obj`` carries a ``ServiceName`` equal to ``service_name``.

    ``obj`` may be a mapping or a JSON document given as text.
    """
    message = _as_object(obj)
    if not isinstance(message, Mapping) or _SERVICE_FIELD not in message:
        log.error("Error: no ServiceName field")
        return False

    value = message[_SERVICE_FIELD]
    name = value if isinstance(value, str) else json.dumps(value)
    if name != service_name:
        log.error(
            "Error: ServiceName is not the expected! %s != %s", name, service_name
        )
        return False
    return True


def correct_uri(uri: str, expected: str) -> bool:
    """Return True if ``uri`` is exactly ``expected`` with a leading slash."""
    if "/" + expected != uri:
        log.error("Error: unexpected URI %s", uri)
        return False
    return True