"""
Typed field accessors for node configs.

A missing field (or JSON ``null``) reads as ``None``. A field that is
present with the wrong JSON type raises ``NodeFieldError``, which the
interpreter reports as an inline error node.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sdui.core.errors import NodeFieldError

NodeConfig = Mapping[str, Any]


def get_str(config: NodeConfig, key: str) -> str | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise NodeFieldError(key, "a string", value)
    return value


def get_number(config: NodeConfig, key: str) -> float | None:
    """Read a numeric field as float. Booleans are not numbers."""
    value = config.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NodeFieldError(key, "a number", value)
    return float(value)


def get_bool(config: NodeConfig, key: str) -> bool | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise NodeFieldError(key, "a boolean", value)
    return value


def get_list(config: NodeConfig, key: str) -> list[Any] | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise NodeFieldError(key, "an array", value)
    return list(value)


def get_mapping(config: NodeConfig, key: str) -> NodeConfig | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise NodeFieldError(key, "an object", value)
    return value
