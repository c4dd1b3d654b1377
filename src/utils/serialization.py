"""Helpers converting domain dataclasses into JSON-compatible values."""

from dataclasses import fields, is_dataclass
from enum import Enum
import json


def to_primitive(value):
    """Recursively convert dataclasses, enums and tuples to plain values.

    Args:
        value: Domain object, container or scalar.

    Returns:
        Dicts, lists, strings, numbers, booleans or None.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: to_primitive(getattr(value, item.name))
            for item in fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(key): to_primitive(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_primitive(item) for item in value]
    return value


def to_json(value, indent: int | None = 2) -> str:
    """Serialize a domain object as JSON text."""
    return json.dumps(to_primitive(value), indent=indent, ensure_ascii=False)


__all__ = ["to_primitive", "to_json"]
