from __future__ import annotations

from typing import Any

_TYPE_CHECKS = {
    "string": lambda value: isinstance(value, str),
    "integer": lambda value: isinstance(value, int) and not isinstance(value, bool),
    "number": lambda value: isinstance(value, (int, float)) and not isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
    "object": lambda value: isinstance(value, dict),
    "array": lambda value: isinstance(value, list),
}


def validate_against_schema(schema: dict[str, Any], params: Any) -> str | None:
    """Check ``params`` against a flat JSON-schema-like object description.

    Returns the first violation as a message naming the field, or ``None``.
    Only ``required`` and the ``type`` of top-level ``properties`` are checked;
    unknown keys are allowed.
    """
    if not isinstance(params, dict):
        return "params must be object"

    required = schema.get("required")
    required_fields = required if isinstance(required, list) else []
    for field in required_fields:
        if not isinstance(field, str):
            continue
        if params.get(field) is None:
            return f"params must have required property '{field}'"

    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return None

    for key, value in params.items():
        prop = properties.get(key)
        if not isinstance(prop, dict):
            continue
        if value is None and key not in required_fields:
            continue
        expected = prop.get("type")
        check = _TYPE_CHECKS.get(expected) if isinstance(expected, str) else None
        if check is not None and not check(value):
            return f"params/{key} must be {expected}"
    return None
