from __future__ import annotations

import json
from typing import Any


def escape_xml(value: Any) -> str:
    """
    Encode double quotes and tag enclosures.
    Ampersands are left untouched so URI templates and query strings render as-is.
    """
    return (
        to_text(value).replace('"', "&quot;").replace("<", "&lt;").replace(">", "&gt;")
    )


def to_text(value: Any) -> str:
    """
    Coerce a scalar the way a JSON document would spell it.
    Example: True -> 'true', 30.0 -> '30', None -> 'null'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        # Arrays join their members with commas
        return ",".join("" if v is None else to_text(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def singularize(rel: str) -> str:
    """Naive singular form: strip one trailing 's' ('orders' -> 'order')."""
    return rel[:-1] if rel.endswith("s") else rel


__all__ = ["escape_xml", "to_text", "singularize"]
