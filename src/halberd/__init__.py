"""halberd package exports."""

from .core import (
    LINK_ATTRIBUTES,
    CyclicGraphError,
    HalError,
    HalParseError,
    HalValidationError,
    Link,
    LinkValidationError,
    Resource,
    link_to_json,
    parse_links,
)

__all__ = [
    "Link",
    "Resource",
    "LINK_ATTRIBUTES",
    "link_to_json",
    "parse_links",
    "HalError",
    "HalValidationError",
    "LinkValidationError",
    "HalParseError",
    "CyclicGraphError",
]
