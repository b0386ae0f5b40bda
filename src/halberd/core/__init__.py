"""Core HAL model: links, resources and their JSON/XML renderings."""

from .config import RenderConfig, load_render_config, parse_indent
from .errors import (
    CyclicGraphError,
    HalError,
    HalParseError,
    HalValidationError,
    LinkValidationError,
)
from .link import LINK_ATTRIBUTES, Link, is_link_attribute, link_to_json, parse_links
from .resource import Resource

__all__ = [
    # Model
    "Link",
    "Resource",
    "LINK_ATTRIBUTES",
    # Helpers
    "is_link_attribute",
    "link_to_json",
    "parse_links",
    # Exceptions
    "HalError",
    "HalValidationError",
    "LinkValidationError",
    "HalParseError",
    "CyclicGraphError",
    # Config helpers
    "RenderConfig",
    "load_render_config",
    "parse_indent",
]
