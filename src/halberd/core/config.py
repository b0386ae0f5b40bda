from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

XML_INDENT_ENV = "HALBERD_XML_INDENT"
JSON_INDENT_ENV = "HALBERD_JSON_INDENT"
LOG_LEVEL_ENV = "HALBERD_LOG_LEVEL"


@dataclass(frozen=True)
class RenderConfig:
    """Rendering defaults for the CLI and other callers that read the environment."""

    xml_indent: str = ""
    json_indent: Optional[str] = None
    log_level: str = "INFO"


def parse_indent(raw: Optional[str]) -> Optional[str]:
    """
    Turn an indent setting into the indent unit.
    Examples: '2' -> '  ', '\\t' (literal backslash-t) -> tab, '' -> None
    """
    if raw is None:
        return None
    if raw.strip().isdigit():
        return " " * int(raw.strip())
    unit = raw.replace("\\t", "\t").replace("\\n", "\n")
    return unit or None


def load_render_config(*, use_dotenv: bool = True) -> RenderConfig:
    """Load rendering defaults from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    log_level = os.getenv(LOG_LEVEL_ENV, "").strip() or "INFO"
    return RenderConfig(
        xml_indent=parse_indent(os.getenv(XML_INDENT_ENV)) or "",
        json_indent=parse_indent(os.getenv(JSON_INDENT_ENV)),
        log_level=log_level.upper(),
    )


__all__ = [
    "RenderConfig",
    "load_render_config",
    "parse_indent",
    "XML_INDENT_ENV",
    "JSON_INDENT_ENV",
    "LOG_LEVEL_ENV",
]
