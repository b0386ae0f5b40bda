from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.text import escape_xml, to_text
from .errors import HalValidationError, LinkValidationError

log = logging.getLogger("halberd.link")

LINK_ATTRIBUTES = (
    "href",
    "templated",
    "type",
    "deprecation",
    "name",
    "profile",
    "title",
    "hreflang",
)

LinkValue = Union[str, Mapping[str, Any]]


def is_link_attribute(attr: str) -> bool:
    return attr in LINK_ATTRIBUTES


class Link(BaseModel):
    """
    Link to another hypermedia resource.

    Link("next", "/orders?page=2")
    Link("find", {"href": "/orders{?id}", "templated": True})

    The mapping form keeps only recognized HAL attributes; anything else is
    dropped. The explicit rel argument always wins over a "rel" key in the
    mapping, since the resource indexes links by it.
    """

    rel: str = Field(min_length=1)
    href: str = Field(min_length=1)
    # Copied as given; only rel and href are checked
    templated: Optional[Any] = None
    type: Optional[Any] = None
    deprecation: Optional[Any] = None
    name: Optional[Any] = None
    profile: Optional[Any] = None
    title: Optional[Any] = None
    hreflang: Optional[Any] = None

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    def __init__(self, rel: str, value: Optional[LinkValue] = None) -> None:
        if not rel:
            raise LinkValidationError('Required <link> attribute "rel"')

        if isinstance(value, Mapping):
            if not value.get("href"):
                raise LinkValidationError('Required <link> attribute "href"')
            data = {
                attr: val
                for attr, val in value.items()
                if is_link_attribute(attr) and val is not None
            }
        else:
            # Scalar: its text is the href
            if not value:
                raise LinkValidationError('Required <link> attribute "href"')
            data = {"href": to_text(value)}

        try:
            super().__init__(rel=rel, **data)
        except ValidationError as exc:
            raise LinkValidationError(
                f"Invalid <link> attributes for rel {rel!r}: {exc}"
            ) from exc

    def attributes(self) -> Dict[str, Any]:
        """Set attributes in canonical order: rel, then the HAL attribute order."""
        fields_set = self.model_fields_set
        return {
            attr: getattr(self, attr)
            for attr in ("rel",) + LINK_ATTRIBUTES
            if attr in fields_set
        }

    def to_xml(self) -> str:
        """
        Self-closing <link> tag, one attribute per set field.
        Attributes follow the canonical order of attributes(), not the order of
        the input mapping, and a "rel" key from that mapping is not rendered:
        the rel attribute is always the explicit relation.
        """
        attrs = "".join(
            f' {attr}="{escape_xml(val)}"' for attr, val in self.attributes().items()
        )
        return f"<link{attrs} />"

    def to_json(self) -> Dict[str, Any]:
        """
        Plain dict restricted to HAL attributes.
        Falsy values are omitted, so templated=False does not survive the
        projection. rel is never included.
        """
        return {
            attr: val
            for attr, val in self.attributes().items()
            if is_link_attribute(attr) and val
        }


def link_to_json(link: Union[Link, List[Link]]) -> Union[Dict[str, Any], List[Dict]]:
    """Project a link, or element-wise a list of links, to plain dicts."""
    if isinstance(link, list):
        return [link_to_json(item) for item in link]
    return link.to_json()


def parse_links(raw: Mapping[str, Any]) -> Dict[str, Union[Link, List[Link]]]:
    """
    Rebuild a link table from a raw "_links" block.
    A list value stays a list of Links even with a single member.
    Example: {"self": {"href": "/x"}, "item": ["/a"]} ->
             {"self": Link(self, /x), "item": [Link(item, /a)]}
    """
    if not isinstance(raw, Mapping):
        raise HalValidationError(
            f'"_links" must be an object, got {type(raw).__name__}'
        )

    parsed: Dict[str, Union[Link, List[Link]]] = {}
    for rel, value in raw.items():
        if isinstance(value, list):
            parsed[rel] = [Link(rel, item) for item in value]
        else:
            parsed[rel] = Link(rel, value)

    log.debug("hal.links_parsed", extra={"count": len(parsed)})
    return parsed


__all__ = [
    "LINK_ATTRIBUTES",
    "Link",
    "LinkValue",
    "is_link_attribute",
    "link_to_json",
    "parse_links",
]
