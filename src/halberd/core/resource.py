from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

from ..utils.text import escape_xml, singularize
from .errors import CyclicGraphError, HalParseError, HalValidationError
from .link import Link, LinkValue, link_to_json, parse_links

log = logging.getLogger("halberd.resource")

LINKS_KEY = "_links"
EMBEDDED_KEY = "_embedded"
RESERVED_KEYS = (LINKS_KEY, EMBEDDED_KEY)

LinkGroup = Union[Link, List[Link]]

_MISSING: Any = object()


def _link_group_plus(group: Optional[LinkGroup], new_link: Link) -> LinkGroup:
    # A new list every time; callers may hold on to the previous one
    if group is None:
        return new_link
    if isinstance(group, list):
        return [*group, new_link]
    return [group, new_link]


def _as_list(group: Optional[LinkGroup]) -> List[Link]:
    if group is None:
        return []
    if isinstance(group, list):
        return list(group)
    return [group]


class Resource:
    """
    A hypertext resource: ordered plain properties, a link table keyed by
    relation and an embedded table keyed by relation.

    Resource({"total": 30}, "/orders/123")
    Resource({"href": "/orders/123", "total": 30})   # same self link

    Passing an existing Resource returns that very instance unchanged, so
    Resource(x) can be used to wrap raw mappings and resources alike.

    Notes:
    - "_links" in the input is parsed into typed Links.
    - "_embedded" in the input is NOT parsed; it is kept as a raw property.
      to_json() emits it only while nothing was added with embed(); once the
      embedded table has entries the raw value is left out of the output.
    - Embedded relations are always lists, even with one member. Strict HAL
      would collapse those to a bare object; this model does not.
    """

    def __new__(cls, properties: Any = None, uri: Any = None):
        if isinstance(properties, Resource):
            return properties
        return super().__new__(cls)

    def __init__(
        self,
        properties: Optional[Mapping[str, Any]] = None,
        uri: Optional[LinkValue] = None,
    ) -> None:
        if properties is self:
            return
        if properties is not None and not isinstance(properties, Mapping):
            raise HalValidationError(
                f"Resource properties must be a mapping, "
                f"got {type(properties).__name__}"
            )

        # Tables exist before any property is copied
        self.link_table: Dict[str, LinkGroup] = {}
        self.embedded: Dict[str, List[Resource]] = {}
        self.properties: Dict[str, Any] = {}

        for key, value in (properties or {}).items():
            if key == LINKS_KEY:
                self.link_table = parse_links(value)
            else:
                self.properties[key] = value

        # uri or the "href" property becomes the self link
        href = self.properties.get("href")
        uri = uri or href
        if "href" in self.properties and uri == href:
            del self.properties["href"]

        if uri:
            self.link(Link("self", uri))

    @classmethod
    def loads(
        cls, text: Union[str, bytes], uri: Optional[LinkValue] = None
    ) -> "Resource":
        """Build a resource from a HAL+JSON document."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            snippet = text[:200]
            raise HalParseError(f"Expected HAL+JSON, got: {snippet!r}") from exc

        if not isinstance(data, dict):
            raise HalParseError(
                f"Expected top-level JSON object, got {type(data).__name__}"
            )
        return cls(data, uri)

    # --- Property bag ----------------------------------------------------- #

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    # --- Links ------------------------------------------------------------ #

    def link(self, link: Union[Link, str], value: Any = _MISSING):
        """
        1. link(Link) attaches a link and returns the resource
        2. link(rel, href_or_attrs) builds a Link, attaches it, returns the resource
        3. link(rel) returns the first link with that rel, or None
        """
        if value is not _MISSING:
            link = Link(link, value)
        if isinstance(link, str):
            found = self.links(link)
            return found[0] if found else None
        if not isinstance(link, Link):
            raise HalValidationError(
                f"Expected a Link or a relation name, got {type(link).__name__}"
            )

        self.link_table[link.rel] = _link_group_plus(
            self.link_table.get(link.rel), link
        )
        log.debug("hal.link_attached", extra={"rel": link.rel})
        return self

    def links(self, rel: Union[str, Sequence[str], None] = None) -> List[Link]:
        """
        All links (no argument), the links of one relation (str) or of several
        relations concatenated in the given order (list of str).
        Always a list.
        """
        if isinstance(rel, str):
            return _as_list(self.link_table.get(rel))
        if rel is not None:
            found: List[Link] = []
            for name in rel:
                found.extend(self.links(name))
            return found

        found = []
        for group in self.link_table.values():
            found.extend(_as_list(group))
        return found

    # --- Embedded --------------------------------------------------------- #

    def embed(self, rel: str, resource: Any) -> "Resource":
        """
        Embed a resource or a list of resources under rel (should be plural).
        Raw mappings are wrapped in Resource; repeated calls accumulate.
        """
        members = resource if isinstance(resource, (list, tuple)) else [resource]
        # Wrap everything first so a bad member leaves the table untouched
        wrapped = [Resource(member) for member in members]

        current = self.embedded.get(rel)
        if current is None:
            current = self.embedded[rel] = []
        elif not isinstance(current, list):
            current = self.embedded[rel] = [current]
        current.extend(wrapped)

        log.debug("hal.embedded", extra={"rel": rel, "count": len(members)})
        return self

    def embedded_resources(self, rel: str) -> List["Resource"]:
        return list(self.embedded.get(rel) or [])

    # --- JSON ------------------------------------------------------------- #

    def to_json(self) -> Dict[str, Any]:
        """
        Plain dict ready for json.dumps: "_links", then "_embedded", then the
        properties in insertion order. Empty tables are omitted.
        """
        return _resource_to_json(self, rel="", ancestors=())

    def dumps(self, indent: Union[str, int, None] = None) -> str:
        if indent is None:
            return json.dumps(self.to_json(), separators=(",", ":"))
        return json.dumps(self.to_json(), indent=indent)

    def __str__(self) -> str:
        return self.dumps("\t")

    def __repr__(self) -> str:
        self_link = self.link("self")
        href = self_link.href if self_link else None
        return (
            f"Resource(href={href!r}, properties={list(self.properties)!r}, "
            f"links={list(self.link_table)!r}, embedded={list(self.embedded)!r})"
        )

    # --- XML -------------------------------------------------------------- #

    def to_xml(self, indent: Optional[str] = None) -> str:
        """
        XML rendering. Without an indent unit the output is a single line.
        """
        return _resource_to_xml(self, None, "", indent or "", ancestors=())


def _check_cycle(resource: Resource, rel: str, ancestors: tuple) -> tuple:
    if any(resource is seen for seen in ancestors):
        raise CyclicGraphError(rel=rel, depth=len(ancestors))
    return ancestors + (resource,)


def _resource_to_json(
    resource: Resource, *, rel: str, ancestors: tuple
) -> Dict[str, Any]:
    ancestors = _check_cycle(resource, rel, ancestors)
    result: Dict[str, Any] = {}

    if resource.link_table:
        links: Dict[str, Any] = {}
        for name, group in resource.link_table.items():
            projected = link_to_json(group)
            # rel is implied by the key
            for entry in projected if isinstance(projected, list) else [projected]:
                entry.pop("rel", None)
            links[name] = projected
        result[LINKS_KEY] = links

    if resource.embedded:
        result[EMBEDDED_KEY] = {
            name: [
                _resource_to_json(member, rel=name, ancestors=ancestors)
                for member in members
            ]
            for name, members in resource.embedded.items()
        }
    elif EMBEDDED_KEY in resource.properties:
        result[EMBEDDED_KEY] = resource.properties[EMBEDDED_KEY]

    for key, value in resource.properties.items():
        if key not in RESERVED_KEYS:
            result[key] = value

    return result


def _resource_to_xml(
    resource: Resource,
    rel: Optional[str],
    current_indent: str,
    next_indent: str,
    *,
    ancestors: tuple,
) -> str:
    ancestors = _check_cycle(resource, rel or "", ancestors)
    # No line feeds unless indentation is asked
    lf = "\n" if (current_indent or next_indent) else ""
    child_indent = current_indent + next_indent

    href = resource.get("href")
    self_link = resource.link("self")

    xml = current_indent + "<resource"
    if rel:
        xml += f' rel="{escape_xml(rel)}"'
    if href or self_link:
        xml += f' href="{escape_xml(href or self_link.href)}"'
    if resource.get("name"):
        xml += f' name="{escape_xml(resource["name"])}"'
    xml += ">" + lf

    for name, group in resource.link_table.items():
        # self is already the href attribute
        if not href and name == "self":
            continue
        for link in _as_list(group):
            xml += child_indent + link.to_xml() + lf

    for name, members in resource.embedded.items():
        singular = singularize(name)
        for member in members:
            xml += (
                _resource_to_xml(
                    member,
                    singular,
                    child_indent,
                    child_indent + next_indent,
                    ancestors=ancestors,
                )
                + lf
            )

    for key, value in resource.properties.items():
        if key in RESERVED_KEYS:
            continue
        xml += f"{child_indent}<{key}>{escape_xml(value)}</{key}>{lf}"

    xml += current_indent + "</resource>"
    return xml


__all__ = ["Resource", "LinkGroup", "LINKS_KEY", "EMBEDDED_KEY"]
