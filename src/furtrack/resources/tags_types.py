"""Tag types and the prefix classifier for Furtrack tag strings.

Furtrack encodes the kind of a tag in a short numeric prefix on its name:
``"1:Fluffy"`` is a character, ``"6Wolf"`` a species, and anything without
a known prefix is a general tag. Rules are tried in declaration order and
the first matching prefix wins.

Note
----
The species prefix ``"6"`` carries no colon, so every tag that starts with
``6`` is classified as a species. The service defines no other prefix that
collides with it today; a future ``"60:"`` style type would be swallowed by
the species rule.
"""

from __future__ import annotations

from typing import Iterable, Literal, Mapping, TypedDict, get_args

from typing_extensions import ReadOnly

# --- Tag Type Definitions --- #
TagType = Literal["character", "maker", "photographer", "species", "event", "general"]
TAG_TYPES: tuple[TagType, ...] = get_args(TagType)

CHARACTER: TagType = "character"
MAKER: TagType = "maker"
PHOTOGRAPHER: TagType = "photographer"
SPECIES: TagType = "species"
EVENT: TagType = "event"
GENERAL: TagType = "general"

# Order is significant: first match wins.
TAG_TYPE_PREFIXES: tuple[tuple[str, TagType], ...] = (
    ("1:", CHARACTER),
    ("2:", MAKER),
    ("3:", PHOTOGRAPHER),
    ("5:", EVENT),
    ("6", SPECIES),
)


class ParsedTag(TypedDict):
    """A tag string split into its type and bare value."""
    type: ReadOnly[TagType]
    value: ReadOnly[str]


class TagResponse(TypedDict, total=False):
    """Readonly tag info dict returned by ``/get/index/{tag}``."""
    success: ReadOnly[bool]
    tagmeta: ReadOnly[dict[str, object]]
    tagalias: ReadOnly[list[dict[str, object]]]


def parse_tag(tag_string: str) -> ParsedTag:
    """Classify a raw tag string by its prefix.

    Parameters
    ----------
    tag_string
        Tag name exactly as the service returns it. No trimming or case
        folding is applied.

    Returns
    -------
    ParsedTag
        ``{"type": ..., "value": ...}`` with the prefix stripped from the
        value, or the untouched string typed ``"general"``.
    """
    for prefix, tag_type in TAG_TYPE_PREFIXES:
        if tag_string.startswith(prefix):
            return {"type": tag_type, "value": tag_string[len(prefix):]}
    return {"type": GENERAL, "value": tag_string}


def get_tags_by_type(tags: Iterable[Mapping[str, object]], tag_type: TagType) -> list[str]:
    """Return the values of every tag of ``tag_type``, in input order.

    Records without a string ``tagName`` are skipped. Duplicates are kept.
    """
    values: list[str] = []
    for tag in tags:
        name = tag.get("tagName")
        if not isinstance(name, str):
            continue
        parsed = parse_tag(name)
        if parsed["type"] == tag_type:
            values.append(parsed["value"])
    return values


__all__ = [
    "CHARACTER",
    "EVENT",
    "GENERAL",
    "MAKER",
    "PHOTOGRAPHER",
    "SPECIES",
    "TAG_TYPES",
    "TAG_TYPE_PREFIXES",
    "ParsedTag",
    "TagResponse",
    "TagType",
    "get_tags_by_type",
    "parse_tag",
]
