"""Public package surface for the furtrack Python client."""

from .client import DEFAULT_BASE_URL, DEFAULT_HEADERS, Furtrack
from .exceptions import (
    FurtrackDecodeError,
    FurtrackError,
    FurtrackHTTPError,
    FurtrackTransportError,
)
from .resources.posts_types import THUMBNAIL_BASE_URL, build_thumbnail_url
from .resources.tags_types import (
    CHARACTER,
    EVENT,
    GENERAL,
    MAKER,
    PHOTOGRAPHER,
    SPECIES,
    TAG_TYPE_PREFIXES,
    TAG_TYPES,
    ParsedTag,
    TagType,
    get_tags_by_type,
    parse_tag,
)

__all__ = [
    "CHARACTER",
    "DEFAULT_BASE_URL",
    "DEFAULT_HEADERS",
    "EVENT",
    "GENERAL",
    "MAKER",
    "PHOTOGRAPHER",
    "SPECIES",
    "TAG_TYPES",
    "TAG_TYPE_PREFIXES",
    "THUMBNAIL_BASE_URL",
    "Furtrack",
    "FurtrackDecodeError",
    "FurtrackError",
    "FurtrackHTTPError",
    "FurtrackTransportError",
    "ParsedTag",
    "TagType",
    "build_thumbnail_url",
    "get_tags_by_type",
    "parse_tag",
]
