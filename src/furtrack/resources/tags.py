"""Tag resource wrapper."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .base import Resource
from .tags_types import ParsedTag, TagResponse, TagType, get_tags_by_type, parse_tag


class Tags(Resource):
    """Tag lookups and tag string classification."""

    def get(self, tag: str, *, timeout: Optional[float] = None) -> TagResponse:
        """Fetch information about a tag.

        Parameters
        ----------
        tag
            Tag name, including its type prefix (``"1:fluffy"``).
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        TagResponse
            Tag info payload, returned verbatim.
        """
        return self._get("get", "index", tag, timeout=timeout)

    @staticmethod
    def parse(tag_string: str) -> ParsedTag:
        """Split a tag string into ``{"type", "value"}``."""
        return parse_tag(tag_string)

    @staticmethod
    def by_type(tags: Iterable[Mapping[str, object]], tag_type: TagType) -> list[str]:
        """Values of the tags in ``tags`` whose type is ``tag_type``."""
        return get_tags_by_type(tags, tag_type)
