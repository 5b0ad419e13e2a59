"""Resource module exports."""

from .albums import Albums
from .posts import Posts
from .tags import Tags
from .users import Users

__all__ = [
    "Albums",
    "Posts",
    "Tags",
    "Users",
]
