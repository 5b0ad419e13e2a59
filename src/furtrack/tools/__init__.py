"""Helper tools built on top of the resource methods."""

from .posts import get_thumbnail_batch, iter_pages

__all__ = ["get_thumbnail_batch", "iter_pages"]
