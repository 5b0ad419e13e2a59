"""Post helper tools."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable, Iterator, Optional, TYPE_CHECKING

from tqdm import tqdm

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Furtrack

_logger = logging.getLogger(__name__)


def iter_pages(
    fetch_page: Callable[[int], list[dict[str, Any]]],
    *,
    start: int = 0,
    max_pages: Optional[int] = None,
) -> Iterator[dict[str, Any]]:
    """Yield posts page by page until a page comes back empty.

    Parameters
    ----------
    fetch_page
        Callable taking a page number, e.g.
        ``lambda page: client.posts.by_tag("1:fluffy", page)``.
    start
        First page to request.
    max_pages
        Upper bound on the number of pages requested.
    """
    page = start
    fetched = 0
    while max_pages is None or fetched < max_pages:
        posts = fetch_page(page)
        fetched += 1
        if not posts:
            return
        yield from posts
        page += 1


def get_thumbnail_batch(
    client: "Furtrack",
    post_ids: Iterable[int | str],
    *,
    max_workers: int = 4,
    timeout: Optional[float] = None,
) -> dict[int | str, str]:
    """Resolve thumbnail URLs for many posts, optionally in parallel.

    Posts that fail to fetch or lack thumbnail fields are logged and left
    out. The result keeps the order of ``post_ids``.
    """
    post_ids = list(post_ids)
    if not post_ids:
        return {}

    found: dict[int | str, str] = {}

    def _resolve(post_id: int | str) -> str | None:
        return client.posts.thumbnail(post_id, validation="warn", timeout=timeout)

    if max_workers == 0:
        for post_id in tqdm(post_ids, desc="Fetching thumbnails", unit=" posts"):
            try:
                url = _resolve(post_id)
            except Exception as exc:  # noqa: BLE001 - skip posts that fail
                _logger.warning("Post %s failed during fetch: %s", post_id, exc)
                continue
            if url:
                found[post_id] = url
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(_resolve, post_id): post_id for post_id in post_ids}
            with tqdm(total=len(futures), desc="Fetching thumbnails (parallel)", unit=" posts") as pbar:
                for future in as_completed(futures):
                    post_id = futures[future]
                    try:
                        url = future.result()
                        if url:
                            found[post_id] = url
                    except Exception as exc:  # noqa: BLE001 - handle worker failures gracefully
                        _logger.warning("Post %s failed during fetch: %s", post_id, exc)
                    finally:
                        pbar.update(1)

    return {post_id: found[post_id] for post_id in post_ids if post_id in found}
