"""CLI demo that exercises the :class:`furtrack.Furtrack` helpers.

Run with the virtual environment activated::

    python examples/demo_furtrack.py [tag]

Set ``FURTRACK_API_KEY`` to send authenticated requests.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from furtrack import CHARACTER, SPECIES, Furtrack
from furtrack.tools import get_thumbnail_batch, iter_pages

logging.basicConfig(level=logging.INFO)


def main() -> None:
    tag = sys.argv[1] if len(sys.argv) > 1 else "1:fluffy"
    furtrack = Furtrack(api_key=os.environ.get("FURTRACK_API_KEY"))

    pprint(furtrack.tags.get(tag))

    posts = list(iter_pages(lambda page: furtrack.posts.by_tag(tag, page), max_pages=2))
    print(f"Fetched {len(posts)} posts tagged {tag}")
    if not posts:
        return

    first = furtrack.posts.get(posts[0]["postId"])
    tags = first.get("tags", [])
    print("Characters:", ", ".join(Furtrack.get_tags_by_type(tags, CHARACTER)) or "-")
    print("Species:", ", ".join(Furtrack.get_tags_by_type(tags, SPECIES)) or "-")

    thumbnails = get_thumbnail_batch(furtrack, [post["postId"] for post in posts[:5]])
    for post_id, url in thumbnails.items():
        print(f"{post_id}: {url}")


if __name__ == "__main__":
    main()
