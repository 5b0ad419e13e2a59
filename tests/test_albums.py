import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from furtrack.resources.albums import ALBUM_LIKES, ALBUM_UPLOADS, Albums  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class DummyClient:
    def __init__(self, response=None) -> None:
        self._logger = logging.getLogger("furtrack.tests")
        self.response = {} if response is None else response
        self.calls: list[tuple[str, object]] = []

    def request(self, path, timeout=None):
        self.calls.append((path, timeout))
        return self.response


class AlbumsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = DummyClient({"success": True, "posts": [{"id": 1}]})
        self.albums = Albums(self.client)  # type: ignore[arg-type]

    def test_get_first_page(self):
        self.assertEqual(self.albums.get("user", "albumid", 0), self.client.response)
        self.assertEqual(self.client.calls[-1], ("/view/album/user/albumid", None))

    def test_get_default_page(self):
        self.albums.get("user", "albumid")
        self.assertEqual(self.client.calls[-1][0], "/view/album/user/albumid")

    def test_get_with_page(self):
        self.albums.get("user", 12, 3)
        self.assertEqual(self.client.calls[-1][0], "/view/album/user/12/3")

    def test_get_encodes_segments(self):
        self.albums.get("a b", "x/y")
        self.assertEqual(self.client.calls[-1][0], "/view/album/a%20b/x%2Fy")

    def test_reserved_album_ids(self):
        self.assertEqual(ALBUM_UPLOADS, "3")
        self.assertEqual(ALBUM_LIKES, "o")
