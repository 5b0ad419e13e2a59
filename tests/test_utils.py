import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from furtrack.utils import build_path, encode_segment, page_suffix  # noqa: E402


class UtilsTests(unittest.TestCase):
    def test_encode_segment_reserved_characters(self):
        self.assertEqual(encode_segment("1:fluffy"), "1%3Afluffy")
        self.assertEqual(encode_segment("a/b?c#d&e"), "a%2Fb%3Fc%23d%26e")
        self.assertEqual(encode_segment("with space"), "with%20space")

    def test_encode_segment_keeps_unreserved_marks(self):
        self.assertEqual(encode_segment("a-b_c.d~e!f*g'h(i)"), "a-b_c.d~e!f*g'h(i)")

    def test_encode_segment_non_ascii(self):
        self.assertEqual(encode_segment("é"), "%C3%A9")

    def test_encode_segment_stringifies(self):
        self.assertEqual(encode_segment(42), "42")

    def test_page_suffix(self):
        self.assertEqual(page_suffix(0), "")
        self.assertEqual(page_suffix(-1), "")
        self.assertEqual(page_suffix(2), "/2")

    def test_build_path(self):
        self.assertEqual(build_path("get", "tag", "foo"), "/get/tag/foo")
        self.assertEqual(build_path("get", "tag", "foo", page=0), "/get/tag/foo")
        self.assertEqual(build_path("view", "album", "user", "3", page=2), "/view/album/user/3/2")
