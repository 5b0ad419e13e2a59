import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from furtrack.resources.posts_types import (  # noqa: E402
    THUMBNAIL_BASE_URL,
    build_thumbnail_url,
)


class BuildThumbnailUrlTests(unittest.TestCase):
    def test_complete_post(self):
        post = {"submitUserId": 42, "id": 99, "metaFingerprint": "abc", "metaFiletype": "jpg"}
        expected = "https://orca2.furtrack.com/gallery/42/99-abc.jpg"
        for mode in ("off", "warn", "strict"):
            with self.subTest(mode=mode):
                self.assertEqual(build_thumbnail_url(post, validation=mode), expected)

    def test_base_url(self):
        self.assertEqual(THUMBNAIL_BASE_URL, "https://orca2.furtrack.com/gallery")

    def test_string_fields(self):
        post = {"submitUserId": "7", "id": "8", "metaFingerprint": "f", "metaFiletype": "png"}
        self.assertEqual(build_thumbnail_url(post), "https://orca2.furtrack.com/gallery/7/8-f.png")

    def test_missing_fields_warn_logs(self):
        with self.assertLogs("furtrack.resources.posts_types", level="WARNING") as logs:
            self.assertIsNone(build_thumbnail_url({"id": 1, "submitUserId": 2}, validation="warn"))
        self.assertIn("metaFingerprint, metaFiletype", logs.output[0])

    def test_missing_fields_strict_names_fields(self):
        with self.assertRaises(ValueError) as ctx:
            build_thumbnail_url({"id": 1}, validation="strict")
        self.assertIn("submitUserId", str(ctx.exception))

    def test_missing_fields_off_keeps_placeholders(self):
        post = {"submitUserId": 42, "id": 99, "metaFiletype": "jpg"}
        self.assertEqual(
            build_thumbnail_url(post, validation="off"),
            "https://orca2.furtrack.com/gallery/42/99-undefined.jpg",
        )

    def test_none_field_counts_as_missing(self):
        post = {"submitUserId": 42, "id": 99, "metaFingerprint": None, "metaFiletype": "jpg"}
        self.assertIsNone(build_thumbnail_url(post, validation="warn"))
        with self.assertRaises(ValueError):
            build_thumbnail_url(post, validation="strict")

    def test_off_renders_null_and_absent_fields_differently(self):
        post = {"submitUserId": 42, "id": 99, "metaFingerprint": None}
        self.assertEqual(
            build_thumbnail_url(post),
            "https://orca2.furtrack.com/gallery/42/99-null.undefined",
        )

    def test_nested_post_payload(self):
        payload = {
            "success": True,
            "post": {"submitUserId": 1, "id": 2, "metaFingerprint": "x", "metaFiletype": "gif"},
        }
        self.assertEqual(build_thumbnail_url(payload), "https://orca2.furtrack.com/gallery/1/2-x.gif")
