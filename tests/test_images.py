import unittest

from fastapi import HTTPException

from portfolio.core.config import settings
from portfolio.utils.images import detect_image_format, validate_image
from tests.support import GIF_BYTES, JPEG_BYTES, PNG_BYTES, WEBP_BYTES, b64


class DetectImageFormatTests(unittest.TestCase):
    def test_known_signatures(self):
        self.assertEqual(detect_image_format(PNG_BYTES), "png")
        self.assertEqual(detect_image_format(JPEG_BYTES), "jpeg")
        self.assertEqual(detect_image_format(GIF_BYTES), "gif")
        self.assertEqual(detect_image_format(WEBP_BYTES), "webp")

    def test_webp_needs_riff_container(self):
        self.assertIsNone(detect_image_format(b"XXXX\x00\x00\x00\x00WEBPVP8 "))

    def test_unknown_and_empty(self):
        self.assertIsNone(detect_image_format(b"%PDF-1.7"))
        self.assertIsNone(detect_image_format(b""))


class ValidateImageTests(unittest.TestCase):
    def assertRejected(self, payload, image_type, message):
        with self.assertRaises(HTTPException) as ctx:
            validate_image(payload, image_type)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn(message, ctx.exception.detail)

    def test_accepts_each_allowed_type(self):
        cases = [
            (PNG_BYTES, "image/png"),
            (JPEG_BYTES, "image/jpeg"),
            (JPEG_BYTES, "image/jpg"),
            (GIF_BYTES, "image/gif"),
            (WEBP_BYTES, "image/webp"),
        ]
        for data, image_type in cases:
            with self.subTest(image_type=image_type):
                self.assertEqual(validate_image(b64(data), image_type), data)

    def test_declared_type_is_not_cross_checked(self):
        # PNG bytes declared as GIF pass both checks independently
        self.assertEqual(validate_image(b64(PNG_BYTES), "image/gif"), PNG_BYTES)

    def test_malformed_base64(self):
        self.assertRejected("not base64!!", "image/png", "base64")

    def test_empty_payload_fails_magic_check(self):
        self.assertRejected("", "image/png", "Invalid image format")

    def test_size_limit_checked_before_signature(self):
        oversized = b"\x00" * (settings.MAX_IMAGE_SIZE + 1)
        self.assertRejected(b64(oversized), "image/png", "Image size exceeds 5MB limit")

    def test_exactly_at_limit_is_accepted(self):
        data = PNG_BYTES + b"\x00" * (settings.MAX_IMAGE_SIZE - len(PNG_BYTES))
        self.assertEqual(len(validate_image(b64(data), "image/png")), settings.MAX_IMAGE_SIZE)

    def test_signature_checked_before_mime_type(self):
        self.assertRejected(b64(b"%PDF-1.7 body"), "application/pdf", "Invalid image format")

    def test_disallowed_mime_type(self):
        self.assertRejected(b64(PNG_BYTES), "image/svg+xml", "Image type image/svg+xml not allowed")

    def test_missing_mime_type(self):
        self.assertRejected(b64(PNG_BYTES), None, "not allowed")


if __name__ == "__main__":
    unittest.main()
