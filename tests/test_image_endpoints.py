import unittest
from unittest import mock

from sqlalchemy.exc import OperationalError

from portfolio.core.config import settings
from tests.support import ApiTestCase, JPEG_BYTES, b64


class ImageEndpointTests(ApiTestCase):
    def test_serves_bytes_with_cache_header(self):
        project = self.create("/api/projects", self.project_payload(image=b64(JPEG_BYTES), imageType="image/jpeg"))
        response = self.client.get(f"/api/projects/{project['id']}/image")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, JPEG_BYTES)
        self.assertEqual(response.headers["content-type"], "image/jpeg")
        self.assertEqual(response.headers["cache-control"], settings.IMAGE_CACHE_CONTROL)

    def test_malformed_id_is_400(self):
        for path in (
            "/api/projects/xyz/image",
            "/api/blog/posts/ABCDEF0123456789ABCDEF0123456789/cover",
            "/api/gallery/123/image",
            "/api/blog/images/zz",
        ):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.text, "Invalid id")

    def test_unknown_row_is_404(self):
        response = self.client.get(f"/api/gallery/{'a' * 32}/image")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.text, "Image not found")

    def test_row_without_image_is_404(self):
        project = self.create("/api/projects", self.project_payload())
        self.assertEqual(self.client.get(f"/api/projects/{project['id']}/image").status_code, 404)

    def test_datastore_failure_is_500(self):
        failure = OperationalError("SELECT image", {}, Exception("database is locked"))
        with mock.patch("portfolio.api.media.fetch_image", side_effect=failure):
            response = self.client.get(f"/api/projects/{'a' * 32}/image")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.text, "Internal Server Error")


if __name__ == "__main__":
    unittest.main()
