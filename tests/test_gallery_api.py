import unittest

from tests.support import ApiTestCase, PNG_BYTES, WEBP_BYTES, b64

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


class GalleryApiTests(ApiTestCase):
    def test_image_item(self):
        item = self.create("/api/gallery", self.gallery_payload())
        self.assertEqual(item["mediaType"], "IMAGE")
        self.assertTrue(item["hasImage"])
        self.assertIsNone(item["videoUrl"])
        self.assertEqual(item["tagList"], ["demo", "travel"])

    def test_video_item(self):
        item = self.create(
            "/api/gallery",
            self.gallery_payload(mediaType="VIDEO", image=None, imageType=None, videoUrl=VIDEO_URL),
        )
        self.assertFalse(item["hasImage"])
        self.assertEqual(item["youtubeId"], "dQw4w9WgXcQ")

    def test_media_type_rules(self):
        cases = [
            (self.gallery_payload(mediaType="VIDEO", videoUrl=VIDEO_URL), "A VIDEO item cannot carry an image"),
            (self.gallery_payload(mediaType="VIDEO", image=None), "A VIDEO item needs a videoUrl"),
            (self.gallery_payload(videoUrl=VIDEO_URL), "An IMAGE item cannot carry a videoUrl"),
            (self.gallery_payload(image=None), "An IMAGE item needs an image"),
        ]
        for payload, error in cases:
            with self.subTest(error=error):
                response = self.client.post("/api/gallery", json=payload, headers=self.admin)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["error"], error)
        self.assertEqual(self.client.get("/api/gallery").json()["total"], 0)

    def test_switching_to_video_drops_image(self):
        item = self.create("/api/gallery", self.gallery_payload())
        response = self.client.put(
            f"/api/gallery/{item['id']}",
            json=self.gallery_payload(mediaType="VIDEO", image=None, imageType=None, videoUrl=VIDEO_URL),
            headers=self.admin,
        )
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["hasImage"])
        self.assertEqual(self.client.get(f"/api/gallery/{item['id']}/image").status_code, 404)

    def test_switching_to_image_needs_image(self):
        item = self.create(
            "/api/gallery",
            self.gallery_payload(mediaType="VIDEO", image=None, imageType=None, videoUrl=VIDEO_URL),
        )
        url = f"/api/gallery/{item['id']}"
        response = self.client.put(url, json=self.gallery_payload(image=None), headers=self.admin)
        self.assertEqual(response.status_code, 400)

        response = self.client.put(
            url,
            json=self.gallery_payload(image=b64(WEBP_BYTES), imageType="image/webp"),
            headers=self.admin,
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["videoUrl"])

    def test_update_keeps_existing_image(self):
        item = self.create("/api/gallery", self.gallery_payload())
        response = self.client.put(
            f"/api/gallery/{item['id']}",
            json=self.gallery_payload(title="Renamed", image=None),
            headers=self.admin,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["image"], b64(PNG_BYTES))

    def test_tag_filter_and(self):
        self.create("/api/gallery", self.gallery_payload(title="Both", tags="demo, cfd"))
        self.create("/api/gallery", self.gallery_payload(title="Demo only", tags="demo"))
        self.create("/api/gallery", self.gallery_payload(title="CFD only", tags="CFD"))

        body = self.client.get("/api/gallery", params=[("tags", "demo"), ("tags", "cfd")]).json()
        self.assertEqual([i["title"] for i in body["items"]], ["Both"])

        body = self.client.get("/api/gallery", params={"tags": "cfd"}).json()
        self.assertEqual(sorted(i["title"] for i in body["items"]), ["Both", "CFD only"])

    def test_tags_endpoint(self):
        self.create("/api/gallery", self.gallery_payload(tags="demo, cfd"))
        self.create("/api/gallery", self.gallery_payload(tags="Beach,demo"))
        self.assertEqual(self.client.get("/api/gallery/tags").json(), ["Beach", "cfd", "demo"])

    def test_admin_only_routes(self):
        item = self.create("/api/gallery", self.gallery_payload())
        url = f"/api/gallery/{item['id']}"
        self.assertEqual(self.client.get(url).status_code, 401)
        self.assertEqual(self.client.delete(url, headers=self.visitor).status_code, 403)
        self.assertEqual(self.client.delete(url, headers=self.admin).status_code, 200)
        self.assertEqual(self.client.get(url, headers=self.admin).status_code, 404)


if __name__ == "__main__":
    unittest.main()
