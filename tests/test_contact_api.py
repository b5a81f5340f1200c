import unittest

from tests.support import ApiTestCase


class ContactApiTests(ApiTestCase):
    def submit(self, **payload):
        payload.setdefault("email", "ann@example.com")
        payload.setdefault("message", "Hi there")
        return self.client.post("/api/contact", json=payload)

    def test_submit_is_public(self):
        response = self.submit(name="Ann", subject="Hello")
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertFalse(body["read"])
        self.assertEqual(body["subject"], "Hello")
        self.assertTrue(body["createdAt"].endswith(("Z", "+00:00")))

    def test_validation(self):
        self.assertEqual(self.submit(email="not-an-email").status_code, 422)
        self.assertEqual(self.submit(message="  ").status_code, 422)

    def test_listing_requires_admin(self):
        self.submit()
        self.assertEqual(self.client.get("/api/contact").status_code, 401)
        body = self.client.get("/api/contact", headers=self.admin).json()
        self.assertEqual(body["total"], 1)
        self.assertEqual(body["items"][0]["email"], "ann@example.com")

    def test_mark_read_and_delete(self):
        message_id = self.submit().json()["id"]

        response = self.client.patch(f"/api/contact/{message_id}/read", headers=self.admin)
        self.assertTrue(response.json()["read"])
        counts = self.client.get("/admin", headers=self.admin).json()["counts"]
        self.assertEqual((counts["messages"], counts["unreadMessages"]), (1, 0))

        self.client.delete(f"/api/contact/{message_id}", headers=self.admin)
        self.assertEqual(
            self.client.patch(f"/api/contact/{message_id}/read", headers=self.admin).status_code, 404
        )


if __name__ == "__main__":
    unittest.main()
