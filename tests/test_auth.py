import unittest

from portfolio.core.config import settings
from portfolio.models.user import Role
from portfolio.services.auth_service import decode_access_token, get_password_hash, verify_password
from tests.support import ApiTestCase, add_user


class PasswordTests(unittest.TestCase):
    def test_hash_and_verify(self):
        hashed = get_password_hash("s3cret")
        self.assertNotEqual(hashed, "s3cret")
        self.assertTrue(verify_password("s3cret", hashed))
        self.assertFalse(verify_password("wrong", hashed))

    def test_malformed_hash(self):
        self.assertFalse(verify_password("s3cret", "not-a-hash"))


class AuthApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.run_async(add_user, "owner", "correct horse", Role.ADMIN)
        self.run_async(add_user, "guest", "battery staple", Role.USER)

    def sign_in(self, username, password):
        return self.client.post("/api/auth/token", data={"username": username, "password": password})

    def test_token_carries_role_and_sets_cookie(self):
        response = self.sign_in("owner", "correct horse")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["token_type"], "bearer")
        claims = decode_access_token(body["access_token"])
        self.assertEqual((claims["sub"], claims["role"]), ("owner", "ADMIN"))
        self.assertIn(settings.SESSION_COOKIE_NAME, response.cookies)

        # the cookie alone opens the admin area
        self.assertEqual(self.client.get("/admin", follow_redirects=False).status_code, 200)

    def test_wrong_password(self):
        response = self.sign_in("owner", "nope")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Incorrect username or password"})
        self.assertEqual(self.sign_in("nobody", "nope").status_code, 401)

    def test_user_role_is_sent_home(self):
        self.sign_in("guest", "battery staple")
        response = self.client.get("/admin", follow_redirects=False)
        self.assertEqual(response.status_code, 307)
        self.assertEqual(response.headers["location"], "/")

    def test_signout_clears_cookie(self):
        self.sign_in("owner", "correct horse")
        self.client.post("/api/auth/signout")
        response = self.client.get("/admin", follow_redirects=False)
        self.assertEqual(response.status_code, 307)
        self.assertTrue(response.headers["location"].startswith(settings.SIGNIN_PATH))

    def test_signin_echoes_callback(self):
        response = self.client.get("/api/auth/signin", params={"callbackUrl": "http://testserver/admin"})
        self.assertEqual(
            response.json(),
            {"token_url": "/api/auth/token", "callback_url": "http://testserver/admin"},
        )


if __name__ == "__main__":
    unittest.main()
