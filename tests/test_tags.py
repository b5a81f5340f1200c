import unittest

from portfolio.utils.tags import collect_tags, join_tags, split_tags
from portfolio.utils.video import youtube_id


class TagTests(unittest.TestCase):
    def test_split_trims_and_dedupes(self):
        self.assertEqual(split_tags(" Python, NumPy ,,Python, numpy "), ["Python", "NumPy", "numpy"])

    def test_split_empty(self):
        self.assertEqual(split_tags(""), [])
        self.assertEqual(split_tags(None), [])
        self.assertEqual(split_tags(" , "), [])

    def test_join(self):
        self.assertEqual(join_tags(["a ", " b", "", "  "]), "a,b")

    def test_collect_sorts_case_insensitively(self):
        self.assertEqual(
            collect_tags(["react, Go", "go,Python", None, "apollo"]),
            ["apollo", "Go", "go", "Python", "react"],
        )


class YoutubeIdTests(unittest.TestCase):
    def test_common_url_shapes(self):
        for url in (
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ?start=3",
            "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        ):
            with self.subTest(url=url):
                self.assertEqual(youtube_id(url), "dQw4w9WgXcQ")

    def test_not_youtube(self):
        self.assertIsNone(youtube_id("https://vimeo.com/12345"))
        self.assertIsNone(youtube_id(None))


if __name__ == "__main__":
    unittest.main()
