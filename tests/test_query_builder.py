import unittest

from sqlalchemy.dialects import sqlite

from portfolio.models.project import Project
from portfolio.services.query_builder import (
    build_filters,
    contains_pattern,
    normalize_search,
    page_response,
    total_pages,
)


class NormalizeSearchTests(unittest.TestCase):
    def test_trims(self):
        self.assertEqual(normalize_search("  solver  "), "solver")

    def test_too_short_is_dropped(self):
        self.assertIsNone(normalize_search("a"))
        self.assertIsNone(normalize_search("  a  "))

    def test_bounds(self):
        self.assertEqual(normalize_search("ab"), "ab")
        self.assertEqual(normalize_search("x" * 200), "x" * 200)
        self.assertIsNone(normalize_search("x" * 201))

    def test_needs_alphanumeric(self):
        self.assertIsNone(normalize_search("!!!"))
        self.assertIsNone(normalize_search("--  --"))
        self.assertEqual(normalize_search("c++"), "c++")

    def test_none(self):
        self.assertIsNone(normalize_search(None))


class FilterTests(unittest.TestCase):
    def compile(self, clause) -> str:
        return str(clause.compile(dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}))

    def test_wildcards_are_escaped(self):
        self.assertEqual(contains_pattern("50%_off"), "%50\\%\\_off%")

    def test_no_input_no_filters(self):
        self.assertEqual(build_filters(Project.name, Project.tech_stacks, None, None), [])
        self.assertEqual(build_filters(Project.name, Project.tech_stacks, "x", []), [])

    def test_one_clause_per_tag(self):
        filters = build_filters(Project.name, Project.tech_stacks, "solver", ["Python", " ", "NumPy"])
        self.assertEqual(len(filters), 3)
        self.assertIn("project.name", self.compile(filters[0]))
        self.assertIn("'%NumPy%'", self.compile(filters[2]))


class PaginationTests(unittest.TestCase):
    def test_total_pages(self):
        self.assertEqual(total_pages(0, 12), 0)
        self.assertEqual(total_pages(12, 12), 1)
        self.assertEqual(total_pages(13, 12), 2)

    def test_page_response(self):
        body = page_response(["a"], 25, 3, 12)
        self.assertEqual(body, {"items": ["a"], "total": 25, "page": 3, "total_pages": 3})


if __name__ == "__main__":
    unittest.main()
