import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel

import portfolio.models  # noqa: F401
from portfolio.schemas.contact import ContactMessageRead
from portfolio.utils.clock import as_utc, utc_now


class ClockTests(unittest.TestCase):
    def test_utc_now_is_aware(self):
        self.assertEqual(utc_now().utcoffset(), timedelta(0))

    def test_as_utc(self):
        naive = datetime(2024, 5, 1, 10, 0)
        self.assertEqual(as_utc(naive), datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc))
        plus_two = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(as_utc(plus_two).hour, 10)
        self.assertEqual(as_utc(plus_two).tzinfo, timezone.utc)
        self.assertIsNone(as_utc(None))


class TimestampColumnTests(unittest.TestCase):
    def test_every_datetime_column_is_timezone_aware(self):
        columns = [
            (table.name, column.name)
            for table in SQLModel.metadata.sorted_tables
            for column in table.columns
            if isinstance(column.type, DateTime) and not column.type.timezone
        ]
        self.assertEqual(columns, [])

    def test_read_models_emit_utc(self):
        message = ContactMessageRead(
            id="a" * 32,
            name=None,
            email="ann@example.com",
            subject=None,
            message="hi",
            read=False,
            created_at=datetime(2024, 5, 1, 10, 0),
        )
        created_at = message.model_dump(mode="json", by_alias=True)["createdAt"]
        self.assertIn(created_at, ("2024-05-01T10:00:00Z", "2024-05-01T10:00:00+00:00"))


if __name__ == "__main__":
    unittest.main()
