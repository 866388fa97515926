"""Tests for calendar links and iCalendar export.

Run with: pytest tests/test_calendar.py -v
"""

from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlsplit

import pytest

from core.domain import EntityId
from events.domain import Event
from events.services.calendar import (
    calendar_links,
    escape_ics_text,
    event_window,
    google_calendar_url,
    ics_content,
    ics_filename,
    outlook_calendar_url,
    yahoo_calendar_url,
)

NAIROBI = timezone(timedelta(hours=3))


@pytest.fixture
def event():
    return Event(
        id=EntityId.from_string("4f6b1d2c-3e5a-4b7c-9d8e-0a1b2c3d4e5f"),
        title='Town Hall, Part 1; "Q&A"',
        description="Bring questions.\nDoors open early.",
        date=datetime(2024, 2, 15, 12, 0, tzinfo=NAIROBI),
        location="KICC, Nairobi",
        type="meeting",
    )


def query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


class TestEventWindow:
    def test_default_duration_is_two_hours(self, event):
        start, end = event_window(event)
        assert start == datetime(2024, 2, 15, 9, 0, tzinfo=timezone.utc)
        assert end - start == timedelta(hours=2)

    def test_explicit_duration(self, event):
        from dataclasses import replace

        start, end = event_window(replace(event, duration=4.5))
        assert end - start == timedelta(hours=4, minutes=30)


class TestProviderLinks:
    def test_google(self, event):
        params = query(google_calendar_url(event))
        assert params["action"] == ["TEMPLATE"]
        assert params["text"] == [event.title]
        assert params["dates"] == ["20240215T090000Z/20240215T110000Z"]
        assert params["location"] == ["KICC, Nairobi"]

    def test_outlook_uses_iso_timestamps(self, event):
        url = outlook_calendar_url(event)
        params = query(url)
        assert url.startswith("https://outlook.live.com/calendar/0/deeplink/compose?")
        assert params["startdt"] == ["2024-02-15T09:00:00.000Z"]
        assert params["enddt"] == ["2024-02-15T11:00:00.000Z"]
        assert params["subject"] == [event.title]

    def test_yahoo(self, event):
        params = query(yahoo_calendar_url(event))
        assert params["st"] == ["20240215T090000Z"]
        assert params["et"] == ["20240215T110000Z"]
        assert params["in_loc"] == ["KICC, Nairobi"]

    def test_calendar_links_has_all_providers(self, event):
        assert set(calendar_links(event)) == {"google", "outlook", "yahoo"}


class TestIcs:
    def test_escaping(self):
        assert escape_ics_text('Town Hall, Part 1; "Q&A"') == 'Town Hall\\, Part 1\\; "Q&A"'
        assert escape_ics_text("a\\b") == "a\\\\b"
        assert escape_ics_text("line one\nline two") == "line one\\nline two"

    def test_content(self, event):
        content = ics_content(event)
        lines = content.split("\r\n")

        assert lines[0] == "BEGIN:VCALENDAR"
        assert lines[-1] == "END:VCALENDAR"
        assert "UID:4f6b1d2c-3e5a-4b7c-9d8e-0a1b2c3d4e5f@ufa.org" in lines
        assert "DTSTART:20240215T090000Z" in lines
        assert "DTEND:20240215T110000Z" in lines
        assert 'SUMMARY:Town Hall\\, Part 1\\; "Q&A"' in lines
        assert "DESCRIPTION:Bring questions.\\nDoors open early." in lines
        assert "LOCATION:KICC\\, Nairobi" in lines

    def test_filename(self, event):
        assert ics_filename(event) == "town_hall__part_1___q_a_.ics"
