"""Calendar export for events.

Pure functions turning an Event into provider deep links or iCalendar text.
"""

import re
from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode

from events.domain import Event

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
OUTLOOK_CALENDAR_URL = "https://outlook.live.com/calendar/0/deeplink/compose"
YAHOO_CALENDAR_URL = "https://calendar.yahoo.com/"

ICS_CONTENT_TYPE = "text/calendar; charset=utf-8"
ICS_PRODID = "-//United Future Alliance//Event Calendar//EN"
UID_DOMAIN = "ufa.org"


def event_window(event: Event) -> tuple[datetime, datetime]:
    """Start and end of the event in UTC."""
    start = event.date
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    start = start.astimezone(timezone.utc)
    return start, start + timedelta(hours=event.duration_hours)


def compact_utc(value: datetime) -> str:
    """``20240215T090000Z``"""
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def iso_utc(value: datetime) -> str:
    """``2024-02-15T09:00:00.000Z``"""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def google_calendar_url(event: Event) -> str:
    start, end = event_window(event)
    params = {
        "action": "TEMPLATE",
        "text": event.title,
        "dates": f"{compact_utc(start)}/{compact_utc(end)}",
        "details": event.description or "",
        "location": event.location or "",
        "trp": "false",
    }
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"


def outlook_calendar_url(event: Event) -> str:
    start, end = event_window(event)
    params = {
        "path": "/calendar/action/compose",
        "rru": "addevent",
        "subject": event.title,
        "startdt": iso_utc(start),
        "enddt": iso_utc(end),
        "body": event.description or "",
        "location": event.location or "",
    }
    return f"{OUTLOOK_CALENDAR_URL}?{urlencode(params)}"


def yahoo_calendar_url(event: Event) -> str:
    start, end = event_window(event)
    params = {
        "v": "60",
        "view": "d",
        "type": "20",
        "title": event.title,
        "st": compact_utc(start),
        "et": compact_utc(end),
        "desc": event.description or "",
        "in_loc": event.location or "",
    }
    return f"{YAHOO_CALENDAR_URL}?{urlencode(params)}"


def escape_ics_text(text: str) -> str:
    r"""Escape ``\``, ``,`` and ``;`` with a backslash and newlines as ``\n``."""
    escaped = re.sub(r"([,;\\])", r"\\\1", text)
    return escaped.replace("\r\n", "\\n").replace("\n", "\\n")


def ics_content(event: Event) -> str:
    start, end = event_window(event)
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{ICS_PRODID}",
        "BEGIN:VEVENT",
        f"UID:{event.id}@{UID_DOMAIN}",
        f"DTSTART:{compact_utc(start)}",
        f"DTEND:{compact_utc(end)}",
        f"SUMMARY:{escape_ics_text(event.title)}",
        f"DESCRIPTION:{escape_ics_text(event.description or '')}",
        f"LOCATION:{escape_ics_text(event.location or '')}",
        "STATUS:CONFIRMED",
        "TRANSP:OPAQUE",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines)


def ics_filename(event: Event) -> str:
    return re.sub(r"[^a-z0-9]", "_", event.title, flags=re.IGNORECASE).lower() + ".ics"


def calendar_links(event: Event) -> dict[str, str]:
    return {
        "google": google_calendar_url(event),
        "outlook": outlook_calendar_url(event),
        "yahoo": yahoo_calendar_url(event),
    }
