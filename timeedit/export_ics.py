"""
iCalendar (.ics) export.

Writes fetched events to a calendar file that can be imported into
Google Calendar, Outlook or Apple Calendar.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from timeedit.model import Event


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_local(dt: datetime) -> str:
    # floating local time, TimeEdit reports wall-clock times
    return dt.strftime("%Y%m%dT%H%M%S")


def _uid(event: Event, summary: str) -> str:
    key = f"{summary}-{_dt_local(event.start_date)}-{_dt_local(event.end_date)}"
    return "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in key) + "@timeedit"


def export_events_to_ics(events: Iterable[Event], out_path: str | Path, summary: str = "") -> int:
    """
    Export events to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//timeedit//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    count = 0
    for ev in events:
        title = " ".join(part for part in (summary.strip(), ev.type.strip()) if part) or "TimeEdit event"
        location = ", ".join(loc for loc in ev.location if loc)
        lecturers = ", ".join(name for name in ev.lecturers if name)

        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:{_uid(ev, summary)}")
        lines.append(f"DTSTAMP:{dtstamp}")
        lines.append(f"DTSTART:{_dt_local(ev.start_date)}")
        lines.append(f"DTEND:{_dt_local(ev.end_date)}")
        lines.append(f"SUMMARY:{_ics_escape(title)}")
        if location:
            lines.append(f"LOCATION:{_ics_escape(location)}")
        if lecturers:
            lines.append(f"DESCRIPTION:{_ics_escape('Lecturers: ' + lecturers)}")
        lines.append("END:VEVENT")
        count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
