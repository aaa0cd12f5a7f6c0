"""
Parsing (free-form text / JSON dicts -> structured values).

- Converts clock-time strings like "10:00 AM" into minutes since midnight
- Builds Activity / Appointment objects from JSON-like dicts

Important rules (DO NOT CHANGE):
- Parsing never fails: no time pattern -> 0 (midnight)
- Hours/minutes are NOT range-checked ("25:99" -> 1599)
- Time ranges ("10:30am - 5:30pm"): only the first time counts
"""

from __future__ import annotations

import re

from typing import Any, Dict, Optional

from careschedule.model import Activity, Appointment


# ---------------------------------------------------------------------------
# Time normalizer (CORE LOGIC)
# ---------------------------------------------------------------------------

_CLOCK_RE = re.compile(r"(\d+):(\d+)\s*(AM|PM)?", re.IGNORECASE | re.ASCII)


def parse_clock_time(text: Optional[str]) -> int:
    """
    Return minutes since midnight for the first "H:MM [AM|PM]" in text.

    Without AM/PM the hour is taken literally (24h clock).
    """
    if not text:
        return 0

    match = _CLOCK_RE.search(text)
    if not match:
        return 0

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = (match.group(3) or "").upper()

    if meridiem == "PM" and hours < 12:
        hours += 12
    if meridiem == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _opt_str(value: Any) -> Optional[str]:
    """
    Return a stripped string, or None for missing / empty values.
    """
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _opt_int(value: Any) -> Optional[int]:
    """
    Return an int duration, or None if the value is missing or not a number.

    Booleans are rejected (True would otherwise become 1 minute).
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# ---------------------------------------------------------------------------
# Entity parsing
# ---------------------------------------------------------------------------


def activity_from_dict(data: Dict[str, Any]) -> Activity:
    """
    Build an Activity from a dict, tolerating half-filled drafts.
    """
    return Activity(
        id=str(data.get("id", "") or ""),
        title=str(data.get("title", "") or ""),
        time=str(data.get("time", "") or ""),
        duration=_opt_int(data.get("duration")),
        date=_opt_str(data.get("date")),
        icon=str(data.get("icon", "") or ""),
        description=_opt_str(data.get("description")),
        location=_opt_str(data.get("location")),
    )


def appointment_from_dict(data: Dict[str, Any]) -> Appointment:
    """
    Build an Appointment from a dict.

    Accepts both "doctorName" (app JSON) and "doctor_name".
    """
    doctor = data.get("doctorName", data.get("doctor_name", ""))

    try:
        rating = float(data.get("rating", 0) or 0)
    except (TypeError, ValueError):
        rating = 0.0

    return Appointment(
        id=str(data.get("id", "") or ""),
        doctor_name=str(doctor or ""),
        time=str(data.get("time", "") or ""),
        date=str(data.get("date", "") or "").strip(),
        specialty=str(data.get("specialty", "") or ""),
        hospital=str(data.get("hospital", "") or ""),
        duration=_opt_int(data.get("duration")),
        rating=rating,
        favorite=data.get("favorite") is True,
    )
