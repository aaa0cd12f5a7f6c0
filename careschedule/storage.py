"""
Persistent storage for the user's schedule.

This module manages the file:

    data/schedule.json

with the layout:

    {"activities": [...], "appointments": [...]}

Conflicts are never stored: they are recomputed from the two lists
every time they are needed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from careschedule.model import Activity, Appointment
from careschedule.parse import activity_from_dict, appointment_from_dict


def _default_schedule_path() -> Path:
    """
    Return the default path of schedule.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "schedule.json"


def _dict_items(raw: Any) -> list[dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    return [x for x in raw if isinstance(x, dict)]


def load_schedule(
    path: str | Path | None = None,
    strict: bool = False,
) -> tuple[list[Activity], list[Appointment]]:
    """
    Load activities and appointments from schedule.json.

    Returns two empty lists if the file does not exist.
    An unreadable or malformed file also gives two empty lists, unless
    strict=True: then ValueError is raised so callers that write the file
    back do not overwrite data they could not read.
    Entries that are not JSON objects are skipped.
    """
    schedule_path = Path(path) if path is not None else _default_schedule_path()

    # First run: nothing scheduled yet
    if not schedule_path.exists():
        return [], []

    try:
        data = json.loads(schedule_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        if strict:
            raise ValueError(f"Could not read {schedule_path}: {exc}") from exc
        return [], []

    if not isinstance(data, dict):
        if strict:
            raise ValueError(f"Could not read {schedule_path}: top level is not a JSON object")
        return [], []

    activities = [activity_from_dict(d) for d in _dict_items(data.get("activities"))]
    appointments = [appointment_from_dict(d) for d in _dict_items(data.get("appointments"))]
    return activities, appointments


def save_schedule(
    activities: Iterable[Activity],
    appointments: Iterable[Appointment],
    path: str | Path | None = None,
) -> None:
    """
    Save activities and appointments to schedule.json.

    Creates parent directories if needed.
    """
    schedule_path = Path(path) if path is not None else _default_schedule_path()
    schedule_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "activities": [a.to_dict() for a in activities],
        "appointments": [a.to_dict() for a in appointments],
    }

    schedule_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
