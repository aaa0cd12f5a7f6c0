"""
Central data model definitions used across the project.

This module defines the canonical structure of the schedulable entities so that:
- the conflict engine, storage and CLI share the same field names
- the JSON file keeps the key names the original app used (camelCase)
- the engine-internal interval and conflict types live next to the entities they wrap
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Union


ACTIVITY = "activity"
APPOINTMENT = "appointment"

# Fixed policy, not configurable per call
DEFAULT_ACTIVITY_DURATION = 30
DEFAULT_APPOINTMENT_DURATION = 60


@dataclass
class Activity:
    """
    One daily activity (walk, lunch with family, ...).

    Only id, time, duration and date matter for scheduling.
    """

    id: str
    title: str
    time: str
    duration: Optional[int] = None
    date: Optional[str] = None
    icon: str = ""
    description: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "time": self.time,
            "duration": self.duration,
            "date": self.date,
            "icon": self.icon,
            "description": self.description,
            "location": self.location,
        }


@dataclass
class Appointment:
    """
    One medical appointment.

    The time string may encode a range ("10:30am - 5:30pm"); only its
    first token is used as the start.
    """

    id: str
    doctor_name: str
    time: str
    date: str = ""
    specialty: str = ""
    hospital: str = ""
    duration: Optional[int] = None
    rating: float = 0.0
    favorite: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "doctorName": self.doctor_name,
            "specialty": self.specialty,
            "hospital": self.hospital,
            "date": self.date,
            "time": self.time,
            "duration": self.duration,
            "rating": self.rating,
            "favorite": self.favorite,
        }


ScheduleItem = Union[Activity, Appointment]


@dataclass
class ScheduledInterval:
    """
    Half-open [start, end) window in minutes since midnight.

    Built fresh on every conflict check and wraps exactly one source entity.
    """

    id: str
    kind: str
    start: int
    end: int
    date: Optional[str]
    source: ScheduleItem


@dataclass
class ConflictRecord:
    """
    Two overlapping entities. item1/item2 are the caller's own objects.

    type is "activity-activity", "activity-appointment" or
    "appointment-appointment".
    """

    item1: ScheduleItem
    item2: ScheduleItem
    type: str
