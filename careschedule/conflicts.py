"""
Conflict detection.

Given the activity and appointment lists, detect overlapping pairs.
Overlap rule:
    start < other_end AND other_start < end
Two entries are only skipped for date reasons when BOTH carry a date
and the dates differ. A missing date may still be the same day.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from careschedule.model import (
    ACTIVITY,
    APPOINTMENT,
    DEFAULT_ACTIVITY_DURATION,
    DEFAULT_APPOINTMENT_DURATION,
    Activity,
    Appointment,
    ConflictRecord,
    ScheduledInterval,
    ScheduleItem,
)
from careschedule.parse import parse_clock_time


def _interval(item: ScheduleItem, kind: str, default_duration: int) -> ScheduledInterval:
    start = parse_clock_time(item.time)
    # None / 0 / negative -> default, so end > start always holds
    duration = item.duration if item.duration and item.duration > 0 else default_duration
    return ScheduledInterval(
        id=item.id,
        kind=kind,
        start=start,
        end=start + duration,
        date=item.date,
        source=item,
    )


def build_intervals(
    activities: Sequence[Activity],
    appointments: Sequence[Appointment],
) -> list[ScheduledInterval]:
    """
    One interval per entity: all activities first, then all appointments.
    """
    intervals = [_interval(a, ACTIVITY, DEFAULT_ACTIVITY_DURATION) for a in activities]
    intervals.extend(_interval(a, APPOINTMENT, DEFAULT_APPOINTMENT_DURATION) for a in appointments)
    return intervals


def _same_day_possible(a: ScheduledInterval, b: ScheduledInterval) -> bool:
    # plain string comparison: "Oct 5" and "5 Oct" are different days here
    if a.date and b.date and a.date != b.date:
        return False
    return True


def _overlaps(a: ScheduledInterval, b: ScheduledInterval) -> bool:
    return a.start < b.end and b.start < a.end


def check_conflicts(
    activities: Sequence[Activity],
    appointments: Sequence[Appointment],
) -> list[ConflictRecord]:
    """
    Find overlapping pairs, each pair appears once (i<j).

    Records reference the original entities in first-encountered order.
    Never raises for malformed times or missing optional fields.
    """
    conflicts: list[ConflictRecord] = []
    intervals = build_intervals(activities, appointments)

    # O(n^2) is fine for a single day's schedule
    for i in range(len(intervals)):
        a = intervals[i]
        for j in range(i + 1, len(intervals)):
            b = intervals[j]
            if not _same_day_possible(a, b):
                continue
            if _overlaps(a, b):
                conflicts.append(ConflictRecord(item1=a.source, item2=b.source, type=f"{a.kind}-{b.kind}"))

    return conflicts


def conflicting_ids(conflicts: Iterable[ConflictRecord]) -> set[str]:
    """
    Ids of every entity taking part in at least one conflict.
    """
    out: set[str] = set()
    for c in conflicts:
        out.add(c.item1.id)
        out.add(c.item2.id)
    return out
