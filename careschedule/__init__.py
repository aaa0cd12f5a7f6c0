"""
CareSchedule: activities, appointments and the conflicts between them.
"""

from careschedule.conflicts import check_conflicts, conflicting_ids
from careschedule.parse import parse_clock_time

__all__ = ["check_conflicts", "conflicting_ids", "parse_clock_time"]
