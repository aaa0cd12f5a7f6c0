"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    careschedule list
    careschedule add-activity <id> <title> <time> [--date ...] [--duration ...]
    careschedule add-appointment <id> <doctor> <time> --date <date>
    careschedule remove <id>
    careschedule conflicts
    careschedule weather <lat> <lon>

Note:
- All commands accept --file to use another schedule.json
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from careschedule.conflicts import check_conflicts, conflicting_ids
from careschedule.model import Activity, Appointment, ScheduleItem
from careschedule.storage import load_schedule, save_schedule
from careschedule.weather import fetch_weather


def _label(item: ScheduleItem) -> str:
    """
    One-line description of an activity or appointment.
    """
    if isinstance(item, Appointment):
        name = item.doctor_name or "(no doctor)"
        if item.specialty:
            name = f"{name} ({item.specialty})"
    else:
        name = item.title or "(no title)"
    date = item.date or "?"
    return f"{item.id} | {date} {item.time} | {name}"


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Print all entries, marking the ones that are in conflict with [!].
    """
    activities, appointments = load_schedule(args.file)
    if not activities and not appointments:
        print("Schedule is empty.")
        return 0

    flagged = conflicting_ids(check_conflicts(activities, appointments))

    print(f"Activities ({len(activities)}):")
    for a in activities:
        mark = "[!]" if a.id in flagged else "   "
        print(f"{mark} {_label(a)}")

    print(f"Appointments ({len(appointments)}):")
    for p in appointments:
        mark = "[!]" if p.id in flagged else "   "
        print(f"{mark} {_label(p)}")

    return 0


def _known_ids(activities: list[Activity], appointments: list[Appointment]) -> set[str]:
    return {a.id for a in activities} | {p.id for p in appointments}


def _cmd_add_activity(args: argparse.Namespace) -> int:
    """
    Add an activity to the schedule.
    """
    item_id = (args.id or "").strip()
    if not item_id:
        print("Please provide an id.")
        return 1

    try:
        activities, appointments = load_schedule(args.file, strict=True)
    except ValueError as exc:
        print(exc)
        return 1

    if item_id in _known_ids(activities, appointments):
        print(f"Id already used: {item_id}")
        return 1

    activities.append(
        Activity(
            id=item_id,
            title=args.title.strip(),
            time=args.time.strip(),
            duration=args.duration,
            date=(args.date or "").strip() or None,
            location=(args.location or "").strip() or None,
        )
    )
    save_schedule(activities, appointments, args.file)
    print(f"Added activity: {item_id} (activities: {len(activities)})")
    return 0


def _cmd_add_appointment(args: argparse.Namespace) -> int:
    """
    Add an appointment to the schedule.
    """
    item_id = (args.id or "").strip()
    if not item_id:
        print("Please provide an id.")
        return 1

    try:
        activities, appointments = load_schedule(args.file, strict=True)
    except ValueError as exc:
        print(exc)
        return 1

    if item_id in _known_ids(activities, appointments):
        print(f"Id already used: {item_id}")
        return 1

    appointments.append(
        Appointment(
            id=item_id,
            doctor_name=args.doctor.strip(),
            time=args.time.strip(),
            date=args.date.strip(),
            specialty=(args.specialty or "").strip(),
            hospital=(args.hospital or "").strip(),
            duration=args.duration,
        )
    )
    save_schedule(activities, appointments, args.file)
    print(f"Added appointment: {item_id} (appointments: {len(appointments)})")
    return 0


def _cmd_remove(args: argparse.Namespace) -> int:
    """
    Remove every activity/appointment with the given id.
    """
    item_id = (args.id or "").strip()
    if not item_id:
        print("Please provide an id.")
        return 1

    try:
        activities, appointments = load_schedule(args.file, strict=True)
    except ValueError as exc:
        print(exc)
        return 1

    kept_activities = [a for a in activities if a.id != item_id]
    kept_appointments = [p for p in appointments if p.id != item_id]

    removed = (len(activities) - len(kept_activities)) + (len(appointments) - len(kept_appointments))
    if not removed:
        print(f"Not found: {item_id}")
        return 1

    save_schedule(kept_activities, kept_appointments, args.file)
    print(f"Removed: {item_id}")
    return 0


def _cmd_conflicts(args: argparse.Namespace) -> int:
    """
    Print all detected conflicts, in the order they were found.
    """
    activities, appointments = load_schedule(args.file)

    confs = check_conflicts(activities, appointments)
    if not confs:
        print("No conflicts found.")
        return 0

    print(f"Conflicts found: {len(confs)}")
    for c in confs:
        print(f"- {c.type}: {_label(c.item1)}  <->  {_label(c.item2)}")

    return 0


def _cmd_weather(args: argparse.Namespace) -> int:
    """
    Print the current weather for a location.
    """
    w = fetch_weather(args.lat, args.lon)
    print(f"{w.temperature}° {w.condition} ({w.icon})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="careschedule", description="CareSchedule CLI")
    parser.add_argument("--file", type=Path, default=None, help="Path to schedule.json (default: package data)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List activities and appointments")

    p_act = sub.add_parser("add-activity", help="Add an activity")
    p_act.add_argument("id", type=str, help="Activity id")
    p_act.add_argument("title", type=str, help="Title (e.g. 'Morning walk')")
    p_act.add_argument("time", type=str, help="Start time (e.g. '10:00 AM')")
    p_act.add_argument("--date", type=str, default=None, help="Date label (e.g. 'Oct 24')")
    p_act.add_argument("--duration", type=int, default=None, help="Duration in minutes (default 30)")
    p_act.add_argument("--location", type=str, default=None, help="Location")

    p_appt = sub.add_parser("add-appointment", help="Add a medical appointment")
    p_appt.add_argument("id", type=str, help="Appointment id")
    p_appt.add_argument("doctor", type=str, help="Doctor name")
    p_appt.add_argument("time", type=str, help="Time or range (e.g. '10:30am - 5:30pm')")
    p_appt.add_argument("--date", type=str, required=True, help="Date label (e.g. '5 Oct')")
    p_appt.add_argument("--specialty", type=str, default=None, help="Specialty")
    p_appt.add_argument("--hospital", type=str, default=None, help="Hospital")
    p_appt.add_argument("--duration", type=int, default=None, help="Duration in minutes (default 60)")

    p_remove = sub.add_parser("remove", help="Remove an entry by id")
    p_remove.add_argument("id", type=str, help="Activity or appointment id")

    sub.add_parser("conflicts", help="Show schedule conflicts")

    p_weather = sub.add_parser("weather", help="Show current weather")
    p_weather.add_argument("lat", type=float, help="Latitude (e.g. 47.05)")
    p_weather.add_argument("lon", type=float, help="Longitude (e.g. 8.31)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "add-activity":
        raise SystemExit(_cmd_add_activity(args))
    if args.command == "add-appointment":
        raise SystemExit(_cmd_add_appointment(args))
    if args.command == "remove":
        raise SystemExit(_cmd_remove(args))
    if args.command == "conflicts":
        raise SystemExit(_cmd_conflicts(args))
    if args.command == "weather":
        raise SystemExit(_cmd_weather(args))

    raise SystemExit(2)
