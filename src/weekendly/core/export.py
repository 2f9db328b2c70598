"""Plan export formatters - read-only views over a finished plan."""

from datetime import datetime, timezone

from .schedule import (
    ActivityLookup,
    Day,
    ScheduledActivity,
    WeekendPlan,
    effective_duration,
    resolve_activity,
    sort_by_start,
)
from .timeutils import add_minutes, format_duration, format_time

DAY_HEADERS = {Day.SATURDAY: "🌅 SATURDAY", Day.SUNDAY: "🌇 SUNDAY"}


def format_activity_line(scheduled: ScheduledActivity, catalog: ActivityLookup) -> str:
    """One line per placement: "9:00 AM - 10:30 AM | 🥐 Brunch (notes)"."""
    activity = resolve_activity(scheduled, catalog)
    end = add_minutes(scheduled.start_time, effective_duration(scheduled, catalog))
    line = f"{format_time(scheduled.start_time)} - {format_time(end)} | {activity.icon} {activity.name}"
    if scheduled.notes:
        line += f" ({scheduled.notes})"
    return line


def generate_shareable_text(plan: WeekendPlan, catalog: ActivityLookup) -> str:
    """Plain-text summary suitable for pasting into a message."""
    header = f"🗓️ {plan.name}"
    if plan.theme:
        header += f" ({plan.theme.value} weekend)"
    lines = [header, ""]

    for day in Day:
        day_activities = sort_by_start(plan.activities_for(day))
        if not day_activities:
            continue
        lines.append(DAY_HEADERS[day])
        lines.extend(format_activity_line(s, catalog) for s in day_activities)
        lines.append("")

    total = sum(effective_duration(s, catalog) for s in plan.all_activities())
    lines.append(f"Total planned: {format_duration(total)}")
    lines.append("")
    lines.append("✨ Created with Weekendly - Plan your perfect weekend!")
    return "\n".join(lines)


def _ical_stamp(dt: datetime) -> str:
    """UTC stamp; naive datetimes are taken as local time."""
    return dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%S") + "Z"


def _ical_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")


def generate_ical_event(scheduled: ScheduledActivity, catalog: ActivityLookup) -> str:
    activity = resolve_activity(scheduled, catalog)
    end = add_minutes(scheduled.start_time, effective_duration(scheduled, catalog))

    description = activity.description
    if scheduled.notes:
        description += f"\n\nNotes: {scheduled.notes}"

    lines = [
        "BEGIN:VEVENT",
        f"UID:weekendly-{scheduled.id}@weekendly.app",
        f"DTSTART:{_ical_stamp(scheduled.start_time)}",
        f"DTEND:{_ical_stamp(end)}",
        f"SUMMARY:{_ical_escape(f'{activity.icon} {activity.name}')}",
        f"DESCRIPTION:{_ical_escape(description)}",
        f"CATEGORIES:{_ical_escape(activity.category)}",
    ]
    if activity.location:
        lines.append(f"LOCATION:{_ical_escape(activity.location.address)}")
    lines.extend(["STATUS:CONFIRMED", "END:VEVENT"])
    return "\r\n".join(lines)


def generate_ical(plan: WeekendPlan, catalog: ActivityLookup) -> str:
    """iCalendar document with one VEVENT per placement."""
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Weekendly//Weekend Planner//EN",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{_ical_escape(plan.name)}",
        "X-WR-CALDESC:Weekend plan created with Weekendly",
    ]
    lines.extend(generate_ical_event(s, catalog) for s in plan.all_activities())
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"
