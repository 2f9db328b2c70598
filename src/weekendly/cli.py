"""Weekendly CLI - plan a Saturday and Sunday."""

import json
import logging
import sys
from pathlib import Path

import click

from .adapters.geoapify import PlaceLookupError
from .catalog import WEEKEND_TEMPLATES, Catalog, get_template
from .config import load_config
from .core.activities import CATALOG_CATEGORIES, WeekendTheme
from .core.errors import PlanError
from .core.export import generate_ical, generate_shareable_text
from .core.schedule import Day, DayTimeBounds, effective_duration
from .core.timeutils import format_duration, format_time
from .workflows import (
    ensure_plan,
    find_nearby_activities,
    get_repository,
    load_store,
    parse_clock,
    save_store,
)

DAY_CHOICE = click.Choice([d.value for d in Day], case_sensitive=False)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _open():
    config = load_config()
    repo = get_repository(config)
    return config, repo, load_store(repo)


@click.group()
@click.version_option(package_name="weekendly")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """Weekendly - Weekend Planner CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ============== Catalog ==============


@main.command()
@click.option("--category", type=click.Choice(CATALOG_CATEGORIES), help="Only this category")
@click.option("--search", "query", help="Match name, description or tags")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def activities(category: str | None, query: str | None, as_json: bool):
    """List catalog activities."""
    catalog = Catalog()
    if query:
        found = [a for a in catalog.search(query) if not category or a.category == category]
    elif category:
        found = catalog.by_category(category)
    else:
        found = list(catalog)

    if as_json:
        click.echo(json.dumps([a.to_dict() for a in found], indent=2, ensure_ascii=False))
        return

    if not found:
        click.echo("No matching activities.")
        return

    for a in found:
        click.echo(f"{a.icon} {a.id:20} {a.name} ({format_duration(a.duration)}, {a.category})")


@main.command()
def templates():
    """List weekend templates."""
    for t in WEEKEND_TEMPLATES:
        click.echo(f"{t.icon} {t.id:22} {t.name} - {t.description}")


# ============== Plan lifecycle ==============


@main.command()
@click.option("--name", help="Plan name")
@click.option("--theme", type=click.Choice([t.value for t in WeekendTheme]), help="Weekend theme")
def new(name: str | None, theme: str | None):
    """Start a fresh plan, replacing the current one."""
    config, repo, store = _open()
    store.clear_current_plan()
    plan = ensure_plan(store, config, name=name, theme=WeekendTheme(theme) if theme else None)
    save_store(store, repo)
    click.echo(f"Started plan {plan.id}: {plan.name}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(as_json: bool):
    """Show the current plan."""
    _, _, store = _open()
    try:
        plan = store.require_plan()
    except PlanError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(plan.to_dict(), indent=2, ensure_ascii=False))
        return

    title = plan.name + (f" ({plan.theme.value})" if plan.theme else "")
    click.echo(title)
    for day in Day:
        bounds = plan.bounds_for(day)
        day_total = format_duration(store.get_day_duration(day))
        click.echo(f"\n{day.label} [{bounds.format()}] - {day_total}")
        scheduled = store.get_day_activities(day)
        if not scheduled:
            click.echo("  (nothing planned)")
        for s in scheduled:
            activity = store.resolve(s)
            minutes = effective_duration(s, store.catalog)
            line = f"  {format_time(s.start_time):>8} {activity.icon} {activity.name} ({format_duration(minutes)}) [{s.id}]"
            if s.notes:
                line += f" - {s.notes}"
            click.echo(line)
    click.echo(f"\nTotal: {format_duration(store.get_total_plan_duration())}")


@main.command()
@click.option("--day", type=DAY_CHOICE, help="Clear only this day")
@click.confirmation_option(prompt="Clear the schedule? This cannot be undone.")
def clear(day: str | None):
    """Clear the whole plan or one day."""
    config, repo, store = _open()
    if day:
        removed = store.clear_day(Day(day))
        click.echo(f"Removed {len(removed)} activities from {Day(day).label}.")
    else:
        store.clear_current_plan()
        ensure_plan(store, config)
        click.echo("Started a fresh plan.")
    save_store(store, repo)


@main.command()
@click.argument("theme", type=click.Choice([t.value for t in WeekendTheme] + ["none"]))
def theme(theme: str):
    """Set the plan's theme."""
    _, repo, store = _open()
    store.set_theme(None if theme == "none" else WeekendTheme(theme))
    save_store(store, repo)


@main.command()
@click.argument("day", type=DAY_CHOICE)
@click.argument("hours")
def bounds(day: str, hours: str):
    """Set a day's hours, e.g. 'bounds saturday 08:00-20:00'."""
    config, repo, store = _open()
    ensure_plan(store, config)
    try:
        store.set_time_bounds(Day(day), DayTimeBounds.parse(hours))
    except ValueError as e:
        _fail(e)
    save_store(store, repo)


@main.command()
@click.argument("template_id")
def template(template_id: str):
    """Start a new plan from a template."""
    _, repo, store = _open()
    found = get_template(template_id)
    if found is None:
        _fail(ValueError(f"Unknown template {template_id!r}"))
    plan = store.apply_template(found)
    save_store(store, repo)
    click.echo(f"Applied {found.name}: {len(plan.saturday)} Saturday, {len(plan.sunday)} Sunday activities.")


# ============== Scheduling ==============


@main.command()
@click.argument("activity_id")
@click.option("--day", type=DAY_CHOICE, default="saturday", show_default=True)
@click.option("--at", "at", help="Start time HH:MM (default: earliest free slot)")
@click.option("--duration", type=click.IntRange(min=1), help="Custom duration in minutes")
def add(activity_id: str, day: str, at: str | None, duration: int | None):
    """Add a catalog activity to a day."""
    config, repo, store = _open()
    ensure_plan(store, config)
    activity = store.catalog.get(activity_id)
    if activity is None:
        _fail(ValueError(f"Unknown activity {activity_id!r}. See 'weekendly activities'."))

    target = Day(day)
    try:
        if at:
            scheduled = store.add_activity_to_schedule(
                activity, target, parse_clock(target, at, store.now()), duration
            )
        else:
            scheduled = store.schedule_activity(activity, target, duration)
    except (PlanError, ValueError) as e:
        _fail(e)

    save_store(store, repo)
    click.echo(f"Added {activity.name} on {target.label} at {format_time(scheduled.start_time)} [{scheduled.id}]")


@main.command()
@click.argument("scheduled_id")
def remove(scheduled_id: str):
    """Remove a scheduled activity."""
    _, repo, store = _open()
    removed = store.remove_activity_from_schedule(scheduled_id)
    if removed is None:
        _fail(ValueError(f"No scheduled activity with id {scheduled_id!r}"))
    save_store(store, repo)
    click.echo(f"Removed {store.resolve(removed).name}.")


@main.command()
@click.argument("scheduled_id")
@click.option("--start", help="New start time HH:MM")
@click.option("--duration", type=click.IntRange(min=1), help="New duration in minutes")
@click.option("--notes", help="Replace notes (empty string clears)")
def edit(scheduled_id: str, start: str | None, duration: int | None, notes: str | None):
    """Edit a scheduled activity; later activities shift to follow it."""
    _, repo, store = _open()
    try:
        plan = store.require_plan()
        scheduled = plan.find(scheduled_id)
        if scheduled is None:
            raise ValueError(f"No scheduled activity with id {scheduled_id!r}")
        start_time = parse_clock(scheduled.day, start, store.now()) if start else None
        kwargs = {} if notes is None else {"notes": notes}
        result = store.update_scheduled_activity(
            scheduled_id, start_time=start_time, custom_duration=duration, **kwargs
        )
    except (PlanError, ValueError) as e:
        _fail(e)

    save_store(store, repo)
    for dropped in result.evicted:
        click.echo(f"Dropped {store.resolve(dropped).name}: no longer fits before the end of the day.")


@main.command()
@click.argument("day", type=DAY_CHOICE)
@click.argument("scheduled_ids", nargs=-1, required=True)
def reorder(day: str, scheduled_ids: tuple[str, ...]):
    """Reorder a day; activities are packed from the day's start."""
    _, repo, store = _open()
    try:
        store.require_plan()
        store.reorder_activities(Day(day), list(scheduled_ids))
    except (PlanError, ValueError) as e:
        _fail(e)
    save_store(store, repo)


@main.command()
@click.argument("day", type=DAY_CHOICE)
@click.argument("scheduled_id")
@click.argument("position", type=click.IntRange(min=1))
def move(day: str, scheduled_id: str, position: int):
    """Move one activity to a 1-based position in its day."""
    _, repo, store = _open()
    try:
        store.move_activity(Day(day), scheduled_id, position - 1)
    except (PlanError, ValueError) as e:
        _fail(e)
    save_store(store, repo)


@main.command()
@click.argument("day", type=DAY_CHOICE)
def slots(day: str):
    """List free time on a day."""
    _, _, store = _open()
    free = store.get_available_time_slots(Day(day))
    if not free:
        click.echo("No free time.")
    for slot in free:
        click.echo(slot.format())


# ============== Saved plans ==============


@main.command()
def save():
    """Save the current plan to the saved list."""
    _, repo, store = _open()
    try:
        store.require_plan()
    except PlanError as e:
        _fail(e)
    snapshot = store.save_plan()
    save_store(store, repo)
    click.echo(f"Saved {snapshot.name} [{snapshot.id}]")


@main.command()
def plans():
    """List saved plans."""
    _, _, store = _open()
    if not store.saved_plans:
        click.echo("No saved plans.")
    for p in store.saved_plans:
        count = len(p.saturday) + len(p.sunday)
        click.echo(f"{p.id}  {p.name} ({count} activities, updated {p.updated_at:%Y-%m-%d %H:%M})")


@main.command()
@click.argument("plan_id")
def load(plan_id: str):
    """Make a saved plan the current one."""
    _, repo, store = _open()
    if store.load_plan(plan_id) is None:
        _fail(ValueError(f"No saved plan with id {plan_id!r}"))
    save_store(store, repo)


@main.command()
@click.argument("plan_id")
def delete(plan_id: str):
    """Delete a saved plan."""
    _, repo, store = _open()
    if not store.delete_plan(plan_id):
        _fail(ValueError(f"No saved plan with id {plan_id!r}"))
    save_store(store, repo)


# ============== Export & discovery ==============


@main.command()
@click.option("--format", "fmt", type=click.Choice(["text", "ical"]), default="text", show_default=True)
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write to a file")
def export(fmt: str, output: Path | None):
    """Export the current plan as text or iCalendar."""
    _, _, store = _open()
    try:
        plan = store.require_plan()
    except PlanError as e:
        _fail(e)

    content = generate_ical(plan, store.catalog) if fmt == "ical" else generate_shareable_text(plan, store.catalog)
    if output:
        output.write_text(content)
        click.echo(f"Wrote {output}")
    else:
        click.echo(content)


@main.command()
@click.option("--lat", type=float, help="Latitude (default: DEFAULT_LOCATION)")
@click.option("--lng", type=float, help="Longitude (default: DEFAULT_LOCATION)")
@click.option("--radius", type=click.IntRange(min=100), help="Search radius in meters")
@click.option("--type", "types", multiple=True, help="Activity type, e.g. cafe, park, museum")
@click.option("--add", "add_index", type=click.IntRange(min=1), help="Schedule the Nth result")
@click.option("--day", type=DAY_CHOICE, default="saturday", show_default=True)
def nearby(lat, lng, radius, types, add_index, day):
    """Find activities near a location."""
    config, repo, store = _open()
    if lat is None or lng is None:
        location = config.location()
        if location is None:
            _fail(ValueError("No location given. Pass --lat/--lng or set DEFAULT_LOCATION."))
        lat, lng = location

    try:
        found = find_nearby_activities(config, lat, lng, radius, list(types) or None)
    except PlaceLookupError as e:
        _fail(e)

    if not found:
        click.echo("No places found nearby.")
        return

    if add_index is None:
        for i, a in enumerate(found, start=1):
            click.echo(f"{i:2}. {a.icon} {a.name} ({format_duration(a.duration)}) - {a.location.address}")
        return

    if add_index > len(found):
        _fail(ValueError(f"Only {len(found)} results"))
    activity = found[add_index - 1]
    ensure_plan(store, config)
    try:
        scheduled = store.schedule_activity(activity, Day(day))
    except PlanError as e:
        _fail(e)
    save_store(store, repo)
    click.echo(f"Added {activity.name} on {Day(day).label} at {format_time(scheduled.start_time)} [{scheduled.id}]")


if __name__ == "__main__":
    main()
