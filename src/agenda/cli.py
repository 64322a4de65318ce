"""Agenda CLI - month/week/day calendar views over an event collection."""

import json
import logging
import sys
from datetime import date

import click

from .adapters import EventSourceError, source_for
from .config import Config, load_config
from .core.agenda import assemble_view, format_statistics, format_view
from .core.conflicts import adjacent_conflicts
from .core.errors import FormatError, ValidationError
from .core.events import CATEGORY_ORDER, Category, Event, date_key, filter_by_category, parse_events
from .core.navigation import ViewState, change_view, navigate
from .core.statistics import compute_statistics, top_categories
from .core.window import ViewMode

CATEGORY_NAMES = [c.value for c in CATEGORY_ORDER]
VIEW_NAMES = [m.value for m in ViewMode]


@click.group()
@click.version_option()
@click.option("--source", help="Events JSON file or http(s) URL (overrides config)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, source: str | None, debug: bool):
    """Agenda - personal event calendar."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if source:
        config.events_source = source
    ctx.obj = config


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _load_records(config: Config) -> list:
    try:
        return source_for(config.events_source, timeout=config.http_timeout).load()
    except EventSourceError as e:
        _fail(e)


def _load_events(config: Config) -> list[Event]:
    """Load and parse the collection, warning about skipped records."""
    events, failures = parse_events(_load_records(config))
    if failures:
        click.echo(
            f"Warning: skipped {len(failures)} invalid event record(s); run 'agenda validate' for details",
            err=True,
        )
    return events


def _enabled(config: Config, categories: tuple[str, ...]) -> set[Category]:
    if categories:
        return {Category(c) for c in categories}
    return set(config.enabled_categories)


def _build_state(config: Config, view: str | None, anchor: date | None, offset: int) -> ViewState:
    state = ViewState.initial(anchor)
    state = change_view(state, ViewMode(view) if view else config.default_view)
    direction = "next" if offset > 0 else "prev"
    for _ in range(abs(offset)):
        state = navigate(state, direction)
    return state


def _view_options(f):
    f = click.option("--offset", default=0, help="Steps forward (or back, if negative) by view unit")(f)
    f = click.option(
        "--date",
        "anchor",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        help="Anchor date (YYYY-MM-DD), defaults to today",
    )(f)
    f = click.option("--view", type=click.Choice(VIEW_NAMES), help="View mode")(f)
    return f


def _category_option(f):
    return click.option(
        "--category",
        "-c",
        "categories",
        multiple=True,
        type=click.Choice(CATEGORY_NAMES),
        help="Only show these categories (repeatable)",
    )(f)


@main.command()
@_view_options
@_category_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(config: Config, view, anchor, offset: int, categories, as_json: bool):
    """Show the calendar window with events."""
    state = _build_state(config, view, anchor.date() if anchor else None, offset)
    events = _load_events(config)

    try:
        result = assemble_view(
            state,
            events,
            _enabled(config, categories),
            upcoming_limit=config.upcoming_limit,
        )
    except (FormatError, ValidationError) as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "title": result.title,
                    "view": state.view_mode.value,
                    "anchor_date": date_key(state.anchor_date),
                    "dates": [
                        {
                            "date": date_key(d),
                            "in_month": not result.is_padding(d),
                            "conflict": result.conflicts[date_key(d)],
                            "events": [e.to_dict() for e in result.events_by_date[date_key(d)]],
                        }
                        for d in result.dates
                    ],
                },
                indent=2,
            )
        )
    else:
        click.echo(format_view(result))


@main.command()
@_category_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def stats(config: Config, categories, as_json: bool):
    """Show weekly counts, categories and upcoming events."""
    events = _load_events(config)

    visible = filter_by_category(events, _enabled(config, categories))
    try:
        result = compute_statistics(visible, upcoming_limit=config.upcoming_limit)
    except (FormatError, ValidationError) as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "this_week": result.this_week_count,
                    "next_week": result.next_week_count,
                    "categories": {
                        c.value: n for c, n in top_categories(result.category_histogram, len(CATEGORY_ORDER))
                    },
                    "upcoming": [e.to_dict() for e in result.upcoming],
                },
                indent=2,
            )
        )
    else:
        click.echo(format_statistics(result))


@main.command()
@_view_options
@_category_option
@click.pass_obj
def conflicts(config: Config, view, anchor, offset: int, categories):
    """List dates in the window with overlapping events."""
    state = _build_state(config, view, anchor.date() if anchor else None, offset)
    events = _load_events(config)

    try:
        result = assemble_view(state, events, _enabled(config, categories))
        found = [
            (key, adjacent_conflicts(result.events_by_date[key]))
            for key, flagged in result.conflicts.items()
            if flagged
        ]
    except (FormatError, ValidationError) as e:
        _fail(e)

    if not found:
        click.echo(f"No conflicts in {result.title}.")
        return

    for key, pairs in found:
        click.echo(f"{key}:")
        for first, second in pairs:
            click.echo(f"  {first.title} ({first.time}-{first.end_time}) overlaps {second.title} ({second.time})")


@main.command()
@click.pass_obj
def validate(config: Config):
    """Check every event record in the source."""
    records = _load_records(config)
    events, failures = parse_events(records)

    if not failures:
        click.echo(f"All {len(events)} event(s) valid.")
        return

    for failure in failures:
        click.echo(f"Record {failure.index} (id={failure.record_id}): {failure.reason}")
    click.echo(f"{len(failures)} of {len(records)} record(s) invalid.", err=True)
    sys.exit(1)


if __name__ == "__main__":
    main()
