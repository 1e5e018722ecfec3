"""Quest Log CLI - gamified Eisenhower to-do list."""

import json
import logging
import sys
from datetime import datetime

import click

from .adapters.file_blob import FileBlobStore
from .config import Config, load_config
from .core.persona import personality
from .core.tasks import Quadrant, SortMode, TaskItem, tomorrow
from .core.views import active_list, completed_list, matrix_groups, task_counts
from .i18n import localize
from .store import TaskStore

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]
SHORT_ID = 8


def _open_store(config: Config) -> TaskStore:
    return TaskStore(FileBlobStore(config.data_file), seed_demo_data=config.seed_demo_data)


def _resolve(store: TaskStore, prefix: str) -> TaskItem:
    """Find the one task whose id starts with `prefix`, or exit with an error."""
    needle = prefix.strip().upper()
    matches = [t for t in store.tasks if t.id.upper().startswith(needle)] if needle else []
    if len(matches) == 1:
        return matches[0]
    if not matches:
        click.echo(f"Error: no quest with id {prefix!r}", err=True)
    else:
        click.echo(f"Error: id {prefix!r} matches {len(matches)} quests", err=True)
    sys.exit(1)


def _sort_mode(value: str | None, config: Config) -> SortMode:
    return SortMode.parse(value) if value else config.sort_mode


def _format_task(task: TaskItem) -> str:
    marker = "x" if task.is_completed else " "
    flags = ("U" if task.is_urgent else "-") + ("I" if task.is_important else "-")
    line = f"{task.id[:SHORT_ID]} [{marker}] {flags} {task.title} (due {task.due_day.isoformat()})"
    if task.completed_at:
        line += f" ✓ {task.completed_at.strftime('%Y-%m-%d %H:%M')}"
    return line


def _echo_tasks(tasks: list[TaskItem], as_json: bool, empty_msg: str) -> None:
    if as_json:
        click.echo(json.dumps([t.to_record() for t in tasks], indent=2, ensure_ascii=False))
        return
    if not tasks:
        click.echo(empty_msg)
        return
    for task in tasks:
        click.echo(_format_task(task))


sort_option = click.option(
    "--sort",
    "sort",
    type=click.Choice([m.name.lower() for m in SortMode], case_sensitive=False),
    default=None,
    help="Sort order (defaults to SORT_MODE from questlog.conf)",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="questlog")
def main(debug: bool):
    """Quest Log - gamified Eisenhower to-do list."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("title")
@click.option("--deadline", "-d", type=click.DateTime(DATE_FORMATS), default=None,
              help="Due date (YYYY-MM-DD), defaults to tomorrow")
@click.option("--urgent", is_flag=True, help="Mark as urgent")
@click.option("--important", is_flag=True, help="Mark as important")
def add(title: str, deadline: datetime | None, urgent: bool, important: bool):
    """Add a new quest."""
    title = title.strip()
    if not title:
        click.echo("Error: quest name cannot be empty", err=True)
        sys.exit(1)

    config = load_config()
    with _open_store(config) as store:
        task = store.add(title, deadline or tomorrow(), is_urgent=urgent, is_important=important)
    lang = config.language
    click.echo(f"+ {task.id[:SHORT_ID]} {task.title} [{localize(task.quadrant.label_key, lang)}]")


@main.command()
@click.argument("task_id")
@click.option("--title", "-t", default=None, help="New quest name")
@click.option("--deadline", "-d", type=click.DateTime(DATE_FORMATS), default=None, help="New due date")
@click.option("--urgent/--not-urgent", default=None)
@click.option("--important/--not-important", default=None)
def edit(
    task_id: str,
    title: str | None,
    deadline: datetime | None,
    urgent: bool | None,
    important: bool | None,
):
    """Edit an existing quest."""
    if title is not None and not title.strip():
        click.echo("Error: quest name cannot be empty", err=True)
        sys.exit(1)

    config = load_config()
    with _open_store(config) as store:
        task = _resolve(store, task_id)
        updated = store.update(
            task.id,
            title=title.strip() if title is not None else task.title,
            deadline=deadline or task.deadline,
            is_urgent=task.is_urgent if urgent is None else urgent,
            is_important=task.is_important if important is None else important,
        )
    if updated:
        click.echo(_format_task(updated))


@main.command()
@click.argument("task_id")
def done(task_id: str):
    """Toggle a quest between open and completed."""
    config = load_config()
    with _open_store(config) as store:
        task = store.toggle_completion(_resolve(store, task_id).id)
    if task:
        click.echo(_format_task(task))


@main.command()
@click.argument("task_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def rm(task_id: str, yes: bool):
    """Abandon (delete) a quest."""
    config = load_config()
    with _open_store(config) as store:
        task = _resolve(store, task_id)
        if not yes and not click.confirm(f"{task.title}: {localize('ABANDON_WARNING', config.language)}"):
            return
        store.delete(task.id)
    click.echo(f"- {task.id[:SHORT_ID]} {task.title}")


@main.command("list")
@sort_option
@json_option
def list_cmd(sort: str | None, as_json: bool):
    """List open quests."""
    config = load_config()
    with _open_store(config) as store:
        tasks = active_list(store.tasks, _sort_mode(sort, config))
    lang = config.language
    if not as_json:
        click.echo(localize("QUEST LOG", lang))
    _echo_tasks(tasks, as_json, localize("No active quests!", lang))


@main.command()
@sort_option
@json_option
def matrix(sort: str | None, as_json: bool):
    """Show open quests grouped by Eisenhower quadrant."""
    config = load_config()
    with _open_store(config) as store:
        groups = matrix_groups(store.tasks, _sort_mode(sort, config))

    if as_json:
        click.echo(
            json.dumps(
                {q.name: [t.to_record() for t in tasks] for q, tasks in groups.items()},
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    lang = config.language
    click.echo(localize("MATRIX", lang))
    for quadrant, tasks in groups.items():
        click.echo()
        click.echo(f"### {localize(quadrant.label_key, lang)}")
        if not tasks:
            click.echo(f"  ({localize('Empty', lang)})")
        for task in tasks:
            click.echo(f"  {_format_task(task)}")


@main.command()
@sort_option
@json_option
def completed(sort: str | None, as_json: bool):
    """List completed quests."""
    config = load_config()
    with _open_store(config) as store:
        tasks = completed_list(store.tasks, _sort_mode(sort, config))
    lang = config.language
    if not as_json:
        click.echo(localize("COMPLETED LOG", lang))
    _echo_tasks(tasks, as_json, localize("No completed quests yet!", lang))


@main.command()
@json_option
def persona(as_json: bool):
    """Show the persona earned from completed quests."""
    config = load_config()
    with _open_store(config) as store:
        result = personality(store.tasks)

    if as_json:
        click.echo(json.dumps({"title": result.title_key, "vibe": result.vibe_key}, indent=2))
        return
    click.echo(localize(result.title_key, config.language))
    click.echo(localize(result.vibe_key, config.language))


@main.command()
@json_option
def stats(as_json: bool):
    """Show quest totals."""
    config = load_config()
    with _open_store(config) as store:
        counts = task_counts(store.tasks)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": counts.total,
                    "active": counts.active,
                    "completed": counts.completed,
                    "completed_by_quadrant": {
                        q.name: n for q, n in counts.completed_by_quadrant.items()
                    },
                },
                indent=2,
            )
        )
        return

    lang = config.language
    click.echo(f"{localize('Total', lang)}: {counts.total}")
    click.echo(f"{localize('Active', lang)}: {counts.active}")
    click.echo(f"{localize('Done', lang)}: {counts.completed}")
    for quadrant in Quadrant:
        click.echo(f"  {localize(quadrant.label_key, lang):10} {counts.completed_by_quadrant[quadrant]}")


@main.command()
@json_option
def settings(as_json: bool):
    """Show preferences loaded from questlog.conf."""
    config = load_config()

    if as_json:
        click.echo(
            json.dumps(
                {
                    "language": config.language,
                    "sort_mode": config.sort_mode.name,
                    "sound_enabled": config.sound_enabled,
                    "music_enabled": config.music_enabled,
                    "notifications_enabled": config.notifications_enabled,
                    "data_file": str(config.data_file),
                },
                indent=2,
            )
        )
        return

    lang = config.language

    def on_off(flag: bool) -> str:
        return localize("On" if flag else "Off", lang)

    click.echo(f"{localize('Language', lang)}: {lang}")
    click.echo(f"{localize('SORT BY', lang)}: {localize(config.sort_mode.value, lang)}")
    click.echo(f"{localize('Sound', lang)}: {on_off(config.sound_enabled)}")
    click.echo(f"{localize('Music', lang)}: {on_off(config.music_enabled)}")
    click.echo(f"{localize('Notifications', lang)}: {on_off(config.notifications_enabled)}")
    click.echo(f"{localize('Data file', lang)}: {config.data_file}")


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def reset(yes: bool):
    """Delete all quests."""
    config = load_config()
    if not yes and not click.confirm(localize("RESET_WARNING", config.language)):
        return
    with _open_store(config) as store:
        store.reset_all()
    click.echo("All quests deleted.")


if __name__ == "__main__":
    main()
