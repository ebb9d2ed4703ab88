#!/usr/bin/env python3
"""
Customize Resume Template Configuration

Inspect templates and spacing presets, and edit the saved template
configuration of resumes in the ResumeForge database.

Examples:
    # List templates (optionally by category)
    python scripts/customize.py templates
    python scripts/customize.py templates executive

    # List presentation options
    python scripts/customize.py options spacing

    # Print a spacing preset
    python scripts/customize.py print compact

    # Create a resume record
    python scripts/customize.py create "Backend Engineer" --template modern-1

    # Show the effective configuration of resume 1
    python scripts/customize.py show 1

    # Change fields and apply a preset, then save
    python scripts/customize.py apply 1 showBorders=false font=roboto --preset compact -v

    # Recent customization events
    python scripts/customize.py events --resume 1
"""

import asyncio
import difflib
from pathlib import Path
from typing import List, Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from resumeforge.contexts.customization import (
    CustomizationController,
    CustomizationError,
    SQLiteConfigStore,
    load_spacing_presets,
)
from resumeforge.contexts.customization.catalog import list_templates, template_categories
from resumeforge.contexts.customization.logger import setup_customization_logger
from resumeforge.contexts.customization.persistence import RESUMEFORGE_DB_PATH
from resumeforge.contexts.customization.styling import (
    COLOR_SCHEMES,
    FONT_OPTIONS,
    LAYOUT_STYLES,
    SPACING_OPTIONS,
)
from resumeforge.utils.event_logging import LOGS_PATH, get_recent_events
from resumeforge.utils.timestamp import format_timestamp, now

app = typer.Typer(
    help="Inspect and edit resume template configurations",
    add_completion=False,
)

DbOption = Annotated[
    Path,
    typer.Option("--db", help="SQLite database path (defaults to RESUMEFORGE_DB_PATH)"),
]


def print_diff(original: dict, modified: dict) -> None:
    """Print unified diff between two configs rendered as YAML."""
    diff = difflib.unified_diff(
        OmegaConf.to_yaml(original).splitlines(keepends=True),
        OmegaConf.to_yaml(modified).splitlines(keepends=True),
        fromfile="saved",
        tofile="modified",
        lineterm="",
    )
    typer.echo("\nDiff:")
    for line in diff:
        typer.echo(line, nl=False)


def _open_store(db: Optional[Path]) -> SQLiteConfigStore:
    try:
        return SQLiteConfigStore(db or RESUMEFORGE_DB_PATH)
    except FileNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _controller_for(store: SQLiteConfigStore, resume_id: int) -> CustomizationController:
    resume = store.get_resume(resume_id)
    if resume is None:
        typer.secho(f"Resume not found: {resume_id}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    controller = CustomizationController(store, resume["template_id"], source="cli")
    asyncio.run(controller.load(resume_id))
    return controller


@app.command("templates")
def templates_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Category to filter (e.g., 'modern', 'executive')"),
    ] = None,
):
    """List templates in the catalog."""
    if category and category not in template_categories():
        typer.secho(
            f"Unknown category '{category}'. Available: {', '.join(template_categories())}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    for meta in list_templates(category):
        price = f"₹{meta.price}" if meta.premium else "free"
        typer.echo(f"{meta.id:<22} {meta.name:<28} {meta.category:<13} {price}")


@app.command("options")
def options_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Option category: fonts, colors, layouts or spacing"),
    ] = None,
):
    """
    List available presentation options.

    Examples:\n
        $ customize.py options            # All categories

        $ customize.py options spacing    # Only spacing options
    """
    catalogs = {
        "fonts": {key: value["name"] for key, value in FONT_OPTIONS.items()},
        "colors": {key: value["name"] for key, value in COLOR_SCHEMES.items()},
        "layouts": LAYOUT_STYLES,
        "spacing": {option["id"]: option["description"] for option in SPACING_OPTIONS},
    }

    if category and category not in catalogs:
        typer.secho(
            f"Unknown category '{category}'. Available: {', '.join(catalogs)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    for name, options in catalogs.items():
        if category and name != category:
            continue
        typer.secho(name, bold=True)
        for option_id, label in options.items():
            typer.echo(f"  {option_id:<14} {label}")


@app.command("print")
def print_command(
    preset_name: Annotated[str, typer.Argument(help="Spacing preset name (e.g., 'compact')")],
):
    """Print the derived values of a spacing preset."""
    presets = load_spacing_presets()

    if preset_name not in presets:
        typer.secho(f"Unknown preset '{preset_name}'", fg=typer.colors.RED, err=True)
        typer.echo(f"\nAvailable presets: {', '.join(sorted(presets))}")
        raise typer.Exit(code=1)

    typer.secho(preset_name, bold=True)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(presets[preset_name])).rstrip())


@app.command("create")
def create_command(
    name: Annotated[str, typer.Argument(help="Resume name")],
    template: Annotated[str, typer.Option("--template", "-t", help="Template id")] = "modern-1",
    db: DbOption = None,
):
    """Create a resume record (creates the database if needed)."""
    store = SQLiteConfigStore.create(db or RESUMEFORGE_DB_PATH)
    resume = store.create_resume(name, template)
    typer.secho(f"✓ Created resume {resume['id']}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Template: {resume['template_id']}")


@app.command("show")
def show_command(
    resume_id: Annotated[int, typer.Argument(help="Resume id")],
    db: DbOption = None,
):
    """Show the effective configuration of a resume (saved config over template defaults)."""
    controller = _controller_for(_open_store(db), resume_id)

    typer.secho(f"Resume {resume_id} ({controller.template_id})", bold=True)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(controller.config.to_dict())).rstrip())

    typer.secho("\nStyle classes", bold=True)
    for key, value in vars(controller.classes).items():
        typer.echo(f"  {key:<18} {value}")


@app.command("apply")
def apply_command(
    resume_id: Annotated[int, typer.Argument(help="Resume id")],
    assignments: Annotated[
        Optional[List[str]],
        typer.Argument(help="Field assignments (e.g., showBorders=false font=roboto)"),
    ] = None,
    preset: Annotated[
        Optional[str],
        typer.Option("--preset", "-p", help="Spacing preset to apply after the assignments"),
    ] = None,
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Reset to template defaults before other changes"),
    ] = False,
    undo: Annotated[
        int,
        typer.Option("--undo", help="Undo this many steps before saving"),
    ] = 0,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show diff of changes"),
    ] = False,
    db: DbOption = None,
):
    """
    Edit and save the template configuration of a resume.

    All assignments are applied as one step; the preset is a second step, so
    --undo 1 drops just the preset.

    Examples:\n
        $ customize.py apply 1 showBorders=false colorScheme=ocean

        $ customize.py apply 1 --preset spacious -v
    """
    setup_customization_logger(LOGS_PATH / f"customize_{now()}")
    store = _open_store(db)
    controller = _controller_for(store, resume_id)
    original = controller.config.to_dict()

    try:
        if reset:
            controller.reset_to_defaults()
        if assignments:
            changes = OmegaConf.to_container(OmegaConf.from_dotlist(assignments), resolve=True)
            controller.bulk_update(changes)
        if preset:
            controller.update_field("spacingPreset", preset)
    except CustomizationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for _ in range(undo):
        controller.undo()

    if verbose:
        print_diff(original, controller.config.to_dict())

    if not asyncio.run(controller.save()):
        typer.secho("✗ Failed to save configuration", fg=typer.colors.RED, err=True, bold=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Configuration saved", fg=typer.colors.GREEN, bold=True)


@app.command("events")
def events_command(
    resume: Annotated[Optional[int], typer.Option("--resume", "-r", help="Resume id")] = None,
    count: Annotated[int, typer.Option("-n", help="Number of events")] = 10,
):
    """Show recent customization events."""
    events = get_recent_events(count, resume_id=resume)
    if not events:
        typer.echo("No events recorded")
        return

    for event in events:
        when = format_timestamp(event["timestamp"], relative=True)
        typer.echo(f"{when:<10} {event['event_type']:<20} resume={event['resume_id']}")


if __name__ == "__main__":
    app()
