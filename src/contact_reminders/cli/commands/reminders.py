"""Reminder commands for contact-reminders CLI."""

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from contact_reminders.cli.app import app
from contact_reminders.config import get_config
from contact_reminders.file_utils import FileError
from contact_reminders.properties import get_contact, parse_date
from contact_reminders.recurrence import parse_repeater
from contact_reminders.services.document_service import DocumentService
from contact_reminders.services.exceptions import ContactError, DocumentNotFoundError
from contact_reminders.services.reminder_service import ReminderService, ScheduleReport

# Create rich console
console = Console()


def get_reminder_service() -> ReminderService:
    config = get_config()
    return ReminderService(config, DocumentService(config))


def display_report(report: ScheduleReport) -> None:
    """Display a scheduling report as a tree."""
    tree = Tree("Birthday reminders")

    if not report.updated and not report.failed:
        tree.add("No changes")

    for path, texts in sorted(report.updated.items()):
        branch = tree.add(f"[green]{Path(path).name}[/green]")
        for text in texts:
            branch.add(f"[green]+ {text}[/green]")

    for path, message in sorted(report.failed.items()):
        tree.add(f"[red]{Path(path).name}[/red]: {message}")

    if report.unchanged:
        tree.add(f"[dim]{len(report.unchanged)} documents unchanged[/dim]")

    console.print(Panel(tree, expand=False))


def _pairs_cell(pairs: List[Tuple[str, str]]) -> str:
    return "\n".join(f"{label}: {value}" for label, value in pairs)


@app.command()
def properties() -> None:
    """List the frontmatter properties read from contact documents."""
    service = get_reminder_service()
    for key in service.list_managed_properties():
        console.print(key)


@app.command()
def birthdays(
    file: Path = typer.Argument(..., help="Contact document"),
    days: Optional[int] = typer.Option(
        None, "--days", "-d", min=0, help="Days of advance notice (default from config)"
    ),
) -> None:
    """Insert birthday reminders into a contact document."""
    service = get_reminder_service()
    notice = service.config.advance_notice_days if days is None else days

    try:
        created = service.schedule_file(file, notice)
    except (ContactError, FileError, DocumentNotFoundError) as e:
        logger.error(f"Failed to insert birthday reminders into {file}: {e}")
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    if not created:
        console.print("No reminders added")
        return
    for text in created:
        console.print(f"[green]✓ Added {text}[/green]")


@app.command()
def scan(
    days: Optional[int] = typer.Option(
        None, "--days", "-d", min=0, help="Days of advance notice (default from config)"
    ),
) -> None:
    """Insert birthday reminders into every contact document."""
    service = get_reminder_service()
    notice = service.config.advance_notice_days if days is None else days

    report = service.schedule_all(notice)
    display_report(report)
    if report.failed:
        raise typer.Exit(1)


@app.command()
def remind(
    file: Path = typer.Argument(..., help="Document to add the reminder to"),
    text: str = typer.Argument(..., help="Reminder heading text"),
    date: Optional[str] = typer.Option(None, "--date", help="Scheduled date, e.g. 2024-05-01"),
    every: Optional[str] = typer.Option(
        None, "--every", help="Recurrence interval, e.g. 1y or 'every 2 weeks'"
    ),
) -> None:
    """Add a scheduled reminder under the reminders heading."""
    if date is None:
        date = typer.prompt("Reminder date")

    scheduled = parse_date(date)
    if scheduled is None:
        console.print(f"[red]✗ Invalid date: {date}[/red]")
        raise typer.Exit(1)

    try:
        repeater = parse_repeater(every) if every else None
    except ValueError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    service = get_reminder_service()
    try:
        service.add_reminder(file, text, scheduled, repeater)
    except (ContactError, FileError, DocumentNotFoundError) as e:
        logger.error(f"Failed to add reminder to {file}: {e}")
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Added {text} on {scheduled:%Y-%m-%d}[/green]")


@app.command()
def show(file: Path = typer.Argument(..., help="Contact document")) -> None:
    """Show the contact details of a document."""
    service = get_reminder_service()
    try:
        document = service.document_service.read_document(file)
        contact = get_contact(document, service.config)
    except (ContactError, FileError, DocumentNotFoundError) as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=contact.name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Birthday", f"{contact.birthday:%Y-%m-%d}" if contact.birthday else "")
    table.add_row("Emails", _pairs_cell(contact.emails))
    table.add_row("Addresses", _pairs_cell(contact.addresses))
    table.add_row("Phones", _pairs_cell(contact.phones))
    console.print(table)
