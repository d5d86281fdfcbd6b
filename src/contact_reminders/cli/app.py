from typing import Optional

import typer

from contact_reminders.config import get_config


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import contact_reminders

        config = get_config()
        typer.echo(f"contact-reminders version: {contact_reminders.__version__}")
        typer.echo(f"Contacts path: {config.contacts_dir}")
        raise typer.Exit()


app = typer.Typer(name="contact-reminders")


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """contact-reminders - birthday reminders for your contact notes."""
