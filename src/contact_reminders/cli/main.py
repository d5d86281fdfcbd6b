"""Main CLI entry point for contact-reminders."""  # pragma: no cover

from contact_reminders.cli.app import app  # pragma: no cover
from contact_reminders.config import get_config  # pragma: no cover
from contact_reminders.utils import setup_logging  # pragma: no cover

# Register commands
from contact_reminders.cli.commands import reminders  # pragma: no cover

__all__ = ["app", "reminders"]  # pragma: no cover

_config = get_config()  # pragma: no cover
setup_logging(
    env=_config.env, log_file=_config.log_file, log_level=_config.log_level, console=False
)  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
