"""CLI commands for contact-reminders."""

from . import reminders

__all__ = ["reminders"]
