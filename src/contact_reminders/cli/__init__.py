"""Command line interface for contact-reminders."""
