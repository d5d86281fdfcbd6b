"""contact-reminders - birthday reminders for a Markdown contact knowledge base."""

__version__ = "0.1.0"
