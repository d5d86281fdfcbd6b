"""Configuration management for contact-reminders."""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR_NAME = ".contact-reminders"
LOG_FILE_NAME = "contact-reminders.log"

Environment = Literal["test", "dev", "user"]


class ContactsConfig(BaseSettings):
    """Configuration for a contacts knowledge base."""

    env: Environment = Field(default="dev", description="Environment name")

    # Default to ~/contacts but allow override with env var
    home: Path = Field(
        default_factory=lambda: Path.home() / "contacts",
        validate_default=True,
        description="Root of the document corpus",
    )
    contacts_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding managed contact documents (defaults to home)",
    )

    contact_tag: str = Field(default="person", description="Tag marking a contact document")
    birthday_key: str = "CONTACT_BIRTHDAY"
    emails_key: str = "CONTACT_EMAILS"
    addresses_key: str = "CONTACT_ADDRESSES"
    phones_key: str = "CONTACT_PHONES"

    reminders_heading: str = Field(
        default="Reminders", description="Top-level heading collecting reminders"
    )
    birthday_template: str = "{name}'s birthday"
    advance_notice_template: str = "{name}'s birthday in {days} days"
    advance_notice_days: int = Field(default=7, ge=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CONTACT_REMINDERS_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def managed_properties(self) -> List[str]:
        """Property keys this tool reads from contact documents."""
        return [self.birthday_key, self.emails_key, self.addresses_key, self.phones_key]

    @property
    def data_dir(self) -> Path:
        """Directory for logs and other tool state."""
        return Path.home() / DATA_DIR_NAME

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILE_NAME

    @field_validator("home")
    @classmethod
    def ensure_path_exists(cls, v: Path) -> Path:
        """Ensure corpus path exists."""
        v = v.expanduser()
        if not v.exists():
            v.mkdir(parents=True)
        return v

    @field_validator("birthday_template", "advance_notice_template")
    @classmethod
    def validate_heading_template(cls, v: str) -> str:
        """Templates may only use the {name} and {days} placeholders."""
        if "{name}" not in v:
            raise ValueError("heading template must contain a {name} placeholder")
        try:
            v.format(name="x", days=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"invalid heading template {v!r}: {e!r}") from e
        return v

    @model_validator(mode="after")
    def default_contacts_dir(self) -> "ContactsConfig":
        if self.contacts_dir is None:
            self.contacts_dir = self.home
        else:
            self.contacts_dir = self.contacts_dir.expanduser()
        return self


def get_config() -> ContactsConfig:
    """Load configuration from the environment."""
    return ContactsConfig()
