"""Configuration for the contact editor."""

import logging
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class EditConfig:
    """Configuration for loading, editing and saving the address book."""

    # Storage
    data_file: Path = field(default_factory=lambda: Path("data/addressbook.json"))

    # Logging
    log_level: int = logging.WARNING
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __post_init__(self):
        self.data_file = Path(self.data_file)


# Global configuration instance
default_config = EditConfig()
