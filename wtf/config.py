"""Application configuration: defaults, validation and database path lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATABASE_PATH = "assets/commands.yml"
MAX_RESULTS_LIMIT = 100

# Locations tried, in order, when the configured database file is missing.
DATABASE_FALLBACKS: tuple[str, ...] = (
    "/usr/local/share/wtf/commands.yml",
    "/usr/share/wtf/commands.yml",
    "assets/commands.yml",
    os.path.join("assets", "commands.yml"),
    "commands.yml",
    os.path.join("internal", "database", "commands.yml"),
    "commands_fixed.yml",
)


@dataclass
class Config:
    """Settings that control where commands are read from and how many are shown."""

    database_path: str = DEFAULT_DATABASE_PATH
    personal_db_path: str = ""
    max_results: int = 5
    cache_enabled: bool = True
    config_dir: str = ""

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.max_results <= 0:
            raise ValueError(f"max_results must be positive, got {self.max_results}")
        if self.max_results > MAX_RESULTS_LIMIT:
            raise ValueError(
                f"max_results too large, got {self.max_results} (max: {MAX_RESULTS_LIMIT})"
            )
        if not self.database_path:
            raise ValueError("database_path cannot be empty")

    def resolve_database_path(self) -> str:
        """Return the first existing database file, else the configured path."""
        if os.path.exists(self.database_path):
            return self.database_path
        for candidate in DATABASE_FALLBACKS:
            if os.path.exists(candidate):
                return candidate
        return self.database_path

    def ensure_config_dir(self) -> None:
        """Create the configuration directory and its parents if needed."""
        Path(self.config_dir).mkdir(mode=0o755, parents=True, exist_ok=True)


def default_config() -> Config:
    """Return the configuration used when nothing else is given."""
    config_dir = os.path.join(str(Path.home()), ".config", "cmd-finder")
    return Config(
        database_path=DEFAULT_DATABASE_PATH,
        personal_db_path=os.path.join(config_dir, "personal.yml"),
        max_results=5,
        cache_enabled=True,
        config_dir=config_dir,
    )