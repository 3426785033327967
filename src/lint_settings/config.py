"""Configuration management for lint-settings."""
import json
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_NAME = ".lintsettings.json"


def is_directive(line: str) -> bool:
    """Blank entries and "#" comments are not directives."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


class Config(BaseModel):
    """Configuration for lint-settings with validation."""

    lints: list[str] = Field(default_factory=list, description="Lint directives, in order")
    source_name: str = Field(
        default="lints", min_length=1, description="Label prefix for error messages"
    )

    @field_validator("lints")
    @classmethod
    def validate_single_line_entries(cls, v: list[str]) -> list[str]:
        """Ensure every entry holds at most one directive line."""
        for position, line in enumerate(v, start=1):
            if "\n" in line or "\r" in line:
                raise ValueError(f"lints entry {position} spans more than one line")
        return v

    def labeled_lines(self) -> Iterator[tuple[str, str]]:
        """Yield (label, directive) pairs.

        Labels carry the 1-based position of the entry in ``lints``, counting
        blank and comment entries, which are skipped.
        """
        for position, line in enumerate(self.lints, start=1):
            if is_directive(line):
                yield f"{self.source_name}:{position}", line


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with no lint directives
    """
    return Config(lints=[], source_name="lints")


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .lintsettings.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If the file is not a JSON object
        pydantic.ValidationError: If configuration values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")

    defaults = get_default_config()

    config_data = {
        "lints": data.get("lints", defaults.lints),
        "source_name": data.get("source_name", data.get("sourceName", defaults.source_name)),
    }

    return Config(**config_data)
