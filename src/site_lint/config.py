"""Configuration management for site-lint."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = ".site-lint.json"


class Config(BaseModel):
    """Configuration for site-lint with validation."""

    ignored_dirs: list[str] = Field(
        default_factory=lambda: [".git", "node_modules", "dist"],
        description="Directory names skipped at any depth",
    )
    max_line_length: int = Field(default=140, gt=0, description="Longest allowed stylesheet line")
    node_executable: str = Field(
        default="node", min_length=1, description="Executable used for JavaScript syntax checks"
    )
    show_progress: bool = Field(default=False, description="Show progress bars")

    @field_validator("ignored_dirs")
    @classmethod
    def validate_ignored_dirs(cls, v: list[str]) -> list[str]:
        """Ensure ignored entries are plain directory names."""
        for name in v:
            if not name.strip():
                raise ValueError("ignored_dirs entries cannot be empty strings")
            if "/" in name or "\\" in name:
                raise ValueError(f"ignored_dirs entries must be names, not paths: {name}")
        return v


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with default values
    """
    return Config()


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .site-lint.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If configuration values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")

    defaults = get_default_config()

    config_data = {
        "ignored_dirs": data.get("ignored_dirs", data.get("ignoredDirs", defaults.ignored_dirs)),
        "max_line_length": data.get(
            "max_line_length", data.get("maxLineLength", defaults.max_line_length)
        ),
        "node_executable": data.get(
            "node_executable", data.get("nodeExecutable", defaults.node_executable)
        ),
        "show_progress": data.get(
            "show_progress", data.get("showProgress", defaults.show_progress)
        ),
    }

    return Config(**config_data)
