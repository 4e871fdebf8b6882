"""Configuration management for demotour."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_REVEAL_DELAY_MS
from .errors import ConfigError
from .models import StyleTag


class ThemeConfig(BaseModel):
    """Rich style per style tag."""

    comment: str = "#6c7086"
    prompt_marker: str = "#a6e3a1"
    prompt_body: str = "#cdd6f4"
    key_name: str = "#89b4fa"
    key_separator: str = "#6c7086"
    key_value: str = "#a6e3a1"
    success_marker: str = "#a6e3a1"
    structured_data: str = "#f9e2af"
    status_label: str = "#89b4fa"
    status_value: str = "#cdd6f4"
    section_header: str = "#cba6f7"
    plain: str = "#cdd6f4"

    def style_for(self, tag: StyleTag) -> str:
        """Get the rich style string for a style tag."""
        return getattr(self, tag.value)


class DisplayConfig(BaseModel):
    """Configuration for the terminal display."""

    animate: bool = True
    reveal_delay_ms: int = Field(default=DEFAULT_REVEAL_DELAY_MS, ge=0)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)


class CatalogConfig(BaseModel):
    """Where to read demo steps from."""

    path: str | None = None  # TOML catalog; built-in steps when unset


class DemoTourConfig(BaseModel):
    """Root configuration for demotour."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)


def get_config_path(root: Path | None = None) -> Path:
    """Default config file location under ``root`` (cwd when omitted)."""
    return (root or Path.cwd()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(config_path: Path) -> DemoTourConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to config.toml

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file cannot be parsed or fails validation
    """
    if not config_path.exists():
        return DemoTourConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    try:
        config = DemoTourConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    # Relative catalog paths are relative to the config directory
    if config.catalog.path and not Path(config.catalog.path).is_absolute():
        config.catalog.path = str(config_path.parent / config.catalog.path)
    return config


def write_config_template(config_path: Path) -> Path:
    """Write default config.toml template.

    Args:
        config_path: Destination path; parent directories are created

    Returns:
        Path to the written config file
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    template = {
        "display": {
            "animate": True,
            "reveal_delay_ms": DEFAULT_REVEAL_DELAY_MS,
            "theme": ThemeConfig().model_dump(),
        },
        # Point at a TOML file of [[steps]] tables to replace the built-in demo
        "catalog": {},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
