"""Configuration management for Pokescroll."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml

from pokescroll.exceptions import ConfigError

ALLOWED_THEMES = ["textual-dark", "textual-light", "nord", "gruvbox", "dracula", "monokai"]
ALLOWED_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
CONFIG_FILE_PATH = Path.home() / ".pokescroll.config"
DEFAULT_LOG_FILE = str(Path.home() / ".pokescroll.log")


@dataclass
class PokescrollConfig:
    """Pokescroll configuration settings."""

    api_base_url: str = "http://127.0.0.1:8000"
    upstream_url: str = "https://pokeapi.co/api/v2"
    page_size: int = 20
    request_timeout: float = 10.0
    scroll_margin: int = 4
    carousel_interval: float = 3.0
    carousel_reset_on_navigate: bool = True
    stop_on_empty_page: bool = True
    theme: str = "textual-dark"
    log_file: Optional[str] = DEFAULT_LOG_FILE
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration settings."""
        if self.theme not in ALLOWED_THEMES:
            raise ConfigError(f"Invalid theme '{self.theme}'. Allowed themes: {', '.join(ALLOWED_THEMES)}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in ALLOWED_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level '{self.log_level}'. Allowed levels: {', '.join(ALLOWED_LOG_LEVELS)}"
            )

        for url_field in ("api_base_url", "upstream_url"):
            value = getattr(self, url_field)
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                raise ConfigError(f"'{url_field}' must be an http(s) URL, got {value!r}")

        if not isinstance(self.page_size, int) or isinstance(self.page_size, bool) or self.page_size < 1:
            raise ConfigError(f"'page_size' must be a positive integer, got {self.page_size!r}")

        if not isinstance(self.scroll_margin, int) or self.scroll_margin < 0:
            raise ConfigError(f"'scroll_margin' must be a non-negative integer, got {self.scroll_margin!r}")

        if self.carousel_interval <= 0:
            raise ConfigError(f"'carousel_interval' must be positive, got {self.carousel_interval!r}")

        if self.request_timeout <= 0:
            raise ConfigError(f"'request_timeout' must be positive, got {self.request_timeout!r}")


def load_config(config_file_path: Optional[str] = None) -> PokescrollConfig:
    """Load configuration from file."""
    if config_file_path:
        config_path = Path(config_file_path)
    else:
        config_path = CONFIG_FILE_PATH

    if not config_path.exists():
        return PokescrollConfig()

    try:
        with open(config_path, "r") as f:
            config_data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}") from e

    # Extract only the fields that belong to PokescrollConfig
    valid_fields = {field.name for field in PokescrollConfig.__dataclass_fields__.values()}
    filtered_config = {key: value for key, value in config_data.items() if key in valid_fields}

    return PokescrollConfig(**filtered_config)


def merge_config_with_cli_args(config: PokescrollConfig, **cli_args) -> PokescrollConfig:
    """Merge configuration with CLI arguments, giving priority to CLI args."""
    merged_config = {}

    for field_name in PokescrollConfig.__dataclass_fields__:
        merged_config[field_name] = getattr(config, field_name)

    # Override with CLI args where provided (not None)
    for key, value in cli_args.items():
        if value is not None:
            merged_config[key] = value

    return PokescrollConfig(**merged_config)


def save_config(config: dict, config_path: Path = CONFIG_FILE_PATH) -> None:
    """Write a configuration mapping as TOML."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        toml.dump(config, f)
