"""Configuration management for name-maker.

Config resolution order (highest priority first):
1. Programmatic (NameMakerConfig passed to configure())
2. Environment variables (NAME_MAKER_AMOUNT, NAME_MAKER_SEED, etc.), including
   values from a .env file
3. Config file (~/.config/name-maker/config.json)
4. Hardcoded defaults

Command-line flags such as --seed and --json override the resolved config for
a single invocation.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "name-maker"
CONFIG_FILE = CONFIG_DIR / "config.json"

CLI_MODES = ("human", "json")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Defaults for CLI invocations that omit an amount."""

    amount: int = 1
    children: int = 0
    seed: int | None = None  # None = fresh entropy on every run


@dataclass
class CliConfig:
    """Output settings.

    - human: one name per line
    - json: a single JSON document on stdout
    """

    mode: str = "human"


@dataclass
class NameMakerConfig:
    """Top-level name-maker configuration.

    Examples:
        # Package use
        config = NameMakerConfig(defaults=DefaultsConfig(seed=42))

        # CLI use, loads from ~/.config/name-maker/config.json + env
        config = NameMakerConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    cli: CliConfig = field(default_factory=CliConfig)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "NameMakerConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()
        path = config_file if config_file is not None else CONFIG_FILE

        # Layer 1: config file
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                # All or nothing: a bad key leaves every file value unapplied
                loaded = cls()
                _apply_dict(loaded, data)
                config = loaded
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as exc:
                logger.warning("Failed to load config from %s: %s", path, exc)

        # Layer 2: env var overrides
        _ensure_dotenv()
        if val := os.environ.get("NAME_MAKER_AMOUNT"):
            amount = _parse_count("NAME_MAKER_AMOUNT", val)
            if amount is not None:
                config.defaults.amount = amount
        if val := os.environ.get("NAME_MAKER_CHILDREN"):
            children = _parse_count("NAME_MAKER_CHILDREN", val)
            if children is not None:
                config.defaults.children = children
        if val := os.environ.get("NAME_MAKER_SEED"):
            try:
                config.defaults.seed = int(val)
            except ValueError:
                logger.warning("Invalid NAME_MAKER_SEED=%r, ignoring", val)
        if val := os.environ.get("NAME_MAKER_CLI_MODE"):
            if val in CLI_MODES:
                config.cli.mode = val
            else:
                logger.warning("Invalid NAME_MAKER_CLI_MODE=%r, ignoring", val)

        return config

    def save(self, config_file: Path | None = None) -> None:
        """Save config to ~/.config/name-maker/config.json."""
        path = config_file if config_file is not None else CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "defaults": asdict(self.defaults),
            "cli": asdict(self.cli),
        }

    @property
    def json_mode(self) -> bool:
        return self.cli.mode == "json"


# =============================================================================
# Config dict application
# =============================================================================


def _parse_count(name: str, value: str) -> int | None:
    try:
        count = int(value)
    except ValueError:
        logger.warning("Invalid %s=%r, ignoring", name, value)
        return None
    if count < 0:
        logger.warning("Invalid %s=%r (must be >= 0), ignoring", name, value)
        return None
    return count


def _apply_dict(config: NameMakerConfig, data: dict) -> None:
    """Apply a dict of values onto a NameMakerConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if not hasattr(config.defaults, k):
                continue
            if k in ("amount", "children"):
                v = int(v)
                if v < 0:
                    raise ValueError(f"defaults.{k} must be >= 0, got {v}")
            elif k == "seed" and v is not None:
                v = int(v)
            setattr(config.defaults, k, v)
    if "cli" in data and isinstance(data["cli"], dict):
        mode = data["cli"].get("mode")
        if mode is not None:
            if mode not in CLI_MODES:
                raise ValueError(f"cli.mode must be one of {CLI_MODES}, got {mode!r}")
            config.cli.mode = mode


_dotenv_loaded = False


def _ensure_dotenv() -> None:
    """Load .env file into os.environ if not already loaded."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        _dotenv_loaded = True
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path=dotenv_path, override=False)


# =============================================================================
# Global config singleton
# =============================================================================

_config: NameMakerConfig | None = None


def get_config() -> NameMakerConfig:
    """Get the global NameMakerConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    """
    global _config
    if _config is None:
        _config = NameMakerConfig.load()
    return _config


def configure(config: NameMakerConfig) -> None:
    """Set the global NameMakerConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
