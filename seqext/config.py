"""
Configuration management for the seqext command-line tool.

This module handles loading, saving, and validating the defaults the CLI
applies when a command line leaves them out. Library functions never read
it; they take explicit arguments.
"""

import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .types import OnEmpty

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SeqextConfig:
    """Defaults for the seqext CLI."""

    on_empty: str = OnEmpty.RETURN_EMPTY.value  # Empty-collection policy
    chunk_size: int = 2  # Elements per chunk
    score_precision: int = 4  # Digits shown for coefficients
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SeqextConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    @property
    def policy(self) -> OnEmpty:
        return OnEmpty.coerce(self.on_empty)

    def validate(self) -> List[str]:
        """Validate configuration parameters; an empty list means valid."""
        errors = []

        if self.on_empty not in [m.value for m in OnEmpty]:
            errors.append(f"on_empty must be one of {[m.value for m in OnEmpty]}, got {self.on_empty!r}")

        if not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            errors.append(f"chunk_size must be a positive integer, got {self.chunk_size!r}")

        if not isinstance(self.score_precision, int) or not 0 <= self.score_precision <= 16:
            errors.append(f"score_precision must be between 0 and 16, got {self.score_precision!r}")

        if str(self.log_level).upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level!r}")

        return errors


class ConfigManager:
    """Manages seqext configuration."""

    DEFAULT_CONFIG_FILE = ".seqext.yml"
    ENV_PREFIX = "SEQEXT_"

    def __init__(self, config_path: Optional[Path] = None, console: Optional[Console] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to configuration file
            console: Console used for status output (stderr by default)
        """
        self.console = console or Console(stderr=True)
        self.config_path = Path(config_path) if config_path else Path(self.DEFAULT_CONFIG_FILE)
        self._config: Optional[SeqextConfig] = None

    def load(self) -> SeqextConfig:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration
        """
        if self._config is not None:
            return self._config

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f)
            if data is not None and not isinstance(data, dict):
                raise ValueError(f"{self.config_path} must contain a mapping, got {type(data).__name__}")
            self._config = SeqextConfig.from_dict(data or {})
        else:
            self._config = SeqextConfig()

        self._apply_env_overrides()

        return self._config

    def save(self, config: Optional[SeqextConfig] = None) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration to save (uses current if None)

        Returns:
            True if successful
        """
        config = config or self._config or SeqextConfig()

        try:
            with open(self.config_path, 'w') as f:
                yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            self.console.print(f"[red]Error saving config: {e}[/red]")
            return False

        self._config = config
        self.console.print(f"[green]Saved config to {self.config_path}[/green]")
        return True

    def update(self, **kwargs) -> SeqextConfig:
        """
        Update configuration parameters.

        Args:
            **kwargs: Parameters to update

        Returns:
            Updated configuration
        """
        if self._config is None:
            self._config = self.load()

        for key, value in kwargs.items():
            if hasattr(self._config, key):
                setattr(self._config, key, value)
            else:
                self.console.print(f"[yellow]Warning: Unknown parameter '{key}'[/yellow]")

        return self._config

    def reset(self) -> SeqextConfig:
        """
        Reset to default configuration.

        Returns:
            Default configuration
        """
        self._config = SeqextConfig()
        return self._config

    def display(self, config: Optional[SeqextConfig] = None, console: Optional[Console] = None):
        """
        Display configuration in a formatted panel.

        Args:
            config: Configuration to display (uses current if None)
            console: Console to render on (uses the manager's if None)
        """
        config = config or self._config or self.load()

        yaml_str = yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
        syntax = Syntax(yaml_str, "yaml", theme="monokai", line_numbers=True)
        panel = Panel(
            syntax,
            title=f"[bold cyan]seqext configuration ({self.config_path})[/bold cyan]",
            border_style="cyan"
        )

        (console or self.console).print(panel)

    def _apply_env_overrides(self):
        """Apply SEQEXT_* environment variable overrides."""
        if self._config is None:
            return

        if env_on_empty := os.getenv(f"{self.ENV_PREFIX}ON_EMPTY"):
            self._config.on_empty = env_on_empty.lower()

        for name in ("chunk_size", "score_precision"):
            if env_value := os.getenv(f"{self.ENV_PREFIX}{name.upper()}"):
                try:
                    setattr(self._config, name, int(env_value))
                except ValueError:
                    self.console.print(f"[red]Invalid env value for {name}: {env_value}[/red]")

        if env_level := os.getenv(f"{self.ENV_PREFIX}LOG_LEVEL"):
            self._config.log_level = env_level.upper()


def create_default_config_file(path: Optional[Path] = None) -> bool:
    """
    Create a default configuration file.

    Args:
        path: Path for config file

    Returns:
        True if successful
    """
    path = Path(path) if path else Path(ConfigManager.DEFAULT_CONFIG_FILE)

    try:
        with open(path, 'w') as f:
            yaml.dump(SeqextConfig().to_dict(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        Console(stderr=True).print(f"[red]Error creating config file: {e}[/red]")
        return False

    return True
