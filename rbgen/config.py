#!/usr/bin/env python3
"""
Generator configuration.

Options come from three places, highest precedence first: explicit
command-line flags, an optional YAML config file, and built-in defaults.
The resulting GeneratorConfig is passed to every component.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .format_handlers import DEFAULT_JS_VARIABLE, FormatRegistry


class ConfigurationError(ValueError):
    """Raised for invalid options or unreadable config files."""


@dataclass
class GeneratorConfig:
    """Options for one generator invocation."""
    source_directory: Path = Path(".")
    output_directory: Path = Path(".")
    source_bundle: str = "en.properties"
    use_namespaces: bool = False
    output_type: str = "json"
    watch: bool = False
    js_variable: str = DEFAULT_JS_VARIABLE
    poll_interval: float = 0.5

    def __post_init__(self):
        """Ensure directories are paths."""
        self.source_directory = Path(self.source_directory)
        self.output_directory = Path(self.output_directory)

    @property
    def source_bundle_path(self) -> Path:
        """Path of the source bundle, relative to the source directory."""
        return self.source_directory / self.source_bundle

    def validate(self) -> None:
        """
        Check options before any file work is done.

        Raises:
            ConfigurationError: On an unsupported output type or bad option value
        """
        if not FormatRegistry.is_supported(self.output_type):
            supported = ', '.join(f['name'] for f in FormatRegistry.list_formats())
            raise ConfigurationError(
                f"Unsupported type: {self.output_type}. Must be one of: {supported}"
            )

        if not self.js_variable:
            raise ConfigurationError("JavaScript variable name must not be empty")

        if self.poll_interval <= 0:
            raise ConfigurationError(
                f"Poll interval must be positive, got {self.poll_interval}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        data = asdict(self)
        data["source_directory"] = str(self.source_directory)
        data["output_directory"] = str(self.output_directory)
        return data

    @classmethod
    def from_sources(
        cls,
        cli_options: Optional[dict[str, Any]] = None,
        config_file: Optional[str] = None,
    ) -> "GeneratorConfig":
        """
        Build a config from CLI options layered over an optional YAML file.

        Args:
            cli_options: Options given on the command line; None values are
                treated as "not given"
            config_file: Optional path to a YAML config file

        Returns:
            GeneratorConfig (not yet validated)
        """
        options: dict[str, Any] = {}

        if config_file:
            options.update(load_config_file(config_file))

        for key, value in (cli_options or {}).items():
            if value is not None:
                options[key] = value

        return cls(**options)


BOOL_OPTIONS = {"use_namespaces", "watch"}


def _field_names() -> set[str]:
    return {f.name for f in fields(GeneratorConfig)}


def load_config_file(path: str) -> dict[str, Any]:
    """
    Read generator options from a YAML file.

    Keys may use flag spelling (source-directory) or field spelling
    (source_directory).

    Args:
        path: Path to YAML file

    Returns:
        Mapping of GeneratorConfig field name -> value

    Raises:
        ConfigurationError: If the file is missing, invalid YAML, not a
            mapping, contains unknown keys, or has a mistyped value
    """
    config_path = Path(path)

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    known = _field_names()
    options = {}
    unknown = []
    for key, value in data.items():
        name = str(key).replace('-', '_')
        if name not in known:
            unknown.append(str(key))
            continue

        # Quoted "no" or "false" would otherwise be truthy
        if name in BOOL_OPTIONS and not isinstance(value, bool):
            raise ConfigurationError(
                f"Option {key} in config file {path} must be true or false, got {value!r}"
            )
        if name == "poll_interval" and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ConfigurationError(
                f"Option {key} in config file {path} must be a number, got {value!r}"
            )

        options[name] = value

    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) in config file {path}: {', '.join(unknown)}"
        )

    return options
