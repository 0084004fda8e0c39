"""
Configuration resolution for auto-increment checks.

Values are taken from command-line options first, then from an optional
``key = value`` config file, then from the defaults below.
"""

import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigFileError

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^\s*(\S+?)\s*=\s*(.*?)\s*$")


@dataclass
class CheckConfig:
    """Resolved check configuration."""

    verbosity: int = 0
    warning: float = 0.7
    critical: float = 0.85
    dbhost: str = "localhost"
    dbuser: str = "root"
    dbpass: str | None = None
    dbport: int = 3306

    @classmethod
    def keys(cls) -> list[str]:
        """Names of all recognized configuration keys."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckConfig":
        """
        Create from a mapping of raw values.

        String values are converted to each key's type. Unknown keys are ignored.

        Raises:
            ValueError: If a value cannot be converted, naming the key
        """
        converters = {"verbosity": int, "dbport": int, "warning": float, "critical": float}
        values = {}
        for key in cls.keys():
            if key not in data:
                continue
            convert = converters.get(key, str)
            try:
                values[key] = convert(data[key])
            except (TypeError, ValueError) as e:
                raise ValueError(f"{key}={data[key]!r} is not a valid {convert.__name__}") from e
        return cls(**values)


def parse_config_file(path: str | Path) -> dict[str, str]:
    """
    Parse a ``key = value`` config file.

    Blank lines and lines starting with ``#`` are ignored.

    Args:
        path: Path to the config file

    Returns:
        Mapping of keys to their raw string values

    Raises:
        ConfigFileError: If the file cannot be read or a line is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Cannot read config file {path}: {e}") from e

    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _LINE_RE.match(stripped)
        if match is None:
            raise ConfigFileError(f"Invalid line in config file {path}: {line}")
        values[match.group(1)] = match.group(2)

    logger.debug("Read %d values from %s", len(values), path)
    return values


def resolve_config(cli_values: dict[str, Any] | None = None, configfile: str | Path | None = None) -> CheckConfig:
    """
    Merge command-line values, config file values and defaults.

    Args:
        cli_values: Values given on the command line; None means unset
        configfile: Optional path to a config file

    Returns:
        Fully resolved CheckConfig

    Raises:
        ConfigFileError: If the config file is unreadable, malformed or holds
            a value of the wrong type
    """
    merged: dict[str, Any] = {}

    if configfile is not None:
        file_values = parse_config_file(configfile)
        for key in file_values:
            if key not in CheckConfig.keys():
                logger.debug("Ignoring unknown key %r in %s", key, configfile)
        merged.update(file_values)

    for key, value in (cli_values or {}).items():
        if value is not None:
            merged[key] = value

    try:
        return CheckConfig.from_dict(merged)
    except ValueError as e:
        raise ConfigFileError(f"Invalid configuration value: {e}") from e
