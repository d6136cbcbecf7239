# topmark:header:start
#
#   project      : NiceError
#   file         : settings.py
#   file_relpath : src/nicerror/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render settings loaded from TOML files and the environment.

Sources are layered, lowest precedence first:

1. built-in defaults (`RenderSettings()`),
2. the ``[tool.nicerror]`` table of ``pyproject.toml``,
3. the top-level keys of ``nicerror.toml``,
4. the ``NICERROR_CONTEXT_SIZE`` environment variable.

Explicit CLI options are applied on top by the caller. Recognized keys are
``context_size`` (non-negative integer) and ``color`` (``auto``, ``always`` or
``never``); other keys are ignored.

Parsing is done with `tomlkit`. Unreadable or malformed files are logged and
skipped; values of the wrong shape raise `SettingsError`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from nicerror.cli_shared.color import ColorMode
from nicerror.config.logging import get_logger
from nicerror.constants import (
    DEFAULT_CONTEXT_SIZE,
    ENV_CONTEXT_SIZE,
    NICERROR_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_TABLE,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from nicerror.config.logging import NicerrorLogger

TomlTable = dict[str, Any]

logger: NicerrorLogger = get_logger(__name__)

KEY_CONTEXT_SIZE: Final[str] = "context_size"
KEY_COLOR: Final[str] = "color"


class SettingsError(ValueError):
    """A configuration value has the wrong type or is out of range."""


@dataclass(frozen=True)
class RenderSettings:
    """Effective settings for rendering reports.

    Attributes:
        context_size (int): Lines of source shown on each side of the target line.
        color (ColorMode): User intent for colorized output.
    """

    context_size: int = DEFAULT_CONTEXT_SIZE
    color: ColorMode = ColorMode.AUTO

    def merge_table(self, table: Mapping[str, Any], origin: str) -> RenderSettings:
        """Return a copy updated with the recognized keys of ``table``.

        Args:
            table (Mapping[str, Any]): Parsed TOML table.
            origin (str): Human-readable source name used in error messages.

        Returns:
            RenderSettings: The updated settings.

        Raises:
            SettingsError: If a recognized key holds an invalid value.
        """
        updated: RenderSettings = self
        if KEY_CONTEXT_SIZE in table:
            updated = replace(
                updated, context_size=coerce_context_size(table[KEY_CONTEXT_SIZE], origin)
            )
        if KEY_COLOR in table:
            updated = replace(updated, color=coerce_color_mode(table[KEY_COLOR], origin))
        return updated


def coerce_context_size(value: object, origin: str) -> int:
    """Validate a context size read from a configuration source.

    Integer-like strings are accepted so that environment values can share
    this check.

    Raises:
        SettingsError: If ``value`` is not a non-negative integer.
    """
    size: int | None = None
    if isinstance(value, int) and not isinstance(value, bool):
        size = value
    elif isinstance(value, str) and value.strip().isdigit():
        size = int(value.strip())
    if size is None or size < 0:
        raise SettingsError(
            f"{origin}: '{KEY_CONTEXT_SIZE}' must be a non-negative integer, got {value!r}"
        )
    return size


def coerce_color_mode(value: object, origin: str) -> ColorMode:
    """Validate a color mode read from a configuration source.

    Raises:
        SettingsError: If ``value`` is not one of ``auto``, ``always``, ``never``.
    """
    if isinstance(value, str):
        try:
            return ColorMode(value.strip().lower())
        except ValueError:
            pass
    choices: str = ", ".join(m.value for m in ColorMode)
    raise SettingsError(f"{origin}: '{KEY_COLOR}' must be one of {choices}, got {value!r}")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content, or an empty dict when the file cannot be
            read or parsed (the failure is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _pyproject_table(path: Path) -> TomlTable:
    tool: Any = load_toml_dict(path).get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE, {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def load_settings(
    directory: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> RenderSettings:
    """Resolve the effective render settings.

    Args:
        directory (Path | None): Directory searched for ``pyproject.toml`` and
            ``nicerror.toml``. When None, only defaults and the environment apply.
        environ (Mapping[str, str] | None): Environment to consult; defaults to
            `os.environ`.

    Returns:
        RenderSettings: Settings with all layers applied.

    Raises:
        SettingsError: If any layer holds an invalid value.
    """
    settings = RenderSettings()

    if directory is not None:
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            logger.debug("Reading [tool.%s] from %s", PYPROJECT_TOOL_TABLE, pyproject)
            settings = settings.merge_table(_pyproject_table(pyproject), str(pyproject))

        nicerror_toml: Path = directory / NICERROR_TOML_NAME
        if nicerror_toml.is_file():
            logger.debug("Reading settings from %s", nicerror_toml)
            settings = settings.merge_table(load_toml_dict(nicerror_toml), str(nicerror_toml))

    env: Mapping[str, str] = os.environ if environ is None else environ
    env_size: str | None = env.get(ENV_CONTEXT_SIZE)
    if env_size:
        settings = replace(settings, context_size=coerce_context_size(env_size, ENV_CONTEXT_SIZE))

    logger.trace("Effective render settings: %s", settings)
    return settings
