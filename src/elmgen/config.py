"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for elmgen:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.elmgen/`` on macOS and Windows. See :func:`get_data_dir`.
* **Project config** -- An optional ``./elmgen.json`` deserialised into a
  :class:`~elmgen.models.GeneratorConfig`.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, and project config into the effective
  configuration; :func:`build_options` turns it into
  :class:`~elmgen.options.ElmOptions`.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`) so that an interrupted run never leaves a half-written
Elm module behind.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from elmgen.exceptions import ConfigError, TypeExpressionError
from elmgen.models import GeneratorConfig
from elmgen.options import (
    DEFAULT_EMPTY_RESPONSE_TYPES,
    DEFAULT_STRING_TYPES,
    DynamicPrefix,
    ElmOptions,
    StaticPrefix,
)
from elmgen.typerefs import parse_type

_APP_NAME = "elmgen"
_PROJECT_CONFIG_FILENAME = "elmgen.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/elmgen/`` (default ``~/.local/share/elmgen/``).
    On macOS/Windows: ``~/.elmgen/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Project-local config ---


def load_project_config(directory: Optional[Path] = None) -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``elmgen.json``.

    Args:
        directory: Where to look; the current working directory by default.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or is not
            an object.
    """
    path = (directory or Path.cwd()) / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Project config at {path} must be a JSON object")
    return data


def save_project_config(config: GeneratorConfig, directory: Optional[Path] = None) -> Path:
    """Persist *config* atomically as ``elmgen.json`` and return its path."""
    path = (directory or Path.cwd()) / _PROJECT_CONFIG_FILENAME
    data = config.model_dump(mode="json")
    atomic_write(path, json.dumps(data, indent=2) + "\n")
    return path


# --- Precedence resolution ---


def _env_bool(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Environment variable {name} must be a boolean (got {value!r})")


def resolve_config(
    cli_url_prefix: Optional[str] = None,
    cli_dynamic_url: Optional[bool] = None,
    cli_module: Optional[str] = None,
    cli_output_dir: Optional[str] = None,
    cli_includes: Optional[list[str]] = None,
) -> GeneratorConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags
        2. Environment variables (``ELMGEN_URL_PREFIX``,
           ``ELMGEN_DYNAMIC_URL``, ``ELMGEN_MODULE``, ``ELMGEN_OUTPUT_DIR``)
        3. Project config (``./elmgen.json``)
        4. Defaults

    A static URL prefix given at a higher level switches off a dynamic
    prefix set at a lower one, and vice versa.

    Returns:
        The effective :class:`~elmgen.models.GeneratorConfig`.

    Raises:
        ConfigError: If the project config or an environment value is invalid.
    """
    # 4 + 3. Defaults overlaid with the project file
    project = load_project_config() or {}
    try:
        config = GeneratorConfig.model_validate(project)
    except ValidationError as exc:
        raise ConfigError(f"Invalid project config: {exc}") from exc
    values = config.model_dump()

    # 2. Environment variables
    env_prefix = os.environ.get("ELMGEN_URL_PREFIX")
    if env_prefix is not None:
        values["url_prefix"] = env_prefix
        values["dynamic_url"] = False
    env_dynamic = _env_bool("ELMGEN_DYNAMIC_URL")
    if env_dynamic is not None:
        values["dynamic_url"] = env_dynamic
    if os.environ.get("ELMGEN_MODULE"):
        values["module_name"] = os.environ["ELMGEN_MODULE"]
    if os.environ.get("ELMGEN_OUTPUT_DIR"):
        values["output_dir"] = os.environ["ELMGEN_OUTPUT_DIR"]

    # 1. CLI flags (highest precedence)
    if cli_url_prefix is not None:
        values["url_prefix"] = cli_url_prefix
        values["dynamic_url"] = False
    if cli_dynamic_url is not None:
        values["dynamic_url"] = cli_dynamic_url
    if cli_module is not None:
        values["module_name"] = cli_module
    if cli_output_dir is not None:
        values["output_dir"] = cli_output_dir
    if cli_includes:
        values["includes"] = list(values["includes"]) + list(cli_includes)

    return GeneratorConfig.model_validate(values)


def build_options(config: GeneratorConfig) -> ElmOptions:
    """Translate a :class:`~elmgen.models.GeneratorConfig` into generator options.

    Extra empty-response and string type names are parsed with
    :func:`~elmgen.typerefs.parse_type` and added to the defaults.

    Raises:
        ConfigError: If a configured type name is malformed.
    """
    try:
        empty_types = frozenset(parse_type(name) for name in config.empty_response_types)
        string_types = frozenset(parse_type(name) for name in config.string_types)
    except TypeExpressionError as exc:
        raise ConfigError(f"Invalid type in configuration: {exc}") from exc

    if config.dynamic_url:
        url_prefix = DynamicPrefix()
    else:
        url_prefix = StaticPrefix(url=config.url_prefix)

    return ElmOptions(
        url_prefix=url_prefix,
        empty_response_types=DEFAULT_EMPTY_RESPONSE_TYPES | empty_types,
        string_types=DEFAULT_STRING_TYPES | string_types,
    )
