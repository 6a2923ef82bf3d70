"""Assemble generated functions into an Elm module file.

The generator produces one Elm function per endpoint. This module wraps
them into a complete module -- header, the imports from
:data:`~elmgen.options.DEFAULT_IMPORTS`, any hand-written declarations the
project includes (type definitions, decoders, encoders), then the
functions -- and writes it to the path implied by the module name::

    Generated.Api  ->  <output_dir>/Generated/Api.elm

Rendering goes through the Jinja2 template ``templates/module.elm.j2``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from elmgen.config import atomic_write
from elmgen.exceptions import ConfigError, OutputError
from elmgen.options import DEFAULT_IMPORTS


TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``elmgen/templates/``)."""

_MODULE_NAME_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*(\.[A-Z][A-Za-z0-9_]*)*$")


def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for module templates.

    Autoescape is off for ``.elm.j2`` files, which produce Elm, not HTML.
    Block trimming and lstrip keep the template readable without leaking
    whitespace into the module.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(disabled_extensions=("elm.j2",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def validate_module_name(module_name: str) -> None:
    """Reject names Elm would not accept, such as ``generated.api``.

    Raises:
        ConfigError: If *module_name* is not a dotted sequence of
            capitalised identifiers.
    """
    if not _MODULE_NAME_RE.match(module_name):
        raise ConfigError(
            f"Invalid Elm module name {module_name!r}; "
            "expected capitalised dotted names such as 'Generated.Api'"
        )


def render_module(
    module_name: str,
    functions: Sequence[str],
    includes: Sequence[str] = (),
    imports: str = DEFAULT_IMPORTS,
) -> str:
    """Render a complete Elm module.

    Args:
        module_name: Dotted Elm module name, e.g. ``"Generated.Api"``.
        functions: Generated function definitions, in order.
        includes: Extra declarations placed before the functions.
        imports: Import block placed after the module header.

    Returns:
        The module source, ending with a newline.
    """
    validate_module_name(module_name)
    template = _create_jinja_env().get_template("module.elm.j2")
    return template.render(
        module_name=module_name,
        imports=imports,
        declarations=[*includes, *functions],
    )


def module_path(output_dir: str | Path, module_name: str) -> Path:
    """``Generated.Api`` under *output_dir* -> ``<output_dir>/Generated/Api.elm``."""
    validate_module_name(module_name)
    parts = module_name.split(".")
    return Path(output_dir).joinpath(*parts[:-1], parts[-1] + ".elm")


def read_includes(paths: Iterable[str]) -> list[str]:
    """Read hand-written Elm declarations to copy into the module.

    Raises:
        ConfigError: If an include file is missing or unreadable.
    """
    contents: list[str] = []
    for raw in paths:
        path = Path(raw).expanduser()
        if not path.is_file():
            raise ConfigError(f"Include file not found: {path}")
        try:
            contents.append(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Cannot read include file {path}: {exc}") from exc
    return contents


def write_module(output_dir: str | Path, module_name: str, source: str) -> Path:
    """Atomically write *source* to the file for *module_name* and return its path.

    Raises:
        OutputError: If the file or its directories cannot be written.
    """
    path = module_path(output_dir, module_name)
    try:
        atomic_write(path, source)
    except OSError as exc:
        raise OutputError(f"Cannot write module {module_name} to {path}: {exc}") from exc
    return path
