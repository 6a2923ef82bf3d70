"""Init command -- write a project-local ``elmgen.json``.

Implements the ``elmgen init`` top-level command. The written file is the
lowest-precedence layer read by :func:`~elmgen.config.resolve_config`, so
later ``elmgen generate`` runs in the same directory pick it up without
repeating flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from elmgen.output import debug, info, success, suggest


def init_command(
    module: str = typer.Option(
        "Generated.Api", "--module", "-m", help="Elm module name, e.g. Generated.Api."
    ),
    output_dir: str = typer.Option(
        ".", "--output-dir", "-d", help="Directory the module file is written under."
    ),
    url_prefix: str = typer.Option(
        "", "--url-prefix", help="Static base URL baked into every request."
    ),
    dynamic_url: bool = typer.Option(
        False, "--dynamic-url", help="Take the base URL as a function argument."
    ),
    string_type: Optional[list[str]] = typer.Option(
        None, "--string-type", help="Extra type that is already a string."
    ),
    empty_type: Optional[list[str]] = typer.Option(
        None, "--empty-type", help="Extra type meaning 'no response body'."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing elmgen.json."
    ),
) -> None:
    """Create ``elmgen.json`` in the current directory.

    The settings are validated before anything is written: the module name
    must be a dotted Elm module name and extra type names must parse as
    type shorthand.

    Raises:
        InvalidUsageError: If ``elmgen.json`` exists and ``--force`` is not
            given, or ``--url-prefix`` is combined with ``--dynamic-url``.
        ConfigError: If a setting is invalid.

    Example::

        elmgen init --module Api.Client --output-dir frontend/src
        elmgen init --dynamic-url --string-type Isbn
    """
    from elmgen.config import build_options, save_project_config
    from elmgen.exceptions import InvalidUsageError
    from elmgen.models import GeneratorConfig
    from elmgen.writer import validate_module_name

    if url_prefix and dynamic_url:
        raise InvalidUsageError("--url-prefix cannot be combined with --dynamic-url")

    target = Path.cwd() / "elmgen.json"
    if target.exists():
        if not force:
            raise InvalidUsageError(f"{target} already exists (use --force to overwrite)")
        info(f"Overwriting {target}")

    config = GeneratorConfig(
        url_prefix=url_prefix,
        dynamic_url=dynamic_url,
        module_name=module,
        output_dir=output_dir,
        string_types=string_type or [],
        empty_response_types=empty_type or [],
    )
    validate_module_name(config.module_name)
    build_options(config)
    debug(f"Project config: {config.model_dump()}")

    path = save_project_config(config)
    success(f"Wrote {path}")
    suggest("Generate the module: elmgen generate <descriptors>")
