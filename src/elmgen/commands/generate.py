"""Generate command -- write an Elm module for a descriptor document.

Loads endpoint descriptors, resolves the effective configuration (CLI
flags over environment over ``elmgen.json``), generates one Elm function
per endpoint, and writes the assembled module under the output directory,
or prints it with ``--stdout``.

Usage::

    elmgen generate api.yaml
    elmgen generate api.yaml --module Api.Client --output-dir frontend/src
    elmgen generate https://example.com/endpoints.json --dynamic-url --stdout
"""

from __future__ import annotations

from typing import Optional

import typer

from elmgen.output import debug, info, print_source, success, suggest, warning


def generate_command(
    source: str = typer.Argument(
        ..., help="Descriptor file, http(s) URL, or '-' for stdin."
    ),
    module: Optional[str] = typer.Option(
        None, "--module", "-m", help="Elm module name, e.g. Generated.Api."
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", "-d", help="Directory the module file is written under."
    ),
    url_prefix: Optional[str] = typer.Option(
        None, "--url-prefix", help="Static base URL baked into every request."
    ),
    dynamic_url: Optional[bool] = typer.Option(
        None,
        "--dynamic-url/--static-url",
        help="Take the base URL as the first argument of every function.",
    ),
    include: Optional[list[str]] = typer.Option(
        None, "--include", "-i", help="Elm file with declarations to copy into the module."
    ),
    to_stdout: bool = typer.Option(
        False, "--stdout", help="Print the module instead of writing it."
    ),
) -> None:
    """Generate an Elm module with one HTTP request function per endpoint.

    Errors propagate as :class:`~elmgen.exceptions.ElmgenError` and are
    turned into exit codes by :func:`elmgen.app.main`.

    Example::

        elmgen generate api.yaml --module Generated.Api --output-dir src
    """
    from elmgen.config import build_options, resolve_config
    from elmgen.descriptors import load_descriptors
    from elmgen.exceptions import InvalidUsageError
    from elmgen.generator import generate_elm_for_api
    from elmgen.writer import read_includes, render_module, write_module

    if url_prefix is not None and dynamic_url:
        raise InvalidUsageError("--url-prefix cannot be combined with --dynamic-url")

    config = resolve_config(
        cli_url_prefix=url_prefix,
        cli_dynamic_url=dynamic_url,
        cli_module=module,
        cli_output_dir=output_dir,
        cli_includes=include,
    )
    debug(f"Effective config: {config.model_dump()}")

    descriptors = load_descriptors(source)
    debug(f"Loaded {len(descriptors)} endpoint descriptors from {source}")
    if not descriptors:
        warning(f"No endpoints found in {source}")

    functions = generate_elm_for_api(descriptors, build_options(config))
    dropped = len(descriptors) - len(functions)
    if dropped:
        info(f"Skipped {dropped} duplicate endpoint definition(s)")

    source_text = render_module(
        config.module_name, functions, includes=read_includes(config.includes)
    )

    if to_stdout:
        print_source(source_text)
        return

    path = write_module(config.output_dir, config.module_name, source_text)
    success(f"Wrote {len(functions)} functions to {path}")
    if not config.includes:
        suggest("Add type, decoder and encoder declarations with --include")
