"""Inspect commands -- examine descriptor documents and generator defaults.

* ``elmgen endpoints SOURCE`` -- table of the endpoints a document
  describes, with the Elm function name each one generates.
* ``elmgen imports`` -- the import block generated code needs.
"""

from __future__ import annotations

import typer

from elmgen.output import print_data, print_table


def endpoints_command(
    source: str = typer.Argument(
        ..., help="Descriptor file, http(s) URL, or '-' for stdin."
    ),
) -> None:
    """List the endpoints of a descriptor document.

    Example::

        elmgen endpoints api.yaml
        elmgen --json endpoints api.yaml
    """
    from elmgen.descriptors import load_descriptors
    from elmgen.generator.naming import elm_function_name

    descriptors = load_descriptors(source)

    headers = ["Function", "Method", "Path", "Returns"]
    rows: list[list[str]] = []
    for descriptor in descriptors:
        rows.append([
            elm_function_name(descriptor.function_name),
            descriptor.method,
            descriptor.path_template(),
            str(descriptor.return_type) if descriptor.return_type else "-",
        ])

    print_table(headers, rows, title=f"Endpoints ({len(rows)})")


def imports_command() -> None:
    """Print the imports required by generated code."""
    from elmgen.options import DEFAULT_IMPORTS

    print_data(DEFAULT_IMPORTS.rstrip("\n"))
