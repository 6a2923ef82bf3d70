"""elmgen -- Generate Elm HTTP client functions from endpoint descriptors.

This package turns a list of endpoint descriptors (method, path, captures,
query parameters, headers, body and response types) into Elm functions that
build ``Http.Request`` values, and assembles them into a ready-to-compile
Elm module.

Typical workflow::

    elmgen init --module Generated.Api              # write elmgen.json
    elmgen endpoints api.yaml                       # review the endpoints
    elmgen generate api.yaml --module Generated.Api # write Generated/Api.elm

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for descriptors and generator configuration.
    options: Generation options and the default imports preamble.
    typerefs: Default Elm type, encoder and decoder resolution.
    doc: Width-sensitive pretty-printing documents.
    generator: Per-endpoint code generation and rendering.
    descriptors: Loading descriptor documents from files, URLs or stdin.
    writer: Module assembly and file output.
    config: Configuration precedence and atomic file writes.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
