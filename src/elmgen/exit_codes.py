"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~elmgen.exceptions.ElmgenError` subclass.
Build scripts that call ``elmgen generate`` can inspect the exit code to
tell a broken descriptor file from a broken endpoint without parsing stderr.

Example::

    $ elmgen generate api.yaml
    $ echo $?
    8   # EXIT_GENERATION_ERROR -- an endpoint has no return type
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid or conflicting arguments."""

EXIT_DESCRIPTOR_ERROR = 7
"""The endpoint descriptor source could not be loaded or validated."""

EXIT_GENERATION_ERROR = 8
"""An endpoint descriptor violated the generator's contract."""

EXIT_OUTPUT_ERROR = 9
"""The generated module could not be written."""
