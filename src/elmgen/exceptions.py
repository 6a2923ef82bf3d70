"""Exception hierarchy for elmgen.

All exceptions inherit from :class:`ElmgenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`elmgen.exit_codes`.
The top-level error handler in :func:`elmgen.app.main` catches
``ElmgenError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    ElmgenError (exit 1)
    +-- InvalidUsageError          (exit 2)
    +-- DescriptorError            (exit 7)
    |   +-- TypeExpressionError    (exit 7)
    +-- GenerationError            (exit 8)
    |   +-- MissingReturnTypeError (exit 8)
    |   +-- ArgumentCollisionError (exit 8)
    +-- OutputError                (exit 9)
    +-- ConfigError                (exit 1)
"""

from elmgen.exit_codes import (
    EXIT_DESCRIPTOR_ERROR,
    EXIT_GENERATION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_OUTPUT_ERROR,
)


class ElmgenError(Exception):
    """Base exception for all elmgen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`elmgen.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ElmgenError):
    """Raised for invalid or conflicting CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class DescriptorError(ElmgenError):
    """Raised when a descriptor source cannot be read, parsed, or validated."""

    exit_code = EXIT_DESCRIPTOR_ERROR


class TypeExpressionError(DescriptorError):
    """Raised when a type shorthand such as ``"List (Maybe Int)"`` is malformed."""


class GenerationError(ElmgenError):
    """Raised when an endpoint descriptor breaks the generator's contract.

    These are never retried: generation is pure, so running it again on
    the same descriptor fails the same way.
    """

    exit_code = EXIT_GENERATION_ERROR


class MissingReturnTypeError(GenerationError):
    """Raised when a descriptor carries no return type.

    Every well-formed endpoint has one; its absence means the upstream
    descriptor builder is broken, so generation aborts with no partial
    output.
    """

    def __init__(self, function_name: str):
        super().__init__(f"Endpoint '{function_name}' has no return type")
        self.function_name = function_name


class ArgumentCollisionError(GenerationError):
    """Raised when two parts of one endpoint derive the same argument name."""

    def __init__(self, function_name: str, names: list[str]):
        joined = ", ".join(names)
        super().__init__(
            f"Endpoint '{function_name}' derives duplicate argument names: {joined}"
        )
        self.function_name = function_name
        self.names = names


class OutputError(ElmgenError):
    """Raised when the generated Elm module cannot be written to disk."""

    exit_code = EXIT_OUTPUT_ERROR


class ConfigError(ElmgenError):
    """Raised for configuration problems (invalid ``elmgen.json``, bad environment values)."""

    exit_code = EXIT_GENERIC_FAILURE
