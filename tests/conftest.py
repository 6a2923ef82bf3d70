"""Shared test fixtures for elmgen.

Provides reusable endpoint descriptors, generator options, fixture paths,
and output state management. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from elmgen.models import (
    CaptureSegment,
    HeaderParam,
    QueryKind,
    QueryParam,
    RequestDescriptor,
    StaticSegment,
    TypeRef,
)
from elmgen.options import DynamicPrefix, ElmOptions
from elmgen.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    Resetting forces a fresh manager to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host configuration out of the tests.

    Runs every test in an empty working directory (so no stray
    ``elmgen.json`` is picked up) with the ``ELMGEN_*`` variables unset.
    """
    for name in (
        "ELMGEN_URL_PREFIX",
        "ELMGEN_DYNAMIC_URL",
        "ELMGEN_MODULE",
        "ELMGEN_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@pytest.fixture
def books_yaml() -> Path:
    """Path to the book catalogue descriptor document."""
    return FIXTURES_DIR / "books.yaml"


@pytest.fixture
def types_elm() -> Path:
    """Path to hand-written Elm declarations for the book catalogue."""
    return FIXTURES_DIR / "Types.elm"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@pytest.fixture
def options() -> ElmOptions:
    return ElmOptions()


@pytest.fixture
def dynamic_options() -> ElmOptions:
    return ElmOptions(url_prefix=DynamicPrefix())


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@pytest.fixture
def get_book_by_id() -> RequestDescriptor:
    """``GET /books/{id}`` returning a ``Book``."""
    return RequestDescriptor(
        function_name="get_books_by_id",
        method="GET",
        path=(
            StaticSegment(text="books"),
            CaptureSegment(name="id", type=TypeRef.of("Int")),
        ),
        return_type=TypeRef.of("Book"),
    )


@pytest.fixture
def get_books() -> RequestDescriptor:
    """``GET /books`` with a flag and a normal query parameter."""
    return RequestDescriptor(
        function_name="get_books",
        method="GET",
        path=(StaticSegment(text="books"),),
        query=(
            QueryParam(name="published", type=TypeRef.of("Bool"), kind=QueryKind.FLAG),
            QueryParam(name="sort", type=TypeRef.of("String")),
        ),
        return_type=TypeRef.list_of(TypeRef.of("Book")),
    )


@pytest.fixture
def post_book() -> RequestDescriptor:
    """``POST /books`` with a header and a JSON body, returning ``NoContent``."""
    return RequestDescriptor(
        function_name="post_books",
        method="POST",
        path=(StaticSegment(text="books"),),
        headers=(HeaderParam(name="X-Request-Id", type=TypeRef.of("String")),),
        body=TypeRef.of("Book"),
        return_type=TypeRef.of("NoContent"),
    )


@pytest.fixture
def descriptor_without_return() -> RequestDescriptor:
    return RequestDescriptor(
        function_name="get_nothing",
        method="GET",
        path=(StaticSegment(text="nothing"),),
    )
