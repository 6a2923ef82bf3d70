"""Canonical Pydantic models shared across all elmgen modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Descriptor models** -- immutable inputs to the generator, one
:class:`RequestDescriptor` per API endpoint:
    :class:`TypeRef`, :class:`StaticSegment`, :class:`CaptureSegment`,
    :class:`QueryKind`, :class:`QueryParam`, :class:`HeaderParam`, and
    :class:`RequestDescriptor`.

**Configuration models** -- serialised as JSON in the project's
``elmgen.json``:
    :class:`GeneratorConfig`.

Descriptor models are frozen so that generation can never mutate its input,
and so that :class:`TypeRef` values are hashable and usable in the
classification sets of :class:`~elmgen.options.ElmOptions`.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Type references ---


class TypeRef(BaseModel):
    """Opaque handle to an Elm type.

    The generator never looks inside a ``TypeRef``; it only hands it to the
    resolver callbacks of :class:`~elmgen.options.ElmOptions` and checks it
    for membership in the classification sets. The ``name``/``args`` shape
    exists so that the default resolvers in :mod:`elmgen.typerefs` can
    render applied types such as ``List (Book)``.

    A plain string is accepted wherever a ``TypeRef`` is validated and is
    parsed with :func:`~elmgen.typerefs.parse_type`::

        TypeRef.model_validate("List (Maybe Int)")
    """

    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[TypeRef, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            from elmgen.typerefs import parse_type

            return parse_type(data).model_dump()
        return data

    @classmethod
    def of(cls, name: str, *args: TypeRef) -> TypeRef:
        """Build a (possibly applied) type: ``TypeRef.of("Dict", k, v)``."""
        return cls(name=name, args=args)

    @classmethod
    def maybe(cls, inner: TypeRef) -> TypeRef:
        return cls(name="Maybe", args=(inner,))

    @classmethod
    def list_of(cls, inner: TypeRef) -> TypeRef:
        return cls(name="List", args=(inner,))

    def __str__(self) -> str:
        from elmgen.typerefs import elm_type_ref

        return elm_type_ref(self)


# --- Path segments ---


class StaticSegment(BaseModel):
    """A literal path segment such as ``books`` in ``/books/{id}``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    text: str


class CaptureSegment(BaseModel):
    """A captured path segment; becomes a ``capture_<name>`` argument."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["capture"] = "capture"
    name: str
    type: TypeRef


PathSegment = Annotated[
    Union[StaticSegment, CaptureSegment], Field(discriminator="kind")
]


# --- Query and header parameters ---


class QueryKind(str, enum.Enum):
    """How a query parameter is encoded in the query string.

    ``NORMAL`` parameters are optional single values (``Maybe a`` in the
    signature), ``FLAG`` parameters are booleans rendered as ``name=`` when
    set, and ``LIST`` parameters repeat as ``name[]=value``.
    """

    NORMAL = "normal"
    FLAG = "flag"
    LIST = "list"


class QueryParam(BaseModel):
    """A single query-string parameter of an endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef
    kind: QueryKind = QueryKind.NORMAL


class HeaderParam(BaseModel):
    """A request header supplied by the caller of the generated function."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef


# --- Endpoint descriptor ---


class RequestDescriptor(BaseModel):
    """Everything the generator needs to know about one API endpoint.

    Descriptors are built once by an upstream collaborator (or loaded by
    :mod:`elmgen.descriptors`) and are read-only afterwards. The
    ``return_type`` is optional in the model only so that a broken upstream
    can be reported: generation raises
    :class:`~elmgen.exceptions.MissingReturnTypeError` when it is absent.

    Example::

        RequestDescriptor(
            function_name="get_books_by_id",
            method="GET",
            path=[StaticSegment(text="books"),
                  CaptureSegment(name="id", type=TypeRef.of("Int"))],
            return_type=TypeRef.of("Book"),
        )
    """

    model_config = ConfigDict(frozen=True)

    function_name: str
    method: str
    path: tuple[PathSegment, ...] = ()
    query: tuple[QueryParam, ...] = ()
    headers: tuple[HeaderParam, ...] = ()
    body: Optional[TypeRef] = None
    return_type: Optional[TypeRef] = None

    @property
    def captures(self) -> list[CaptureSegment]:
        """Captured path segments, in path order."""
        return [seg for seg in self.path if isinstance(seg, CaptureSegment)]

    def path_template(self) -> str:
        """Human-readable path such as ``/books/{id}`` for listings and logs."""
        parts = []
        for seg in self.path:
            if isinstance(seg, CaptureSegment):
                parts.append("{" + seg.name + "}")
            else:
                parts.append(seg.text)
        return "/" + "/".join(parts)


# --- Configuration ---


class GeneratorConfig(BaseModel):
    """Project configuration persisted at ``./elmgen.json``.

    Loaded by :func:`~elmgen.config.load_project_config` and merged with
    environment variables and CLI flags by
    :func:`~elmgen.config.resolve_config`. Type names in
    ``empty_response_types`` and ``string_types`` use the shorthand accepted
    by :func:`~elmgen.typerefs.parse_type` and are added to the defaults.
    """

    url_prefix: str = Field(
        default="", description="Static base URL baked into every request"
    )
    dynamic_url: bool = Field(
        default=False, description="Take the base URL as the first argument instead"
    )
    module_name: str = Field(
        default="Generated.Api", description="Elm module name of the output file"
    )
    output_dir: str = Field(
        default=".", description="Directory the module path is created under"
    )
    empty_response_types: list[str] = Field(
        default_factory=list, description="Extra types meaning 'no response body'"
    )
    string_types: list[str] = Field(
        default_factory=list, description="Extra types that are already strings"
    )
    includes: list[str] = Field(
        default_factory=list,
        description="Files with Elm declarations copied into the module",
    )
