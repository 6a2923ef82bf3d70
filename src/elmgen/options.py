"""Generation options: URL prefix mode, type classification, type resolution.

:class:`ElmOptions` is a frozen value passed explicitly to every generation
call; the generator has no other configuration and no global state. The
outer layers build one from :class:`~elmgen.models.GeneratorConfig` via
:func:`~elmgen.config.build_options`.
"""

from __future__ import annotations

from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field

from elmgen.models import TypeRef
from elmgen.typerefs import UNIT, elm_decoder_ref, elm_encoder_ref, elm_type_ref


DEFAULT_IMPORTS = "\n".join(
    [
        "import Json.Decode exposing (..)",
        "import Json.Decode.Pipeline exposing (..)",
        "import Json.Encode",
        "import Http",
        "import String",
    ]
) + "\n"
"""Imports required by generated code; put them at the top of the Elm module."""


class StaticPrefix(BaseModel):
    """Bake a fixed base URL, e.g. ``"https://example.com/api"``, into every request."""

    model_config = ConfigDict(frozen=True)

    url: str = ""


class DynamicPrefix(BaseModel):
    """Take the base URL as a leading ``urlBase : String`` argument."""

    model_config = ConfigDict(frozen=True)


UrlPrefix = Union[StaticPrefix, DynamicPrefix]


DEFAULT_EMPTY_RESPONSE_TYPES: frozenset[TypeRef] = frozenset(
    {TypeRef.of("NoContent"), TypeRef.of(UNIT)}
)
DEFAULT_STRING_TYPES: frozenset[TypeRef] = frozenset({TypeRef.of("String")})


class ElmOptions(BaseModel):
    """Options controlling how Elm code is generated.

    Attributes:
        url_prefix: :class:`StaticPrefix` (default, empty URL) or
            :class:`DynamicPrefix`.
        empty_response_types: Return types meaning "the response has no
            body". Endpoints returning one of these check that the body is
            empty instead of decoding JSON.
        string_types: Types that are already strings and must not be passed
            through ``toString`` (which would add quotes).
        type_name: Resolver for the display name of a type.
        encoder_name: Resolver for the JSON encoder of a type.
        decoder_name: Resolver for the JSON decoder of a type.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url_prefix: UrlPrefix = Field(default_factory=StaticPrefix)
    empty_response_types: frozenset[TypeRef] = DEFAULT_EMPTY_RESPONSE_TYPES
    string_types: frozenset[TypeRef] = DEFAULT_STRING_TYPES
    type_name: Callable[[TypeRef], str] = elm_type_ref
    encoder_name: Callable[[TypeRef], str] = elm_encoder_ref
    decoder_name: Callable[[TypeRef], str] = elm_decoder_ref

    @property
    def is_dynamic(self) -> bool:
        return isinstance(self.url_prefix, DynamicPrefix)

    def is_empty_type(self, ref: TypeRef) -> bool:
        """Whether endpoints returning *ref* expect an empty response body."""
        return ref in self.empty_response_types

    def is_string_type(self, ref: TypeRef) -> bool:
        """Whether values of *ref* skip ``toString`` before URI encoding."""
        return ref in self.string_types


DEFAULT_OPTIONS = ElmOptions()
