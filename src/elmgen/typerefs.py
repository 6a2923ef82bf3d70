"""Default Elm type-reference resolution and the type shorthand parser.

The generator treats :class:`~elmgen.models.TypeRef` values as opaque and
asks three resolver callbacks on :class:`~elmgen.options.ElmOptions` for
the text to emit. This module provides the default resolvers, which follow
the naming conventions of elm-export generated code:

* :func:`elm_type_ref` -- ``Int``, ``Maybe (Int)``, ``List (Book)``
* :func:`elm_decoder_ref` -- ``int``, ``(list decodeBook)``
* :func:`elm_encoder_ref` -- ``Json.Encode.int``, ``encodeBook``

Decoder references assume ``import Json.Decode exposing (..)``, which is
part of :data:`~elmgen.options.DEFAULT_IMPORTS`.

It also provides :func:`parse_type`, which turns shorthand such as
``"List (Maybe Int)"`` into a ``TypeRef`` tree for descriptor files and
configuration.
"""

from __future__ import annotations

import re

from elmgen.exceptions import TypeExpressionError
from elmgen.models import TypeRef


UNIT = "()"

_PRIMITIVE_DECODERS: dict[str, str] = {
    "Int": "int",
    "Float": "float",
    "String": "string",
    "Bool": "bool",
    "Char": "char",
}

_PRIMITIVE_ENCODERS: dict[str, str] = {
    "Int": "Json.Encode.int",
    "Float": "Json.Encode.float",
    "String": "Json.Encode.string",
    "Bool": "Json.Encode.bool",
    "Char": "(String.fromChar >> Json.Encode.string)",
}


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def elm_type_ref(ref: TypeRef) -> str:
    """Render *ref* as an Elm type, parenthesising every argument.

    Example::

        >>> elm_type_ref(TypeRef.maybe(TypeRef.of("Int")))
        'Maybe (Int)'
    """
    if not ref.args:
        return ref.name
    return ref.name + "".join(f" ({elm_type_ref(arg)})" for arg in ref.args)


def elm_decoder_ref(ref: TypeRef) -> str:
    """Return the Elm ``Json.Decode`` expression decoding *ref*."""
    if ref.name == UNIT:
        return "(succeed ())"
    if ref.name == "List" and len(ref.args) == 1:
        return f"(list {elm_decoder_ref(ref.args[0])})"
    if ref.name == "Maybe" and len(ref.args) == 1:
        return f"(maybe {elm_decoder_ref(ref.args[0])})"
    if ref.name in _PRIMITIVE_DECODERS and not ref.args:
        return _PRIMITIVE_DECODERS[ref.name]
    return "decode" + _qualified_tail(ref.name)


def elm_encoder_ref(ref: TypeRef) -> str:
    """Return the Elm expression turning a value of *ref* into a ``Json.Encode.Value``."""
    if ref.name == UNIT:
        return "(always Json.Encode.null)"
    if ref.name == "List" and len(ref.args) == 1:
        return f"(Json.Encode.list << List.map {elm_encoder_ref(ref.args[0])})"
    if ref.name == "Maybe" and len(ref.args) == 1:
        inner = elm_encoder_ref(ref.args[0])
        return f"(Maybe.withDefault Json.Encode.null << Maybe.map {inner})"
    if ref.name in _PRIMITIVE_ENCODERS and not ref.args:
        return _PRIMITIVE_ENCODERS[ref.name]
    return "encode" + _qualified_tail(ref.name)


def _qualified_tail(name: str) -> str:
    # "Api.Book" -> "Book"; decoders live next to the type, unqualified.
    return name.rsplit(".", 1)[-1]


# ---------------------------------------------------------------------------
# Shorthand parser
# ---------------------------------------------------------------------------

_TOKEN_RE = re.compile(r"\s*(?:(\(\))|([()])|([A-Za-z_][A-Za-z0-9_.']*))")


def parse_type(text: str) -> TypeRef:
    """Parse an Elm-like type expression into a :class:`TypeRef`.

    Application is left-associative juxtaposition and parentheses group,
    so ``"Dict String (List Int)"`` is ``Dict`` applied to ``String`` and
    ``List Int``. ``"()"`` is the unit type.

    Args:
        text: The type expression.

    Returns:
        The parsed type reference.

    Raises:
        TypeExpressionError: If *text* is empty or malformed.

    Example::

        >>> parse_type("List (Maybe Bool)") == TypeRef.list_of(
        ...     TypeRef.maybe(TypeRef.of("Bool")))
        True
    """
    tokens = _tokenize(text)
    if not tokens:
        raise TypeExpressionError(f"Empty type expression: {text!r}")
    ref, pos = _parse_application(tokens, 0, text)
    if pos != len(tokens):
        raise TypeExpressionError(
            f"Unexpected {tokens[pos]!r} in type expression {text!r}"
        )
    return ref


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN_RE.match(stripped, pos)
        if match is None:
            raise TypeExpressionError(
                f"Invalid character {stripped[pos]!r} in type expression {text!r}"
            )
        tokens.append(next(group for group in match.groups() if group))
        pos = match.end()
    return tokens


def _parse_application(
    tokens: list[str], pos: int, text: str
) -> tuple[TypeRef, int]:
    head, pos = _parse_atom(tokens, pos, text)
    args: list[TypeRef] = []
    while pos < len(tokens) and tokens[pos] != ")":
        arg, pos = _parse_atom(tokens, pos, text)
        args.append(arg)
    if not args:
        return head, pos
    if head.args or head.name == UNIT:
        raise TypeExpressionError(
            f"Cannot apply type {elm_type_ref(head)!r} in {text!r}"
        )
    return TypeRef.of(head.name, *args), pos


def _parse_atom(tokens: list[str], pos: int, text: str) -> tuple[TypeRef, int]:
    if pos >= len(tokens):
        raise TypeExpressionError(f"Unexpected end of type expression {text!r}")
    token = tokens[pos]
    if token == UNIT:
        return TypeRef.of(UNIT), pos + 1
    if token == "(":
        inner, pos = _parse_application(tokens, pos + 1, text)
        if pos >= len(tokens) or tokens[pos] != ")":
            raise TypeExpressionError(f"Unbalanced parentheses in {text!r}")
        return inner, pos + 1
    if token == ")":
        raise TypeExpressionError(f"Unbalanced parentheses in {text!r}")
    return TypeRef.of(token), pos + 1
