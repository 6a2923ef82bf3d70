"""Type signature and argument list of a generated function.

Both builders walk the descriptor through :func:`request_parts`, so the
n-th type in the signature always belongs to the n-th formal argument.
"""

from __future__ import annotations

from collections import Counter

from elmgen.doc import Doc, hsep, punctuate, text
from elmgen.exceptions import ArgumentCollisionError, MissingReturnTypeError
from elmgen.generator.naming import (
    BODY_ARG,
    URL_BASE_ARG,
    capture_arg,
    header_arg,
    query_arg,
)
from elmgen.models import QueryKind, RequestDescriptor, TypeRef
from elmgen.options import ElmOptions


def request_parts(descriptor: RequestDescriptor) -> list[tuple[str, TypeRef]]:
    """Argument name and signature type of every part, in order.

    Captures come first (static segments contribute nothing), then query
    parameters (normal ones are optional, so wrapped in ``Maybe``), then
    headers, then the request body.
    """
    parts: list[tuple[str, TypeRef]] = []
    for capture in descriptor.captures:
        parts.append((capture_arg(capture), capture.type))
    for param in descriptor.query:
        if param.kind == QueryKind.NORMAL:
            parts.append((query_arg(param), TypeRef.maybe(param.type)))
        else:
            parts.append((query_arg(param), param.type))
    for header in descriptor.headers:
        parts.append((header_arg(header), header.type))
    if descriptor.body is not None:
        parts.append((BODY_ARG, descriptor.body))
    return parts


def argument_names(options: ElmOptions, descriptor: RequestDescriptor) -> list[str]:
    """All formal arguments of the generated function, ``urlBase`` first when dynamic."""
    names = [URL_BASE_ARG] if options.is_dynamic else []
    names.extend(name for name, _ in request_parts(descriptor))
    return names


def check_argument_names(options: ElmOptions, descriptor: RequestDescriptor) -> None:
    """Reject descriptors whose parts derive the same argument name twice.

    Raises:
        ArgumentCollisionError: Listing every duplicated name.
    """
    counts = Counter(argument_names(options, descriptor))
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise ArgumentCollisionError(descriptor.function_name, duplicates)


def return_type(descriptor: RequestDescriptor) -> TypeRef:
    """The descriptor's return type.

    Raises:
        MissingReturnTypeError: If the descriptor has none.
    """
    if descriptor.return_type is None:
        raise MissingReturnTypeError(descriptor.function_name)
    return descriptor.return_type


def mk_type_signature(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    """``String -> Int -> Http.Request (Book)``"""
    result = f"Http.Request ({options.type_name(return_type(descriptor))})"
    types = ["String"] if options.is_dynamic else []
    types.extend(options.type_name(ref) for _, ref in request_parts(descriptor))
    types.append(result)
    return hsep(punctuate(text(" ->"), [text(t) for t in types]))


def mk_args(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    """``urlBase capture_id body``"""
    return hsep([text(name) for name in argument_names(options, descriptor)])
