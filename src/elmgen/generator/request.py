"""The ``Http.request`` expression of a generated function.

Assembles the seven record fields Elm's ``Http.request`` takes. Only
``method``, ``headers``, ``url``, ``body`` and ``expect`` depend on the
descriptor; ``timeout`` is always ``Nothing`` and ``withCredentials``
always ``False``.

The ``expect`` field branches on the return type. Types in
:attr:`~elmgen.options.ElmOptions.empty_response_types` get a handler that
succeeds with the type's constructor only when the response body is
exactly empty; every other type is decoded as JSON.
"""

from __future__ import annotations

from elmgen.doc import (
    LINE,
    Doc,
    above,
    beside,
    braces,
    dquotes,
    indent,
    parens,
    text,
    vsep,
)
from elmgen.generator.naming import BODY_ARG, header_arg
from elmgen.generator.signature import return_type
from elmgen.generator.syntax import INDENT, elm_field, elm_list, elm_record, elm_string
from elmgen.generator.url import mk_query_params, mk_url
from elmgen.models import HeaderParam, RequestDescriptor
from elmgen.options import ElmOptions

EMPTY_BODY_ERROR = "Expected the response body to be empty"


def mk_request(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    """``Http.request { method = ..., ..., withCredentials = False }``"""
    fields = [
        elm_field("method", dquotes(text(descriptor.method))),
        elm_field("headers", elm_list([_header_to_doc(options, h) for h in descriptor.headers])),
        elm_field("url", mk_url(options, descriptor.path) + mk_query_params(descriptor)),
        elm_field("body", _body(options, descriptor)),
        elm_field("expect", _expect(options, descriptor)),
        elm_field("timeout", text("Nothing")),
        elm_field("withCredentials", text("False")),
    ]
    return above(text("Http.request"), indent(INDENT, elm_record(fields)))


def _header_to_doc(options: ElmOptions, header: HeaderParam) -> Doc:
    name = header_arg(header)
    if options.is_string_type(header.type):
        value = text(name)
    else:
        value = parens(text(f"toString {name}"))
    return beside(beside(text("Http.header"), elm_string(header.name)), value)


def _body(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    if descriptor.body is None:
        return text("Http.emptyBody")
    encoder = options.encoder_name(descriptor.body)
    return beside(text("Http.jsonBody"), parens(text(f"{encoder} {BODY_ARG}")))


def _expect(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    result = return_type(descriptor)
    if not options.is_empty_type(result):
        return beside(text("Http.expectJson"), text(options.decoder_name(result)))

    constructor = options.type_name(result)
    check = vsep(
        [
            text("if String.isEmpty body then"),
            beside(indent(INDENT, text("Ok")), text(constructor)),
            text("else"),
            indent(INDENT, beside(text("Err"), elm_string(EMPTY_BODY_ERROR))),
        ]
    )
    handler = text("\\") + beside(
        braces(text(" body ")),
        above(text("->"), indent(INDENT, check) + LINE),
    )
    return above(text("Http.expectStringResponse"), indent(INDENT, parens(handler)))
