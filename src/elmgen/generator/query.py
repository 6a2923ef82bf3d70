"""The ``params`` let-binding that builds the query string.

Every query parameter renders to one string -- ``name=value``, ``name=``,
``name[]=a&name[]=b`` or the empty string when it has nothing to send. The
binding filters out the empty strings so that the URL builder can join the
rest with ``&``::

    params =
        List.filter (not << String.isEmpty)
            [ query_sort
                |> Maybe.map (Http.encodeUri >> (++) "sort=")
                |> Maybe.withDefault ""
            , if query_published then
                "published="
              else
                ""
            ]
"""

from __future__ import annotations

from typing import Optional

from elmgen.doc import Doc, above, beside, indent, text, vsep
from elmgen.generator.naming import query_arg
from elmgen.generator.syntax import EMPTY_STRING, INDENT, elm_list, elm_string
from elmgen.models import QueryKind, QueryParam, RequestDescriptor
from elmgen.options import ElmOptions

PARAMS_BINDING = "params"


def mk_let_params(options: ElmOptions, descriptor: RequestDescriptor) -> Optional[Doc]:
    """The ``params`` binding, or ``None`` when the endpoint has no query parameters."""
    if not descriptor.query:
        return None
    params = [_param_to_doc(options, param) for param in descriptor.query]
    return above(
        text(f"{PARAMS_BINDING} ="),
        indent(
            INDENT,
            above(
                text("List.filter (not << String.isEmpty)"),
                indent(INDENT, elm_list(params)),
            ),
        ),
    )


def _param_to_doc(options: ElmOptions, param: QueryParam) -> Doc:
    name = query_arg(param)
    if param.kind == QueryKind.NORMAL:
        to_string = "" if options.is_string_type(param.type) else "toString >> "
        encode = beside(
            text(f"|> Maybe.map ({to_string}Http.encodeUri >> (++)"),
            elm_string(param.name + "="),
        ) + text(")")
        return above(
            text(name),
            indent(INDENT, above(encode, beside(text("|> Maybe.withDefault"), EMPTY_STRING))),
        )

    if param.kind == QueryKind.FLAG:
        return vsep(
            [
                text(f"if {name} then"),
                indent(INDENT, elm_string(param.name + "=")),
                indent(2, text("else")),
                indent(INDENT, EMPTY_STRING),
            ]
        )

    if param.kind == QueryKind.LIST:
        element = beside(
            text("|> List.map (\\val ->"),
            elm_string(param.name + "[]="),
        )
        element = beside(element, text("++ (val |> toString |> Http.encodeUri))"))
        return above(
            text(name),
            indent(INDENT, above(element, beside(text("|> String.join"), elm_string("&")))),
        )

    raise ValueError(f"Unknown query parameter kind: {param.kind!r}")
