"""Generate Elm functions for endpoint descriptors.

This is the core of elmgen. :func:`generate_elm_for_request` assembles the
document for one endpoint from the builders in this sub-package, and
:func:`generate_elm_for_api` renders every endpoint of an API to text.

A generated function looks like::

    getBooksById : Int -> Http.Request (Book)
    getBooksById capture_id =
        Http.request
            { method =
                "GET"
            , headers =
                []
            , url =
                String.join "/"
                    [ ""
                    , "books"
                    , capture_id |> toString |> Http.encodeUri
                    ]
            , body =
                Http.emptyBody
            , expect =
                Http.expectJson decodeBook
            , timeout =
                Nothing
            , withCredentials =
                False
            }

Endpoints with query parameters wrap the request in a ``let`` block holding
the ``params`` binding from :mod:`elmgen.generator.query`.

Generation is pure: the same options and descriptor always produce the same
text, and endpoints are independent of each other.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from elmgen.doc import Doc, beside, indent, render, text, vsep
from elmgen.generator.naming import elm_function_name
from elmgen.generator.query import mk_let_params
from elmgen.generator.request import mk_request
from elmgen.generator.signature import (
    check_argument_names,
    mk_args,
    mk_type_signature,
    return_type,
)
from elmgen.generator.syntax import INDENT
from elmgen.models import RequestDescriptor
from elmgen.options import DEFAULT_OPTIONS, ElmOptions

logger = logging.getLogger(__name__)

PAGE_WIDTH = 100
RIBBON = 0.4


def generate_elm_for_request(options: ElmOptions, descriptor: RequestDescriptor) -> Doc:
    """Build the document of the Elm function for one endpoint.

    The descriptor is validated before anything is built, so a broken
    descriptor never yields a partial function.

    Raises:
        MissingReturnTypeError: If the descriptor has no return type.
        ArgumentCollisionError: If two parts derive the same argument name.
    """
    return_type(descriptor)
    check_argument_names(options, descriptor)

    fn_name = text(elm_function_name(descriptor.function_name))
    signature = beside(beside(fn_name, text(":")), mk_type_signature(options, descriptor))
    header = beside(beside(fn_name, mk_args(options, descriptor)), text("="))

    request = mk_request(options, descriptor)
    let_params = mk_let_params(options, descriptor)
    if let_params is None:
        body = indent(INDENT, request)
    else:
        body = indent(
            INDENT,
            vsep(
                [
                    text("let"),
                    indent(INDENT, let_params),
                    text("in"),
                    indent(INDENT, request),
                ]
            ),
        )

    return vsep([signature, header, body])


def doc_to_text(doc: Doc) -> str:
    """Render a generated document with the standard page width and ribbon."""
    return render(doc, width=PAGE_WIDTH, ribbon=RIBBON)


def generate_elm_for_api(
    descriptors: Iterable[RequestDescriptor],
    options: Optional[ElmOptions] = None,
) -> list[str]:
    """Generate the Elm source of every endpoint, in order.

    Endpoints that render to identical text (for example the same route
    reachable twice through the API definition) appear once, at the
    position of their first occurrence.

    Args:
        descriptors: Endpoint descriptors in API order.
        options: Generation options; :data:`~elmgen.options.DEFAULT_OPTIONS`
            when omitted.

    Returns:
        One Elm function definition per distinct endpoint.

    Raises:
        GenerationError: If any descriptor breaks the generator's contract.
            Generation stops at the first such descriptor.
    """
    options = options or DEFAULT_OPTIONS
    seen: set[str] = set()
    functions: list[str] = []
    for descriptor in descriptors:
        logger.debug(
            "Generating %s for %s %s",
            descriptor.function_name,
            descriptor.method,
            descriptor.path_template(),
        )
        source = doc_to_text(generate_elm_for_request(options, descriptor))
        if source in seen:
            logger.info("Dropping duplicate definition of %s", descriptor.function_name)
            continue
        seen.add(source)
        functions.append(source)
    logger.info("Generated %d Elm functions", len(functions))
    return functions
