"""Elm code generator -- turn endpoint descriptors into ``Http.request`` functions.

Typical usage::

    from elmgen.generator import generate_elm_for_api
    from elmgen.options import DynamicPrefix, ElmOptions

    functions = generate_elm_for_api(descriptors, ElmOptions(url_prefix=DynamicPrefix()))

Sub-modules, leaf first:

* :mod:`~elmgen.generator.naming` -- function and argument identifiers.
* :mod:`~elmgen.generator.signature` -- type signature and argument list,
  derived in lock-step.
* :mod:`~elmgen.generator.query` -- the ``params`` binding encoding query
  parameters.
* :mod:`~elmgen.generator.url` -- the path and query-string expression.
* :mod:`~elmgen.generator.request` -- the ``Http.request`` record.
* :mod:`~elmgen.generator.render` -- per-endpoint documents and the
  whole-API driver.
"""

from elmgen.generator.render import (
    doc_to_text,
    generate_elm_for_api,
    generate_elm_for_request,
)

__all__ = ["doc_to_text", "generate_elm_for_api", "generate_elm_for_request"]
