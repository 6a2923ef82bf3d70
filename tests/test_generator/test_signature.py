"""Tests for elmgen.generator.signature -- type signature and argument list."""

from __future__ import annotations

import pytest

from elmgen.doc import render
from elmgen.exceptions import ArgumentCollisionError, MissingReturnTypeError
from elmgen.generator.signature import (
    argument_names,
    check_argument_names,
    mk_args,
    mk_type_signature,
    request_parts,
    return_type,
)
from elmgen.models import (
    CaptureSegment,
    HeaderParam,
    QueryKind,
    QueryParam,
    RequestDescriptor,
    StaticSegment,
    TypeRef,
)


@pytest.fixture
def everything() -> RequestDescriptor:
    """An endpoint exercising every kind of argument."""
    return RequestDescriptor(
        function_name="put_shelves_books",
        method="PUT",
        path=(
            StaticSegment(text="shelves"),
            CaptureSegment(name="shelf", type=TypeRef.of("String")),
            StaticSegment(text="books"),
            CaptureSegment(name="id", type=TypeRef.of("Int")),
        ),
        query=(
            QueryParam(name="notify", type=TypeRef.of("Bool"), kind=QueryKind.FLAG),
            QueryParam(name="note", type=TypeRef.of("String")),
            QueryParam(name="tags", type=TypeRef.list_of(TypeRef.of("String")), kind=QueryKind.LIST),
        ),
        headers=(HeaderParam(name="X-Token", type=TypeRef.of("String")),),
        body=TypeRef.of("Book"),
        return_type=TypeRef.of("NoContent"),
    )


class TestRequestParts:
    def test_order_and_types(self, everything: RequestDescriptor) -> None:
        parts = [(name, str(ref)) for name, ref in request_parts(everything)]
        assert parts == [
            ("capture_shelf", "String"),
            ("capture_id", "Int"),
            ("query_notify", "Bool"),
            ("query_note", "Maybe (String)"),
            ("query_tags", "List (String)"),
            ("header_X_Token", "String"),
            ("body", "Book"),
        ]

    def test_no_parts(self) -> None:
        descriptor = RequestDescriptor(
            function_name="f", method="GET", return_type=TypeRef.of("Int")
        )
        assert request_parts(descriptor) == []


class TestTypeSignature:
    def test_single_capture(self, options, get_book_by_id) -> None:
        assert render(mk_type_signature(options, get_book_by_id)) == "Int -> Http.Request (Book)"

    def test_dynamic_prefix_adds_string_first(self, dynamic_options, get_book_by_id) -> None:
        assert render(mk_type_signature(dynamic_options, get_book_by_id)) == (
            "String -> Int -> Http.Request (Book)"
        )

    def test_no_arguments(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_books",
            method="GET",
            path=(StaticSegment(text="books"),),
            return_type=TypeRef.list_of(TypeRef.of("Book")),
        )
        assert render(mk_type_signature(options, descriptor)) == "Http.Request (List (Book))"

    def test_full(self, options, everything) -> None:
        assert render(mk_type_signature(options, everything)) == (
            "String -> Int -> Bool -> Maybe (String) -> List (String) -> String -> Book"
            " -> Http.Request (NoContent)"
        )

    def test_custom_type_name_resolver(self, get_book_by_id) -> None:
        from elmgen.options import ElmOptions

        options = ElmOptions(type_name=lambda ref: "T" + ref.name)
        assert render(mk_type_signature(options, get_book_by_id)) == "TInt -> Http.Request (TBook)"

    def test_missing_return_type(self, options, descriptor_without_return) -> None:
        with pytest.raises(MissingReturnTypeError):
            mk_type_signature(options, descriptor_without_return)


class TestArguments:
    def test_single_capture(self, options, get_book_by_id) -> None:
        assert render(mk_args(options, get_book_by_id)) == "capture_id"

    def test_dynamic_prefix_adds_url_base_first(self, dynamic_options, get_book_by_id) -> None:
        assert render(mk_args(dynamic_options, get_book_by_id)) == "urlBase capture_id"

    def test_full(self, options, everything) -> None:
        assert render(mk_args(options, everything)) == (
            "capture_shelf capture_id query_notify query_note query_tags header_X_Token body"
        )

    def test_no_arguments(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="f", method="GET", return_type=TypeRef.of("Int")
        )
        assert render(mk_args(options, descriptor)) == ""

    @pytest.mark.parametrize("dynamic", [False, True])
    def test_one_type_per_argument(self, options, dynamic_options, everything, dynamic) -> None:
        opts = dynamic_options if dynamic else options
        types = render(mk_type_signature(opts, everything)).split(" -> ")
        args = render(mk_args(opts, everything)).split(" ")
        assert len(types) == len(args) + 1


class TestValidation:
    def test_return_type(self, get_book_by_id) -> None:
        assert return_type(get_book_by_id) == TypeRef.of("Book")

    def test_missing_return_type_message(self, descriptor_without_return) -> None:
        with pytest.raises(MissingReturnTypeError) as exc_info:
            return_type(descriptor_without_return)
        assert str(exc_info.value) == "Endpoint 'get_nothing' has no return type"
        assert exc_info.value.function_name == "get_nothing"

    def test_argument_names(self, dynamic_options, get_book_by_id) -> None:
        assert argument_names(dynamic_options, get_book_by_id) == ["urlBase", "capture_id"]

    def test_distinct_names_pass(self, options, everything) -> None:
        check_argument_names(options, everything)

    def test_headers_colliding_after_hyphen_replacement(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_thing",
            method="GET",
            headers=(
                HeaderParam(name="X-Id", type=TypeRef.of("String")),
                HeaderParam(name="X_Id", type=TypeRef.of("String")),
            ),
            return_type=TypeRef.of("Int"),
        )
        with pytest.raises(ArgumentCollisionError) as exc_info:
            check_argument_names(options, descriptor)
        assert exc_info.value.names == ["header_X_Id"]
        assert "get_thing" in str(exc_info.value)

    def test_repeated_captures_collide(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_pair",
            method="GET",
            path=(
                CaptureSegment(name="id", type=TypeRef.of("Int")),
                CaptureSegment(name="id", type=TypeRef.of("Int")),
            ),
            return_type=TypeRef.of("Int"),
        )
        with pytest.raises(ArgumentCollisionError):
            check_argument_names(options, descriptor)

    def test_same_raw_name_in_different_categories_is_fine(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_item",
            method="GET",
            path=(CaptureSegment(name="id", type=TypeRef.of("Int")),),
            query=(QueryParam(name="id", type=TypeRef.of("Int")),),
            headers=(HeaderParam(name="id", type=TypeRef.of("String")),),
            return_type=TypeRef.of("Int"),
        )
        check_argument_names(options, descriptor)
