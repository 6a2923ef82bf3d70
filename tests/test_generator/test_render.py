"""Tests for elmgen.generator.render -- whole functions and the API driver."""

from __future__ import annotations

import logging
import textwrap

import pytest

from elmgen.exceptions import ArgumentCollisionError, MissingReturnTypeError
from elmgen.generator import doc_to_text, generate_elm_for_api, generate_elm_for_request
from elmgen.models import (
    CaptureSegment,
    HeaderParam,
    QueryKind,
    QueryParam,
    RequestDescriptor,
    StaticSegment,
    TypeRef,
)
from elmgen.options import ElmOptions, StaticPrefix


GET_BOOKS_BY_ID = textwrap.dedent("""\
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
            }""")


GET_BOOKS = textwrap.dedent("""\
    getBooks : Bool -> Maybe (String) -> Http.Request (List (Book))
    getBooks query_published query_sort =
        let
            params =
                List.filter (not << String.isEmpty)
                    [ if query_published then
                        "published="
                      else
                        ""
                    , query_sort
                        |> Maybe.map (Http.encodeUri >> (++) "sort=")
                        |> Maybe.withDefault ""
                    ]
        in
            Http.request
                { method =
                    "GET"
                , headers =
                    []
                , url =
                    String.join "/"
                        [ ""
                        , "books"
                        ]
                    ++ if List.isEmpty params then
                           ""
                       else
                           "?" ++ String.join "&" params
                , body =
                    Http.emptyBody
                , expect =
                    Http.expectJson (list decodeBook)
                , timeout =
                    Nothing
                , withCredentials =
                    False
                }""")


def _generate(options: ElmOptions, descriptor: RequestDescriptor) -> str:
    return doc_to_text(generate_elm_for_request(options, descriptor))


class TestGenerateElmForRequest:
    def test_capture_endpoint(self, options, get_book_by_id) -> None:
        assert _generate(options, get_book_by_id) == GET_BOOKS_BY_ID

    def test_query_endpoint(self, options, get_books) -> None:
        assert _generate(options, get_books) == GET_BOOKS

    def test_dynamic_prefix(self, dynamic_options, get_book_by_id) -> None:
        lines = _generate(dynamic_options, get_book_by_id).splitlines()
        assert lines[0] == "getBooksById : String -> Int -> Http.Request (Book)"
        assert lines[1] == "getBooksById urlBase capture_id ="
        assert "                [ urlBase" in lines

    def test_static_prefix(self, get_book_by_id) -> None:
        options = ElmOptions(url_prefix=StaticPrefix(url="https://example.com"))
        assert '                [ "https://example.com"' in _generate(options, get_book_by_id)

    def test_no_arguments(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_status",
            method="GET",
            path=(StaticSegment(text="status"),),
            return_type=TypeRef.of("String"),
        )
        lines = _generate(options, descriptor).splitlines()
        assert lines[0] == "getStatus : Http.Request (String)"
        assert lines[1] == "getStatus ="
        assert "            Http.expectJson string" in lines

    def test_string_capture_skips_to_string(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_books_by_title",
            method="GET",
            path=(
                StaticSegment(text="books"),
                CaptureSegment(name="title", type=TypeRef.of("String")),
            ),
            return_type=TypeRef.of("Book"),
        )
        text = _generate(options, descriptor)
        assert ", capture_title |> Http.encodeUri" in text
        assert "toString" not in text

    def test_flag_uses_raw_name(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_users",
            method="GET",
            path=(StaticSegment(text="users"),),
            query=(QueryParam(name="active", type=TypeRef.of("Bool"), kind=QueryKind.FLAG),),
            return_type=TypeRef.list_of(TypeRef.of("User")),
        )
        text = _generate(options, descriptor)
        assert '"active="' in text
        assert "if query_active then" in text

    def test_empty_response(self, options, post_book) -> None:
        text = _generate(options, post_book)
        assert text.splitlines()[:2] == [
            "postBooks : String -> Book -> Http.Request (NoContent)",
            "postBooks header_X_Request_Id body =",
        ]
        assert "Http.expectStringResponse" in text
        assert "Ok NoContent" in text
        assert 'Err "Expected the response body to be empty"' in text

    def test_missing_return_type_is_fatal(self, options, descriptor_without_return) -> None:
        with pytest.raises(MissingReturnTypeError, match="get_nothing"):
            generate_elm_for_request(options, descriptor_without_return)

    def test_argument_collision(self, options) -> None:
        descriptor = RequestDescriptor(
            function_name="get_thing",
            method="GET",
            headers=(
                HeaderParam(name="X-Id", type=TypeRef.of("String")),
                HeaderParam(name="X_Id", type=TypeRef.of("String")),
            ),
            return_type=TypeRef.of("Int"),
        )
        with pytest.raises(ArgumentCollisionError):
            generate_elm_for_request(options, descriptor)

    def test_deterministic(self, options, get_books) -> None:
        assert _generate(options, get_books) == _generate(options, get_books)

    def test_no_trailing_whitespace(self, options, get_books, post_book) -> None:
        for descriptor in (get_books, post_book):
            for line in _generate(options, descriptor).splitlines():
                assert line == line.rstrip()


class TestGenerateElmForApi:
    def test_preserves_order(self, options, get_books, get_book_by_id, post_book) -> None:
        result = generate_elm_for_api([post_book, get_books, get_book_by_id], options)
        assert [text.split(" ", 1)[0] for text in result] == [
            "postBooks",
            "getBooks",
            "getBooksById",
        ]

    def test_deduplicates_keeping_first(self, options, get_books, get_book_by_id) -> None:
        result = generate_elm_for_api([get_books, get_book_by_id, get_books], options)
        assert len(result) == 2
        assert result[0].startswith("getBooks :")
        assert result[1].startswith("getBooksById :")

    def test_default_options(self, get_book_by_id) -> None:
        assert generate_elm_for_api([get_book_by_id]) == [GET_BOOKS_BY_ID]

    def test_empty_api(self, options) -> None:
        assert generate_elm_for_api([], options) == []

    def test_missing_return_type_aborts(self, options, get_books, descriptor_without_return) -> None:
        with pytest.raises(MissingReturnTypeError):
            generate_elm_for_api([get_books, descriptor_without_return], options)

    def test_logs_summary(self, options, get_books, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="elmgen.generator.render")
        generate_elm_for_api([get_books, get_books], options)
        messages = [record.getMessage() for record in caplog.records]
        assert "Generating get_books for GET /books" in messages
        assert "Dropping duplicate definition of get_books" in messages
        assert "Generated 1 Elm functions" in messages
