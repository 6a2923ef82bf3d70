"""Tests for elmgen.models -- descriptor and configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from elmgen.exceptions import TypeExpressionError
from elmgen.models import (
    CaptureSegment,
    GeneratorConfig,
    QueryKind,
    QueryParam,
    RequestDescriptor,
    StaticSegment,
    TypeRef,
)


class TestTypeRef:
    def test_equal_refs_hash_equal(self) -> None:
        assert {TypeRef.of("Int"), TypeRef.of("Int")} == {TypeRef.of("Int")}

    def test_args_distinguish_refs(self) -> None:
        assert TypeRef.list_of(TypeRef.of("Int")) != TypeRef.list_of(TypeRef.of("Bool"))

    def test_validates_from_shorthand(self) -> None:
        assert TypeRef.model_validate("Maybe Int") == TypeRef.maybe(TypeRef.of("Int"))

    def test_validates_from_mapping_with_shorthand_args(self) -> None:
        ref = TypeRef.model_validate({"name": "List", "args": ["Book"]})
        assert ref == TypeRef.list_of(TypeRef.of("Book"))

    def test_bad_shorthand_raises_type_expression_error(self) -> None:
        with pytest.raises(TypeExpressionError):
            TypeRef.model_validate("List (")

    def test_is_frozen(self) -> None:
        ref = TypeRef.of("Int")
        with pytest.raises(ValidationError):
            ref.name = "Bool"  # type: ignore[misc]


class TestRequestDescriptor:
    def test_path_segments_discriminated_by_kind(self) -> None:
        descriptor = RequestDescriptor.model_validate(
            {
                "function_name": "get_books_by_id",
                "method": "GET",
                "path": [
                    {"kind": "static", "text": "books"},
                    {"kind": "capture", "name": "id", "type": "Int"},
                ],
                "return_type": "Book",
            }
        )
        assert isinstance(descriptor.path[0], StaticSegment)
        assert isinstance(descriptor.path[1], CaptureSegment)
        assert descriptor.path[1].type == TypeRef.of("Int")

    def test_captures_in_path_order(self) -> None:
        descriptor = RequestDescriptor(
            function_name="f",
            method="GET",
            path=(
                CaptureSegment(name="a", type=TypeRef.of("Int")),
                StaticSegment(text="x"),
                CaptureSegment(name="b", type=TypeRef.of("Int")),
            ),
            return_type=TypeRef.of("Int"),
        )
        assert [c.name for c in descriptor.captures] == ["a", "b"]

    def test_path_template(self, get_book_by_id: RequestDescriptor) -> None:
        assert get_book_by_id.path_template() == "/books/{id}"

    def test_empty_path_template(self) -> None:
        descriptor = RequestDescriptor(function_name="root", method="GET")
        assert descriptor.path_template() == "/"

    def test_return_type_is_optional_in_model(self, descriptor_without_return) -> None:
        assert descriptor_without_return.return_type is None

    def test_query_kind_defaults_to_normal(self) -> None:
        param = QueryParam(name="q", type=TypeRef.of("String"))
        assert param.kind is QueryKind.NORMAL

    def test_query_kind_from_string(self) -> None:
        param = QueryParam.model_validate({"name": "tags", "type": "String", "kind": "list"})
        assert param.kind is QueryKind.LIST

    def test_is_frozen(self, get_book_by_id: RequestDescriptor) -> None:
        with pytest.raises(ValidationError):
            get_book_by_id.method = "POST"  # type: ignore[misc]


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.url_prefix == ""
        assert config.dynamic_url is False
        assert config.module_name == "Generated.Api"
        assert config.output_dir == "."
        assert config.empty_response_types == []
        assert config.string_types == []
        assert config.includes == []

    def test_round_trips_through_json(self) -> None:
        config = GeneratorConfig(url_prefix="https://example.com", includes=["Types.elm"])
        restored = GeneratorConfig.model_validate_json(config.model_dump_json())
        assert restored == config
