"""Tests for the public conversion functions in idcase.api."""

from __future__ import annotations

from typing import Any

import pytest

from idcase.api import convert, to_camel_case, to_dot_case, to_kebab_case, to_snake_case
from idcase.casing import CaseStyle


class TestSnakeCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello World", "hello_world"),
            ("convertToSnakeCase", "convert_to_snake_case"),
            ("  spaced-out  ", "spaced_out"),
            ("already_snake", "already_snake"),
            ("SCREEN_NAME", "screen_name"),
            ("some__key", "some_key"),
            ("v2Config", "v2_config"),
            ("A123B456C789", "a123_b456_c789"),
            ("user.name-field", "user_name_field"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert to_snake_case(text) == expected


class TestCamelCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("SCREEN_NAME", "screenName"),
            ("mobile-number", "mobileNumber"),
            ("first name", "firstName"),
            ("user_id", "userId"),
            ("hello world", "helloWorld"),
            ("convert_to_snake", "convertToSnake"),
            ("  spaced-out text ", "spacedOutText"),
            ("camelCase", "camelCase"),
            ("PascalCase", "pascalCase"),
            ("a123_b456_c789", "a123B456C789"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert to_camel_case(text) == expected


class TestDotCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello World", "hello.world"),
            ("convertToDot", "convert.to.dot"),
            (" already.dotted", "already.dotted"),
            ("..leading.and.trailing..", "leading.and.trailing"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert to_dot_case(text) == expected


class TestKebabCase:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello World", "hello-world"),
            ("convertToKebab", "convert-to-kebab"),
            ("snake_case_name", "snake-case-name"),
            ("--already-kebab--", "already-kebab"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert to_kebab_case(text) == expected


class TestConvert:
    def test_accepts_enum_and_string(self) -> None:
        assert convert("fooBar", CaseStyle.DOT) == convert("fooBar", "dot") == "foo.bar"

    def test_unknown_style(self) -> None:
        with pytest.raises(ValueError):
            convert("fooBar", "screaming")


class TestGracefulDegradation:
    @pytest.mark.parametrize(
        "func", [to_snake_case, to_camel_case, to_dot_case, to_kebab_case]
    )
    @pytest.mark.parametrize("value", [None, 7, 2.5, True, [], {}, b"x"])
    def test_non_string_returns_empty(self, func: Any, value: Any) -> None:
        assert func(value) == ""

    @pytest.mark.parametrize(
        "func", [to_snake_case, to_camel_case, to_dot_case, to_kebab_case]
    )
    @pytest.mark.parametrize("text", ["", "   ", "!!!", "-_-"])
    def test_no_alphanumerics_returns_empty(self, func: Any, text: str) -> None:
        assert func(text) == ""
