"""Tests for minic_core.literals."""

import pytest

from minic_core.literals import (
    LiteralKind,
    classify_literal,
    literal_type,
    literal_value,
    string_body,
)
from minic_core.typeinfo import BOOL, FLOAT, INT, STRING
from minic_core.values import VBool, VFloat, VInt, VString


class TestClassify:
    def test_int(self):
        assert classify_literal("42") is LiteralKind.Int

    def test_float(self):
        assert classify_literal("3.14") is LiteralKind.Float

    def test_string(self):
        assert classify_literal('"hi"') is LiteralKind.String

    def test_bool(self):
        assert classify_literal("true") is LiteralKind.Bool
        assert classify_literal("false") is LiteralKind.Bool

    def test_quote_wins_over_dot(self):
        assert classify_literal('"a.b"') is LiteralKind.String

    def test_bool_is_exact(self):
        assert classify_literal("True") is LiteralKind.Int


class TestLiteralType:
    def test_types(self):
        assert literal_type("7") == INT
        assert literal_type("7.5") == FLOAT
        assert literal_type('"x"') == STRING
        assert literal_type("false") == BOOL


class TestLiteralValue:
    def test_int(self):
        assert literal_value("42") == VInt(42)

    def test_negative_int(self):
        assert literal_value("-7") == VInt(-7)

    def test_float(self):
        assert literal_value("2.5") == VFloat(2.5)

    def test_string_quotes_stripped(self):
        assert literal_value('"hello"') == VString("hello")

    def test_empty_string(self):
        assert literal_value('""') == VString("")

    def test_bool(self):
        assert literal_value("true") == VBool(True)
        assert literal_value("false") == VBool(False)

    def test_malformed_int(self):
        assert literal_value("abc") is None

    def test_malformed_float(self):
        assert literal_value("1.2.3") is None


class TestStringBody:
    def test_unbalanced_quote(self):
        assert string_body('"abc') == "abc"


@pytest.mark.parametrize("text", ["0", "123", "9.75", '"s"', "true", "-4", "0.5"])
def test_static_type_matches_runtime_kind(text):
    expected = {
        LiteralKind.Int: VInt,
        LiteralKind.Float: VFloat,
        LiteralKind.String: VString,
        LiteralKind.Bool: VBool,
    }[classify_literal(text)]
    assert isinstance(literal_value(text), expected)
