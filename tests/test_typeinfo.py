"""Tests for minic_core.typeinfo."""

from minic_core.typeinfo import (
    BOOL,
    FLOAT,
    INT,
    STRING,
    UNKNOWN,
    VOID,
    TypeInfo,
    TypeKind,
)


class TestEquality:
    def test_same_primitive(self):
        assert TypeInfo(TypeKind.Int) == INT

    def test_different_primitives(self):
        assert INT != FLOAT
        assert STRING != BOOL

    def test_class_same_name(self):
        assert TypeInfo.of_class("Point") == TypeInfo.of_class("Point")

    def test_class_different_name(self):
        assert TypeInfo.of_class("Point") != TypeInfo.of_class("Line")

    def test_class_vs_primitive(self):
        assert TypeInfo.of_class("int") != INT

    def test_hashable(self):
        assert len({INT, TypeInfo(TypeKind.Int), TypeInfo.of_class("A")}) == 2


class TestNames:
    def test_str(self):
        assert str(INT) == "int"
        assert str(FLOAT) == "float"
        assert str(STRING) == "string"
        assert str(BOOL) == "bool"
        assert str(VOID) == "void"
        assert str(UNKNOWN) == "unknown"
        assert str(TypeInfo.of_class("Point")) == "Point"


class TestSize:
    def test_sizes(self):
        assert INT.size == 4
        assert FLOAT.size == 8
        assert BOOL.size == 1
        assert STRING.size == 256
        assert VOID.size == 0
        assert TypeInfo.of_class("Point").size == 0
