"""Tests for minic_core.values."""

from minic_core.typeinfo import BOOL, FLOAT, INT, STRING, VOID, TypeInfo
from minic_core.values import (
    VBool,
    VFloat,
    VInt,
    VString,
    VVoid,
    Void,
    as_return,
    wrap_i32,
    zero_value,
)


class TestStr:
    def test_int(self):
        assert str(VInt(42)) == "42"
        assert str(VInt(-7)) == "-7"

    def test_float(self):
        assert str(VFloat(3.14)) == "3.14"
        assert str(VFloat(2.0)) == "2"
        assert str(VFloat(0.1)) == "0.1"

    def test_float_six_significant_digits(self):
        assert str(VFloat(1234567.0)) == "1.23457e+06"

    def test_bool(self):
        assert str(VBool(True)) == "true"
        assert str(VBool(False)) == "false"

    def test_string(self):
        assert str(VString("hello")) == "hello"

    def test_void(self):
        assert str(Void) == "void"
        assert repr(Void) == "Void"


class TestInt32:
    def test_wrap(self):
        assert wrap_i32(2**31) == -(2**31)
        assert wrap_i32(-(2**31) - 1) == 2**31 - 1
        assert wrap_i32(5) == 5

    def test_constructor_wraps(self):
        assert VInt(2**31).value == -(2**31)


class TestFloat32:
    def test_rounded_to_single_precision(self):
        assert VFloat(0.1).value != 0.1
        assert VFloat(0.5).value == 0.5


class TestReturnFlag:
    def test_default_off(self):
        assert not VInt(1).returning
        assert not Void.returning

    def test_as_return_copies(self):
        v = VInt(5)
        r = as_return(v)
        assert r.returning
        assert not v.returning
        assert r.value == 5

    def test_flag_not_part_of_equality(self):
        assert as_return(VInt(5)) == VInt(5)
        assert as_return(Void) == Void

    def test_void_return(self):
        r = as_return(Void)
        assert isinstance(r, VVoid)
        assert r.returning


class TestZeroValue:
    def test_primitives(self):
        assert zero_value(INT) == VInt(0)
        assert zero_value(FLOAT) == VFloat(0.0)
        assert zero_value(BOOL) == VBool(False)
        assert zero_value(STRING) == VString("")

    def test_others_are_void(self):
        assert zero_value(VOID) is Void
        assert zero_value(TypeInfo.of_class("Point")) is Void


class TestEquality:
    def test_different_kinds_differ(self):
        assert VInt(1) != VFloat(1.0)
        assert VBool(False) != Void
