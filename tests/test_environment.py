"""Tests for minic_core.environment."""

from minic_core.environment import Environment
from minic_core.typeinfo import FLOAT
from minic_core.values import VInt, VString


class TestEnvironment:
    def test_value_roundtrip(self):
        env = Environment()
        env.set_value("x", VInt(10))
        assert env.get_value("x") == VInt(10)

    def test_undefined_returns_none(self):
        env = Environment()
        assert env.get_value("nope") is None
        assert "nope" not in env.variables

    def test_overwrite_same_entry(self):
        env = Environment()
        env.set_value("x", VInt(1))
        env.set_value("x", VString("two"))
        assert env.get_value("x") == VString("two")
        assert len(env.variables) == 1

    def test_functions(self):
        env = Environment()
        env.declare_function("f", FLOAT)
        assert env.resolve_function("f") == FLOAT
        assert env.resolve_function("g") is None
