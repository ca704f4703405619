"""
Tests for the scope chain in bisaya.environment.
"""
import pytest

from bisaya.environment import Environment
from bisaya.exceptions import UndefinedVariableException
from bisaya.nodes import DataType


def test_define_and_read():
    env = Environment()
    env.define('x', DataType.NUMERO, 3)
    assert env.read('x') == 3
    assert env.resolve('x').declared_type == DataType.NUMERO


def test_read_undefined_raises_with_name_and_position():
    env = Environment("<test>")
    with pytest.raises(UndefinedVariableException) as exc_info:
        env.read('missing', 4, 2)
    err = exc_info.value
    assert err.varname == 'missing'
    assert str(err) == "Undefined variable 'missing' on line 4, column 2 in <test>"


def test_write_undefined_raises():
    with pytest.raises(UndefinedVariableException):
        Environment().write('missing', 1)


def test_inner_frame_sees_and_mutates_outer_variables():
    env = Environment()
    env.define('x', DataType.NUMERO, 1)
    env.push_frame()
    env.write('x', 2)
    env.define('y', DataType.NUMERO, 5)
    assert env.read('x') == 2
    env.pop_frame()
    assert env.read('x') == 2
    with pytest.raises(UndefinedVariableException):
        env.read('y')


def test_shadowing_only_affects_inner_frame():
    env = Environment()
    env.define('x', DataType.NUMERO, 1)
    env.push_frame()
    env.define('x', DataType.LETRA, 'a')
    assert env.read('x') == 'a'
    env.pop_frame()
    assert env.read('x') == 1
    assert env.resolve('x').declared_type == DataType.NUMERO


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define('x', DataType.NUMERO, 1)
    env.define('x', DataType.TIPIK, 2.5)
    assert env.resolve('x').declared_type == DataType.TIPIK
    assert env.read('x') == 2.5


def test_write_does_not_enforce_declared_type():
    env = Environment()
    env.define('x', DataType.NUMERO, 1)
    env.write('x', "text")
    assert env.read('x') == "text"


def test_scope_restores_frame_on_error():
    env = Environment()
    with pytest.raises(ValueError):
        with env.scope():
            env.define('tmp', DataType.NUMERO, 0)
            assert env.depth == 1
            raise ValueError("boom")
    assert env.current is env.root
    assert env.depth == 0
    with pytest.raises(UndefinedVariableException):
        env.read('tmp')


def test_nested_scopes_track_depth():
    env = Environment()
    with env.scope():
        with env.scope():
            assert env.depth == 2
        assert env.depth == 1
    assert env.depth == 0


def test_popping_root_frame_is_an_error():
    with pytest.raises(RuntimeError, match="root frame"):
        Environment().pop_frame()
