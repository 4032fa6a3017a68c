import queue
from dataclasses import dataclass

import pytest

from easyfunc.variables import boolval, debug_zval_dump, is_array, is_int


@dataclass
class _Empty:
    pass


@dataclass
class _Holder:
    a: str


@pytest.mark.parametrize(
    "value,expected",
    [("", False), ("-", True), (0, False), (1, True)],
)
def test_boolval(value, expected):
    assert boolval(value) is expected


def test_boolval_none_raises():
    with pytest.raises(TypeError):
        boolval(None)


def test_debug_zval_dump_nothing(capsys):
    debug_zval_dump()
    assert capsys.readouterr().out == ""


def test_debug_zval_dump_strings(capsys):
    debug_zval_dump("1", "abc")
    assert capsys.readouterr().out == "'1'\n'abc'\n"


def test_debug_zval_dump_mixed(capsys):
    debug_zval_dump("1", "abc", _Empty(), _Holder(a="123"))
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["'1'", "'abc'"]
    assert len(lines) == 4
    assert "a='123'" in lines[3]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("abc", False),
        (1, True),
        (1.01, False),
        ([4, 5, 6, 7, 8], False),
        ({"France": "Paris", "Italy": "Rome"}, False),
        (True, False),
    ],
)
def test_is_int(value, expected):
    assert is_int(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ([""], True),
        (["string", "test"], True),
        ([True], True),
        ((10.5, 5.6), True),
        ([], True),
        ([["a", "b", "c"], ["d", "e", "f"]], True),
        ([0], True),
        ((), True),
        (-5322, False),
        (0x55F, False),
        (-0xCCF, False),
        ("", False),
        ("string", False),
        (10.0000000000000000005, False),
        (0.5e6, False),
        (-0.5e7, False),
        (0.5e8, False),
        (-0.5e90, False),
        (1e5, False),
        ({"nasa": 1}, True),
        (True, False),
        (False, False),
        (queue.Queue(), False),
        (_Empty(), False),
    ],
)
def test_is_array(value, expected):
    assert is_array(value) is expected