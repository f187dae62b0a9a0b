from __future__ import annotations

import pytest

from linebasic.errors import UnknownVariableError
from linebasic.interpreter import Interpreter
from linebasic.values import Reference, Value, is_string_literal, parse_int32, unquote


def test_parse_int32_accepts_sign_and_bounds():
    assert parse_int32("42") == 42
    assert parse_int32("-7") == -7
    assert parse_int32("+3") == 3
    assert parse_int32("2147483647") == 2147483647
    assert parse_int32("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "0x10", "2147483648", "abc", "1.5"])
def test_parse_int32_rejects(text):
    with pytest.raises(ValueError):
        parse_int32(text)


def test_string_literal_detection():
    assert is_string_literal('"HI"')
    assert is_string_literal('  "HI"  ')
    assert is_string_literal("")
    assert is_string_literal("   ")
    assert not is_string_literal('"')
    assert not is_string_literal('"HI')
    assert not is_string_literal("A")
    assert unquote('"HI"') == "HI"
    assert unquote('""') == ""
    assert unquote("") == ""


def test_value_text_and_render():
    n = Value.of_int(5)
    s = Value.of_str("BOB")
    assert not n.is_str and s.is_str
    assert n.text == "5"
    assert s.text == "BOB"
    assert n.render() == "5"
    assert s.render() == '"BOB"'


def test_reference_resolves_against_variables():
    interp = Interpreter()
    ref = Reference("A")
    with pytest.raises(UnknownVariableError) as exc:
        ref.resolve(interp)
    assert exc.value.name == "A"
    assert "unknown var: A" in str(exc.value)

    interp.variables["A"] = Value.of_int(12)
    assert ref.resolve(interp) == "12"
    assert ref.render() == "A"
