from __future__ import annotations

import pytest

from linebasic.errors import LineNotFoundError, ParseError, StepLimitError, UnknownVariableError
from linebasic.parser import parse_program


def run(src: str, out, **kwargs) -> str:
    interp = parse_program(src)
    interp.out = out
    interp.run(**kwargs)
    return out.getvalue()


def test_hi_bye(out):
    assert run('10 PRINT "HI"\n20 PRINT "BYE"\n', out) == "HI\nBYE\n"


def test_goto_missing_target_prints_nothing(out):
    with pytest.raises(LineNotFoundError) as exc:
        run("10 GOTO 99\n", out)
    assert exc.value.line_number == 10
    assert "did not find line number: 99" in str(exc.value)
    assert out.getvalue() == ""


def test_infinite_loop_is_bounded(out):
    src = '10 LET A=5\n20 PRINT "X=";A\n30 GOTO 10\n'
    with pytest.raises(StepLimitError):
        run(src, out, max_steps=30)
    assert out.getvalue() == "X=5\n" * 10


@pytest.mark.parametrize(
    "literal, expected",
    [("42", "42"), ("-7", "-7"), ("+3", "3"), ('"BOB"', "BOB"), ('""', "")],
)
def test_let_then_print(out, literal, expected):
    assert run(f"10 LET V={literal}\n20 PRINT V\n", out) == expected + "\n"


def test_reference_before_let_fails(out):
    with pytest.raises(UnknownVariableError):
        run("10 PRINT V\n20 LET V=1\n", out)


def test_reference_after_let_succeeds(out):
    assert run("10 LET V=1\n20 PRINT V\n", out) == "1\n"


def test_trailing_semicolon_suppresses_newline(out):
    assert run('10 PRINT "A";\n20 PRINT "B"\n30 PRINT "C";\n', out) == "AB\nC"


def test_tab_pads_with_spaces(out):
    assert run('10 PRINT "[";TAB(3);"]"\n20 PRINT TAB(0);"|"\n', out) == "[   ]\n|\n"


def test_goto_skips_forward(out):
    src = '10 GOTO 30\n20 PRINT "SKIPPED"\n30 PRINT "DONE"\n'
    assert run(src, out) == "DONE\n"


def test_source_order_does_not_matter(out):
    assert run('20 PRINT "B"\n10 PRINT "A"\n', out) == "A\nB\n"


def test_last_definition_of_a_line_wins(out):
    assert run('10 PRINT "OLD"\n10 PRINT "NEW"\n', out) == "NEW\n"


def test_strict_lines_rejects_redefinition():
    with pytest.raises(ParseError) as exc:
        parse_program('10 PRINT "OLD"\n10 PRINT "NEW"\n', allow_redefinition=False)
    assert exc.value.position == 2


def test_variables_mix_with_literals(out):
    src = '10 LET N="BOB"\n20 LET AGE=30\n30 PRINT "HI ";N;", AGE ";AGE;"."\n'
    assert run(src, out) == "HI BOB, AGE 30.\n"
