"""
Tests for KUNG conditionals and ALANG SA loops in Bisaya++.
"""
import pytest

from bisaya.tests.utils import program, run_source


def test_false_condition_runs_only_else_branch():
    source = program(
        'KUNG "DILI" {',
        '    IPAKITA: "then"',
        "} KUNG WALA {",
        '    IPAKITA: "else"',
        "}",
    )
    assert run_source(source) == "else"


def test_true_condition_runs_only_then_branch():
    source = program(
        "KUNG (3 > 2) {",
        '    IPAKITA: "then"',
        "} KUNG WALA {",
        '    IPAKITA: "else"',
        "}",
    )
    assert run_source(source) == "then"


def test_if_without_else_and_false_condition():
    assert run_source(program("KUNG 0 { IPAKITA: 1 }", "IPAKITA: 2")) == "2"


@pytest.mark.parametrize("value, expected", [(1, "one"), (2, "two"), (3, "other")])
def test_else_if_chain(value, expected):
    source = program(
        f"MUGNA NUMERO x = {value}",
        'KUNG x == 1 { IPAKITA: "one" }',
        'KUNG DILI x == 2 { IPAKITA: "two" }',
        'KUNG WALA { IPAKITA: "other" }',
    )
    assert run_source(source) == expected


def test_unconditional_kung_dili_branch():
    source = program('KUNG "DILI" { IPAKITA: "a" } KUNG DILI { IPAKITA: "b" }')
    assert run_source(source) == "b"


def test_counting_loop():
    source = program(
        "MUGNA NUMERO ctr",
        "ALANG SA ctr = 1, ctr <= 3, ctr = ctr + 1 {",
        "    IPAKITA: ctr",
        "}",
    )
    assert run_source(source) == "123"


def test_counting_loop_with_parentheses():
    source = program(
        "MUGNA NUMERO i",
        "ALANG SA (i = 3, i > 0, i = i - 1) {",
        "    IPAKITA: i",
        "}",
    )
    assert run_source(source) == "321"


def test_loop_condition_checked_before_first_iteration():
    source = program(
        "MUGNA NUMERO i",
        "ALANG SA i = 5, i < 3, i = i + 1 {",
        "    IPAKITA: i",
        "}",
        "IPAKITA: i",
    )
    assert run_source(source) == "5"


def test_loop_body_gets_fresh_scope_each_iteration():
    source = program(
        "MUGNA NUMERO i",
        "ALANG SA i = 0, i < 3, i = i + 1 {",
        "    MUGNA NUMERO sq = i * i",
        '    IPAKITA: sq & " "',
        "}",
    )
    assert run_source(source) == "0 1 4 "


def test_nested_loops_and_conditionals():
    source = program(
        "MUGNA NUMERO i, j",
        "ALANG SA i = 1, i <= 3, i = i + 1 {",
        "    ALANG SA j = 1, j <= 3, j = j + 1 {",
        "        KUNG i == j {",
        "            IPAKITA: i",
        "        }",
        "    }",
        "}",
    )
    assert run_source(source) == "123"
