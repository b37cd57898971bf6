#!/usr/bin/env python3
"""
Test bracket validation and the jump table it produces.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bft import BracketMismatchError, VirtualMachine, parse, validate


def _validates(source):
    try:
        validate(parse("t.bf", source))
    except BracketMismatchError:
        return False
    return True


@pytest.mark.parametrize("source", ["", "[]", "[[]]", "[][]", "+[>[-]<]", "no brackets at all"])
def test_balanced_programs_validate(source):
    assert _validates(source)


@pytest.mark.parametrize("source", ["[]]", "[[", "]", "[", "][", "[[]", "+]["])
def test_unbalanced_programs_are_rejected(source):
    assert not _validates(source)


def test_jump_table_pairs_brackets():
    table = parse("t.bf", "[[]][]").validate()
    assert table == {0: 3, 3: 0, 1: 2, 2: 1, 4: 5, 5: 4}


def test_jump_table_skips_comments():
    table = validate(parse("t.bf", "[ a ]"))
    assert table == {0: 4, 4: 0}


def test_unmatched_closing_reports_its_own_position():
    with pytest.raises(BracketMismatchError) as exc:
        validate(parse("t.bf", "+[]\n  ]"))
    err = exc.value
    assert (err.line, err.column) == (2, 3)
    assert err.filename == "t.bf"
    assert "unmatched closing bracket at line 2, column 3" in str(err)


def test_unmatched_opening_reports_innermost():
    with pytest.raises(BracketMismatchError) as exc:
        validate(parse("t.bf", "[\n [ [ ]"))
    err = exc.value
    # the "[" at 2:2 is the innermost bracket still open
    assert (err.line, err.column) == (2, 2)
    assert "unmatched opening bracket" in str(err)


def test_error_message_carries_context_and_hint():
    with pytest.raises(BracketMismatchError) as exc:
        validate(parse("loop.bf", "++\n+[-\n--"))
    message = str(exc.value)
    assert "BracketError" in message
    assert "loop.bf" in message
    assert ">    2 | +[-" in message
    assert "Hint:" in message
    assert exc.value.context in message


def test_machine_refuses_unbalanced_program():
    with pytest.raises(BracketMismatchError):
        VirtualMachine(parse("t.bf", "[[]"))


def test_error_context_follows_carriage_return_lines():
    with pytest.raises(BracketMismatchError) as exc:
        validate(parse("t.bf", "+\r-\r]"))
    assert (exc.value.line, exc.value.column) == (3, 1)
    assert ">    3 | ]" in str(exc.value)
