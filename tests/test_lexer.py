#!/usr/bin/env python3
"""
Test that source text is turned into position-tagged instructions.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bft import (
    Comment,
    Decrement,
    Increment,
    Input,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
    Program,
    parse,
    tokenize,
)


def test_every_symbol_maps_to_its_instruction():
    kinds = [type(ins) for ins in tokenize("><+-.,[]")]
    assert kinds == [MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopStart, LoopEnd]


def test_other_characters_become_comments():
    ins = tokenize("a+ b")
    assert ins[0] == Comment(1, 1, 'a')
    assert ins[1] == Increment(1, 2)
    assert ins[2] == Comment(1, 3, ' ')
    assert ins[3] == Comment(1, 4, 'b')


def test_no_character_is_dropped():
    source = "hello [world]\n+++ .\r\n\n,"
    assert len(tokenize(source)) == len(source)


def test_positions_are_one_based_and_reset_per_line():
    ins = tokenize("+\n ++\n\n[")
    assert (ins[0].line, ins[0].column) == (1, 1)
    # the line break itself sits right after the last character of its line
    assert ins[1] == Comment(1, 2, '\n')
    assert (ins[3].line, ins[3].column) == (2, 2)
    assert (ins[4].line, ins[4].column) == (2, 3)
    assert ins[6] == Comment(3, 1, '\n')
    assert ins[7] == LoopStart(4, 1)


def test_parse_keeps_filename_and_source():
    program = parse("hello.bf", "+[-]")
    assert program.source_file == "hello.bf"
    assert program.source == "+[-]"
    assert len(program) == 4


def test_program_renders_code_symbols_only():
    program = Program.from_string("add two: ++\n[ loop - ]\n")
    assert str(program) == "++[-]"


def test_program_is_immutable():
    program = parse("p.bf", "+")
    assert isinstance(program.instructions, tuple)
    with pytest.raises(AttributeError):
        program.filename = "other.bf"


def test_from_file(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("++ comment\n.", encoding="utf-8")
    program = Program.from_file(path)
    assert program.source_file == str(path)
    assert str(program) == "++."
    assert program[-1] == Output(2, 1)


def test_carriage_returns_break_lines():
    ins = tokenize("+\r+\r\n+")
    assert ins[0] == Increment(1, 1)
    assert ins[1] == Comment(1, 2, '\r')
    assert ins[2] == Increment(2, 1)
    # "\r\n" is a single line break
    assert ins[3] == Comment(2, 2, '\r')
    assert ins[4] == Comment(2, 3, '\n')
    assert ins[5] == Increment(3, 1)


def test_iterating_a_program_yields_its_instructions():
    program = parse("p.bf", "+x")
    assert list(program) == [Increment(1, 1), Comment(1, 2, 'x')]


def test_comment_requires_its_character():
    with pytest.raises(TypeError):
        Comment(1, 1)
