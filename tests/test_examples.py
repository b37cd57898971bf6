#!/usr/bin/env python3
"""
Run the bundled example programs.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bft import Program, run_file

EXAMPLES = os.path.join(os.path.dirname(__file__), '..', 'examples')


def test_hello_world_example():
    result = run_file(os.path.join(EXAMPLES, 'hello_world.bf'))
    assert result.output == b"Hello World!\n"


def test_hello_world_comments_are_inert():
    program = Program.from_file(os.path.join(EXAMPLES, 'hello_world.bf'))
    assert str(program) == (
        "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
        ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
    )


def test_echo_upper_example():
    assert run_file(os.path.join(EXAMPLES, 'echo_upper.bf'), b"q").output == b"Q"
