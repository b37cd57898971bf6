from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import BFError
from .program import Program
from .vm import VirtualMachine


def format_cells(cells, count: int, *, width: int = 8) -> str:
    values = [int(b) for b in cells[:count]]
    rows = [" ".join(f"{v:3d}" for v in values[i:i + width]) for i in range(0, len(values), width)]
    return "\n".join(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bft", description="A brainfuck interpreter")
    parser.add_argument("program", metavar="PROGRAM", help="Input source code")
    parser.add_argument(
        "-c", "--cells", type=int, default=0,
        help="Set the number of cells in the virtual machine (default 30000)",
    )
    parser.add_argument(
        "-e", "--extensible", action="store_true",
        help="Let the tape grow to the right when the head runs off its end",
    )
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="Print the first N cells after the run")
    parser.add_argument("--trace", action="store_true", help="Print every executed instruction to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cells < 0:
        print(f"bft: error: --cells must be >= 0, got {args.cells}", file=sys.stderr)
        return 1

    try:
        program = Program.from_file(args.program)
    except FileNotFoundError:
        print(f"Couldn't find file: {args.program}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"bft: error: cannot read {args.program}: {e}", file=sys.stderr)
        return 1

    vm = None
    rc = 0
    try:
        vm = VirtualMachine(program, cells=args.cells, extensible=args.extensible, trace=args.trace)
        vm.interpret(sys.stdin.buffer, sys.stdout.buffer)
    except BFError as e:
        print(f"bft: {e}", file=sys.stderr)
        rc = 1
    except OSError as e:
        print(f"bft: error: cannot transfer program I/O: {e}", file=sys.stderr)
        rc = 1

    if vm is not None:
        if args.trace:
            print("\n".join(vm.state.trace), file=sys.stderr)
        if args.dump > 0:
            print("\n================", file=sys.stderr)
            print(format_cells(vm.cells, args.dump), file=sys.stderr)
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
