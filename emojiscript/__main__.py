"""CLI entry point for the emojiscript interpreter.

Usage:
    python -m emojiscript [-v] [--trace-file PATH] <program_file>
    python -m emojiscript --emit-program <program_file>
    python -m emojiscript [-v] [--trace-file PATH] --program-json <json_file>

Options:
  -v             Trace interpreter steps (also enabled by VERBOSE=true)
  --trace-file   Write trace lines to this file instead of stderr
  --emit-program Parse the given program and write its statement lines as JSON
  --program-json Execute a previously emitted program JSON file
"""

import argparse
import json
import os
import sys
from pathlib import Path

from .errors import EmojiError
from .interpreter import Interpreter
from .parser import parse_program
from .program_json import program_from_obj, program_to_obj


def read_text(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="emojiscript interpreter")
    parser.add_argument('-v', action='store_true', help='trace interpreter steps')
    parser.add_argument('--trace-file', metavar='PATH', help='write trace output to PATH instead of stderr')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-program', metavar='PROGRAM_FILE', help='emit the parsed program as JSON')
    group.add_argument('--program-json', metavar='JSON_FILE', help='execute a program from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    trace = args.v or os.environ.get('VERBOSE') == 'true'

    # Emit program mode
    if args.emit_program:
        program_file = Path(args.emit_program)
        program = parse_program(read_text(program_file))
        out_path = program_file.with_name(program_file.name + '.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    if args.program_json:
        try:
            program = program_from_obj(json.loads(read_text(Path(args.program_json))))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.program:
        program = parse_program(read_text(Path(args.program)))
    else:
        parser.error('missing program file; or use --emit-program/--program-json')

    interpreter = Interpreter(trace=trace, trace_file=args.trace_file)
    try:
        interpreter.run(program)
    except EmojiError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
