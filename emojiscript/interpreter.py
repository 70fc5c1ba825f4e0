"""Interpreter for the emojiscript language.

Programs are evaluated one line at a time. Each line is dispatched by
`parse_line` to an assignment, print or conditional statement; a line with no
statement symbol is a call of a user function. Function bodies and
conditional blocks are kept as statement text and are evaluated recursively
in a child environment of the caller.

Values are either `Text` or `FunctionValue`. Expressions are concatenations
of parts separated by ➕, where a part made of a single grapheme is a variable
reference and anything longer is literal text.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .ast import Program, Statement
from .environment import Environment
from .errors import ArityMismatch, MalformedConditional, MalformedFunctionLiteral, UnresolvedStatement
from .parser import parse_line, parse_program
from .symbols import Symbol, find_symbol, segment
from .types import FunctionValue, Text, Value, type_name


def split_call_args(chars: Sequence[str]) -> List[str]:
    """Turn the graphemes after a function name into positional arguments.

    Whitespace-separated words are arguments when the call contains
    whitespace (`F Hello`); otherwise every grapheme is its own argument
    (`😡😃`).
    """
    if any(ch.isspace() for ch in chars):
        return ''.join(chars).split()
    return list(chars)


class Interpreter:
    """Executes emojiscript programs against a chain of environments."""
    def __init__(self, trace: bool = False, trace_file: Optional[str] = None):
        self.global_env = Environment()
        self.trace = trace
        self.trace_fp = open(trace_file, 'w', encoding='utf-8') if trace and trace_file else None

    def debug(self, msg: str):
        if self.trace:
            if self.trace_fp:
                self.trace_fp.write(msg + '\n')
                self.trace_fp.flush()
            else:
                print(f"\x1b[90m[V]\x1b[39;2m {msg}\x1b[22m", file=sys.stderr)

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> Environment:
        if env is None:
            env = self.global_env
        try:
            self.execute_lines(program.lines, env)
            if self.trace:
                self.debug(f"Final environment: {env.entries()}")
            return env
        finally:
            if self.trace_fp:
                self.trace_fp.close()
                self.trace_fp = None

    def execute_lines(self, lines: Sequence[str], env: Environment):
        for line in lines:
            stripped = line.strip()
            if not stripped:
                continue
            self.debug(f"Processing line: {stripped}")
            node = parse_line(stripped)
            if node is not None:
                self.debug(f"Found token: {node.token} {node.args}")
                self.execute(node, env)
                continue
            self.call(stripped, env)

    def execute(self, node: Statement, env: Environment):
        if node.symbol is Symbol.ASSIGN:
            self.assign(node.args[0], node.args[1], env)
            return
        if node.symbol is Symbol.PRINT:
            print(self.parse_concat(''.join(node.args), env))
            return
        if node.symbol is Symbol.COND:
            self.conditional(''.join(node.args), env)
            return
        raise UnresolvedStatement(f"Unknown syntax or function call: {node.token}{''.join(node.args)}")

    # Statements
    def assign(self, name: str, value_raw: str, env: Environment):
        if not name or not value_raw:
            return
        fn = self.create_fn(value_raw)
        if fn is not None:
            self.debug(f"Assigned function to {name}")
            env.set(name, fn)
            return
        resolved = self.parse_concat(value_raw, env)
        self.debug(f"Assigned {name} = {resolved}")
        env.set(name, Text(resolved))

    def conditional(self, raw: str, env: Environment):
        chars = segment(raw)
        arrow = find_symbol(chars, Symbol.ARROW)
        if arrow is None:
            raise MalformedConditional(f"Missing {Symbol.ARROW.value} in conditional")
        condition = ''.join(chars[:arrow]).strip()
        body = ''.join(chars[arrow + 1:]).strip()

        cond_chars = segment(condition)
        eq = find_symbol(cond_chars, Symbol.EQUALS)
        if eq is None:
            raise MalformedConditional(f"Missing {Symbol.EQUALS.value} in conditional")
        lhs = self.parse_concat(''.join(cond_chars[:eq]), env)
        rhs = self.parse_concat(''.join(cond_chars[eq + 1:]), env)
        self.debug(f'Conditional evaluated: "{condition}" -> "{lhs} = {rhs}"')

        if lhs != rhs:
            self.debug("Condition was falsey, skipping block")
            return
        block = self.create_fn(Symbol.ARROW.value + body)
        if block is not None and not block.params:
            self.debug("Executing conditional block")
            self.execute_lines(block.body, env.child())

    def call(self, line: str, env: Environment):
        chars = segment(line)
        name = chars[0]
        func = env.get(name)
        if not isinstance(func, FunctionValue):
            if func is not None:
                self.debug(f"{name} is {type_name(func)}, not callable")
            raise UnresolvedStatement(f"Unknown syntax or function call: {line}")
        args = split_call_args(chars[1:])
        if not func.params and args:
            raise ArityMismatch(f"Function '{name}' takes no args but got some")
        call_env = env.child()
        for i, param in enumerate(func.params):
            call_env.define(param, Text(args[i] if i < len(args) else ''))
        self.debug(f"Invoking function {name} with {args}: {list(func.body)}")
        self.execute_lines(func.body, call_env)

    # Expressions
    def resolve(self, name: str, env: Environment) -> str:
        """Follow an alias chain from name to its final text value.

        A binding whose text is itself a bound name is followed. The last
        text seen is returned, or name itself when it has no text binding.
        """
        value: Optional[Value] = env.get(name)
        chain = [name]
        result = name
        while isinstance(value, Text):
            result = value.text
            # a name bound to itself is a fixed point
            if not env.has(value.text) or value.text == chain[-1]:
                break
            chain.append(value.text)
            value = env.get(value.text)
        if len(chain) > 1:
            self.debug(f"Resolved {name} through chain: {' → '.join(chain)} = {result}")
        else:
            self.debug(f"Resolved {name} = {result}")
        return result

    def parse_concat(self, raw: str, env: Environment) -> str:
        parts: List[str] = []
        for part in raw.split(Symbol.CONCAT.value):
            text = part.strip()
            resolved = self.resolve(text, env) if len(segment(text)) == 1 else text
            self.debug(f'Parsed concat part "{part}" -> "{resolved}"')
            parts.append(resolved)
        return ''.join(parts)

    def create_fn(self, raw: str) -> Optional[FunctionValue]:
        """Build a function from a literal starting with 🔧 or ▶️.

        Graphemes between the marker and the first ▶️ are parameter names;
        the rest is the body, one statement per 🫷-separated piece. Returns
        None when raw is not a function literal.
        """
        if not (raw.startswith(Symbol.FN_MARK.value) or raw.startswith(Symbol.ARROW.value)):
            return None
        chars = segment(raw)
        arrow = find_symbol(chars, Symbol.ARROW)
        if arrow is None:
            raise MalformedFunctionLiteral(f"Function definition missing {Symbol.ARROW.value}")
        params = tuple(ch for ch in chars[1:arrow] if not ch.isspace())
        body = tuple(''.join(chars[arrow + 1:]).split(Symbol.STMT_SEP.value))
        self.debug(f"Created function: {list(params)} {list(body)}")
        return FunctionValue(params=params, body=body)


def run_program(source: str, trace: bool = False) -> Environment:
    """Convenience function to parse and run an emojiscript program from source."""
    program = parse_program(source)
    interpreter = Interpreter(trace=trace)
    return interpreter.run(program)
