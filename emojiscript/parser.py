"""Source intake and statement dispatch for emojiscript.

Parsing happens in two places:

1. **Program parsing**: `parse_program` turns raw source into a `Program`,
   the ordered list of statement lines. The source is normalised by
   `preprocess` and fed into a small Lark grammar that splits it into lines
   and strips `//` comments. Lines that are empty once the comment is gone
   are dropped.

2. **Statement dispatch**: `parse_line` looks at a single line while the
   interpreter runs and decides whether it is an assignment, a print or a
   conditional by finding the first statement symbol among its graphemes.
   Function bodies are stored as text, so this step is repeated every time
   a body runs.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from lark import Lark, Transformer

from .ast import Program, Statement
from .symbols import Symbol, segment


def preprocess(source: str) -> str:
    """Normalise line endings and make sure the source ends with a newline.

    The grammar terminates every line with a newline token, including the
    last one.
    """
    text = source.replace('\r\n', '\n').replace('\r', '\n')
    if not text.endswith('\n'):
        text += '\n'
    return text


PROGRAM_GRAMMAR = r"""
    start: line*
    line: STATEMENT? COMMENT? _NL

    // A comment starts at "//" followed by whitespace or the end of the line,
    // so text such as http://example is left alone.
    STATEMENT: /(?:(?!\/\/[ \t\n])[^\n])+/
    COMMENT: /\/\/[ \t][^\n]*/ | /\/\/(?=\n)/
    _NL: "\n"
"""


PROGRAM_PARSER = Lark(
    PROGRAM_GRAMMAR,
    parser='lalr',
    maybe_placeholders=False,
    lexer='basic',
)


class ProgramTransformer(Transformer):
    """Transforms the line parse tree into a Program."""

    def start(self, items):
        return Program(lines=tuple(line for line in items if line))

    def line(self, items):
        for token in items:
            if token.type == 'STATEMENT':
                return token.value.strip()
        return ''


def parse_program(source: str) -> Program:
    """Parse emojiscript source into a Program of trimmed statement lines."""
    pre = preprocess(source)
    tree = PROGRAM_PARSER.parse(pre)
    return ProgramTransformer().transform(tree)


STATEMENT_SYMBOLS: Dict[str, Symbol] = {
    s.value: s for s in (Symbol.ASSIGN, Symbol.PRINT, Symbol.COND)
}


def parse_line(line: str) -> Optional[Statement]:
    """Dispatch a line on the leftmost statement symbol it contains.

    Returns None when the line has no statement symbol at all; the
    interpreter then treats it as a function call.
    """
    chars = segment(line)
    for i, ch in enumerate(chars):
        symbol = STATEMENT_SYMBOLS.get(ch)
        if symbol is None:
            continue
        args: List[str]
        if symbol is Symbol.ASSIGN:
            args = [''.join(chars[:i]).strip(), ''.join(chars[i + 1:]).strip()]
        else:
            args = chars[i + 1:]
        return Statement(symbol=symbol, token=ch, args=args)
    return None
