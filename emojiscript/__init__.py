# emojiscript language package
# This package provides an interpreter for the emoji-symbol scripting language.
from .interpreter import run_program, Interpreter
from .parser import parse_program
from .errors import EmojiError

__all__ = [
    'run_program',
    'parse_program',
    'Interpreter',
    'EmojiError',
]
