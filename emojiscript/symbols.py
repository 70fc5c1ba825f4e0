"""Operator symbols and grapheme segmentation.

Every token of the language is a single user-perceived character, and most
operators are emoji made of several code points (a base character plus a
variation selector, for example). Source text is therefore never indexed by
code point: it is split into extended grapheme clusters first, and operators
are found by comparing whole clusters.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

import regex


class Symbol(str, Enum):
    ASSIGN = '👉'
    PRINT = '🗣️'
    COND = '❓'
    ARROW = '▶️'
    EQUALS = '🟰'
    CONCAT = '➕'
    FN_MARK = '🔧'
    STMT_SEP = '🫷'


_GRAPHEME = regex.compile(r'\X')


def segment(text: str) -> List[str]:
    """Split text into extended grapheme clusters.

    Joining the result gives back the input unchanged.
    """
    return _GRAPHEME.findall(text)


def find_symbol(chars: Sequence[str], symbol: Symbol) -> Optional[int]:
    """Return the index of the leftmost occurrence of symbol, or None."""
    for i, ch in enumerate(chars):
        if ch == symbol.value:
            return i
    return None
