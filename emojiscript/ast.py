"""Program and statement nodes.

A program is kept as its list of statement lines: function bodies and
conditional blocks are stored as text and only split into statements when
they run, so there is no tree beyond one statement at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .symbols import Symbol


@dataclass(frozen=True)
class Program:
    lines: Tuple[str, ...]


@dataclass
class Statement:
    """One dispatched line.

    For assignments `args` is `[name, value]`; for print and conditional
    statements it is the list of graphemes following the symbol.
    """
    symbol: Symbol
    token: str
    args: List[str]
