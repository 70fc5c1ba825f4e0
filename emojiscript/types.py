"""Runtime values.

A variable holds either a piece of text or a function. Reassignment may switch
a variable from one kind to the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Text:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FunctionValue:
    """A user function: positional parameter names and body statement lines.

    Conditional blocks are represented as functions with no parameters.
    """
    params: Tuple[str, ...]
    body: Tuple[str, ...]

    def __repr__(self) -> str:
        return f"<function ({''.join(self.params)}) {len(self.body)} lines>"


Value = Union[Text, FunctionValue]


def type_name(value: Value) -> str:
    if isinstance(value, Text):
        return 'Text'
    if isinstance(value, FunctionValue):
        return 'Function'
    raise TypeError(f'not a runtime value: {value!r}')
