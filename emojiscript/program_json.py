"""JSON serialization/deserialization for parsed programs.

A parsed program is only its list of statement lines, so the JSON form is a
single object: `{"type": "Program", "lines": [...]}`.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import Program


def program_to_obj(program: Program) -> Dict[str, Any]:
    return {"type": "Program", "lines": list(program.lines)}


def program_from_obj(obj: Any) -> Program:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError(f"Expected a Program object, got: {obj!r}")
    lines = obj.get("lines")
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise ValueError("Program lines must be a list of strings")
    return Program(lines=tuple(lines))
