import pytest

from emojiscript.parser import parse_program
from emojiscript.program_json import program_from_obj, program_to_obj


def test_program_json_round_trip():
    program = parse_program('X👉Hi // set\n🗣️X\n')
    obj = program_to_obj(program)
    assert obj == {'type': 'Program', 'lines': ['X👉Hi', '🗣️X']}
    assert program_from_obj(obj) == program


@pytest.mark.parametrize('obj', [
    [],
    {'type': 'Block', 'lines': []},
    {'type': 'Program'},
    {'type': 'Program', 'lines': ['ok', 3]},
])
def test_program_from_obj_rejects_bad_shapes(obj):
    with pytest.raises(ValueError):
        program_from_obj(obj)
