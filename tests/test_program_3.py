from pathlib import Path

from emojiscript.interpreter import parse_program, Interpreter
from emojiscript.types import Text

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_scopes(capsys):
    """Test program 3: parameters and scoping.

    F appends "!" to its argument, prints it and copies it into the outer
    X. The Y it assigns is local to the call and is gone afterwards, so
    printing Y falls back to the bare name.
    """
    with open(EXAMPLES / 'program_3.emoji', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    env = interp.run(program)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['Hello!', 'Hello!', 'Y']
    assert env.get('X') == Text('Hello!')
    assert not env.has('Y')
    assert not env.has('P')
