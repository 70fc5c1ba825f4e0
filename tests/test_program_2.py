from pathlib import Path

from emojiscript.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_alias_chain(capsys):
    with open(EXAMPLES / 'program_2.emoji', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['hello', 'chained']
