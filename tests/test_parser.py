from emojiscript.ast import Program
from emojiscript.parser import parse_line, parse_program, preprocess
from emojiscript.symbols import Symbol


def test_preprocess_normalises_newlines():
    assert preprocess('a\r\nb\rc') == 'a\nb\nc\n'
    assert preprocess('') == '\n'


def test_parse_program_strips_comments_and_blank_lines():
    source = '\n'.join([
        '// a comment line',
        '😃👉Happy',
        '',
        '   ',
        '🗣️😃 // trailing comment',
        '🗣️http://example.com',
        '🗣️x //',
    ])
    program = parse_program(source)
    assert program == Program(lines=('😃👉Happy', '🗣️😃', '🗣️http://example.com', '🗣️x'))


def test_parse_program_trims_lines():
    program = parse_program('   X👉Hi   \r\n\t🗣️X\t')
    assert program.lines == ('X👉Hi', '🗣️X')


def test_parse_program_empty_source():
    assert parse_program('').lines == ()
    assert parse_program('// only a comment\n').lines == ()


def test_parse_line_assignment_args_are_name_and_value():
    node = parse_line(' X 👉 a➕b ')
    assert node.symbol is Symbol.ASSIGN
    assert node.token == '👉'
    assert node.args == ['X', 'a➕b']


def test_parse_line_print_args_are_graphemes():
    node = parse_line('🗣️Hi ☹️')
    assert node.symbol is Symbol.PRINT
    assert node.args == ['H', 'i', ' ', '☹️']


def test_parse_line_uses_leftmost_symbol():
    node = parse_line('F👉▶️🗣️Hi')
    assert node.symbol is Symbol.ASSIGN
    assert node.args == ['F', '▶️🗣️Hi']

    node = parse_line('❓A🟰A▶️X👉Y')
    assert node.symbol is Symbol.COND
    assert ''.join(node.args) == 'A🟰A▶️X👉Y'


def test_parse_line_without_statement_symbol_is_call():
    assert parse_line('😡😃') is None
    assert parse_line('F▶️x') is None
