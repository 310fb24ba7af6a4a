'''
SRPN lexer tests
'''

from srpn.lexer import Command, Lexer


def test_comment_removed():
    l = Lexer()
    assert list(l.lex('5 #ignored# 3 +')) == ['5', '3', '+']


def test_comment_greedy():
    l = Lexer()
    assert list(l.lex('1 #a# 2 #b# 3')) == ['1', '3']


def test_unterminated_comment_kept():
    l = Lexer()
    assert list(l.lex('1 #2')) == ['1', '#2']


def test_operators_padded():
    l = Lexer()
    assert list(l.lex('10*2+3/4^5%6')) == \
        ['10', '*', '2', '+', '3', '/', '4', '^', '5', '%', '6']


def test_minus_not_padded():
    l = Lexer()
    assert list(l.lex('3-4')) == ['3-4']
    assert list(l.lex('3 -4 -')) == ['3', '-4', '-']


def test_compound_operators_kept_whole():
    l = Lexer()
    assert list(l.lex('1 2+=3-=4*=5/=6%=7^=')) == \
        ['1', '2', '+=', '3', '-=', '4', '*=', '5', '/=', '6', '%=', '7', '^=']


def test_letters_isolated():
    l = Lexer()
    assert list(l.lex('rrd')) == ['r', 'r', 'd']
    assert list(l.lex('3r+')) == ['3', 'r', '+']
    assert list(l.lex('foo')) == ['foo']
    assert list(l.lex('2foo3')) == ['2', 'foo', '3']


def test_whitespace_collapsed():
    l = Lexer()
    assert l.preprocess('  1 \t\t 2   +  \n') == '1 2 +'


def test_blank_line():
    l = Lexer()
    assert list(l.lex('')) == []
    assert list(l.lex('   \t')) == []
    assert list(l.lex('#nothing here#')) == []


def test_operand():
    l = Lexer()
    assert l.operand('42') == 42
    assert l.operand('-7') == -7
    assert l.operand('+7') == 7
    assert l.operand('2147483647') == 2147483647
    assert l.operand('-2147483648') == -2147483648


def test_not_operand():
    l = Lexer()
    assert l.operand('2147483648') is None
    assert l.operand('-2147483649') is None
    assert l.operand('3-4') is None
    assert l.operand('1_000') is None
    assert l.operand('-') is None
    assert l.operand('=') is None


def test_command():
    l = Lexer()
    assert l.command('+=') is Command.SHOW_ADD
    assert l.command('d') is Command.DISPLAY
    assert l.command('==') is None
    assert l.command('x') is None


def test_command_shape():
    assert Command.SHOW_POWER.compound
    assert Command.SHOW_POWER.base is Command.POWER
    assert Command.POWER.base is Command.POWER
    assert not Command.SHOW.compound
    assert Command.SUBTRACT.arity == 2
    assert Command.SHOW_DIVIDE.arity == 2
    assert Command.RANDOM.arity == 0


def test_command_letters_split_off():
    l = Lexer()
    assert list(l.lex('rx')) == ['r', 'x']
    assert list(l.lex('drq')) == ['d', 'r', 'q']
    assert list(l.lex('rfoo')) == ['r', 'foo']
    assert list(l.lex('fodr2')) == ['fo', 'd', 'r', '2']


def test_operand_leading_zeros():
    l = Lexer()
    assert l.operand('0' * 4400 + '7') == 7
    assert l.operand('-' + '0' * 20 + '2147483648') == -2147483648
    assert l.operand('000') == 0


def test_operand_too_many_digits():
    l = Lexer()
    assert l.operand('1' * 5000) is None
    assert l.operand('-' + '9' * 11) is None
