from enum import Enum
from functools import reduce
import operator

import regex


class Command(Enum):
    '''
    Every command the machine understands, by its spelling.
    '''
    SHOW = '='
    DISPLAY = 'd'
    RANDOM = 'r'

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MODULO = '%'
    POWER = '^'

    # Print the top of the stack, then operate
    SHOW_ADD = '+='
    SHOW_SUBTRACT = '-='
    SHOW_MULTIPLY = '*='
    SHOW_DIVIDE = '/='
    SHOW_MODULO = '%='
    SHOW_POWER = '^='

    @property
    def compound(self):
        return len(self.value) == 2 and self.value.endswith('=')

    @property
    def base(self):
        '''
        The plain operator a compound one applies, or itself.
        '''
        return type(self)(self.value[0]) if self.compound else self

    @property
    def arity(self):
        '''
        Number of operands popped off the stack.
        '''
        return 0 if self.base in NULLARY else 2


NULLARY = frozenset({Command.SHOW, Command.DISPLAY, Command.RANDOM})

# Commands spelt with a single letter
LETTER_COMMANDS = frozenset(command.value
                            for command
                            in Command
                            if command.value.isalpha())

# A lone command letter, or a run of any other letters
LETTER_RUN = r'[{0}]|[^{0}]+'.format(''.join(sorted(LETTER_COMMANDS)))


def _pad_letters(match):
    '''
    Pad a run of letters, splitting off every command letter.

    "rrd" becomes "r r d" and "rfoo" becomes "r foo", but "foo" is kept
    whole so it gets reported as one unrecognised token.
    '''
    runs = regex.findall(LETTER_RUN, match.group('letters'))
    return ' ' + ' '.join(runs) + ' '


class Lexer:
    '''
    Lexer for the SRPN line grammar.

    Normalises a line so that every token stands alone between single
    spaces, then splits it. Holds no state.
    '''
    # Everything from the first # to the last one, so
    # "1 #a# 2 #b# 3" comes out as "1 3".
    COMMENT = r'\#.*\#'
    # Plain operators, but not the first half of a compound one. Note the
    # absence of -, so 3-4 stays a single token.
    OPERATOR = r'(?<operator>[+/*^%])(?!=)'
    COMPOUND = r'(?<compound>[+\-/*^%]=)'
    # Runs of letters, even when glued to other tokens.
    LETTERS = r'(?<letters>[a-zA-Z]+)'
    # ASCII whitespace only.
    SPACE = r'[\ \t\n\x0B\f\r]+'
    # Integer literal; leading zeros don't count towards the digits kept in
    # __digits__. Range checked separately.
    OPERAND = r'(?<sign>[+\-]?)0*(?<__digits__>\d+)'
    # Any more digits than this is out of range anyway.
    MAX_DIGITS = 10

    # Everything up to and including a space gets trimmed at the ends.
    TRIM = ''.join(map(chr, range(0x21)))

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # (pattern, replacement), in order of application
    PREPROCESSORS = (
        (COMMENT, ''),
        (OPERATOR, r' \g<operator> '),
        (COMPOUND, r' \g<compound> '),
        (LETTERS, _pad_letters),
        (SPACE, ' '),
    )

    def preprocess(self, line):
        '''
        Strip comments and pad every token with single spaces.
        '''
        for pattern, replacement in type(self).PREPROCESSORS:
            line = regex.sub(pattern, replacement, line,
                             flags=type(self).FLAGS)
        return line.strip(type(self).TRIM)

    def lex(self, line):
        '''
        Take a line and return all tokens.
        '''
        line = self.preprocess(line)
        if line:
            yield from line.split(' ')

    def operand(self, token):
        '''
        Return the integer token spells, or None if not a 32-bit integer.
        '''
        match = regex.fullmatch(type(self).OPERAND, token,
                                flags=type(self).FLAGS)
        if match is None:
            return None
        digits = match.group('__digits__')
        if len(digits) > type(self).MAX_DIGITS:
            return None
        value = int(match.group('sign') + digits)
        if not -2 ** 31 <= value < 2 ** 31:
            return None
        return value

    def command(self, token):
        '''
        Return the Command token spells, or None.
        '''
        try:
            return Command(token)
        except ValueError:
            return None
