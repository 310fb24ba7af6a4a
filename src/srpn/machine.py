from collections import deque
import traceback

from . import arithmetic
from .arithmetic import INT32_MIN
from .lexer import Command, Lexer
from .randoms import LegacyRandom
from .util import (SRPNError, StackEmpty, StackOverflow, StackUnderflow,
                   UnrecognisedToken)


class Machine:
    '''
    Saturating integer stack machine (SRPN calculator).

    Takes whole lines and runs them, token by token, printing results and
    diagnostics as it goes. Keeps its stack and random sequence between
    lines.
    '''

    # Legacy limit on the number of stacked operands.
    CAPACITY = 23

    def __init__(self, verbose=None, output=None):
        '''
        Create empty stack machine.

        :param verbose: Show stack traces on bad user commands.
        :param output: Stream results and diagnostics are printed to,
                       stdout if None.
        '''
        self.stack = deque()
        self.randoms = LegacyRandom()
        self.lexer = Lexer()
        self.verbose = verbose
        self.output = output

    def process_line(self, line):
        '''
        Run every token on a line.

        A bad token only aborts itself; the rest of the line still runs.
        '''
        for token in self.lexer.lex(line):
            try:
                self.feed(token)
            except SRPNError as e:
                self.print(e.args[0])
                if self.verbose:
                    traceback.print_exc()

    def feed(self, token):
        '''
        Stack or run a single token.
        '''
        parsed = self.parse(token)
        if isinstance(parsed, Command):
            self._apply(parsed)
        elif parsed is not None:
            self._pshstack(parsed)
        else:
            raise UnrecognisedToken(token)

    def parse(self, token):
        '''
        Parse token into an operand or a Command. None if neither.
        '''
        operand = self.lexer.operand(token)
        if operand is not None:
            return operand
        return self.lexer.command(token)

    def _apply(self, command):
        '''
        Run command against the stack.
        '''
        if command in type(self).FUNCTIONS:
            return type(self).FUNCTIONS[command](self)
        f = type(self).OPERATORS[command.base]
        # Check the depth before popping anything, so a failure pops nothing.
        if len(self.stack) < command.arity:
            raise StackUnderflow
        right = self.stack.pop()
        if command.compound:
            self.print(right)
        left = self.stack.pop()
        try:
            res = f(left, right)
        except SRPNError:
            # Put them back the way they were entered.
            self._pshstack(left, right)
            raise
        self._pshstack(res)

    def print(self, *args):
        '''
        Print args, one per line.
        '''
        for arg in args:
            print(arg, file=self.output)

    def printtop(self):
        '''
        Print the element on the top of the stack.
        '''
        if not self.stack:
            raise StackEmpty
        self.print(self.stack[-1])

    def printstack(self):
        '''
        Print all elements on the stack, top of the stack first.

        An empty stack prints INT32_MIN instead.
        '''
        if not self.stack:
            self.print(INT32_MIN)
        else:
            self.print(*reversed(self.stack))

    def pshrandom(self):
        '''
        Push the next legacy random number.
        '''
        # The sequence only advances if the push can happen.
        self._checkspace()
        self._pshstack(next(self.randoms))

    def _checkspace(self, n=1):
        if len(self.stack) + n > type(self).CAPACITY:
            raise StackOverflow

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.

        Pushes nothing if they don't all fit.
        '''
        self._checkspace(len(new))
        self.stack.extend(new)

    # Stack commands
    FUNCTIONS = {
        Command.SHOW: printtop,
        Command.DISPLAY: printstack,
        Command.RANDOM: pshrandom,
    }

    # Binary operators, called with (left, right) in order of entry.
    OPERATORS = {
        Command.ADD: arithmetic.add,
        Command.SUBTRACT: arithmetic.subtract,
        Command.MULTIPLY: arithmetic.multiply,
        Command.DIVIDE: arithmetic.divide,
        Command.MODULO: arithmetic.modulo,
        Command.POWER: arithmetic.power,
    }


# Every command, compound ones included, must run something.
assert not [command
            for command
            in Command
            if command not in Machine.FUNCTIONS and
               command.base not in Machine.OPERATORS]
