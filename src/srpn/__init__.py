'''
SRPN: saturated RPN calculator.

Integer-only reverse Polish notation calculator that clamps to the signed
32-bit range instead of overflowing. Reproduces a legacy calculator's output
exactly, down to its quirks: a 23 element stack, a fixed "random" sequence,
and its diagnostics' wording.
'''

from .cli import CLI
from .lexer import Command, Lexer
from .machine import Machine


__all__ = 'Machine', 'Lexer', 'Command', 'CLI'
