'''
XYZT: four register RPN calculator.

Works like the HP handhelds: X, Y, Z and T on a fixed size stack, numbers
composed in an entry before they're pushed, and operations that either merge
X and Y, replace X, or push a constant.

Floating point all the way down. Division by zero gives inf, square roots of
negative numbers give nan, and both carry on through whatever comes next.
'''

from .cli import CLI
from .keypad import Keypad
from .lexer import Lexer
from .machine import Machine
from .util import CalcError, ParseError, RecallError, LexError


__all__ = ('Machine', 'Keypad', 'Lexer', 'CLI',
           'CalcError', 'ParseError', 'RecallError', 'LexError')
