'''
Operation identifiers understood by the machine, and what they compute.

Every family is a closed enum. Anything the machine doesn't know maps to the
family's UNRECOGNIZED member, which computes nothing.
'''

from enum import Enum

import numpy

from .util import ieee


class _Token(Enum):
    @classmethod
    def _missing_(cls, value):
        return cls.UNRECOGNIZED


class Binary(_Token):
    UNRECOGNIZED = None
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    POWER = 'power'
    ROOT = 'root'


class Unary(_Token):
    UNRECOGNIZED = None
    SQUARE = 'square'
    SQUARE_ROOT = 'square-root'
    LOG10 = 'log10'
    LN = 'ln'
    TEN_TO_X = 'ten-to-x'
    EXP = 'exp'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'


class Nilary(_Token):
    UNRECOGNIZED = None
    PI = 'pi'
    E = 'e'


class Slot(_Token):
    UNRECOGNIZED = None
    A = 'A'
    B = 'B'
    C = 'C'

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and value.upper() != value:
            return cls(value.upper())
        return cls.UNRECOGNIZED


# Arguments are (y, x): the earlier pushed operand comes first, so
# 9 3 subtract is 9 - 3.
BINARY = {
    Binary.ADD: ieee(numpy.add),
    Binary.SUBTRACT: ieee(numpy.subtract),
    Binary.MULTIPLY: ieee(numpy.multiply),
    Binary.DIVIDE: ieee(numpy.divide),
    Binary.POWER: ieee(numpy.power),
    Binary.ROOT: ieee(lambda y, x: numpy.power(y, 1.0 / x)),
}

# Radians in, radians out.
UNARY = {
    # Powers & logarithms
    Unary.SQUARE: ieee(numpy.square),
    Unary.SQUARE_ROOT: ieee(numpy.sqrt),
    Unary.LOG10: ieee(numpy.log10),
    Unary.LN: ieee(numpy.log),
    Unary.TEN_TO_X: ieee(lambda x: numpy.power(10.0, x)),
    Unary.EXP: ieee(numpy.exp),

    # Trigonometry
    Unary.SIN: ieee(numpy.sin),
    Unary.COS: ieee(numpy.cos),
    Unary.TAN: ieee(numpy.tan),
    Unary.ASIN: ieee(numpy.arcsin),
    Unary.ACOS: ieee(numpy.arccos),
    Unary.ATAN: ieee(numpy.arctan),
}

NILARY = {
    Nilary.PI: numpy.pi,
    Nilary.E: numpy.e,
}
