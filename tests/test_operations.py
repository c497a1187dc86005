'''
Operation identifier tests
'''

import math

from xyzt.operations import Binary, Unary, Nilary, Slot, BINARY, UNARY, NILARY
from xyzt.util import CalcError, wrap_user_errors

from pytest import raises


def test_every_operation_computes_something():
    for family, functions in [(Binary, BINARY),
                              (Unary, UNARY),
                              (Nilary, NILARY)]:
        known = set(family) - {family.UNRECOGNIZED}
        assert known == functions.keys()


def test_unknown_tokens():
    assert Binary('×') is Binary.UNRECOGNIZED
    assert Unary('√x') is Unary.UNRECOGNIZED
    assert Nilary('π') is Nilary.UNRECOGNIZED
    assert Slot('D') is Slot.UNRECOGNIZED


def test_tokens():
    assert Binary('root') is Binary.ROOT
    assert Unary('square-root') is Unary.SQUARE_ROOT
    assert Unary('ten-to-x') is Unary.TEN_TO_X
    assert Slot('c') is Slot.C


def test_functions_return_floats():
    result = BINARY[Binary.ADD](1, 2)
    assert result == 3 and type(result) is float
    assert UNARY[Unary.LN](0) == -math.inf


def test_wrap_user_errors():
    @wrap_user_errors('Bad {0}')
    def bad(value):
        raise ValueError(value)

    with raises(CalcError, match='Bad 1') as info:
        bad(1)
    assert isinstance(info.value.__cause__, ValueError)

    @wrap_user_errors('Never seen')
    def already_user_error():
        raise CalcError('Seen')

    with raises(CalcError, match='Seen'):
        already_user_error()
