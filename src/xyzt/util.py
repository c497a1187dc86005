from functools import wraps

import numpy


class CalcError(Exception):
    pass


class ParseError(CalcError):
    pass


class RecallError(CalcError):
    pass


class LexError(CalcError):
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Ugly hack decorator that converts exceptions to user errors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def ieee(f):
    '''
    Evaluate f on doubles the way the hardware does.

    Division by zero, logarithms of non-positive numbers and friends give
    inf/nan instead of raising. Always returns a plain float.
    '''
    @wraps(f)
    def wrapper(*args):
        with numpy.errstate(all='ignore'):
            return float(f(*map(numpy.float64, args)))
    return wrapper
