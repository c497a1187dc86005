import regex

from .operations import Binary, Unary, Nilary, Slot, BINARY, UNARY, NILARY
from .util import ParseError, RecallError, wrap_user_errors


class Machine:
    '''
    Four register stack machine (RPN calculator), like the HP handhelds.

    The registers X, Y, Z and T are a fixed size stack, X on top. Numbers are
    composed in the entry by adding digits and at most one separator, then
    committed onto the stack. Operations come in three shapes:

    - binary: merges Y and X into X and drops the stack.
    - unary: replaces X, the stack doesn't move.
    - nilary: pushes a constant, T falls off the bottom.
    '''

    X, Y, Z, T = range(4)
    SIZE = 4

    DEFAULT_SEPARATOR = '.'
    # Significant digits on output.
    DEFAULT_PRECISION = 15

    # What append_digit takes for an integer.
    DIGITS = r'\s*[+-]?\d+\s*'

    def __init__(self, separator=None, precision=None):
        '''
        Create machine with all registers zeroed and an empty entry.

        :param separator: Decimal separator used in the entry and on output.
        :param precision: Significant digits shown by render.
        '''
        if separator is None:
            separator = type(self).DEFAULT_SEPARATOR
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        self.separator = separator
        self.precision = precision
        self.entry = ''
        self.variables = dict()
        self._stack = [0.0] * type(self).SIZE

    @property
    def registers(self):
        '''
        Snapshot of the registers, X first.
        '''
        return tuple(self._stack)

    @property
    def x(self):
        return self._stack[self.X]

    @property
    def y(self):
        return self._stack[self.Y]

    @property
    def z(self):
        return self._stack[self.Z]

    @property
    def t(self):
        return self._stack[self.T]

    def format(self, value):
        '''
        Format register value for display, with the machine's separator.
        '''
        text = '{:.{}g}'.format(value, self.precision)
        return text.replace('.', self.separator)

    @wrap_user_errors('Cannot convert {1!r}', ParseError)
    def _iconvert(self, entry):
        '''
        Convert entry text to a register value.
        '''
        return float(entry.replace(self.separator, '.'))

    def render(self):
        '''
        T, Z, Y, X and the entry, one per line, like the display shows them.
        '''
        return '\n'.join([*map(self.format, reversed(self._stack)),
                          self.entry])

    def set_x(self, value):
        '''
        Overwrite X. The rest of the stack doesn't move.
        '''
        self._stack[self.X] = float(value)

    def _rollsetx(self, value):
        '''
        Push value into X, rolling the stack down. T is lost.
        '''
        for i in range(self.T, self.X, -1):
            self._stack[i] = self._stack[i - 1]
        self.set_x(value)

    def drop(self):
        '''
        Drop X. Y, Z and T move up one; T keeps its value, so it shows up
        in both Z and T.
        '''
        for i in range(self.X, self.T):
            self._stack[i] = self._stack[i + 1]

    def _dropsetx(self, value):
        '''
        Drop, then replace X. Binary operations consume X and Y this way.
        '''
        self.drop()
        self.set_x(value)

    def roll_up(self):
        '''
        Rotate the stack: T comes around into X, nothing is lost.
        '''
        top = self._stack[self.T]
        self._rollsetx(top)

    def append_digit(self, digit):
        '''
        Add a digit to the entry.

        Silently ignores anything that isn't an integer. No underscores
        between digits, unlike Python literals.
        '''
        if isinstance(digit, str) and \
           regex.fullmatch(type(self).DIGITS, digit):
            self.entry += str(int(digit))

    def append_separator(self):
        '''
        Add the decimal separator to the entry, unless already there.
        '''
        if self.separator not in self.entry:
            self.entry += self.separator

    def toggle_sign(self):
        '''
        Change the sign of the entry.

        Only the first character is looked at: '+' and '-' swap, anything
        else gets a '-' in front. '5' goes to '-5', then '+5', then '-5'.
        '''
        if self.entry[:1] == '+':
            self.entry = '-' + self.entry[1:]
        elif self.entry[:1] == '-':
            self.entry = '+' + self.entry[1:]
        else:
            self.entry = '-' + self.entry

    def commit_entry(self):
        '''
        Push the entry onto the stack and clear it.

        Does nothing if the entry is empty. Raises ParseError, leaving
        everything as is, if the entry isn't a number.
        '''
        if self.entry:
            self._rollsetx(self._iconvert(self.entry))
            self.entry = ''

    def apply_binary(self, op):
        '''
        Replace X and Y with Y op X, dropping the stack.
        '''
        op = Binary(op)
        if op is Binary.UNRECOGNIZED:
            return
        self._dropsetx(BINARY[op](self.y, self.x))

    def apply_unary(self, op):
        '''
        Replace X with op(X).
        '''
        op = Unary(op)
        if op is Unary.UNRECOGNIZED:
            return
        self.set_x(UNARY[op](self.x))

    def apply_constant(self, op):
        '''
        Push a constant.
        '''
        op = Nilary(op)
        if op is Nilary.UNRECOGNIZED:
            return
        self._rollsetx(NILARY[op])

    def store(self, slot):
        '''
        Store X into variable A, B or C. The stack doesn't move.
        '''
        slot = Slot(slot)
        if slot is Slot.UNRECOGNIZED:
            return
        self.variables[slot] = self.x

    def recall(self, slot):
        '''
        Push the content of variable A, B or C.

        Raises RecallError if nothing was stored there yet.
        '''
        slot = Slot(slot)
        if slot is Slot.UNRECOGNIZED:
            return
        try:
            value = self.variables[slot]
        except KeyError as e:
            raise RecallError('Nothing stored in {}'.format(slot.value)) from e
        self._rollsetx(value)
