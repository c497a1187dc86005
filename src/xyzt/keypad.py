from .machine import Machine
from .util import wrap_user_errors


class Keypad:
    '''
    Keys of the calculator, wired to a machine.

    Key labels are what a user sees or types: the glyphs printed on the
    buttons, and plain ASCII names for the keyboard. Machine operations are
    only ever addressed by their own identifiers; this is the one place that
    knows about glyphs.
    '''

    ENTRY_KEYS = {
        **{str(digit): ('append_digit', str(digit)) for digit in range(10)},
        '.': ('append_separator', None),
        ',': ('append_separator', None),
        '±': ('toggle_sign', None),
        'chs': ('toggle_sign', None),
        'ENTER': ('commit_entry', None),
        '⏎': ('commit_entry', None),
    }

    OPERATION_KEYS = {
        # Binary
        '+': ('apply_binary', 'add'),
        '−': ('apply_binary', 'subtract'),
        '-': ('apply_binary', 'subtract'),
        '×': ('apply_binary', 'multiply'),
        '*': ('apply_binary', 'multiply'),
        '÷': ('apply_binary', 'divide'),
        '/': ('apply_binary', 'divide'),
        'yˣ': ('apply_binary', 'power'),
        '^': ('apply_binary', 'power'),
        'ˣ√y': ('apply_binary', 'root'),
        'root': ('apply_binary', 'root'),

        # Powers & logarithms
        'x²': ('apply_unary', 'square'),
        'sq': ('apply_unary', 'square'),
        '√x': ('apply_unary', 'square-root'),
        'sqrt': ('apply_unary', 'square-root'),
        'log x': ('apply_unary', 'log10'),
        'log': ('apply_unary', 'log10'),
        'ln x': ('apply_unary', 'ln'),
        'ln': ('apply_unary', 'ln'),
        '10ˣ': ('apply_unary', 'ten-to-x'),
        'alog': ('apply_unary', 'ten-to-x'),
        'eˣ': ('apply_unary', 'exp'),
        'exp': ('apply_unary', 'exp'),

        # Trigonometry
        'sin': ('apply_unary', 'sin'),
        'cos': ('apply_unary', 'cos'),
        'tan': ('apply_unary', 'tan'),
        'sin⁻¹': ('apply_unary', 'asin'),
        'asin': ('apply_unary', 'asin'),
        'cos⁻¹': ('apply_unary', 'acos'),
        'acos': ('apply_unary', 'acos'),
        'tan⁻¹': ('apply_unary', 'atan'),
        'atan': ('apply_unary', 'atan'),

        # Constants
        'π': ('apply_constant', 'pi'),
        'pi': ('apply_constant', 'pi'),
        'e': ('apply_constant', 'e'),

        # Stack
        'R↑': ('roll_up', None),
        'roll': ('roll_up', None),
        'DROP': ('drop', None),

        # Variables
        **{'STO ' + slot: ('store', slot) for slot in 'ABC'},
        **{'RCL ' + slot: ('recall', slot) for slot in 'ABC'},
    }

    KEYS = {**ENTRY_KEYS, **OPERATION_KEYS}

    # Keyboard input isn't case sensitive.
    _FOLDED = {label.casefold(): label for label in KEYS}

    def __init__(self, machine=None):
        self.machine = machine if machine is not None else Machine()

    @wrap_user_errors('No such key {1!r}')
    def _lookup(self, label):
        if label not in type(self).KEYS:
            label = type(self)._FOLDED[label.casefold()]
        return label, type(self).KEYS[label]

    def press(self, label):
        '''
        Press one key.

        Any key that doesn't edit the entry commits it first, so that
        "5 ENTER 3 +" adds 3 without a second ENTER.
        '''
        label, (action, argument) = self._lookup(label)
        if label not in type(self).ENTRY_KEYS:
            self.machine.commit_entry()
        method = getattr(self.machine, action)
        if argument is None:
            method()
        else:
            method(argument)

    def display(self):
        return self.machine.render()

