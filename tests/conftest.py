from pytest import Item, fixture

from xyzt.machine import Machine
from xyzt.keypad import Keypad
from xyzt.lexer import Lexer


@fixture
def machine():
    return Machine()


@fixture
def keypad(machine):
    return Keypad(machine)


@fixture
def lexer():
    return Lexer()


@fixture
def push(machine):
    '''
    Key whole numbers in through the entry, one ENTER each.
    '''
    def push(*values):
        for value in values:
            for digit in str(value):
                machine.append_digit(digit)
            machine.commit_entry()
    return push


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
