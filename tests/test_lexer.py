'''
Keystroke lexer tests
'''

import regex

from xyzt.util import LexError

from pytest import raises


def keys(lexer, line):
    return [key
            for match in lexer.lex(line)
            if lexer.isfeedable(match)
            for key in lexer.keys(match)]


def test_numbers_are_entered(lexer):
    assert keys(lexer, '5 3 +') == ['5', 'ENTER', '3', 'ENTER', '+']


def test_entry_run(lexer):
    assert keys(lexer, '1.5±') == ['1', '.', '5', '±', 'ENTER']


def test_longest_key(lexer):
    assert keys(lexer, '10ˣ') == ['10ˣ']
    assert keys(lexer, 'exp e') == ['exp', 'e']
    assert keys(lexer, 'log x') == ['log x']
    assert keys(lexer, 'log 2') == ['log', '2', 'ENTER']


def test_case_insensitive(lexer):
    assert keys(lexer, 'STO a') == ['STO a']
    assert keys(lexer, 'Sqrt') == ['Sqrt']


def test_space_not_feedable(lexer):
    matches = list(lexer.lex('  \t'))
    assert [lexer.isfeedable(m) for m in matches] == [False]


def test_unknown_word(lexer):
    with raises(LexError, match=regex.escape("Couldn't lex foo")):
        list(lexer.lex('foo'))


def test_stops_on_first_bad(lexer):
    matches = lexer.lex('2 sqrt % 3')
    assert [m.group(0) for m in [next(matches) for _ in range(4)]] == \
        ['2', ' ', 'sqrt', ' ']
    with raises(LexError, match='% 3'):
        next(matches)
