from functools import reduce
import operator

import regex

from .util import LexError
from .keypad import Keypad


class Lexer:
    '''
    Lexer for the keystroke *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Run of entry keys, typed one after the other without ENTER.
    ENTRY = r'''
             (?:
                 # 1, 12, 1.5, .5, 5±, 1,5 with a comma separator
                 [\d.,±]+
             )
             '''

    # Longest first.
    KEY = r'(?:' + r'|'.join(map(regex.escape,
                                 sorted((label
                                         for label
                                         in Keypad.KEYS
                                         # Digits and separators lex as entry
                                         if label.strip('0123456789.,±')),
                                        key=len,
                                        reverse=True))) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<key>' + KEY + r')|' \
             r'(?<entry>' + ENTRY + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Yields good lexemes up to the first bad one, then raises.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise LexError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme presses any key.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def keys(self, match):
        '''
        Return labels of the keys pressed by lexeme, in order.

        A number is typed, then entered.
        '''
        groups = self.matchedgroups(match)
        if 'entry' in groups:
            return [*groups['entry'], 'ENTER']
        elif 'key' in groups:
            return [groups['key']]
        return []

    def matchedgroups(self, match):
        '''
        Return lexeme matches.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
