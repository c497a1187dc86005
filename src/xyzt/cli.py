from os import isatty
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import CalcError
from .machine import Machine
from .keypad import Keypad
from .lexer import Lexer


def prompt_lines(prompt, toolbar=None):
    '''
    Yield lines typed at an interactive prompt, until EOF.
    '''
    session = PromptSession(message=prompt,
                            vi_mode=True,
                            enable_suspend=True,
                            # T, Z, Y; X gets printed after each line
                            bottom_toolbar=toolbar,
                            erase_when_done=False)
    while True:
        try:
            yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.

    Every input line is a sequence of keys. Numbers are entered as typed;
    anything still in the entry at the end of a line (a lone ±, say) is
    shown below X and carries over to the next line.
    '''

    DEFAULT_PROMPT = 'xyzt> '

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = self._argument_parser()

    @classmethod
    def _argument_parser(cls):
        parser = ArgumentParser(prog='xyzt',
                                description='Four register RPN calculator')
        parser.add_argument('-v', '--verbose',
                            action='store_true',
                            help='show T, Z, Y, X and the entry after '
                                 'every line, not just X')
        parser.add_argument('-s', '--separator',
                            choices=['.', ','],
                            default=Machine.DEFAULT_SEPARATOR,
                            help='decimal separator')
        source = parser.add_mutually_exclusive_group()
        source.add_argument('-e', '--expression',
                            nargs=REMAINDER,
                            dest='expressions',
                            metavar='LINE',
                            help='key in these lines instead of reading '
                                 'stdin')
        source.add_argument('-p', '--prompt',
                            nargs=OPTIONAL,
                            const=cls.DEFAULT_PROMPT,
                            help='prompt even if not on a terminal')
        mode = parser.add_mutually_exclusive_group()
        mode.add_argument('-G', '--raw-grammar',
                          action='store_const',
                          const='raw_grammar',
                          dest='mode',
                          help='print the keystroke grammar')
        mode.add_argument('-D', '--dump',
                          action='store_const',
                          const='dumper',
                          dest='mode',
                          help='print the keys each lexeme presses')
        parser.set_defaults(mode='executor')
        return parser

    def _lines(self):
        '''
        Where input comes from: -e lines, a prompt, or plain stdin.

        Prompts if asked to, or if both stdin and stdout are a tty.
        '''
        if self.args.expressions is not None:
            return self.args.expressions
        interactive = isatty(stdin.fileno()) and isatty(stdout.fileno())
        if self.args.prompt or interactive:
            return prompt_lines(self.args.prompt or self.DEFAULT_PROMPT,
                                toolbar=self.toolbar)
        return stdin

    def show(self):
        '''
        Print X, or the whole stack and entry if verbose.

        A pending entry is always shown.
        '''
        machine = self.keypad.machine
        if self.args.verbose:
            print(machine.render())
            return
        print(machine.format(machine.x))
        if machine.entry:
            print(machine.entry)

    def toolbar(self):
        machine = self.keypad.machine
        shown = ['{} {}'.format(name, machine.format(value))
                 for name, value
                 in zip('TZY', reversed(machine.registers[1:]))]
        if machine.entry:
            shown.append('entry ' + machine.entry)
        return '  '.join(shown)

    def executor(self):
        '''
        Press the keys of every line, showing the result after each.
        '''
        lexer = Lexer()
        for line in self._lines():
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        for key in lexer.keys(match):
                            self.keypad.press(key)
            # Rest of the line is dropped
            except CalcError as e:
                print(e.args[0], file=sys.stderr)
            self.show()

    def dumper(self):
        '''
        Dump every lexeme and the keys it presses.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<keys>')
        for line in self._lines():
            for match in lexer.lex(line):
                print(*lexer.matchedgroups(match).keys(),
                      repr(match.group(0)),
                      ' '.join(lexer.keys(match)),
                      sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def run(self, *, args=None):
        '''
        Run CLI on these args, or the process's own.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.keypad = Keypad(Machine(separator=self.args.separator))
        try:
            getattr(self, self.args.mode)()
        except KeyboardInterrupt:
            exit(1)
