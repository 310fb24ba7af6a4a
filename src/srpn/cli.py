from os import isatty, path
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .machine import Machine
from .lexer import Command, Lexer


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    enable_suspend=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the SRPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.srpn_history'

    def dumper(self):
        '''
        Dump every token with its classification and arity.
        '''
        machine = Machine()
        print('<kind>\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for token in machine.lexer.lex(line):
                parsed = machine.parse(token)
                if parsed is None:
                    kind, arity = 'unknown', None
                elif isinstance(parsed, Command):
                    kind, arity = 'command', parsed.arity
                else:
                    kind, arity = 'operand', None
                print(kind, repr(token), arity, sep='\t')

    def executor(self):
        '''
        Run machine (SRPN calculator).
        '''
        machine = Machine(verbose=self.args.verbose)
        for line in self.args.expressions:
            machine.process_line(line)

    def raw_grammar(self):
        '''
        Print the preprocessing patterns, in order of application.
        '''
        lexer = Lexer()
        for pattern, replacement in lexer.PREPROCESSORS:
            if callable(replacement):
                # Computed per match
                replacement = replacement.__name__ + '()'
            else:
                replacement = repr(replacement)
            print(repr(pattern), replacement, sep='\t')
        print(repr(lexer.OPERAND))

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=FileHistory(
                                        path.expanduser(self.HISTORY_FILE)))
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Saturated RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
