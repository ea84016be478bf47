# coding= utf-8
import inspect
import logging

from vorth import tokens, value
from vorth.errors import (ForthError, ForthSyntaxError, OperandTypeError,
                          ReturnStackOverflow, UnknownWord)
from vorth.parser import tokenize
from vorth.stack import Stack
from vorth.tokens import Token
from vorth.words import WordTable

logger = logging.getLogger(__name__)

DEFINITION_START = Token(tokens.WORD, ':')
DEFINITION_END = Token(tokens.WORD, ';')

# SKIP is set to this by a failed IF (or an ELSE after a passed one): the
# count covers the IF/ELSE token itself plus the one unit it guards.
SKIP_GUARDED = 2

PROMPT = ' ok'


def _word(*names):
    """
    Creates a decorator that adds a .words member to its given func, which may
    then be inspected for by the :class:`Machine`'s __init__ method. Note that
    if you already have an instance of :class:`Machine`, it's too late to
    decorate and you should call its :meth:`Machine.add_stackmethod`
    instead.
    """
    def decorator(func):
        func.words = names
        return func
    return decorator


class Machine(object):
    """
    A Forth machine. It has a stack, a dictionary of user words, and a few
    registers steering control flow:

    pc
        index of the token being run within the active token sequence
    skip
        number of upcoming units (tokens or blocks) to pass over, counting
        the current one
    repeat
        how many times the next unit runs
    last_if
        whether the most recent IF passed
    exit
        set by BYE; nothing more runs on this machine once it is set

    Blocks and word bodies are run by recursing into :meth:`interpret` with
    the same stack, dictionary and registers.
    """
    def __init__(self, stdout=None):
        self.data_stack = Stack()
        self.words = WordTable()
        self.builtins = {}
        self.stdout = stdout
        self.output = []
        self.exit = False
        self.last_if = False
        self._reset_registers()

        # Add decorated member words
        for name, method in inspect.getmembers(self, inspect.ismethod):
            for word in getattr(method, 'words', ()):
                self.builtins[word] = method

        # Arguments arrive in pop order: b is the top of the stack.
        self.add_stackmethod('+', lambda b, a: value.add(a, b))
        self.add_stackmethod('-', lambda b, a: value.subtract(a, b))
        self.add_stackmethod('*', lambda b, a: value.multiply(a, b))
        self.add_stackmethod('/', lambda b, a: value.divide(a, b))
        self.add_stackmethod('//', lambda b, a: value.int_divide(a, b))
        self.add_stackmethod('%', lambda b, a: value.modulo(a, b))
        self.add_stackmethod('mod', lambda b, a: value.modulo(a, b))
        self.add_stackmethod('/mod', lambda b, a: value.floor_divmod(a, b))
        self.add_stackmethod('=', lambda b, a: value.equal(a, b))
        self.add_stackmethod('!=', lambda b, a: value.not_equal(a, b))
        self.add_stackmethod('<', lambda b, a: value.less(a, b))
        self.add_stackmethod('<=', lambda b, a: value.less_equal(a, b))
        self.add_stackmethod('>', lambda b, a: value.greater(a, b))
        self.add_stackmethod('>=', lambda b, a: value.greater_equal(a, b))
        self.add_stackmethod('swap', lambda b, a: (b, a))
        self.add_stackmethod('dup', lambda a: (a, a))
        self.add_stackmethod('over', lambda b, a: (a, b, a))
        self.add_stackmethod('rot', lambda c, b, a: (b, c, a))
        self.add_stackmethod('drop', lambda a: None)
        self.add_stackmethod('nip', lambda b, a: b)
        self.add_stackmethod('tuck', lambda b, a: (b, a, b))
        self.add_stackmethod('type', lambda a: value.type_name(a))

    def _reset_registers(self):
        self.tokens = ()
        self.pc = 0
        self.skip = 0
        self.repeat = 1

    def add_stackmethod(self, word, func):
        """
        Turns a given function `func` into a stack-consumer.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack [1, 2] the call to a
        two-argument function will be func(2, 1)). The arguments are only
        removed once `func` has returned, so a failing call leaves the stack
        as it was. The function's return value goes back on the stack; a
        tuple is pushed element by element, None pushes nothing.
        """
        num_args = func.__code__.co_argcount

        def stack_helper():
            args = self.data_stack.top(num_args)
            ret = func(*args)
            self.data_stack.drop(num_args)
            if ret is None:
                return
            if isinstance(ret, tuple):
                self.data_stack.push_all(ret)
            else:
                self.data_stack.push(ret)
        self.builtins[word] = stack_helper

    def parse(self, text=''):
        """
        Run text and return whatever it printed.

        Any :exc:`ForthError` propagates, carrying the output produced before
        the failure as its ``output`` attribute.
        """
        self._reset_registers()
        self.output = []
        try:
            code = tokenize(text)
            try:
                self.interpret(code)
            except RecursionError:
                raise ReturnStackOverflow('return stack overflow')
        except ForthError as e:
            logger.debug('parse aborted at token %d: %s', self.pc, e)
            e.output = ''.join(self.output)
            raise
        return ''.join(self.output)

    def eval(self, text='', prompt=PROMPT):
        """
        Run text the way the interactive prompt does: the result is the
        output followed by the prompt (' ok'), or by ' ? ' and the error
        message.
        """
        try:
            ret = self.parse(text)
        except ForthError as e:
            return e.output + ' ? ' + e.message
        return ret + prompt

    def interpret(self, tokens=()):
        outer = self.tokens, self.pc
        self.tokens, self.pc = tuple(tokens), 0

        while not self.exit and self.pc < len(self.tokens):
            token = self.tokens[self.pc]
            if token == DEFINITION_START and ':' not in self.words:
                # Moves pc onto the closing ';'.
                self._define(store=self.skip == 0)
            elif self.skip == 0:
                count, self.repeat = self.repeat, 1
                for _ in range(count):
                    if self.exit:
                        break
                    self.interpret_one(*token)

            if self.skip > 0:
                self.skip -= 1
            self.pc += 1

        self.tokens, self.pc = outer

    def interpret_one(self, kind, token):
        if kind in tokens.LITERAL_KINDS:
            self.data_stack.push(token)
        elif kind == tokens.BLOCK:
            self.interpret(token)
        elif kind == tokens.WORD:
            self._call(token)
        elif kind == tokens.PRINT:
            self._emit(token)
        else:
            raise ForthError('unknown token type: %s' % kind)

    def _call(self, word):
        body = self.words.lookup(word)
        if body is not None:
            self.interpret(body)
            return

        method = self.builtins.get(word)
        if method is None:
            raise UnknownWord('can\'t find word "%s" or parse it as number' % word)
        self._emit(method())

    def _emit(self, text):
        if not text:
            return
        self.output.append(text)
        if self.stdout is not None:
            self.stdout.write(text)

    def _define(self, store):
        start = self.pc
        if start + 1 >= len(self.tokens):
            raise ForthSyntaxError('no name given')
        kind, name = self.tokens[start + 1]
        if kind != tokens.WORD or name == ';':
            raise ForthSyntaxError('invalid word name: %s' % tokens.to_source(self.tokens[start + 1]))

        for end in range(start + 2, len(self.tokens)):
            if self.tokens[end] == DEFINITION_END:
                break
        else:
            raise ForthSyntaxError('definition not closed')

        if store:
            if name in self.builtins:
                logger.debug('word %r shadows a built-in', name)
            self.words.define(name, self.tokens[start + 2:end])
            self.repeat = 1
            logger.debug('defined %r', name)
        self.pc = end

    def _peek_typed(self, check, expected):
        """ The top of the stack, provided it passes check. """
        val = self.data_stack.peek()
        if not check(val):
            raise OperandTypeError('expected %s, got %s' % (expected, value.type_name(val)))
        return val

    def _character(self):
        code = self.data_stack.peek()
        if not value.is_int(code):
            raise OperandTypeError('expected int, got %s' % value.type_name(code))
        try:
            char = chr(code)
        except (ValueError, OverflowError):
            raise OperandTypeError('no character with code %d' % code)
        self.data_stack.pop()
        return char

    @_word('.')
    def _stack_pop(self):
        text = value.to_text(self.data_stack.peek())
        self.data_stack.pop()
        return text

    @_word('.stack', '.s')
    def _print_stack(self):
        return str(self.data_stack)

    @_word('.words')
    def _print_words(self):
        return str(self.words)

    @_word('br', 'cr')
    def _newline(self):
        return '\n'

    @_word('space')
    def _space(self):
        return ' '

    @_word('spaces')
    def _spaces(self):
        text = value.multiply(' ', self._peek_typed(value.is_int, 'int'))
        self.data_stack.pop()
        return text

    @_word('emit')
    def _emit_character(self):
        return self._character()

    @_word('chr')
    def _chr(self):
        self.data_stack.push(self._character())

    @_word('ord')
    def _ord(self):
        text = self.data_stack.peek()
        if not value.is_string(text):
            raise OperandTypeError('expected string, got %s' % value.type_name(text))
        if not text:
            raise OperandTypeError('ord of an empty string')
        self.data_stack.pop()
        self.data_stack.push(ord(text[0]))

    @_word('reverse')
    def _reverse(self):
        self.data_stack.reverse()

    @_word('0sp', 'clear')
    def _clear_stack(self):
        del self.data_stack[:]

    @_word('depth')
    def _depth(self):
        self.data_stack.push(len(self.data_stack))

    @_word('bye')
    def _bye(self):
        self.exit = True

    @_word('if')
    def _if(self):
        self.last_if = value.truthy(self.data_stack.pop())
        self.skip = 0 if self.last_if else SKIP_GUARDED

    @_word('else')
    def _else(self):
        self.skip = SKIP_GUARDED if self.last_if else 0

    @_word('times')
    def _times(self):
        self.repeat = self._peek_typed(value.is_int, 'int')
        self.data_stack.pop()

    @_word(';')
    def _stray_definition_end(self):
        raise ForthSyntaxError("unexpected ';' outside a definition")

    @_word('}')
    def _stray_block_end(self):
        raise ForthSyntaxError("unexpected '}' outside a block")
