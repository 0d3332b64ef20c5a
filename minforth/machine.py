# coding= utf-8
from minforth.errors import (ForthError, StackUnderflow, DivisionByZero,
                             UnknownWord, RecursionLimitExceeded)
from minforth.parser import Parser
from minforth.words import Builtin, UserWord

import inspect
import logging
import re
import types

__all__ = ['Machine', 'DEFAULT_MAX_DEPTH', 'Builtin', 'UserWord',
           'ForthError', 'StackUnderflow', 'DivisionByZero', 'UnknownWord',
           'RecursionLimitExceeded']

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

DEFAULT_MAX_DEPTH = 256

_NUMBER = re.compile(r'^[+-]?[0-9]+$')


def _word(name):
    """
    Creates a decorator that adds a .word member to its given func, which may
    then be inspected for by the :class:`Machine`'s __init__ method. Note that
    if you already have an instance of :class:`Machine`, it's too late to
    decorate and you should call its :method:`Machine.add_stackmethod`
    instead.
    """
    def decorator(func):
        func.word = name
        return func
    return decorator


def _truncating_division(dividend, divisor):
    # Python's // floors; Forth's / truncates toward zero.
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


class Machine(object):
    """
    A Forth machine. It has a data stack and a dictionary of words, and not
    much else.

    Errors never escape :meth:`evaluate`: each one is handed to `report`
    (by default, logged as a warning) and evaluation moves on to the next
    word. The exception is running past `max_depth` nested user-defined
    words, which abandons the rest of the line.
    """
    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, report=None):
        self.data_stack = []
        self.words = {}
        self.max_depth = max_depth
        self.report = report or self._log_error

        # Add decorated member words
        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'word'):
                self.words[method.word] = Builtin(method.word, method)

        # Add basic math and stack handling
        self.add_stackmethod('+', lambda b, a: a + b)
        self.add_stackmethod('-', lambda b, a: a - b)
        self.add_stackmethod('*', lambda b, a: a * b)
        self.add_stackmethod('dup', lambda a: (a, a))
        self.add_stackmethod('drop', lambda a: None)
        self.add_stackmethod('swap', lambda b, a: (b, a))
        self.add_stackmethod('over', lambda b, a: (a, b, a))

    @staticmethod
    def _log_error(error):
        log.warning('%s', error)

    def _push(self, val):
        self.data_stack.append(val)

    def _push_all(self, ls):
        self.data_stack.extend(ls)

    def _pop(self):
        return self.data_stack.pop()

    def _require(self, count, word):
        if len(self.data_stack) < count:
            raise StackUnderflow(word)

    @_word('/')
    def _divide(self):
        self._require(2, '/')
        divisor = self._pop()
        dividend = self._pop()
        if divisor == 0:
            raise DivisionByZero()
        self._push(_truncating_division(dividend, divisor))

    def add_stackmethod(self, word, func):
        """
        Turns a given function `func` into a stack-consumer.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack [1, 2] the call to a
        two-argument function will be func(2, 1)). The function's return value
        (or values) are assumed to go back on the stack.

        The stack is checked before anything is popped: if it holds fewer
        values than `func` takes, :exc:`StackUnderflow` is raised and the
        stack is left untouched.
        """
        num_args = func.__code__.co_argcount
        def stack_helper(self):
            self._require(num_args, word)
            args = [self._pop() for x in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            try:
                self._push_all(ret)
            except TypeError:
                self._push(ret)
        self.words[word] = Builtin(word, types.MethodType(stack_helper, self))

    def define(self, name, tokens):
        """
        Binds `name` to the given tokens, replacing whatever it meant before
        (built-ins included). The tokens are not looked at until the word
        runs.
        """
        word = UserWord(name, tokens)
        if name in self.words:
            log.info('redefined %s', name)
        log.debug('defined %s', word)
        self.words[name] = word

    def evaluate(self, text=''):
        try:
            self.interpret(Parser(text).generate())
        except RecursionLimitExceeded as e:
            self.report(e)
        except RecursionError:
            # max_depth set higher than the interpreter's own stack allows
            self.report(RecursionLimitExceeded(self.max_depth))

    def interpret(self, tokens=(), nesting=0):
        for token in tokens:
            try:
                self.interpret_one(token, nesting)
            except RecursionLimitExceeded:
                raise
            except ForthError as e:
                self.report(e)

    def interpret_one(self, token, nesting=0):
        word = self.words.get(token)
        if isinstance(word, Builtin):
            word.func()
        elif isinstance(word, UserWord):
            if nesting >= self.max_depth:
                raise RecursionLimitExceeded(self.max_depth)
            self.interpret(word.tokens, nesting + 1)
        elif _NUMBER.match(token):
            self._push(int(token))
        else:
            raise UnknownWord(token)

    def top(self):
        """ The value on top of the stack, or None if the stack is empty. """
        if self.data_stack:
            return self.data_stack[-1]
        return None

    def depth(self):
        return len(self.data_stack)
