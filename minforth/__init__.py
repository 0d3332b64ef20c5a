# coding= utf-8
"""
Implements a small Forth machine, i.e., an object holding a stack of integers
and a dictionary of words, which evaluates lines of Forth handed to it.

Usage should be as simple as:
    >>> import minforth
    >>> m = minforth.Machine()
    >>> m.evaluate('1 2 + 3 *')
    >>> m.top()
    9

Words are defined with :meth:`Machine.define`; the `: NAME ... ;` syntax
belongs to the REPL (see :mod:`minforth.repl`), which will also happily keep
you in a prompt until given an end of file (^D on Linux) or the word "bye":
    >>> from minforth.repl import forth_repl
    >>> forth_repl()

Only eight words come built in: + - * / dup drop swap over. Arithmetic is
on Python integers, so there is no overflow; / truncates toward zero.
"""
from minforth.machine import *
from minforth.parser import Parser, tokenize, is_definition, parse_definition
from minforth.errors import MalformedDefinition

__version__ = '0.1.0'
