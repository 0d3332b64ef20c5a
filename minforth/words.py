# coding= utf-8
"""
The two kinds of word a :class:`minforth.Machine` keeps in its dictionary.

A :class:`Builtin` wraps native code that works directly on the machine's
data stack. A :class:`UserWord` is nothing more than the tokens it was
defined with; they are looked up again every time the word runs, so
redefining a word changes every word that mentions it.
"""
from collections import namedtuple


Builtin = namedtuple('Builtin', 'name func')


class UserWord(namedtuple('UserWord', 'name tokens')):
    __slots__ = ()

    def __new__(cls, name, tokens=()):
        return super(UserWord, cls).__new__(cls, name, tuple(tokens))

    def __str__(self):
        return ' '.join((':', self.name) + self.tokens + (';',))
