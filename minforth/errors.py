# coding= utf-8
"""
Everything that can go wrong while evaluating Forth. None of these are fatal:
the :class:`minforth.Machine` reports them and carries on with the next word.
"""


class ForthError(Exception): pass


class StackUnderflow(ForthError):
    def __init__(self, word):
        super(StackUnderflow, self).__init__('stack underflow: %s' % word)
        self.word = word


class DivisionByZero(ForthError):
    def __init__(self):
        super(DivisionByZero, self).__init__('division by zero')


class UnknownWord(ForthError):
    def __init__(self, token):
        super(UnknownWord, self).__init__('undefined word: %s' % token)
        self.token = token


class RecursionLimitExceeded(ForthError):
    def __init__(self, limit):
        super(RecursionLimitExceeded, self).__init__(
            'recursion limit exceeded: %d' % limit)
        self.limit = limit


class MalformedDefinition(ForthError): pass
