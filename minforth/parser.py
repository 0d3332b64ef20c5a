import re

from minforth.errors import MalformedDefinition


class Parser(object):
    """
    Very simple Forth parser -- not much more than a few primitives useful for
    consuming an input string in a Forth-compatible way (e.g. consume a word,
    consume the whitespace around it).

    The parser is stateful, in as much as each instance thereof is given an
    initial string to operate on, and calls to parse_whatever will advance the
    parser's position within that string, if necessary (thus, the next call
    will start from where the previous left off).

    The parse_* methods raise :exc:`StopIteration` when the string has been
    completely consumed; at that point, the current :class:`Parser` instance
    may be thrown away and a fresh one made for the next bits of input.

    All whitespace (newlines included) separates words and is never returned
    as a word itself.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex. The
        regex is applied to a slice of self.text starting from self.pos and
        ending at the end of the string.

        Note that matches are only ever expected at the start of the string
        slice.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.match(pattern, self.text[self.pos:])
        if found is None:
            return None
        self.pos += found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(r'\s*')

    def parse_word(self):
        return self._consume(r'\S+')

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                yield self.next_word()
            except StopIteration:
                return


def tokenize(text):
    return list(Parser(text).generate())


def is_definition(text):
    """ A definition is any line whose first word is ':'. """
    try:
        return Parser(text).next_word() == ':'
    except StopIteration:
        return False


def parse_definition(text):
    """
    Splits `: NAME TOKEN ... ;` into its parts.

    Returns a (name, tokens, rest) tuple, where rest is whatever text followed
    the closing ';' on the same line (possibly empty). The body may be empty,
    but a name and the closing ';' are both required; without them
    :exc:`MalformedDefinition` is raised.
    """
    parser = Parser(text)
    words = parser.generate()

    if next(words, None) != ':':
        raise MalformedDefinition('not a definition')

    name = next(words, None)
    if name is None or name == ';':
        raise MalformedDefinition('no name given')

    tokens = []
    for word in words:
        if word == ';':
            return name, tokens, text[parser.pos:]
        tokens.append(word)

    raise MalformedDefinition('missing ; in definition of %s' % name)
