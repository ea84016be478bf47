# coding= utf-8
"""
Turns source text into tokens.

The :class:`Parser` is a plain cursor over the raw text; :func:`tokenize`
drives it, classifying each whitespace-delimited chunk and switching to
character-level scanning for string literals (which may span whitespace) and
for blocks (which nest).
"""
import re

from vorth import tokens
from vorth.errors import LexError
from vorth.tokens import Token

_WHITESPACE = re.compile(r'\s*')
_CHUNK = re.compile(r'\S+')
_REST_OF_LINE = re.compile(r'[^\n]*')
# Everything up to the first unescaped double quote, plus that quote.
_STRING_BODY = re.compile(r'((?:[^"\\]|\\.)*)"', re.DOTALL)
_CLOSING_QUOTE = re.compile(r'(?<!\\)(\\\\)*"$')

_INTEGER_FORMATS = (
    (re.compile(r'(-?)0x([0-9a-fA-F]+)'), 16),
    (re.compile(r'(-?)0o([0-7]+)'), 8),
    (re.compile(r'(-?)0b([01]+)'), 2),
    (re.compile(r'(-?)([0-9]+)'), 10),
)
_FLOAT_FORMAT = re.compile(r'-?[0-9]+\.[0-9]+')

BLOCK_OPEN = '{'
BLOCK_CLOSE = '}'
COMMENT = '#'
PRINT_OPEN = '."'


class Parser(object):
    """
    Very simple parser -- not much more than a few primitives useful for
    consuming an input string in a Forth-compatible way (e.g. consume a word,
    consume to end of line, consume a quoted string).

    The parser is stateful, in as much as each instance thereof is given an
    initial string to operate on, and calls to parse_whatever will advance the
    parser's position within that string, if necessary (thus, the next call
    will start from where the previous left off).

    The parse_* methods return None once the string has been completely
    consumed (or, for the scanning methods, when what they look for is not
    there); the position is left untouched in that case.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a compiled
        regex, which must match right at the current position.
        """
        if self.is_finished:
            return None
        found = pattern.match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found

    def parse_whitespace(self):
        found = self._consume(_WHITESPACE)
        return found and found.group()

    def parse_word(self):
        found = self._consume(_CHUNK)
        return found and found.group()

    def parse_rest_of_line(self):
        found = self._consume(_REST_OF_LINE)
        return found and found.group()

    def parse_string_body(self):
        """
        Consume up to and including the next unescaped double quote, returning
        the text before it with escaped quotes resolved.
        """
        found = self._consume(_STRING_BODY)
        if found is None:
            return None
        return unescape(found.group(1))

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        word = self.next_word()
        while word is not None:
            yield word
            word = self.next_word()


def unescape(text):
    return text.replace('\\"', '"')


def parse_number(chunk):
    """ Returns an INT or FLOAT token for chunk, or None if it isn't one. """
    for pattern, base in _INTEGER_FORMATS:
        found = pattern.fullmatch(chunk)
        if found:
            sign, magnitude = found.groups()
            try:
                number = int(magnitude, base)
            except ValueError:
                # int has a digit limit for decimal conversion.
                raise LexError('number too long: %s' % chunk)
            return Token(tokens.INT, -number if sign else number)

    if _FLOAT_FORMAT.fullmatch(chunk):
        return Token(tokens.FLOAT, float(chunk))
    return None


def tokenize(text):
    """
    Tokenize the whole of text, returning a list of tokens. Blocks come back
    already nested, as single BLOCK tokens.

    Raises :exc:`LexError` for an unterminated string or block.
    """
    try:
        return _tokenize(Parser(text), in_block=False)
    except RecursionError:
        raise LexError('blocks nested too deeply')


def _tokenize(parser, in_block):
    found = []
    for chunk in parser.generate():
        if COMMENT in chunk and not chunk.startswith('"'):
            # The comment runs from the # to the end of the line.
            chunk = chunk[:chunk.index(COMMENT)]
            parser.parse_rest_of_line()
            if not chunk:
                continue
        if in_block and chunk == BLOCK_CLOSE:
            return found

        token = parse_number(chunk)
        if token is None:
            if chunk.startswith('"'):
                token = _string(parser, chunk)
            elif chunk == PRINT_OPEN:
                token = _print(parser)
            elif chunk == BLOCK_OPEN:
                token = tokens.block(_tokenize(parser, in_block=True))
            else:
                token = tokens.word(chunk)
        found.append(token)

    if in_block:
        raise LexError('block not closed')
    return found


def _string(parser, chunk):
    if len(chunk) > 1 and _CLOSING_QUOTE.search(chunk, 1):
        return Token(tokens.STRING, unescape(chunk[1:-1]))

    # The literal runs on past this chunk: rescan from just after its quote.
    parser.pos -= len(chunk) - 1
    body = parser.parse_string_body()
    if body is None:
        raise LexError('string not closed')
    return Token(tokens.STRING, body)


def _print(parser):
    # One whitespace character separates ." from the text it prints.
    if not parser.is_finished and parser.text[parser.pos].isspace():
        parser.pos += 1
    body = parser.parse_string_body()
    if body is None:
        raise LexError('string not closed')
    return Token(tokens.PRINT, body)
