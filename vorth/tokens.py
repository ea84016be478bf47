# coding= utf-8
"""
Tokens are (kind, value) pairs, as handed out by :func:`vorth.parser.tokenize`.

A WORD's value is its lower-cased name, INT/FLOAT/STRING carry the literal
value and a BLOCK carries a tuple of the tokens between its braces. A PRINT
carries the text of a ``." ..."`` literal, written out when it runs.
"""
from collections import namedtuple

WORD = 'WORD'
INT = 'INT'
FLOAT = 'FLOAT'
STRING = 'STRING'
BLOCK = 'BLOCK'
PRINT = 'PRINT'

LITERAL_KINDS = (INT, FLOAT, STRING)


class Token(namedtuple('Token', 'kind value')):
    __slots__ = ()

    def __str__(self):
        return to_source(self)


def word(name):
    return Token(WORD, name.lower())


def block(tokens):
    return Token(BLOCK, tuple(tokens))


def to_source(token):
    """
    Renders a token back as source text, such that tokenizing the result
    yields an equal token.
    """
    kind, value = token
    if kind == STRING:
        return '"%s"' % value.replace('"', '\\"')
    elif kind == PRINT:
        return '." %s"' % value.replace('"', '\\"')
    elif kind == BLOCK:
        return ' '.join(['{'] + [to_source(t) for t in value] + ['}'])
    elif kind == FLOAT:
        return repr(value)
    return str(value)
