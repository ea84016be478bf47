# coding= utf-8
"""
Implements Vorth, a small stack-based Forth dialect: numbers and strings are
pushed onto a data stack, words consume and produce stack values, and
``{ ... }`` blocks together with ``if``, ``else`` and ``times`` provide
conditionals and repetition.

The machine is given strings to evaluate, and keeps its stack and its
dictionary of words between them:
    >>> m = vorth.Machine()
    >>> m.parse(": double dup + ; 3 double .")
    '6'
    >>> m.eval("4 double .")
    '8 ok'

:meth:`Machine.parse` raises a :exc:`ForthError` on failure, whereas
:meth:`Machine.eval` returns the response normally given at the prompt
(' ok' for success, ' ? ' and the error message otherwise).

Run ``vorth`` (or ``python vorth_repl.py``) for an interactive prompt.
"""
from vorth.errors import *
from vorth.machine import Machine
from vorth.parser import Parser, tokenize
from vorth.stack import Stack
from vorth.tokens import Token
from vorth.words import WordTable
