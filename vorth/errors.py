# coding= utf-8
"""
Errors raised by the tokenizer and the machine. Every one of them aborts the
current :meth:`vorth.Machine.parse` call.
"""


class ForthError(Exception):
    """ Base class: anything the interpreter itself refuses to do. """
    # What the failed parse call printed before failing.
    output = ''

    @property
    def message(self):
        return str(self)


class LexError(ForthError): pass
class StackUnderflow(ForthError): pass
class OperandTypeError(ForthError): pass
class UnknownWord(ForthError): pass
class ForthSyntaxError(ForthError): pass
class DivisionByZero(ForthError): pass
class ReturnStackOverflow(ForthError): pass
class NumericOverflow(ForthError): pass
