# coding= utf-8
"""
The value model. Stack values are plain Python ``int``, ``float`` and ``str``
objects; this module supplies the language's own typing rules for them.

Binary operations take ``(left, right)`` in source order, i.e. ``a b -`` is
``subtract(a, b)``, and either return the result or raise
:exc:`OperandTypeError`. A result too large to represent raises
:exc:`NumericOverflow` instead of exhausting the interpreter.
"""
import functools
import math
import numbers

from vorth.errors import DivisionByZero, NumericOverflow, OperandTypeError

INT = 'int'
FLOAT = 'float'
STRING = 'string'


def type_name(value):
    # bool sneaks in as an int subclass; the language has no booleans.
    if isinstance(value, bool):
        raise OperandTypeError('not a value: %r' % (value,))
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    raise OperandTypeError('not a value: %r' % (value,))


def is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_string(value):
    return isinstance(value, str)


def is_int(value):
    return type_name(value) == INT


def to_text(value):
    """ The textual form of a value, as printed by ``.``. """
    try:
        return str(value)
    except ValueError:
        # int has a digit limit for decimal conversion.
        raise NumericOverflow('integer too large to print')


def truthy(value):
    if is_string(value):
        return value != ''
    return value != 0


def _mismatch(op, left, right):
    return OperandTypeError("can't %s %s and %s" % (op, type_name(left), type_name(right)))


def _check_divisor(divisor):
    if divisor == 0:
        raise DivisionByZero('division by zero')


def _bounded(func):
    @functools.wraps(func)
    def wrapper(left, right):
        try:
            return func(left, right)
        except (OverflowError, MemoryError):
            raise NumericOverflow('%s: result out of range' % func.__name__)
    return wrapper


@_bounded
def add(left, right):
    if is_string(left) or is_string(right):
        return to_text(left) + to_text(right)
    return left + right


@_bounded
def subtract(left, right):
    if is_string(left):
        return left.replace(to_text(right), '')
    if is_string(right):
        raise _mismatch('subtract', left, right)
    return left - right


@_bounded
def multiply(left, right):
    if is_number(left) and is_number(right):
        return left * right
    if is_string(left) and is_int(right):
        return left * right
    if is_int(left) and is_string(right):
        return right * left
    raise _mismatch('multiply', left, right)


@_bounded
def divide(left, right):
    """
    True division of numbers. A string divided by an integer n is cut into
    chunks of n characters, returned as a tuple (the last one may be short).
    """
    if is_number(left) and is_number(right):
        _check_divisor(right)
        return left / right
    if is_string(left) and is_int(right):
        if right < 1:
            raise OperandTypeError('chunk size must be positive, not %d' % right)
        return tuple(left[i:i + right] for i in range(0, len(left), right))
    raise _mismatch('divide', left, right)


@_bounded
def int_divide(left, right):
    """ Integer division, truncating toward zero (so ``-7 2 //`` is -3). """
    if not (is_number(left) and is_number(right)):
        raise _mismatch('divide', left, right)
    _check_divisor(right)
    if is_int(left) and is_int(right):
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    quotient = left / right
    if not math.isfinite(quotient):
        raise NumericOverflow('int_divide: result out of range')
    return math.trunc(quotient)


@_bounded
def modulo(left, right):
    if not (is_int(left) and is_int(right)):
        raise _mismatch('take the remainder of', left, right)
    _check_divisor(right)
    return left % right


def _comparable(left, right):
    return (is_number(left) and is_number(right)) or (is_string(left) and is_string(right))


def equal(left, right):
    """ Values of incompatible types are simply unequal. """
    return int(_comparable(left, right) and left == right)


def not_equal(left, right):
    return int(not equal(left, right))


def _ordering(name, compare):
    def closure(left, right):
        if not _comparable(left, right):
            raise _mismatch('compare', left, right)
        return int(compare(left, right))
    closure.__name__ = name
    return closure


less = _ordering('less', lambda a, b: a < b)
less_equal = _ordering('less_equal', lambda a, b: a <= b)
greater = _ordering('greater', lambda a, b: a > b)
greater_equal = _ordering('greater_equal', lambda a, b: a >= b)


@_bounded
def floor_divmod(left, right):
    """ ``(remainder, quotient)`` of integer floor division. """
    if not (is_int(left) and is_int(right)):
        raise _mismatch('divide', left, right)
    _check_divisor(right)
    quotient, remainder = divmod(left, right)
    return remainder, quotient
