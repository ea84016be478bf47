# coding= utf-8
from vorth import value
from vorth.errors import StackUnderflow


class Stack(list):
    """
    The data stack: a list whose tail is the top of the stack. Reads and
    removals past the bottom raise :exc:`StackUnderflow` instead of
    IndexError, and never change the stack.
    """
    def push(self, val):
        value.type_name(val)
        self.append(val)

    def push_all(self, vals):
        for val in vals:
            self.push(val)

    def require(self, count):
        if count > len(self):
            raise StackUnderflow('stack underflow')

    def pop(self):
        self.require(1)
        return super(Stack, self).pop()

    def peek(self, depth=1):
        """ The value depth places down from the top; 1 (or -1) is the top. """
        depth = abs(depth)
        if depth == 0:
            raise StackUnderflow('stack underflow')
        self.require(depth)
        return self[-depth]

    def top(self, count):
        """
        The top count values, topmost first (the order they'd pop off in),
        without removing them.
        """
        self.require(count)
        return [self[-i] for i in range(1, count + 1)]

    def drop(self, count):
        self.require(count)
        if count:
            del self[-count:]

    def __str__(self):
        return '[%s]' % ', '.join(_listing(val) for val in self)


def _listing(val):
    if value.is_string(val):
        return '"%s"' % val
    return value.to_text(val)
