# coding= utf-8
from vorth.tokens import to_source


class WordTable(object):
    """
    User-defined words: lower-cased name to body (a tuple of tokens).

    Redefining a name replaces its body outright and moves it to the end of
    the definition order.
    """
    def __init__(self):
        self._bodies = {}

    def define(self, name, body):
        name = name.lower()
        self._bodies.pop(name, None)
        self._bodies[name] = tuple(body)

    def lookup(self, name):
        return self._bodies.get(name.lower())

    def __contains__(self, name):
        return name.lower() in self._bodies

    def __len__(self):
        return len(self._bodies)

    def __iter__(self):
        return iter(self._bodies)

    def items(self):
        return self._bodies.items()

    def __str__(self):
        entries = ('<%s: %s>' % (name, ' '.join(to_source(t) for t in body))
                   for name, body in self._bodies.items())
        return '[%s]' % ', '.join(entries)
