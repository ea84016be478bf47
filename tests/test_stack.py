import pytest
import vorth
from vorth import tokens


class TestStack():
    def test_push_pop(self):
        s = vorth.Stack()
        s.push(1)
        s.push('two')

        assert s.pop() == 'two'
        assert s == [1]

    def test_underflow(self):
        s = vorth.Stack()

        with pytest.raises(vorth.StackUnderflow):
            s.pop()
        with pytest.raises(vorth.StackUnderflow):
            s.peek()

    def test_only_values_go_on(self):
        s = vorth.Stack()

        with pytest.raises(vorth.OperandTypeError):
            s.push(None)
        with pytest.raises(vorth.OperandTypeError):
            s.push(True)
        assert s == []

    def test_peek_counts_from_the_top(self):
        s = vorth.Stack([1, 2, 3])

        assert s.peek() == 3
        assert s.peek(1) == 3
        assert s.peek(3) == 1
        assert s.peek(-2) == 2
        with pytest.raises(vorth.StackUnderflow):
            s.peek(4)
        with pytest.raises(vorth.StackUnderflow):
            s.peek(-4)
        assert s == [1, 2, 3]

    def test_top_and_drop(self):
        s = vorth.Stack([1, 2, 3])

        assert s.top(2) == [3, 2]
        assert s.top(0) == []
        with pytest.raises(vorth.StackUnderflow):
            s.top(4)

        s.drop(2)
        assert s == [1]
        with pytest.raises(vorth.StackUnderflow):
            s.drop(2)
        assert s == [1]

    def test_reverse(self):
        s = vorth.Stack([1, 2, 3])
        s.reverse()

        assert s == [3, 2, 1]

    def test_str_lists_oldest_first(self):
        assert str(vorth.Stack([1, 'a', 2.5])) == '[1, "a", 2.5]'
        assert str(vorth.Stack()) == '[]'


class TestWordTable():
    def test_define_and_lookup(self):
        w = vorth.WordTable()
        w.define('Double', [(tokens.WORD, 'dup'), (tokens.WORD, '+')])

        assert 'double' in w
        assert 'DOUBLE' in w
        assert w.lookup('double') == ((tokens.WORD, 'dup'), (tokens.WORD, '+'))
        assert w.lookup('triple') is None

    def test_redefine_replaces(self):
        w = vorth.WordTable()
        w.define('a', [(tokens.INT, 1), (tokens.INT, 2)])
        w.define('b', [])
        w.define('a', [(tokens.INT, 3)])

        assert w.lookup('a') == ((tokens.INT, 3),)
        assert len(w) == 2
        assert list(w) == ['b', 'a']

    def test_str(self):
        w = vorth.WordTable()

        assert str(w) == '[]'

        w.define('hi', vorth.tokenize('"hi there" . { br }'))
        w.define('noop', [])

        assert str(w) == '[<hi: "hi there" . { br }>, <noop: >]'
