"""
Values living on the recognizer's stack.  A Leaf wraps a shifted terminal;
a Tree is the result of a reduction and holds the values it consumed, so
nesting Trees form the parse tree.
"""


class StackValue(object):
    __slots__ = ()

    def leaves(self):
        """The terminals covered by this value, left to right."""
        raise NotImplementedError


class Leaf(StackValue):
    __slots__ = ('terminal',)

    def __init__(self, terminal):
        self.terminal = terminal

    def __eq__(self, other):
        if not isinstance(other, Leaf):
            return NotImplemented
        return self.terminal == other.terminal

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Leaf, self.terminal))

    def __repr__(self):
        return "'%s'" % (self.terminal,)

    def leaves(self):
        return [self.terminal]


class Tree(StackValue):
    __slots__ = ('head', 'values')

    def __init__(self, head, values):
        self.head = head
        self.values = tuple(values)

    def __eq__(self, other):
        if not isinstance(other, Tree):
            return NotImplemented
        return self.head == other.head and self.values == other.values

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Tree, self.head, self.values))

    def __repr__(self):
        return "%s[%s]" % (self.head, " ".join(["%r" % v for v in self.values]))

    def leaves(self):
        result = []
        for value in self.values:
            result.extend(value.leaves())
        return result
