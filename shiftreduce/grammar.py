"""
Grammars are plain in-memory values: a start symbol and a mapping from each
non-terminal to its alternative productions.  Terminals and non-terminals are
whatever hashable values the caller likes (usually the members of two Enum
classes); inside a production they are wrapped in TerminalExpr or
NonTerminalExpr so that the two kinds never compare equal to each other.

  class T(enum.Enum):
      Plus = '+'
      Zero = '0'

  class N(enum.Enum):
      Sum = 'sum'
      Number = 'number'

  grammar = Grammar(N.Sum, {
      N.Sum: [[NonTerminalExpr(N.Sum), TerminalExpr(T.Plus),
               NonTerminalExpr(N.Number)],
              [NonTerminalExpr(N.Number)]],
      N.Number: [[TerminalExpr(T.Zero)]],
  })

Nothing is checked when a Grammar is built.  Call validate() to have
dangling references and empty productions reported as SpecError.
"""
from shiftreduce.errors import SpecError


class Expression(object):
    """One slot in the right-hand side of a production."""
    __slots__ = ('symbol',)

    def __init__(self, symbol):
        self.symbol = symbol

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self.symbol == other.symbol

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.symbol))


# AKA terminal symbol.
class TerminalExpr(Expression):
    __slots__ = ()

    def __repr__(self):
        return "'%s'" % (self.symbol,)


class NonTerminalExpr(Expression):
    __slots__ = ()

    def __repr__(self):
        return "%s" % (self.symbol,)


# <$>.  Only ever used as lookahead, never inside a production.
class EndOfInput(TerminalExpr):
    __slots__ = ()

    def __init__(self):
        TerminalExpr.__init__(self, None)

    def __eq__(self, other):
        return isinstance(other, EndOfInput)

    def __hash__(self):
        return hash(EndOfInput)

    def __repr__(self):
        return "<$>"
eoi = EndOfInput()


class Production(object):
    """A single alternative: lhs ::= rhs."""
    __slots__ = ('lhs', 'rhs')

    def __init__(self, lhs, rhs):
        if __debug__:
            for elm in rhs:
                assert isinstance(elm, Expression), elm
        self.lhs = lhs
        self.rhs = tuple(rhs)

    def __eq__(self, other):
        if not isinstance(other, Production):
            return NotImplemented
        return self.lhs == other.lhs and self.rhs == other.rhs

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.lhs, self.rhs))

    def __len__(self):
        return len(self.rhs)

    def __repr__(self):
        return "%s ::= %s." % (self.lhs, " ".join(["%r" % elm for elm in self.rhs]))


class Grammar(object):
    """
Read-only grammar value.  A Grammar holds no parse state and may be shared
between any number of recognizers.

start : The start symbol.  A parse is accepted only when the whole input
        reduces to a single tree headed by this symbol.

rules : Mapping from non-terminal to a sequence of productions, each
        production a sequence of Expression.

terminals : Optional iterable naming the terminal alphabet (an Enum class
            works).  Defaults to the terminals mentioned in rules.  Input
            symbols outside the alphabet are lexical errors.
"""

    def __init__(self, start, rules, terminals=None):
        self._start = start
        self._rules = {}
        for nonterm, alternatives in rules.items():
            self._rules[nonterm] = tuple([tuple(rhs) for rhs in alternatives])
        if terminals is None:
            used = set()
            for alternatives in self._rules.values():
                for rhs in alternatives:
                    for elm in rhs:
                        if isinstance(elm, TerminalExpr):
                            used.add(elm.symbol)
            self._terminals = frozenset(used)
        else:
            self._terminals = frozenset(terminals)

    @property
    def start(self):
        return self._start

    @property
    def rules(self):
        return dict(self._rules)

    @property
    def terminals(self):
        return self._terminals

    @property
    def nonterminals(self):
        return list(self._rules)

    def productions(self):
        """
        Flattens the rules into a list of (lhs, rhs) productions.  The list
        is rebuilt on every call.
        """
        result = []
        for nonterm, alternatives in self._rules.items():
            for rhs in alternatives:
                result.append(Production(nonterm, rhs))
        return result

    def validate(self):
        problems = []
        if self._start not in self._rules:
            problems.append("Start symbol %s has no productions" % (self._start,))
        for production in self.productions():
            if len(production) == 0:
                problems.append("Empty production for %s" % (production.lhs,))
            for elm in production.rhs:
                if isinstance(elm, NonTerminalExpr):
                    if elm.symbol not in self._rules:
                        problems.append(
                            "Unknown symbol '%s' in reduction %r" %
                            (elm.symbol, production))
                elif elm.symbol not in self._terminals:
                    problems.append(
                        "Terminal '%s' in reduction %r is not in the alphabet" %
                        (elm.symbol, production))
        if problems:
            raise SpecError("\n".join(problems))

    def __str__(self):
        lines = []
        for nonterm, alternatives in self._rules.items():
            for rhs in alternatives:
                lines.append(" ".join(["%s ->" % (nonterm,)] +
                                      ["%r" % elm for elm in rhs]))
        return "\n".join(lines)

    def __repr__(self):
        return "Grammar(%r, %d non-terminals, %d productions)" % (
            self._start, len(self._rules), len(self.productions()))
