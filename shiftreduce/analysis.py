"""
Context information derived from a Grammar.  The recognizer uses it to
decide whether a production that matches the top of the stack may actually
be reduced at that point: the non-terminal it produces must be allowed next
to whatever sits below the matched slice, and the lookahead terminal must be
able to follow it.

None of this is a parse table.  The recognizer still re-scans every
production on every step; the analysis only answers yes/no questions about
pairs of symbols.
"""
from shiftreduce.grammar import TerminalExpr, NonTerminalExpr, eoi


class GrammarAnalysis(object):
    def __init__(self, grammar):
        self._grammar = grammar
        self._productions = grammar.productions()
        self._symbols = set([NonTerminalExpr(grammar.start)])
        for production in self._productions:
            self._symbols.add(NonTerminalExpr(production.lhs))
            self._symbols.update(production.rhs)

        self._first = {}
        self._follow = {}
        self._left = {}
        self._successors = {}
        self._reachable = set()
        self._firstSets()
        self._followSets()
        self._leftCorners()
        self._successorSets()
        self._reachableSet()

    @property
    def grammar(self):
        return self._grammar

    def first(self, sym):
        """Terminal expressions that can begin a derivation of sym."""
        return frozenset(self._first.get(sym, ()))

    def follow(self, nonterm):
        """Terminal expressions (and eoi) that can follow nonterm."""
        return frozenset(self._follow.get(nonterm, ()))

    def left_corners(self, sym):
        """sym itself, plus every symbol that can start a derivation of it."""
        return frozenset(self._left.get(sym, (sym,)))

    def successors(self, sym):
        """Non-terminals that may sit directly to the right of sym."""
        return frozenset(self._successors.get(sym, ()))

    def reachable(self):
        """Non-terminals derivable from the start symbol, itself included."""
        return frozenset(self._reachable)

    def roots(self):
        """Non-terminals that may sit at the bottom of the stack."""
        return frozenset([elm.symbol for elm in
                          self.left_corners(NonTerminalExpr(self._grammar.start))
                          if isinstance(elm, NonTerminalExpr)])

    def admits(self, nonterm, below, lookahead=None):
        """
        True if nonterm may be produced directly above the stack symbol
        below (None for the bottom of the stack), with lookahead as the next
        input terminal.  A lookahead of None is not checked.

        A non-terminal the start symbol never reaches, or one with nothing
        that can follow it, has no context to check and is always admitted,
        so a duplicate production for it still surfaces as ambiguity.
        """
        if nonterm not in self._reachable or not self._follow.get(nonterm):
            return True
        if below is None:
            if nonterm not in self.roots():
                return False
        elif nonterm not in self._successors.get(below, ()):
            return False
        if lookahead is not None and lookahead not in self._follow.get(nonterm, ()):
            return False
        return True

    # Compute the first sets for all symbols.
    def _firstSets(self):
        # first(X) is X for terminals.
        for sym in self._symbols:
            if isinstance(sym, TerminalExpr):
                self._first[sym] = set([sym])
            else:
                self._first[sym] = set()

        # There are no empty productions, so only the leftmost symbol of each
        # right-hand side contributes.
        done = False
        while not done:
            done = True
            for production in self._productions:
                if not production.rhs:
                    continue
                target = self._first[NonTerminalExpr(production.lhs)]
                for elm in self._first[production.rhs[0]]:
                    if elm not in target:
                        target.add(elm)
                        done = False

    # Compute the follow sets for all non-terminals.
    def _followSets(self):
        for sym in self._symbols:
            if isinstance(sym, NonTerminalExpr):
                self._follow[sym.symbol] = set()
        self._follow[self._grammar.start].add(eoi)

        done = False
        while not done:
            done = True
            for production in self._productions:
                rhs = production.rhs
                # For A ::= aBb, merge first(b) into follow(B).
                for i in range(len(rhs) - 1):
                    if isinstance(rhs[i], NonTerminalExpr):
                        if self._merge(self._follow[rhs[i].symbol],
                                       self._first[rhs[i + 1]]):
                            done = False
                # For A ::= aB, merge follow(A) into follow(B).
                if rhs and isinstance(rhs[-1], NonTerminalExpr):
                    if self._merge(self._follow[rhs[-1].symbol],
                                   self._follow[production.lhs]):
                        done = False

    def _leftCorners(self):
        for sym in self._symbols:
            self._left[sym] = set([sym])

        done = False
        while not done:
            done = True
            for production in self._productions:
                if not production.rhs:
                    continue
                if self._merge(self._left[NonTerminalExpr(production.lhs)],
                               self._left[production.rhs[0]]):
                    done = False

    def _successorSets(self):
        for production in self._productions:
            rhs = production.rhs
            for i in range(len(rhs) - 1):
                allowed = self._successors.setdefault(rhs[i], set())
                for elm in self._left[rhs[i + 1]]:
                    if isinstance(elm, NonTerminalExpr):
                        allowed.add(elm.symbol)

    def _reachableSet(self):
        self._reachable.add(self._grammar.start)
        done = False
        while not done:
            done = True
            for production in self._productions:
                if production.lhs not in self._reachable:
                    continue
                for elm in production.rhs:
                    if isinstance(elm, NonTerminalExpr) \
                            and elm.symbol not in self._reachable:
                        self._reachable.add(elm.symbol)
                        done = False

    @staticmethod
    def _merge(target, source):
        """Adds source to target; returns True if target grew."""
        n = len(target)
        target.update(source)
        return len(target) != n
