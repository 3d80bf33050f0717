# ===============================================================================
# Copyright (c) 2026 The shiftreduce developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ===============================================================================
"""
The Recognizer is a table-free shift-reduce driver.  It is fed terminals via
the token() method and terminated via the eoi() method, like an LR driver,
but instead of consulting precomputed action/goto tables it decides what to
do by scanning every production of the grammar against the top of the stack:

  1. Before a terminal is shifted, every production whose right-hand side
     matches the trailing stack entries is a candidate.  With use_context
     (the default) a candidate must also be admissible: the produced
     non-terminal must be allowed next to the entry below the matched slice,
     and the incoming terminal must be able to follow it.

  2. Zero candidates: shift the terminal.  One candidate: reduce, then go
     back to 1.  More than one: raise AmbiguousGrammar.

  3. At end of input the same reduce loop runs with <$> as lookahead.  The
     parse is accepted iff a single Tree headed by the start symbol remains;
     otherwise Rejected is raised with the residual stack.

The reduction decision is made by select_reduction(), a plain function of
(productions, stack, analysis, lookahead), so it can be exercised on its own.

Nothing guards the reduce loop against grammars with reduction cycles (for
instance A ::= B and B ::= A); supplying a grammar that terminates is the
caller's job.
"""
import logging

from shiftreduce.analysis import GrammarAnalysis
from shiftreduce.errors import AmbiguousGrammar, LexError, Rejected
from shiftreduce.grammar import TerminalExpr, NonTerminalExpr, eoi
from shiftreduce.tree import Leaf, Tree

__all__ = ["Recognizer", "ShiftAction", "ReduceAction", "matches",
           "candidates", "select_reduction", "parse", "recognize"]

logger = logging.getLogger(__name__)


class Action(object):
    """
    A decision taken by the recognizer; Recognizer.trace lists them in the
    order they happened.
    """


class ShiftAction(Action):
    def __init__(self, terminal):
        Action.__init__(self)
        self.terminal = terminal

    def __repr__(self):
        return "[shift '%s']" % (self.terminal,)

    def __eq__(self, other):
        if not isinstance(other, ShiftAction):
            return False
        return self.terminal == other.terminal

    def __ne__(self, other):
        return not self == other

    __hash__ = None


class ReduceAction(Action):
    def __init__(self, production, values):
        Action.__init__(self)
        self.production = production
        self.values = tuple(values)

    def __repr__(self):
        return "[reduce %r]" % self.production

    def __eq__(self, other):
        if not isinstance(other, ReduceAction):
            return False
        return self.production == other.production \
            and self.values == other.values

    def __ne__(self, other):
        return not self == other

    __hash__ = None


def expression_of(value):
    """The grammar expression a stack value stands for."""
    if isinstance(value, Tree):
        return NonTerminalExpr(value.head)
    return TerminalExpr(value.terminal)


def _value_matches(value, elm):
    if isinstance(elm, NonTerminalExpr):
        return isinstance(value, Tree) and value.head == elm.symbol
    return isinstance(value, Leaf) and value.terminal == elm.symbol


def matches(production, stack):
    """
    True if the trailing len(production) entries of stack match the
    right-hand side slot for slot.  Empty productions never match.
    """
    n = len(production.rhs)
    if n == 0 or n > len(stack):
        return False
    tail = stack[len(stack) - n:]
    for value, elm in zip(tail, production.rhs):
        if not _value_matches(value, elm):
            return False
    return True


def candidates(productions, stack, analysis=None, lookahead=None):
    """
    All productions that could be reduced on stack.  Without an analysis
    this is every production that matches; with one, matches that are not
    admissible in context are dropped.
    """
    result = []
    for production in productions:
        if not matches(production, stack):
            continue
        if analysis is not None:
            n = len(production.rhs)
            if n < len(stack):
                below = expression_of(stack[len(stack) - n - 1])
            else:
                below = None
            if not analysis.admits(production.lhs, below, lookahead):
                continue
        result.append(production)
    return result


def select_reduction(productions, stack, analysis=None, lookahead=None):
    """
    Returns the single production to reduce, or None if nothing applies.
    Raises AmbiguousGrammar when more than one production applies.
    """
    found = candidates(productions, stack, analysis, lookahead)
    if len(found) > 1:
        raise AmbiguousGrammar(
            [(production, list(stack[len(stack) - len(production.rhs):]))
             for production in found])
    if found:
        return found[0]
    return None


class Recognizer(object):
    """
Shift-reduce recognizer driven directly by a Grammar.

grammar : The Grammar to recognize.  It is only read.

verbose : If true, log the stack after every step at INFO level (shifts
          and reductions are always logged at DEBUG level).

use_context : If true (the default), only reduce a matching production
              when the resulting non-terminal fits the stack entry below it
              and the lookahead terminal can follow it.  If false, every
              production matching the stack suffix is a candidate, which
              makes most left-recursive grammars ambiguous.
"""

    def __init__(self, grammar, verbose=False, use_context=True):
        assert type(verbose) == bool
        self._grammar = grammar
        if use_context:
            self._analysis = GrammarAnalysis(grammar)
        else:
            self._analysis = None
        self._verbose = verbose
        self.reset()

    def __getGrammar(self):
        return self._grammar

    def __setGrammar(self, grammar):
        raise AttributeError()

    grammar = property(__getGrammar, __setGrammar)

    def __getStart(self):
        return self._start

    def __setStart(self, start):
        raise AttributeError

    start = property(__getStart, __setStart, doc="""
The accepted value once eoi() has succeeded, otherwise None.
""")

    def __getVerbose(self):
        return self._verbose

    def __setVerbose(self, verbose):
        assert type(verbose) == bool
        self._verbose = verbose

    verbose = property(__getVerbose, __setVerbose)

    @property
    def use_context(self):
        return self._analysis is not None

    @property
    def stack(self):
        """A copy of the current stack, bottom first."""
        return list(self._stack)

    @property
    def trace(self):
        """Shift and reduce decisions taken since the last reset()."""
        return list(self._trace)

    def reset(self):
        self._start = None
        self._stack = []
        self._trace = []

    def token(self, terminal):
        """
Feed a terminal to the recognizer.  Feeding more terminals after eoi() has
accepted continues the same parse from the accepted stack and clears start;
call reset() to begin an unrelated one.
"""
        self._start = None
        if terminal not in self._grammar.terminals:
            raise LexError("Invalid token: %r" % (terminal,), terminal)
        self._log("INPUT: %s", terminal)
        self._reduceAll(TerminalExpr(terminal))

        self._stack.append(Leaf(terminal))
        self._trace.append(ShiftAction(terminal))
        logger.debug("Adding terminal: %s", terminal)
        if self._verbose:
            self._printStack()

    def feed(self, tokens):
        for terminal in tokens:
            self.token(terminal)

    def eoi(self):
        """
Signal end-of-input to the recognizer.  Returns the accepted Tree, or
raises Rejected.
"""
        self._log("INPUT: %r", eoi)
        self._reduceAll(eoi)

        stack = self._stack
        if len(stack) == 1 and isinstance(stack[0], Tree) \
                and stack[0].head == self._grammar.start:
            self._start = stack[0]
            self._log("   --> accept")
            return self._start
        self._log("   --> reject")
        raise Rejected(list(stack))

    def scan(self, text, scanner):
        """Tokenizes text with scanner and recognizes the result."""
        self.reset()
        self.feed(scanner.scan(text))
        return self.eoi()

    def _reduceAll(self, lookahead):
        # Reduce until no production applies.
        while True:
            production = select_reduction(
                self._grammar.productions(), self._stack,
                self._analysis, lookahead)
            if production is None:
                break
            self._reduce(production)

    def _reduce(self, production):
        nRhs = len(production.rhs)
        values = self._stack[len(self._stack) - nRhs:]
        del self._stack[len(self._stack) - nRhs:]

        self._stack.append(Tree(production.lhs, values))
        self._trace.append(ReduceAction(production, values))
        logger.debug("Replacing stack values %r with nonterminal %s",
                     values, production.lhs)
        self._log("   --> %r", self._trace[-1])
        if self._verbose:
            self._printStack()

    def _log(self, msg, *args):
        if self._verbose:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)

    def _printStack(self):
        logger.info("STACK: %s", " ".join(["%r" % value for value in self._stack]))


def parse(grammar, tokens, **kwargs):
    """
    Recognizes tokens with grammar and returns the accepted Tree.  Raises
    LexError, AmbiguousGrammar or Rejected.  Keyword arguments go to
    Recognizer.
    """
    recognizer = Recognizer(grammar, **kwargs)
    recognizer.feed(tokens)
    return recognizer.eoi()


def recognize(grammar, tokens, **kwargs):
    """
    Like parse(), but reports ordinary rejection as False.  LexError and
    AmbiguousGrammar still propagate.
    """
    try:
        parse(grammar, tokens, **kwargs)
    except Rejected:
        return False
    return True
