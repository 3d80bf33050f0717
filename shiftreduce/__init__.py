"""
The shiftreduce module implements a naive, table-free shift-reduce
recognizer for arbitrary context-free grammars.  There is no grammar file
format: a Grammar is built in memory from a start symbol and a mapping of
non-terminals to their productions, and can be shared by any number of
parses.

Where a parser generator would precompute LR tables, the Recognizer scans
every production against the top of its stack each time it has to decide
between shifting and reducing.  A production whose right-hand side matches
the trailing stack entries (and, by default, fits the surrounding context)
is reduced; if two productions qualify at once the grammar is reported as
ambiguous at parse time.

Failures are reported as exceptions:

  * LexError : an input symbol outside the terminal alphabet.
  * AmbiguousGrammar : more than one production applies at some point.
  * Rejected : the input did not reduce to the start symbol; carries the
               residual stack.

See the :py:mod:`recognizer` module for the driver itself.
"""
from shiftreduce.errors import Error, SpecError, ParseFailure, LexError, \
    AmbiguousGrammar, Rejected
from shiftreduce.grammar import Expression, TerminalExpr, NonTerminalExpr, \
    Production, Grammar, eoi
from shiftreduce.analysis import GrammarAnalysis
from shiftreduce.tree import StackValue, Leaf, Tree
from shiftreduce.scanner import Scanner
from shiftreduce.recognizer import Recognizer, ShiftAction, ReduceAction, \
    select_reduction, parse, recognize
