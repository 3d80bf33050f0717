class Error(Exception):
    """Base class for all shiftreduce exceptions."""


class SpecError(Error):
    """
Raised by Grammar.validate() when a grammar is malformed (undefined
non-terminals, empty productions, terminals outside the declared
alphabet).
"""


class ParseFailure(Error):
    """Base class for the outcomes of a failed parse."""


class LexError(ParseFailure):
    def __init__(self, message, token, offset=None):
        ParseFailure.__init__(self, message)
        self.token = token
        self.offset = offset


class AmbiguousGrammar(ParseFailure):
    """
More than one production could be reduced at the same point.  This is a
defect of the grammar, not of the input: the grammar is not deterministic
under naive suffix matching.  candidates is a list of
(production, stack slice) pairs.
"""
    def __init__(self, candidates):
        self.candidates = candidates
        ParseFailure.__init__(
            self, "Ambiguous grammar, multiple applicable rewrites: %s" %
            ", ".join(["%s => %r" % (production.lhs, values)
                       for production, values in candidates]))


class Rejected(ParseFailure):
    """
Input was exhausted without collapsing the stack to a single value headed
by the start symbol.  stack is a snapshot of the residual stack.
"""
    def __init__(self, stack):
        self.stack = stack
        ParseFailure.__init__(self, "Bad stack: %r" % (stack,))
