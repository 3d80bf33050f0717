import enum

from shiftreduce import Grammar, TerminalExpr


class Terminal(enum.Enum):
    Zero = '0'

    def __str__(self):
        return self.value


class NonTerminal(enum.Enum):
    A = 'A'
    B = 'B'

    def __str__(self):
        return self.value


# Two non-terminals with the same single production and nothing above them.
# B is not reachable from the start symbol.
grammar = Grammar(NonTerminal.A, {
    NonTerminal.A: [[TerminalExpr(Terminal.Zero)]],
    NonTerminal.B: [[TerminalExpr(Terminal.Zero)]],
})
