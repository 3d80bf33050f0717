import enum

from shiftreduce import Grammar, TerminalExpr, NonTerminalExpr


class Terminal(enum.Enum):
    Zero = '0'

    def __str__(self):
        return self.value


class NonTerminal(enum.Enum):
    S = 'S'
    A = 'A'
    B = 'B'

    def __str__(self):
        return self.value


# A and B both produce '0', so a lone '0' can be reduced two ways.
grammar = Grammar(NonTerminal.S, {
    NonTerminal.S: [[NonTerminalExpr(NonTerminal.A)],
                    [NonTerminalExpr(NonTerminal.B)]],
    NonTerminal.A: [[TerminalExpr(Terminal.Zero)]],
    NonTerminal.B: [[TerminalExpr(Terminal.Zero)]],
})
