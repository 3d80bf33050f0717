import enum

from shiftreduce import Grammar, Scanner, TerminalExpr, NonTerminalExpr


class Terminal(enum.Enum):
    Plus = '+'
    Minus = '-'
    Star = '*'
    LeftParen = '('
    RightParen = ')'
    Zero = '0'

    def __str__(self):
        return self.value


class NonTerminal(enum.Enum):
    Sum = 'sum'
    Sub = 'sub'
    Mult = 'mult'
    Atom = 'atom'
    Number = 'number'

    def __str__(self):
        return self.value


T = TerminalExpr
N = NonTerminalExpr

# Sum ::= Sum '+' Sub | Sub
# Sub ::= Sub '-' Mult | Mult
# Mult ::= Mult '*' Atom | Atom
# Atom ::= '(' Sum ')' | Number
# Number ::= '0'
rules = {
    NonTerminal.Sum: [
        [N(NonTerminal.Sum), T(Terminal.Plus), N(NonTerminal.Sub)],
        [N(NonTerminal.Sub)],
    ],
    NonTerminal.Sub: [
        [N(NonTerminal.Sub), T(Terminal.Minus), N(NonTerminal.Mult)],
        [N(NonTerminal.Mult)],
    ],
    NonTerminal.Mult: [
        [N(NonTerminal.Mult), T(Terminal.Star), N(NonTerminal.Atom)],
        [N(NonTerminal.Atom)],
    ],
    NonTerminal.Atom: [
        [T(Terminal.LeftParen), N(NonTerminal.Sum), T(Terminal.RightParen)],
        [N(NonTerminal.Number)],
    ],
    NonTerminal.Number: [
        [T(Terminal.Zero)],
    ],
}

grammar = Grammar(NonTerminal.Sum, rules, terminals=Terminal)

scanner = Scanner.from_enum(Terminal)
