#!/bin/env python
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
#
# ===============================================================================
#
# Usage: example1.py [-v] "<input>"
#                         ^^^^^^^
#                         <input> is a string of whitespace-separated tokens.
#
# The traditional arithmetic example, written as a hierarchy of non-terminals
# so that multiplication binds tighter than subtraction, which binds tighter
# than addition.  There are no precedence declarations: the recognizer works
# out where to reduce by matching productions against the top of its stack.
#
# The only number is 0, which keeps the terminal alphabet small:
#
#   $ python example1.py -v "0 + ( 0 - 0 ) * 0"
#
# ===============================================================================

import enum
import logging
import sys

import shiftreduce
from shiftreduce import Grammar, Scanner, TerminalExpr as T, NonTerminalExpr as N


# ===============================================================================
# Terminals and non-terminals.

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


# ===============================================================================
# Productions.  In traditional BNF:
#
#   Sum ::= Sum '+' Sub | Sub.
#   Sub ::= Sub '-' Mult | Mult.
#   Mult ::= Mult '*' Atom | Atom.
#   Atom ::= '(' Sum ')' | Number.
#   Number ::= '0'.

grammar = Grammar(NonTerminal.Sum, {
    NonTerminal.Sum: [[N(NonTerminal.Sum), T(Terminal.Plus), N(NonTerminal.Sub)],
                      [N(NonTerminal.Sub)]],
    NonTerminal.Sub: [[N(NonTerminal.Sub), T(Terminal.Minus), N(NonTerminal.Mult)],
                      [N(NonTerminal.Mult)]],
    NonTerminal.Mult: [[N(NonTerminal.Mult), T(Terminal.Star), N(NonTerminal.Atom)],
                       [N(NonTerminal.Atom)]],
    NonTerminal.Atom: [[T(Terminal.LeftParen), N(NonTerminal.Sum), T(Terminal.RightParen)],
                       [N(NonTerminal.Number)]],
    NonTerminal.Number: [[T(Terminal.Zero)]],
}, terminals=Terminal)


# ===============================================================================
# Main code.

def main(argv):
    args = argv[1:]
    recognizer = shiftreduce.Recognizer(grammar)
    if args and args[0] == "-v":
        # Enable verbose parsing output.
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        recognizer.verbose = True
        args.pop(0)

    print(grammar)
    for text in args:
        print("\n==============\nParsing %s" % text)
        try:
            tree = recognizer.scan(text, Scanner.from_enum(Terminal))
        except shiftreduce.Rejected as e:
            print("Rejected: %r" % (e.stack,))
            return 1
        print("Accepted: %r" % (tree,))
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
