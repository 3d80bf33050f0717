import re

from shiftreduce.errors import LexError


class Scanner(object):
    """
    Splits text on whitespace and maps every word to a terminal through a
    fixed vocabulary.  Unknown words are lexical errors.
    """
    word_re = re.compile(r'\S+')

    def __init__(self, vocabulary):
        self.vocabulary = dict(vocabulary)

    @classmethod
    def from_enum(cls, enum_cls):
        """Builds the vocabulary from str() of every member of enum_cls."""
        return cls([(str(member), member) for member in enum_cls])

    def scan(self, text):
        """Yields the terminals of text, left to right."""
        for m in self.word_re.finditer(text):
            word = m.group(0)
            try:
                terminal = self.vocabulary[word]
            except KeyError:
                raise LexError("Invalid character: %s" % (word,), word, m.start())
            yield terminal
