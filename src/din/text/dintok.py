"""
.. py: module:: dintok
   : synopsis: A DIN 5007 string tokenizer that folds letters and parses numbers.

For example, the string ``"Grüße166.txt"`` is tokenized to::

    G r u e s s e 166 . t x t END

.. License: GNU Affero GPL v3 (http: //www.gnu.org/licenses/agpl.html)
"""
from operator import itemgetter

from din.text.tables import CharClass, UPPER_OF, LAST_MAPPED_CODE_POINT, \
    Lookup


class Token(tuple):

    """
    A data structure for the tokens of a string.

    Tokens have the following attributes:

    1. ``cls`` - the :class:`.CharClass` of the token
    1. ``value`` - the folded code point of a symbol or letter, or the
       integer value of a numeral
    1. ``zeros`` - the leading-zero count of a numeral (zero otherwise)

    There are four kinds of tokens: the END token (:data:`END_TOKEN`),
    symbols, letters (UPPER or LOWER), and numerals.
    """

    __slots__ = ()

    def __new__(cls, tag: int, value: int=0, zeros: int=0):
        if tag not in CharClass.NAMES:
            raise ValueError('unknown character class %r' % tag)

        if zeros and tag != CharClass.NUMERAL:
            raise ValueError('only numerals have leading zeros')

        return tuple.__new__(cls, (tag, value, zeros))

    cls = property(itemgetter(0), doc="the character class tag")
    value = property(itemgetter(1), doc="the (folded or numeric) value")
    zeros = property(itemgetter(2), doc="the leading-zero count of numerals")

    @property
    def char(self) -> str:
        """Return the character of a symbol or letter token."""
        if self.cls in (CharClass.END, CharClass.NUMERAL):
            raise TypeError('%s tokens have no character' %
                            CharClass.name(self.cls))

        return chr(self.value)

    def IsEnd(self) -> bool:
        """Return ``True`` if this is the terminal token of a string."""
        return self.cls == CharClass.END

    def __repr__(self) -> str:
        if self.cls == CharClass.END:
            return 'Token(END)'
        elif self.cls == CharClass.NUMERAL:
            return 'Token(NUMERAL, %i, zeros=%i)' % (self.value, self.zeros)
        else:
            return 'Token(%s, %r)' % (CharClass.name(self.cls), self.char)


END_TOKEN = Token(CharClass.END)
"""The terminal token of every tokenized string."""


class Tokenizer:
    """
    Read the tokens of a string, one at a time.

    Letters are folded to their base letter; umlauts and ligatures produce a
    second, *secondary* letter token right after the base letter. Runs of
    decimal digits are collapsed into a single numeral token with the
    number's value and its count of leading zeros. In case-insensitive mode,
    all letters are folded to upper case.

    A tokenizer is created for one string and cannot be restarted; after the
    END token has been read, :meth:`read` returns the END token again.
    """

    def __init__(self, text: str, case_insensitive: bool=False):
        """
        :param text: the string to tokenize; ``None`` is tokenized as an
                     empty string
        :param case_insensitive: fold all letters to upper case
        """
        if text is not None and not isinstance(text, str):
            raise TypeError('cannot tokenize %s objects' %
                            type(text).__name__)

        self.text = text
        self.case_insensitive = case_insensitive
        self.position = 0
        self.pending = None
        self._length = len(text) if text is not None else 0

    def __iter__(self):
        """Yield the remaining tokens, including the END token."""
        while True:
            token = self.read()
            yield token

            if token.IsEnd():
                break

    def _codePointAt(self, position: int) -> int:
        cp = ord(self.text[position])

        if self.case_insensitive and cp <= LAST_MAPPED_CODE_POINT:
            return UPPER_OF[cp]

        return cp

    def read(self) -> Token:
        """Return the next token."""
        if self.pending is not None:
            tag, base, _ = Lookup(self.pending)
            self.pending = None
            return Token(tag, base)

        if self.position >= self._length:
            return END_TOKEN

        tag, base, secondary = Lookup(self._codePointAt(self.position))
        self.position += 1

        if CharClass.numeral(tag):
            return self._readNumeral(base)

        if self.case_insensitive and tag == CharClass.LOWER:
            # letters without a single upper-case character, like sharp s
            tag = CharClass.UPPER
            base = UPPER_OF[base]

            if secondary is not None:
                secondary = UPPER_OF[secondary]

        self.pending = secondary
        return Token(tag, base)

    def _readNumeral(self, value: int) -> Token:
        zeros = 1 if value == 0 else 0

        while self.position < self._length:
            tag, digit, _ = Lookup(self._codePointAt(self.position))

            if not CharClass.numeral(tag):
                break

            value = 10 * value + digit

            if value == 0:
                zeros += 1

            self.position += 1

        return Token(CharClass.NUMERAL, value, zeros)


def Tokenize(text: str, case_insensitive: bool=False) -> list:
    """
    Return the list of all tokens of a *text*, including the END token.
    """
    return list(Tokenizer(text, case_insensitive))
