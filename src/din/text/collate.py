"""
.. py: module:: collate
   : synopsis: Compare and sort strings as defined in DIN 5007 part 2.

Rules:

* Symbols go before numbers, numbers go before letters.
* Numbers are sorted by their mathematical value, without requiring leading
  zeros. Numbers with leading zeros go before equal numbers without them.
* Letters are compared by their base letter and their expansion: ``AE`` for
  ``Ä``, ``OE`` for ``Ö``, ``UE`` for ``Ü``, ``SS`` for ``ß``, and the
  ligatures ``Æ``, ``Œ``, and ``Ĳ`` as ``AE``, ``OE``, and ``IJ``.
* Strings are compared case-insensitive, unless they are equal. Then, they
  are compared case-sensitive, where upper case goes before lower case. If
  they still are equal, their code points decide, so only identical strings
  are equal.

``None`` is accepted in place of any string and sorts before all strings.

.. License: GNU Affero GPL v3 (http: //www.gnu.org/licenses/agpl.html)
"""
from collections import OrderedDict
from functools import cmp_to_key
from io import StringIO

from din.text.dintok import Tokenizer
from din.text.tables import CharClass


def CompareLevel(a: str, b: str, case_insensitive: bool) -> int:
    """
    Compare the token sequences of two strings *a* and *b* at a single
    level, either case-insensitive or case-sensitive.

    :return: a negative integer if *a* goes before *b*, zero if they are
             equivalent at this level, and a positive integer otherwise
    """
    if a is None or b is None:
        return _CompareNone(a, b)

    tokens_a = Tokenizer(a, case_insensitive)
    tokens_b = Tokenizer(b, case_insensitive)

    while True:
        x = tokens_a.read()
        y = tokens_b.read()

        if x.cls != y.cls:
            return x.cls - y.cls
        elif x.cls == CharClass.END:
            return 0
        elif x.value != y.value:
            return -1 if x.value < y.value else 1
        elif x.zeros != y.zeros:
            # more leading zeros go first
            return y.zeros - x.zeros


def _CompareNone(a, b) -> int:
    if a is None:
        return 0 if b is None else -1
    else:
        return 1


def _CompareRaw(a: str, b: str) -> int:
    return (a > b) - (a < b)


def Compare(a: str, b: str) -> int:
    """
    Compare two strings *a* and *b* using all three levels.

    :return: a negative integer if *a* goes before *b*, zero if the strings
             are identical (or both ``None``), and a positive integer
             otherwise
    """
    return DEFAULT_COLLATOR.compare(a, b)


def Canonical(text: str) -> str:
    """
    Return the canonical version of a *text*, that is exactly the internal
    form used to compare strings case-sensitive.

    Letters are replaced by their base letters plus expansions (``Grüße``
    becomes ``Gruesse``). Numbers are written with one leading zero less
    than they had, except that a plain zero stays a zero (``007`` becomes
    ``07``, ``0`` stays ``0``).

    :param text: the string to convert; ``None`` is returned as is
    """
    if text is None:
        return None

    result = StringIO()

    for token in Tokenizer(text):
        if token.cls == CharClass.END:
            break
        elif token.cls == CharClass.NUMERAL:
            if token.zeros > 1:
                result.write('0' * (token.zeros - 1))

            result.write(str(token.value))
        else:
            result.write(token.char)

    return result.getvalue()


class Collator:
    """
    A reusable comparison function for DIN 5007 collation.

    Instances are callable like :func:`Compare` and provide a sort
    :attr:`key` usable with :func:`sorted` and :meth:`list.sort`.
    """

    def __init__(self, case_pass: bool=True):
        """
        :param case_pass: if ``False``, strings that are equal
                          case-insensitive are ordered by their code points
                          only, skipping the case-sensitive comparison
        """
        self.case_pass = case_pass
        self.key = cmp_to_key(self.compare)

    def __call__(self, a: str, b: str) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return 'Collator(case_pass=%r)' % self.case_pass

    def compare(self, a: str, b: str) -> int:
        """
        Compare two strings *a* and *b*, case-insensitive first, then
        case-sensitive (if enabled), and finally by their code points.
        """
        if a is None or b is None:
            return _CompareNone(a, b)

        result = CompareLevel(a, b, True)

        if result != 0:
            return result

        if self.case_pass:
            result = CompareLevel(a, b, False)

            if result != 0:
                return result

        return _CompareRaw(a, b)

    def sorted(self, iterable, reverse: bool=False) -> list:
        """Return a new list of the strings in *iterable*, in order."""
        return sorted(iterable, key=self.key, reverse=reverse)


DEFAULT_COLLATOR = Collator()
"""The collator used by the module-level functions."""

SortKey = DEFAULT_COLLATOR.key
"""A sort key function for :func:`sorted`, :meth:`list.sort`, etc."""


def Sorted(iterable, reverse: bool=False) -> list:
    """
    Return a new list of the strings in *iterable*, in DIN 5007 order.
    """
    return DEFAULT_COLLATOR.sorted(iterable, reverse=reverse)


def SortedSet(iterable) -> list:
    """
    Return a sorted list of the distinct strings in *iterable*.

    Only identical strings compare equal, so no two distinct strings are
    ever merged.
    """
    return Sorted(set(iterable))


def SortedMapping(mapping) -> OrderedDict:
    """
    Return an :class:`collections.OrderedDict` with the items of a *mapping*,
    its keys in DIN 5007 order.
    """
    return OrderedDict(
        (key, mapping[key]) for key in Sorted(mapping.keys())
    )
