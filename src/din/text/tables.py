"""
.. py: module:: tables
   : synopsis: Character classification tables for DIN 5007 collation.

The tables cover the code points U+0000 .. U+017E (Basic Latin, Latin-1
Supplement, and Latin Extended-A). Every code point above that range is an
unclassified symbol whose value is the code point itself.

The tables are generated once, when the module is imported, and never change
thereafter; they can be shared by any number of tokenizers and threads.

.. License: GNU Affero GPL v3 (http: //www.gnu.org/licenses/agpl.html)
"""
import logging
from unicodedata import category, digit, normalize

from unidecode import unidecode

logger = logging.getLogger(__name__)

#################
# CONFIGURATION #
#################

LAST_MAPPED_CODE_POINT = 0x017E
"""
Last code point that can be resolved using the tables; each table has
``LAST_MAPPED_CODE_POINT + 1`` (383) rows.
"""

SECONDARIES = {
    "Ä": "E",  # LATIN CAPITAL LETTER A WITH DIAERESIS
    "Æ": "E",  # LATIN CAPITAL LETTER AE
    "Ö": "E",  # LATIN CAPITAL LETTER O WITH DIAERESIS
    "Ü": "E",  # LATIN CAPITAL LETTER U WITH DIAERESIS
    "ß": "s",  # LATIN SMALL LETTER SHARP S
    "ä": "e",  # LATIN SMALL LETTER A WITH DIAERESIS
    "æ": "e",  # LATIN SMALL LETTER AE
    "ö": "e",  # LATIN SMALL LETTER O WITH DIAERESIS
    "ü": "e",  # LATIN SMALL LETTER U WITH DIAERESIS
    "Ĳ": "J",  # LATIN CAPITAL LIGATURE IJ
    "ĳ": "j",  # LATIN SMALL LIGATURE IJ
    "Œ": "E",  # LATIN CAPITAL LIGATURE OE
    "œ": "e",  # LATIN SMALL LIGATURE OE
}
"""
Umlauts and ligatures that expand to two letters: ``{ char: secondary }``.
The base letter (the primary) is found in :data:`BASE_OF`, e.g., ``ä`` is
collated as ``a`` followed by the secondary ``e``.
"""

NON_LETTERS = frozenset({
    "µ",  # MICRO SIGN
    "Þ",  # LATIN CAPITAL LETTER THORN
    "ð",  # LATIN SMALL LETTER ETH
    "þ",  # LATIN SMALL LETTER THORN
})
"""
Characters Unicode considers letters that are collated as symbols, because
they have no Latin base letter in DIN 5007.
"""

BASE_OVERRIDES = {
    "ĸ": "k",  # LATIN SMALL LETTER KRA
}
"""
Base letters that can be found neither by decomposition nor by
transliteration: ``{ char: base }``.
"""

ASCII_LETTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)


class CharClass:
    """
    Integer tags for the character classes, ordered the way they collate:
    ``END < SYMBOL < NUMERAL < UPPER < LOWER``.

    END never is the class of an actual character; it only tags the last
    token of a tokenized string, so that any string sorts after all of its
    prefixes.
    """

    END = -1
    "terminal token of a string; sorts before any other class"
    SYMBOL = 0
    "any character that is neither a digit nor a letter"
    NUMERAL = 1
    "a (run of) decimal digit(s)"
    UPPER = 2
    "an upper-case letter"
    LOWER = 3
    "a lower-case letter"

    NAMES = {
        END: 'END',
        SYMBOL: 'SYMBOL',
        NUMERAL: 'NUMERAL',
        UPPER: 'UPPER',
        LOWER: 'LOWER',
    }
    LETTERS = frozenset({UPPER, LOWER})

    @classmethod
    def name(cls, tag: int) -> str:
        """Return the name of the class *tag*."""
        try:
            return cls.NAMES[tag]
        except KeyError:
            raise ValueError('unknown character class %r' % tag)

    @classmethod
    def letter(cls, tag: int) -> bool:
        """``True`` if *tag* is any letter class (UPPER, LOWER)."""
        return tag in cls.LETTERS

    @classmethod
    def numeral(cls, tag: int) -> bool:
        """``True`` if *tag* is the NUMERAL class."""
        return tag == cls.NUMERAL


##################
# IMPLEMENTATION #
##################

def GetCharClass(char: str) -> int:
    """
    Return the :class:`CharClass` of a single *char* that has a base letter,
    according to its Unicode category.
    """
    cat = category(char)

    if cat == 'Nd':
        return CharClass.NUMERAL
    elif char in NON_LETTERS:
        return CharClass.SYMBOL
    elif cat == 'Lu':
        return CharClass.UPPER
    elif cat == 'Ll':
        return CharClass.LOWER
    else:
        return CharClass.SYMBOL


def GetBaseLetter(char: str, tag: int):
    """
    Return the unaccented ASCII base letter of a letter *char* in the case
    given by the class *tag*, or ``None`` if no base letter is known.

    The base is looked up in the :data:`BASE_OVERRIDES`, then taken from the
    canonical decomposition, and finally from the transliteration by
    :func:`unidecode.unidecode`.
    """
    if char in BASE_OVERRIDES:
        base = BASE_OVERRIDES[char]
    else:
        base = normalize('NFD', char)[0]

        if base not in ASCII_LETTERS:
            base = next((c for c in unidecode(char) if c in ASCII_LETTERS),
                        None)

    if base is None:
        return None

    return base.upper() if tag == CharClass.UPPER else base.lower()


def _BuildTables():
    classes = []
    bases = []
    secondaries = []
    uppers = []

    for cp in range(LAST_MAPPED_CODE_POINT + 1):
        char = chr(cp)
        tag = GetCharClass(char)
        base = cp

        if tag == CharClass.NUMERAL:
            base = digit(char)
        elif CharClass.letter(tag):
            letter = GetBaseLetter(char, tag)

            if letter is None:
                tag = CharClass.SYMBOL
            else:
                base = ord(letter)

        upper = char.upper()

        if len(upper) == 1 and ord(upper) <= LAST_MAPPED_CODE_POINT:
            uppers.append(ord(upper))
        else:
            uppers.append(cp)

        classes.append(tag)
        bases.append(base)
        secondaries.append(ord(SECONDARIES[char])
                           if char in SECONDARIES else None)

    for cp, secondary in enumerate(secondaries):
        if secondary is not None:
            if not CharClass.letter(classes[cp]) or \
               classes[secondary] != classes[cp]:
                raise RuntimeError(
                    'secondary %r of %r does not match its primary class %s' %
                    (chr(secondary), chr(cp), CharClass.name(classes[cp]))
                )

    logger.debug(
        'built classification tables for %i code points '
        '(%i letters, %i secondaries)', len(classes),
        sum(1 for tag in classes if CharClass.letter(tag)),
        sum(1 for s in secondaries if s is not None)
    )
    return tuple(classes), tuple(bases), tuple(secondaries), tuple(uppers)


CLASS_OF, BASE_OF, SECONDARY_OF, UPPER_OF = _BuildTables()
"""
The classification tables, indexed by code point:

* ``CLASS_OF`` - the :class:`CharClass` tag
* ``BASE_OF`` - the folded value: the base letter's code point for letters,
  the digit value (0..9) for numerals, and the code point itself otherwise
* ``SECONDARY_OF`` - the code point of the secondary letter or ``None``
* ``UPPER_OF`` - the upper-case code point used for case-insensitive lookups
  (the code point itself if its upper case is not a single mapped character)
"""


def Lookup(cp: int) -> tuple:
    """
    Return the ``(class, base, secondary)`` table entries of the code point
    *cp*; code points above :data:`LAST_MAPPED_CODE_POINT` are symbols with
    themselves as value and no secondary.
    """
    if cp > LAST_MAPPED_CODE_POINT:
        return CharClass.SYMBOL, cp, None

    return CLASS_OF[cp], BASE_OF[cp], SECONDARY_OF[cp]
