"""tables module tests"""

from pytest import raises
from din.text import tables
from din.text.tables import CharClass, CLASS_OF, BASE_OF, SECONDARY_OF, \
    UPPER_OF, LAST_MAPPED_CODE_POINT, GetBaseLetter, GetCharClass, Lookup

ROWS = LAST_MAPPED_CODE_POINT + 1


def CheckEntry(char, tag, base, secondary=None):
    """ensure the table entries of a character"""
    cp = ord(char)
    assert tag == CLASS_OF[cp], CharClass.name(CLASS_OF[cp])
    assert base == BASE_OF[cp]
    assert secondary == SECONDARY_OF[cp]


class TestCharClass():

    def test_order(self):
        assert CharClass.END < CharClass.SYMBOL < CharClass.NUMERAL < \
            CharClass.UPPER < CharClass.LOWER

    def test_name(self):
        assert 'END' == CharClass.name(CharClass.END)
        assert 'LOWER' == CharClass.name(CharClass.LOWER)

    def test_name_unknown(self):
        with raises(ValueError):
            CharClass.name(42)

    def test_predicates(self):
        assert CharClass.letter(CharClass.UPPER)
        assert CharClass.letter(CharClass.LOWER)
        assert not CharClass.letter(CharClass.NUMERAL)
        assert CharClass.numeral(CharClass.NUMERAL)
        assert not CharClass.numeral(CharClass.SYMBOL)


class TestTableShape():

    def test_row_count(self):
        assert ROWS == 383
        assert ROWS == len(CLASS_OF)
        assert ROWS == len(BASE_OF)
        assert ROWS == len(SECONDARY_OF)
        assert ROWS == len(UPPER_OF)

    def test_immutable(self):
        with raises(TypeError):
            CLASS_OF[0] = CharClass.LOWER

    def test_no_end_class(self):
        assert CharClass.END not in CLASS_OF

    def test_letters_fold_to_ascii(self):
        for cp in range(ROWS):
            if CharClass.letter(CLASS_OF[cp]):
                assert chr(BASE_OF[cp]).isascii()
                assert chr(BASE_OF[cp]).isalpha()

    def test_secondaries_match_primary_case(self):
        for cp in range(ROWS):
            if SECONDARY_OF[cp] is not None:
                assert CLASS_OF[SECONDARY_OF[cp]] == CLASS_OF[cp]

    def test_secondary_case_mismatch(self, monkeypatch):
        monkeypatch.setitem(tables.SECONDARIES, 'ä', 'E')

        with raises(RuntimeError):
            tables._BuildTables()

    def test_secondary_of_non_letter(self, monkeypatch):
        monkeypatch.setitem(tables.SECONDARIES, '$', 's')

        with raises(RuntimeError):
            tables._BuildTables()


class TestEntries():

    def test_ascii_letters(self):
        CheckEntry('A', CharClass.UPPER, ord('A'))
        CheckEntry('z', CharClass.LOWER, ord('z'))

    def test_digits(self):
        for d in range(10):
            CheckEntry(str(d), CharClass.NUMERAL, d)

    def test_symbols(self):
        for char in ' -.@[`{~ §×÷':
            CheckEntry(char, CharClass.SYMBOL, ord(char))

    def test_superscript_digits_are_symbols(self):
        CheckEntry('²', CharClass.SYMBOL, 0xB2)

    def test_accented_letters(self):
        CheckEntry('á', CharClass.LOWER, ord('a'))
        CheckEntry('à', CharClass.LOWER, ord('a'))
        CheckEntry('Ç', CharClass.UPPER, ord('C'))
        CheckEntry('ÿ', CharClass.LOWER, ord('y'))
        CheckEntry('Ź', CharClass.UPPER, ord('Z'))
        CheckEntry('ž', CharClass.LOWER, ord('z'))

    def test_umlauts(self):
        CheckEntry('Ä', CharClass.UPPER, ord('A'), ord('E'))
        CheckEntry('ö', CharClass.LOWER, ord('o'), ord('e'))
        CheckEntry('Ü', CharClass.UPPER, ord('U'), ord('E'))

    def test_ligatures(self):
        CheckEntry('Æ', CharClass.UPPER, ord('A'), ord('E'))
        CheckEntry('œ', CharClass.LOWER, ord('o'), ord('e'))
        CheckEntry('Ĳ', CharClass.UPPER, ord('I'), ord('J'))
        CheckEntry('ß', CharClass.LOWER, ord('s'), ord('s'))

    def test_letters_without_decomposition(self):
        CheckEntry('Ø', CharClass.UPPER, ord('O'))
        CheckEntry('Đ', CharClass.UPPER, ord('D'))
        CheckEntry('ł', CharClass.LOWER, ord('l'))
        CheckEntry('ı', CharClass.LOWER, ord('i'))
        CheckEntry('ĸ', CharClass.LOWER, ord('k'))

    def test_non_letters(self):
        for char in 'µÞðþªº':
            CheckEntry(char, CharClass.SYMBOL, ord(char))

    def test_upper_of(self):
        assert ord('A') == UPPER_OF[ord('a')]
        assert ord('Ä') == UPPER_OF[ord('ä')]
        assert 0x178 == UPPER_OF[ord('ÿ')]
        assert ord('I') == UPPER_OF[ord('ı')]
        assert ord('ß') == UPPER_OF[ord('ß')]
        assert ord('µ') == UPPER_OF[ord('µ')]
        assert ord('1') == UPPER_OF[ord('1')]


class TestFunctions():

    def test_get_char_class(self):
        assert CharClass.NUMERAL == GetCharClass('7')
        assert CharClass.UPPER == GetCharClass('É')
        assert CharClass.LOWER == GetCharClass('é')
        assert CharClass.SYMBOL == GetCharClass('þ')
        assert CharClass.SYMBOL == GetCharClass('!')

    def test_get_base_letter(self):
        assert 'E' == GetBaseLetter('é', CharClass.UPPER)
        assert 'e' == GetBaseLetter('É', CharClass.LOWER)
        assert 'k' == GetBaseLetter('ĸ', CharClass.LOWER)

    def test_no_base_letter(self):
        assert GetBaseLetter('!', CharClass.LOWER) is None
        assert GetBaseLetter('\u3000', CharClass.UPPER) is None

    def test_lookup(self):
        assert (CharClass.LOWER, ord('a'), ord('e')) == Lookup(ord('ä'))
        assert (CharClass.NUMERAL, 5, None) == Lookup(ord('5'))

    def test_lookup_beyond_range(self):
        assert (CharClass.SYMBOL, 0x17F, None) == Lookup(0x17F)
        assert (CharClass.SYMBOL, 0x20AC, None) == Lookup(ord('€'))
