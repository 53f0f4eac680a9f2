"""
LexOrder makes order keys:  strings that sort the way their items should.

Give it the keys on either side of a gap and it returns a key for the gap.
No existing key ever has to change.

    lex = lex_order()
    first = lex.get(None, None)          # '80'
    after = lex.get(first, None)         # '8001'
    between = lex.get(first, after)      # '800080'
    assert first < between < after

Word vocabulary
---------------
A word is a string of symbols from the converter's alphabet.
The zero symbol is the smallest symbol, so trailing zeros never change where a word sorts
relative to its neighbors, but they would give one position two spellings.
So every word that comes out of LexOrder is canonical:  no trailing zero symbols.
The canonical empty word '' is zero.

Internally a word of length n is a big-endian base-radix integer.  Arithmetic on equal length
words agrees with string order.  Words of different length are compared after padding the
shorter one with trailing zeros, which is exactly what string order does.

Spread level
------------
A key with fewer symbols than the spread level grows by appending rather than by arithmetic.
That leaves room around short keys, e.g. at the default spread level 2:

    '80'  -->  next  -->  '8001'
    '80'  -->  previous  -->  '7fff'
"""

import logging
import re

from .converter import converter256


log = logging.getLogger(__name__)

SPREAD_LEVEL_DEFAULT = 2


class LexOrder(object):
    """
    Order key arithmetic over the alphabet of a symbol converter.

    A LexOrder never changes after construction, and has no other state.
    It is as thread-safe as its converter.
    """

    __slots__ = (
        '_converter',
        '_spread_level',
        '_zero',
        '_first',
        '_median',
        '_last',
        '_valid_pattern',
        '_overflow_pattern',
        '_underflow_pattern',
        '_trailing_zeros_pattern',
    )

    def __init__(self, converter, spread_level):
        """
        converter - see SymbolConverter for what it must do
        spread_level - minimum number of symbols before next() and previous() do arithmetic
        """
        if spread_level < 1:
            raise self.ConfigurationError("The spreadLevel must be at least 1.")

        symbols = tuple(converter.symbols)
        if len(symbols) < 2:
            raise self.ConfigurationError("There must be at least 2 symbols.")

        self._converter = converter
        self._spread_level = spread_level

        self._zero = self._defined(symbols[0], "reading symbols[0]")
        self._first = self._defined(symbols[1], "reading symbols[1]")
        self._median = self._defined(symbols[(len(symbols) + 1) // 2], "calculating median symbol")
        self._last = self._defined(symbols[-1], "reading last symbol")
        # NOTE:  The median index is round(n/2) rounding half up, e.g. 128 of 256, 3 of 5.

        alternatives = '|'.join(re.escape(symbol) for symbol in sorted(symbols, key=len, reverse=True))
        # NOTE:  Longest first, so a symbol that is a prefix of another cannot steal the match.
        zero = re.escape(self._zero)
        self._valid_pattern = re.compile('(?:{})*'.format(alternatives))
        self._overflow_pattern = re.compile('(?:{})+'.format(re.escape(self._last)))
        self._underflow_pattern = re.compile('(?:{zero})*{first}'.format(zero=zero, first=re.escape(self._first)))
        self._trailing_zeros_pattern = re.compile('(?:{})+$'.format(zero))

    @classmethod
    def _defined(cls, symbol, what):
        if symbol is None or symbol == '':
            raise cls.ConfigurationError("Got undefined when {}.".format(what))
        return symbol

    def __repr__(self):
        return "LexOrder(converter={converter}, spread_level={spread_level})".format(
            converter=type(self._converter).__name__,
            spread_level=self._spread_level,
        )

    class ConfigurationError(ValueError):
        """Unusable constructor arguments, e.g. LexOrder(converter256, spread_level=0)"""

    class InvalidArgument(ValueError):
        """A word with a symbol not in the alphabet, e.g. lex.next('4x')"""

    class EqualArguments(ValueError):
        """No key is strictly between a key and itself, e.g. lex.intermediate('42', '42')"""

    @property
    def converter(self):
        return self._converter

    @property
    def spread_level(self):
        return self._spread_level

    @property
    def zero(self):
        return self._zero

    @property
    def first(self):
        return self._first

    @property
    def median(self):
        """The seed key for an empty collection."""
        return self._median

    @property
    def last(self):
        return self._last

    # Canonical words
    # ---------------
    def validate(self, word):
        """
        Canonical version of a word.  Raise InvalidArgument if it has a symbol not in the alphabet.

        assert 'aabbcc' == lex_order().validate('aabbcc0000')
        assert '' == lex_order().validate('00')
        """
        if not self._is_symbols(word):
            raise self._invalid(word)
        return self._canonical(word)

    def decode(self, word):
        """The integer value of a canonical, nonzero word."""
        if word == '' or not self._is_symbols(word) or self._canonical(word) != word:
            raise self._invalid(word)
        return self._converter.to_integer(word)

    def encode(self, value, length):
        """
        Canonical word for an integer, as if it were left-padded to length characters.

        assert '0016' == lex_order().encode(0x16, 4)
        assert '08' == lex_order().encode(0x800, 4)
        """
        return self._canonical(self._pad_left(self._converter.from_integer(value), length))

    def _is_symbols(self, word):
        return isinstance(word, str) and self._valid_pattern.fullmatch(word) is not None

    def _canonical(self, word):
        return self._trailing_zeros_pattern.sub('', word, count=1)

    def _invalid(self, word):
        return self.InvalidArgument("Argument \"{}\" is invalid.".format(word))

    def _pad_left(self, word, length):
        return self._zero * self._zeros_short(word, length) + word

    def _pad_right(self, word, length):
        return word + self._zero * self._zeros_short(word, length)

    def _zeros_short(self, word, length):
        """How many zero symbols would make word at least length characters long."""
        missing = length - len(word)
        if missing <= 0:
            return 0
        return -(-missing // len(self._zero))

    # Order keys
    # ----------
    def get(self, a, b):
        """
        A key between neighbors a and b.  Either neighbor may be None.

        get(a, b) is between them, get(a, None) is after a, get(None, b) is before b,
        get(None, None) is the median symbol, a place to start.
        """
        if a is not None and b is not None:
            return self.intermediate(a, b)
        elif a is not None:
            return self.next(a)
        elif b is not None:
            return self.previous(b)
        else:
            return self._median

    def intermediate(self, a, b):
        """
        A key strictly between two different keys, in either order.

        assert 'dd4b80' == lex_order().intermediate('dd4b', 'dd4c')
        assert '3c99' == lex_order().intermediate('4e32', '2b')
        """
        a_valid = self.validate(a)
        b_valid = self.validate(b)
        if a_valid == b_valid:
            raise self.EqualArguments("Both arguments are equal.")

        length = max(len(a_valid), len(b_valid))
        total = (
            self._converter.to_integer(self._pad_right(a_valid, length)) +
            self._converter.to_integer(self._pad_right(b_valid, length))
        )
        half, odd = divmod(total, 2)
        middle = self._pad_left(self._converter.from_integer(half), length)
        if odd:
            middle += self._median
            # NOTE:  The median symbol is the .5 of an odd sum, one symbol deeper.
            #        It goes after the padded half, so any zeros inside it stay put.
        return self._canonical(middle)

    def next(self, word):
        """
        A key after this one.

        Short keys (fewer symbols than the spread level) and saturated keys (all last symbols)
        grow instead of counting up.  Everything else counts up at its own length.

        assert '8001' == lex_order().next('80')
        assert 'ff01' == lex_order().next('ff')
        assert '8002' == lex_order().next('8001')
        """
        valid = self.validate(word)
        level = self._converter.symbol_count(valid)
        if level < self._spread_level or self._overflow_pattern.fullmatch(valid):
            zeros = self._zero * max(0, self._spread_level - 1 - level)
            log.debug("next(%r) grows at level %d", word, level)
            return valid + zeros + self._first
        return self.encode(self._converter.to_integer(valid) + 1, len(valid))

    def previous(self, word):
        """
        A key before this one.

        A key that is just zeros and a first symbol grows a last symbol instead of counting down.
        A short key (fewer symbols than the spread level) counts down as if it were
        spread level symbols long, so it grows last symbols out to that depth.

        assert '00ff' == lex_order().previous('01')
        assert '7fff' == lex_order().previous('80')
        assert '80' == lex_order().previous('8001')
        """
        valid = self.validate(word)
        if self._underflow_pattern.fullmatch(valid):
            log.debug("previous(%r) grows at underflow", word)
            return valid[:-len(self._first)] + self._zero + self._last

        level = self._converter.symbol_count(valid)
        if level < self._spread_level:
            if valid == '':
                raise self._invalid(word)
                # NOTE:  Nothing sorts before zero.
            padded = valid + self._zero * (self._spread_level - level)
            log.debug("previous(%r) grows at level %d", word, level)
            return self.encode(self._converter.to_integer(padded) - 1, len(padded))
        return self.encode(self._converter.to_integer(valid) - 1, len(valid))


def lex_order(converter=None, spread_level=None):
    """
    LexOrder with defaults:  base 256 hexadecimal symbols, spread level 2.

    assert '80' == lex_order().get(None, None)
    """
    if converter is None:
        converter = converter256
    if spread_level is None:
        spread_level = SPREAD_LEVEL_DEFAULT
    return LexOrder(converter, spread_level)
