"""
Symbol converters translate between words and the integers they stand for.

A word is a string of symbols.  A converter knows the alphabet of symbols,
and how to read a word as a base-radix, big-endian, non-negative integer.
The LexOrder engine does all its arithmetic on those integers.

Features:
 - arbitrary precision (Python int, no floats anywhere)
 - minimal output (no padding beyond whole symbols)
 - no state (one instance may be shared by everybody)
"""

import binascii


class SymbolConverter(object):
    """
    What a LexOrder needs from a converter.

    Subclassing is optional.  Any object with these members will do:
        converter.symbols            tuple of symbol strings, zero symbol first
        converter.radix              len(converter.symbols)
        converter.to_integer(word)   int value of a word, or raise a DecodeError
        converter.from_integer(i)    minimal word for a non-negative int
        converter.symbol_count(s)    how many symbols are in s, rounding up
    """

    @property
    def symbols(self):
        raise NotImplementedError("{class_name} should implement a symbols property".format(
            class_name=type(self).__name__)
        )

    @property
    def radix(self):
        return len(self.symbols)

    def to_integer(self, word):
        raise NotImplementedError("{class_name} should implement to_integer()".format(
            class_name=type(self).__name__)
        )

    def from_integer(self, value):
        raise NotImplementedError("{class_name} should implement from_integer()".format(
            class_name=type(self).__name__)
        )

    def symbol_count(self, value):
        raise NotImplementedError("{class_name} should implement symbol_count()".format(
            class_name=type(self).__name__)
        )

    class DecodeError(ValueError):
        """A word that cannot be read as an integer, e.g. Converter256().to_integer('abc')"""


class Converter256(SymbolConverter):
    """
    Base 256, each symbol a pair of lowercase hexadecimal digits.

        assert 42 == Converter256().to_integer('2a')
        assert '0100' == Converter256().from_integer(256)

    Lexicographic order of equal length words is numeric order,
    because '0' < '9' < 'a' < 'f' in ASCII.
    """

    RADIX = 256
    SYMBOL_SIZE = 2
    SYMBOLS = tuple('{:02x}'.format(i) for i in range(RADIX))   # ('00', '01', ..., 'ff')

    @property
    def symbols(self):
        return self.SYMBOLS

    def to_integer(self, word):
        """
        Read a hexadecimal word as an integer, exactly, at any magnitude.

        Raise DecodeError for an empty word, an odd number of digits,
        or anything that is not hexadecimal.
        """
        if word == '':
            raise self.DecodeError("Value is empty.")
        if len(word) % self.SYMBOL_SIZE != 0:
            raise self.DecodeError("Invalid value \"{word}\" does not fit the symbol size {size}.".format(
                word=word,
                size=self.SYMBOL_SIZE,
            ))
        try:
            return int_from_bytes(bytes_from_hex(word))
        except bytes_from_hex.Error:
            raise self.DecodeError("Invalid value \"{word}\" is not hexadecimal.".format(word=word))

    def from_integer(self, value):
        """Render a non-negative integer as the shortest word of whole symbols."""
        if value < 0:
            raise ValueError("Negative values have no word:  {}".format(value))
        return hex_from_integer(value)

    def symbol_count(self, value):
        """Symbols in a string, rounding up a dangling half symbol.  ceil(len/2)"""
        return -(-len(value) // self.SYMBOL_SIZE)


converter256 = Converter256()


# Hexadecimal
# -----------
def hex_from_integer(the_integer):
    """
    Encode a hexadecimal string from an arbitrarily big integer.

    Like hex() but output has:  an even number of digits, no '0x' prefix.
    """
    # THANKS:  Mike Boers code, http://stackoverflow.com/a/777774/673991
    hex_string = hex(the_integer)[2:]
    if len(hex_string) % 2:
        hex_string = '0' + hex_string
    return hex_string
assert 'ff' == hex_from_integer(255)
assert '0100' == hex_from_integer(256)
assert '00' == hex_from_integer(0)


def bytes_from_hex(hexadecimal_digits):
    """
    Decode a hexadecimal string into an 8-bit binary (base-256) string.

    Raises bytes_from_hex.Error (a ValueError) for an odd number of digits or non-hex digits.

    NOTE:  binascii.unhexlify() is stricter than int(s, 16), which would let through
           '0x', '+', '_' and whitespace.
    """
    assert isinstance(hexadecimal_digits, str)
    try:
        return binascii.unhexlify(hexadecimal_digits)
    except (binascii.Error, ValueError):
        # NOTE:  ValueError is for non-ASCII digits, e.g. unhexlify('éé')
        raise bytes_from_hex.Error("Not an even number of hexadecimal digits: " + repr(hexadecimal_digits))


class BytesFromHexError(ValueError):
    """bytes_from_hex() invalid input"""
bytes_from_hex.Error = BytesFromHexError
assert b'\xBE\xEF' == bytes_from_hex('BEEF')


def int_from_bytes(string_of_8_bit_bytes):
    """Unsigned, big-endian, base-256 digits to an int."""
    return int.from_bytes(string_of_8_bit_bytes, byteorder='big', signed=False)
assert 0xBEEF == int_from_bytes(b'\xBE\xEF')
