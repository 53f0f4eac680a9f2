"""
Unit tests for SymbolConverter, Converter256
"""


import unittest

from lexorder.converter import bytes_from_hex
from lexorder.converter import Converter256
from lexorder.converter import converter256
from lexorder.converter import hex_from_integer
from lexorder.converter import int_from_bytes
from lexorder.converter import SymbolConverter


class Converter256Tests(unittest.TestCase):

    def test_symbols(self):
        self.assertEqual(256, len(converter256.symbols))
        self.assertEqual(256, converter256.radix)
        self.assertEqual('00', converter256.symbols[0])
        self.assertEqual('01', converter256.symbols[1])
        self.assertEqual('80', converter256.symbols[128])
        self.assertEqual('ff', converter256.symbols[255])
        self.assertIsInstance(converter256.symbols, tuple)

    def test_symbols_sorted(self):
        self.assertEqual(sorted(converter256.symbols), list(converter256.symbols))

    def test_instance(self):
        self.assertIsInstance(converter256, Converter256)
        self.assertIsInstance(converter256, SymbolConverter)

    def test_symbol_count(self):
        self.assertEqual(0, converter256.symbol_count(''))
        self.assertEqual(1, converter256.symbol_count('00'))
        self.assertEqual(2, converter256.symbol_count('0011'))
        self.assertEqual(3, converter256.symbol_count('001122'))
        self.assertEqual(8, converter256.symbol_count('0011223300112233'))
        self.assertEqual(12, converter256.symbol_count('001122330011223300112233'))

    def test_symbol_count_rounds_up(self):
        self.assertEqual(1, converter256.symbol_count('0'))
        self.assertEqual(2, converter256.symbol_count('001'))
        self.assertEqual(3, converter256.symbol_count('00112'))
        self.assertEqual(4, converter256.symbol_count('0011223'))

    def test_from_integer(self):
        self.assertEqual('00', converter256.from_integer(0))
        self.assertEqual('01', converter256.from_integer(1))
        self.assertEqual('0f', converter256.from_integer(15))
        self.assertEqual('10', converter256.from_integer(16))
        self.assertEqual('2a', converter256.from_integer(42))
        self.assertEqual('ff', converter256.from_integer(255))
        self.assertEqual('0100', converter256.from_integer(256))
        self.assertEqual('ba55', converter256.from_integer(47701))
        self.assertEqual('bada55', converter256.from_integer(12245589))
        self.assertEqual('ffffff', converter256.from_integer(16777215))
        self.assertEqual('1fffffffffffff', converter256.from_integer(9007199254740991))

    def test_from_integer_big(self):
        self.assertEqual('efffffffffffff', converter256.from_integer(67553994410557439))
        self.assertEqual('0fffffffffffffff', converter256.from_integer(1152921504606846975))
        self.assertEqual('ffffffffffffffff', converter256.from_integer(18446744073709551615))
        self.assertEqual('12345678901234567890', converter256.from_integer(85968058271978839505040))

    def test_from_integer_googol(self):
        self.assertEqual(
            '1249ad2594c37ceb0b2784c4ce0bf38ace408e211a'
            '7caab24308a82e8f10' + '00' * 12,
            converter256.from_integer(10**100)
        )

    def test_from_integer_negative(self):
        with self.assertRaises(ValueError):
            converter256.from_integer(-1)

    def test_to_integer(self):
        self.assertEqual(0, converter256.to_integer('00'))
        self.assertEqual(1, converter256.to_integer('01'))
        self.assertEqual(15, converter256.to_integer('0f'))
        self.assertEqual(16, converter256.to_integer('10'))
        self.assertEqual(42, converter256.to_integer('2a'))
        self.assertEqual(255, converter256.to_integer('ff'))
        self.assertEqual(256, converter256.to_integer('0100'))
        self.assertEqual(47701, converter256.to_integer('ba55'))
        self.assertEqual(12245589, converter256.to_integer('bada55'))
        self.assertEqual(16777215, converter256.to_integer('ffffff'))
        self.assertEqual(9007199254740991, converter256.to_integer('1fffffffffffff'))

    def test_to_integer_big(self):
        self.assertEqual(67553994410557439, converter256.to_integer('efffffffffffff'))
        self.assertEqual(1152921504606846975, converter256.to_integer('0fffffffffffffff'))
        self.assertEqual(18446744073709551615, converter256.to_integer('ffffffffffffffff'))
        self.assertEqual(85968058271978839505040, converter256.to_integer('12345678901234567890'))

    def test_python_int_unlimited_precision(self):
        big = converter256.to_integer('ff' * 100)
        self.assertEqual(256**100 - 1, big)
        self.assertNotEqual(big, big + 1)
        self.assertEqual('01' + '00' * 100, converter256.from_integer(big + 1))

    def test_to_integer_leading_zeros(self):
        self.assertEqual(1, converter256.to_integer('0001'))
        self.assertEqual(1, converter256.to_integer('000001'))

    def test_to_integer_empty(self):
        with self.assertRaises(SymbolConverter.DecodeError) as context:
            converter256.to_integer('')
        self.assertEqual("Value is empty.", str(context.exception))

    def test_to_integer_wrong_size(self):
        for value in ('0', '001', '00112', '0011223'):
            with self.assertRaises(Converter256.DecodeError) as context:
                converter256.to_integer(value)
            self.assertEqual(
                "Invalid value \"{}\" does not fit the symbol size 2.".format(value),
                str(context.exception)
            )

    def test_to_integer_not_hex(self):
        for value in ('zz', '0x', '+1', ' 1', '1_', 'éé'):
            with self.assertRaises(Converter256.DecodeError) as context:
                converter256.to_integer(value)
            self.assertEqual(
                "Invalid value \"{}\" is not hexadecimal.".format(value),
                str(context.exception)
            )

    def test_decode_error_is_value_error(self):
        with self.assertRaises(ValueError):
            converter256.to_integer('')

    def test_round_trip_spot_checks(self):
        for value in (0, 1, 127, 128, 255, 256, 65535, 65536, 2**64, 3**99):
            self.assertEqual(value, converter256.to_integer(converter256.from_integer(value)))

    def test_stateless(self):
        self.assertEqual(Converter256().symbols, converter256.symbols)
        self.assertEqual(Converter256().to_integer('2a'), converter256.to_integer('2a'))


class SymbolConverterTests(unittest.TestCase):

    def test_abstract(self):
        converter = SymbolConverter()
        with self.assertRaises(NotImplementedError):
            _ = converter.symbols
        with self.assertRaises(NotImplementedError):
            _ = converter.radix
        with self.assertRaises(NotImplementedError):
            converter.to_integer('00')
        with self.assertRaises(NotImplementedError):
            converter.from_integer(0)
        with self.assertRaises(NotImplementedError):
            converter.symbol_count('00')

    def test_not_implemented_message(self):
        class Incomplete(SymbolConverter):
            pass
        with self.assertRaisesRegex(NotImplementedError, r'^Incomplete should implement to_integer\(\)$'):
            Incomplete().to_integer('00')

    def test_radix_from_symbols(self):
        class Octal(SymbolConverter):
            @property
            def symbols(self):
                return tuple('01234567')
        self.assertEqual(8, Octal().radix)


class HexTests(unittest.TestCase):

    def test_hex_from_integer(self):
        self.assertEqual('00', hex_from_integer(0))
        self.assertEqual('0a', hex_from_integer(10))
        self.assertEqual('0100', hex_from_integer(256))

    def test_bytes_from_hex(self):
        self.assertEqual(b'\xBE\xEF', bytes_from_hex('beef'))
        self.assertEqual(b'', bytes_from_hex(''))
        with self.assertRaises(bytes_from_hex.Error):
            bytes_from_hex('bee')
        with self.assertRaises(ValueError):
            bytes_from_hex('nonsense')

    def test_int_from_bytes(self):
        self.assertEqual(0, int_from_bytes(b''))
        self.assertEqual(0, int_from_bytes(b'\x00\x00'))
        self.assertEqual(256, int_from_bytes(b'\x01\x00'))


if __name__ == '__main__':
    unittest.main()
