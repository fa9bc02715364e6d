import unittest

import numpy as np

from radix import (
    InvalidNumberError,
    NotIntegerOnlyError,
    Number,
    NumberSyntaxError,
    format_number,
    negate,
    normalize,
)


def raw(base, digits, *, negative=False, decimal_length=0, repeating_length=0):
    number = Number.allocate(base, len(digits))
    number.digits[:] = digits
    number.is_negative = negative
    number.decimal_length = decimal_length
    number.repeating_length = repeating_length
    return number


def assert_zero(test, number):
    test.assertEqual(number.digits.tolist(), [0])
    test.assertEqual(number.length, 1)
    test.assertEqual(number.decimal_length, 0)
    test.assertEqual(number.repeating_length, 0)
    test.assertFalse(number.is_negative)


class ParseFormatTests(unittest.TestCase):
    def test_documented_layouts(self):
        cases = [
            ("123", "123"),
            ("16#1A3F", "16#1A3F"),
            ("-456", "-456"),
            ("12.34", "12.34"),
            ("-9.8", "-9.8"),
            ("1.(3)", "1.(3)"),
            ("16#1A.3(45)", "16#1A.3(45)"),
            ("2#1011.01", "2#1011.01"),
            ("36#Z9A", "36#Z9A"),
            ("0", "0"),
            ("16#-FF", "16#-FF"),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(format_number(Number.parse(text)), expected)

    def test_fields_of_parsed_number(self):
        value = Number.parse("16#1A.3(45)")
        self.assertEqual(value.base, 16)
        self.assertEqual(value.digits.tolist(), [1, 10, 3, 4, 5])
        self.assertEqual(value.decimal_length, 3)
        self.assertEqual(value.repeating_length, 2)
        self.assertEqual(value.integer_length, 2)
        self.assertEqual(value.nonrepeating_length, 1)
        self.assertEqual(value.digits.dtype, np.uint8)

    def test_lowercase_glyphs_and_sign_before_prefix(self):
        self.assertEqual(Number.parse("16#1a"), Number.parse("16#1A"))
        self.assertEqual(Number.parse("-16#FF"), Number.parse("16#-FF"))

    def test_explicit_base_argument(self):
        self.assertEqual(Number.parse("FF", base=16), Number.parse("16#FF"))
        with self.assertRaises(NumberSyntaxError):
            Number.parse("16#FF", base=10)

    def test_missing_integer_part(self):
        self.assertEqual(str(Number.parse(".5")), "0.5")
        self.assertEqual(str(Number.parse(".(6)")), "0.(6)")

    def test_syntax_errors(self):
        for text in ["", "12.3.4", "1(3)", "1.(3", "1.(3)4", "1.()", "10#1A", "40#1", "1#0", "abc$", "x#1", "--1"]:
            with self.subTest(text=text):
                with self.assertRaises(NumberSyntaxError):
                    Number.parse(text)

    def test_syntax_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Number.parse("1.2.3")

    def test_repr(self):
        self.assertEqual(repr(Number.parse("-1.(3)")), "Number('-1.(3)')")


class NormalizeTests(unittest.TestCase):
    def test_strips_insignificant_zeros(self):
        self.assertEqual(str(Number.parse("007.500")), "7.5")
        self.assertEqual(str(Number.parse("0.0100")), "0.01")
        self.assertEqual(str(Number.parse("100")), "100")
        self.assertEqual(str(Number.parse("12.000")), "12")

    def test_zero_canonical_form(self):
        candidates = [
            raw(10, [0, 0, 0], negative=True, decimal_length=2, repeating_length=1),
            raw(10, [0], negative=True),
            raw(16, [0, 0, 0, 0], decimal_length=4, repeating_length=4),
            raw(2, [0, 0], negative=True, decimal_length=2),
            Number.parse("-0.000"),
            Number.parse("-0.(0)"),
        ]
        for number in candidates:
            with self.subTest(number=number):
                assert_zero(self, normalize(number))

    def test_all_zero_repeating_block_collapses(self):
        self.assertEqual(str(Number.parse("1.5(0)")), "1.5")
        self.assertEqual(str(Number.parse("1.50(00)")), "1.5")
        self.assertEqual(str(Number.parse("3.(000)")), "3")

    def test_repeating_block_with_zeros_is_preserved(self):
        value = Number.parse("0.(305)")
        self.assertEqual(value.digits.tolist(), [0, 3, 0, 5])
        self.assertEqual(value.repeating_length, 3)
        self.assertEqual(str(value), "0.(305)")
        self.assertEqual(str(Number.parse("2.10(0305)")), "2.10(0305)")
        self.assertEqual(str(Number.parse("0.(50)")), "0.(50)")

    def test_idempotent(self):
        numbers = [
            raw(10, [0, 0, 1, 2, 0, 0], decimal_length=3),
            raw(10, [0, 1, 3, 0, 5], negative=True, decimal_length=3, repeating_length=3),
            raw(16, [0, 15, 0, 0], decimal_length=2, repeating_length=1),
            raw(10, [0, 0, 0], negative=True),
            raw(10, [5, 0], decimal_length=2),
        ]
        for number in numbers:
            with self.subTest(number=number):
                once = normalize(number).copy()
                self.assertEqual(normalize(number), once)
                self.assertEqual(normalize(normalize(number)), once)

    def test_empty_integer_part_with_trailing_zeros(self):
        cases = [
            (Number.parse(".50"), "0.5", [0, 5], 1),
            (Number.parse("-.120"), "-0.12", [0, 1, 2], 2),
            (Number(10, [5, 0], decimal_length=2), "0.5", [0, 5], 1),
            (normalize(raw(16, [10, 0], decimal_length=2)), "16#0.A", [0, 10], 1),
        ]
        for value, text, digits, decimal_length in cases:
            with self.subTest(text=text):
                self.assertEqual(str(value), text)
                self.assertEqual(value.digits.tolist(), digits)
                self.assertEqual(value.decimal_length, decimal_length)
                self.assertEqual(value.repeating_length, 0)

    def test_noop_on_none(self):
        self.assertIsNone(normalize(None))

    def test_allocate_then_populate(self):
        number = Number.allocate(10, 4)
        self.assertEqual(number.digits.tolist(), [0, 0, 0, 0])
        number.digits[:] = [0, 0, 4, 2]
        self.assertEqual(str(normalize(number)), "42")
        self.assertEqual(number.length, 2)


class ConstructionTests(unittest.TestCase):
    def test_constructor_normalizes(self):
        value = Number(10, [0, 1, 3], decimal_length=1, repeating_length=1)
        self.assertEqual(str(value), "1.(3)")

    def test_invalid_components(self):
        with self.assertRaises(InvalidNumberError):
            Number(10, [])
        with self.assertRaises(InvalidNumberError):
            Number(10, [10])
        with self.assertRaises(InvalidNumberError):
            Number(10, [1, 2], decimal_length=1, repeating_length=2)
        with self.assertRaises(InvalidNumberError):
            Number(10, [1], decimal_length=2)
        with self.assertRaises(InvalidNumberError):
            Number.allocate(10, 0)

    def test_base_range(self):
        for base in (0, 1, 37):
            with self.subTest(base=base):
                with self.assertRaises(ValueError):
                    Number(base, [0])
        with self.assertRaises(TypeError):
            Number(10.0, [0])

    def test_from_int_and_int(self):
        self.assertEqual(str(Number.from_int(-255, 16)), "16#-FF")
        self.assertEqual(str(Number.from_int(0, 2)), "2#0")
        self.assertEqual(int(Number.parse("16#-FF")), -255)
        self.assertEqual(int(Number.from_int(10**30, 7)), 10**30)
        with self.assertRaises(NotIntegerOnlyError):
            int(Number.parse("1.5"))

    def test_copy_owns_its_digits(self):
        original = Number.parse("123")
        duplicate = original.copy()
        self.assertEqual(duplicate, original)
        self.assertFalse(np.shares_memory(duplicate.digits, original.digits))

    def test_normalized_digits_are_read_only(self):
        values = [Number.parse("123"), Number.parse("1.(3)").copy(), normalize(raw(10, [4, 2]))]
        for value in values:
            with self.subTest(value=value):
                self.assertFalse(value.digits.flags.writeable)
                with self.assertRaises(ValueError):
                    value.digits[0] = 9
        self.assertTrue(Number.allocate(10, 2).digits.flags.writeable)

    def test_negate(self):
        value = Number.parse("1.5")
        self.assertEqual(str(negate(value)), "-1.5")
        self.assertEqual(str(-value), "-1.5")
        self.assertEqual(str(value), "1.5")
        self.assertFalse(negate(Number.parse("0")).is_negative)
        with self.assertRaises(InvalidNumberError):
            negate(None)

    def test_properties(self):
        self.assertTrue(Number.parse("42").is_integer_only)
        self.assertFalse(Number.parse("4.2").is_integer_only)
        self.assertTrue(Number.parse("4.2").is_terminating)
        self.assertFalse(Number.parse("0.(2)").is_terminating)
        self.assertTrue(Number.parse("0").is_zero)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
