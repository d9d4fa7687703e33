#!/usr/bin/env python3
'''Unit tests for enum <-> factor conversion'''

from enum import Enum, auto
from pathlib import Path
import sys
import unittest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hostbridge import *


class Model(Enum):
    A = auto()
    B = auto()
    C = auto()


LABELS = ['A', 'B', 'C']


class TestConvertEnum(unittest.TestCase):
    '''Test inbound factor conversion'''

    def test_scalar_factor(self):
        '''Test converting a valid scalar factor'''
        value = convert_enum(Factor(['B'], levels = LABELS), LABELS)
        self.assertEqual(value, EnumValue('B'))

    def test_enum_class_as_label_set(self):
        '''Test that a Python Enum class declares the label set'''
        value = convert_enum(Factor(['C'], levels = LABELS), Model)
        self.assertEqual(value.to_member(Model), Model.C)

    def test_subset_of_levels_accepted(self):
        '''Test that a factor using fewer levels than allowed converts'''
        value = convert_enum(Factor(['A'], levels = ['A', 'B']), LABELS)
        self.assertEqual(value, EnumValue('A'))

    def test_invalid_levels(self):
        '''Test that levels outside the allowed set are rejected'''
        with self.assertRaises(ConversionError) as ctx:
            convert_enum(Factor(['B'], levels = ['a', 'b', 'c']), LABELS)

        self.assertEqual(ctx.exception.kind, ErrorKind.InvalidEnumLevel)
        self.assertIn('invalid level', str(ctx.exception))

    def test_extra_level_rejected_even_if_unused(self):
        '''Test that every level of the factor must be allowed'''
        with self.assertRaises(ConversionError) as ctx:
            convert_enum(Factor(['A'], levels = ['A', 'Z']), LABELS)
        self.assertEqual(ctx.exception.kind, ErrorKind.InvalidEnumLevel)

    def test_non_scalar_factor(self):
        '''Test that a factor of length 2 is rejected'''
        with self.assertRaises(ConversionError) as ctx:
            convert_enum(Factor(['A', 'B'], levels = LABELS), LABELS)

        self.assertEqual(ctx.exception.kind, ErrorKind.InvalidEnumLevel)
        self.assertEqual(ctx.exception.detail, 'length != 1')

    def test_integer_is_not_a_factor(self):
        '''Test that a bare integer code is never read as categorical'''
        for value in [Integer([1]), Integer(1), String('A'), Null()]:
            with self.subTest(value = value):
                with self.assertRaises(ConversionError) as ctx:
                    convert_enum(value, LABELS)

                self.assertEqual(ctx.exception.kind, ErrorKind.InvalidEnumLevel)
                self.assertEqual(ctx.exception.detail, 'not a factor')

    def test_missing_code(self):
        '''Test that a missing factor element is rejected'''
        with self.assertRaises(ConversionError) as ctx:
            convert_enum(Factor([None], levels = LABELS), LABELS)
        self.assertEqual(ctx.exception.kind, ErrorKind.MissingValueDisallowed)

    def test_message_format(self):
        '''Test the reported message for enum failures'''
        with self.assertRaises(ConversionError) as ctx:
            convert_enum(Integer([1]), LABELS)
        self.assertEqual(ctx.exception.message, 'Expected Factor got Integer')


class TestEncodeEnum(unittest.TestCase):
    '''Test outbound enum encoding'''

    def test_encode(self):
        '''Test that encoding builds a length-1 factor with all levels'''
        factor = encode_enum(EnumValue('B'), LABELS)
        self.assertEqual(factor, Factor(['B'], levels = ['A', 'B', 'C']))
        self.assertEqual(factor.levels, ('A', 'B', 'C'))
        self.assertEqual(factor.codes, (2,))

    def test_level_order_follows_label_set(self):
        '''Test that level order is the given order, not sorted'''
        factor = encode_enum(EnumValue('A'), ['C', 'B', 'A'])
        self.assertEqual(factor.levels, ('C', 'B', 'A'))
        self.assertEqual(factor.codes, (3,))

    def test_round_trip(self):
        '''Test that encode then convert gives back the same value'''
        for label in LABELS:
            with self.subTest(label = label):
                value = EnumValue(label)
                self.assertEqual(convert_enum(encode_enum(value, LABELS), LABELS), value)

    def test_encode_member(self):
        '''Test encoding a Python Enum member'''
        factor = encode_enum(Model.B, Model)
        self.assertEqual(factor, Factor(['B'], levels = LABELS))

    def test_unknown_label(self):
        '''Test that a label outside the set cannot be encoded'''
        with self.assertRaises(ConversionError) as ctx:
            encode_enum(EnumValue('D'), LABELS)
        self.assertEqual(ctx.exception.kind, ErrorKind.InvalidEnumLevel)


class TestEnumLabels(unittest.TestCase):
    '''Test label sets derived from Enum classes'''

    def test_declaration_order(self):
        class Shuffled(Enum):
            Zeta = 1
            Alpha = 2

        self.assertEqual(enum_labels(Shuffled), ('Zeta', 'Alpha'))

    def test_not_an_enum(self):
        with self.assertRaises(ValueError):
            enum_labels(int)

    def test_to_member_unknown(self):
        with self.assertRaises(ValueError):
            EnumValue('D').to_member(Model)


if __name__ == '__main__':
    unittest.main()
