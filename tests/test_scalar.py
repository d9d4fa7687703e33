#!/usr/bin/env python3
'''Unit tests for scalar conversion'''

from pathlib import Path
import sys
import unittest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hostbridge import *


class TestScalarConversion(unittest.TestCase):
    '''Test convert_scalar accept/reject table'''

    def assertConversionError(self, kind, value, target):
        with self.assertRaises(ConversionError) as ctx:
            convert_scalar(value, target)

        self.assertEqual(ctx.exception.kind, kind)
        return ctx.exception

    def test_double_scalar(self):
        '''Test double targets, including the integer widening'''
        self.assertEqual(convert_scalar(Double(0.45), DoubleScalar), 0.45)

        result = convert_scalar(Integer(15), DoubleScalar)
        self.assertEqual(result, 15.0)
        self.assertIsInstance(result, float)

        self.assertConversionError(ErrorKind.TypeMismatch, Logical(True), DoubleScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, String('abcxyz'), DoubleScalar)
        self.assertConversionError(ErrorKind.MissingValueDisallowed, Double(NA), DoubleScalar)
        self.assertConversionError(ErrorKind.LengthMismatch, Double([0.45, 0.46]), DoubleScalar)

    def test_int_scalar(self):
        '''Test integer targets; doubles never narrow'''
        result = convert_scalar(Integer(15), IntScalar)
        self.assertEqual(result, 15)
        self.assertIsInstance(result, int)

        self.assertConversionError(ErrorKind.TypeMismatch, Double(4.4), IntScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, Double(4.0), IntScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, Logical(True), IntScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, String('abcxyz'), IntScalar)
        self.assertConversionError(ErrorKind.MissingValueDisallowed, Integer(NA), IntScalar)
        self.assertConversionError(ErrorKind.LengthMismatch, Integer([1, 2, 3, 4, 5]), IntScalar)

    def test_bool_scalar(self):
        '''Test logical targets'''
        self.assertIs(convert_scalar(Logical(True), BoolScalar), True)
        self.assertIs(convert_scalar(Logical(False), BoolScalar), False)

        self.assertConversionError(ErrorKind.TypeMismatch, Double(0.45), BoolScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, Integer(15), BoolScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, String('abcxyz'), BoolScalar)
        self.assertConversionError(ErrorKind.MissingValueDisallowed, Logical(NA), BoolScalar)
        self.assertConversionError(ErrorKind.LengthMismatch, Logical([True, False, True]), BoolScalar)

    def test_string_scalar(self):
        '''Test string targets'''
        self.assertEqual(convert_scalar(String('abcxyz'), StringScalar), 'abcxyz')

        self.assertConversionError(ErrorKind.TypeMismatch, Double(0.45), StringScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, Integer(15), StringScalar)
        self.assertConversionError(ErrorKind.TypeMismatch, Logical(True), StringScalar)
        self.assertConversionError(ErrorKind.MissingValueDisallowed, String(NA_STRING), StringScalar)
        self.assertConversionError(ErrorKind.LengthMismatch, String(['hello', 'world']), StringScalar)

    def test_length_checked_before_type(self):
        '''Test that non-1 lengths fail on length whatever the variant'''
        values = [
            Double([]),
            Integer([]),
            Logical([True, False]),
            String(['a', 'b']),
            Factor(['A', 'B'], levels = ['A', 'B']),
        ]
        targets = [BoolScalar, IntScalar, DoubleScalar, StringScalar]

        for value in values:
            for target in targets:
                with self.subTest(value = value, target = target):
                    error = self.assertConversionError(ErrorKind.LengthMismatch, value, target)
                    self.assertEqual(error.detail, 'length != 1')

    def test_null_never_converts(self):
        '''Test that Null is a type mismatch for every scalar target'''
        for target in [BoolScalar, IntScalar, DoubleScalar, StringScalar]:
            with self.subTest(target = target):
                error = self.assertConversionError(ErrorKind.TypeMismatch, Null(), target)
                self.assertTrue(str(error).endswith('got Null'))

    def test_factor_is_not_an_integer(self):
        '''Test that a factor does not satisfy numeric or string targets'''
        f = Factor(['A'], levels = ['A'])
        for target in [BoolScalar, IntScalar, DoubleScalar, StringScalar]:
            with self.subTest(target = target):
                self.assertConversionError(ErrorKind.TypeMismatch, f, target)

    def test_nan_is_a_present_double(self):
        '''Test that a plain NaN is accepted where NA is not'''
        result = convert_scalar(Double(float('nan')), DoubleScalar)
        self.assertNotEqual(result, result)

    def test_vector_target_rejected(self):
        '''Test that convert_scalar refuses vector targets'''
        with self.assertRaises(ValueError):
            convert_scalar(Double(1.0), DoubleVector)


class TestOptionalConversion(unittest.TestCase):
    '''Test convert_optional'''

    def test_null_and_na_give_none(self):
        '''Test that Null and a single missing value convert to None'''
        self.assertIsNone(convert_optional(Null(), IntScalar))
        self.assertIsNone(convert_optional(Integer(NA), IntScalar))
        self.assertIsNone(convert_optional(Double(NA), DoubleScalar))
        self.assertIsNone(convert_optional(String(NA), StringScalar))

    def test_present_values_convert(self):
        '''Test that present values behave as convert_scalar'''
        self.assertEqual(convert_optional(Integer(7), DoubleScalar), 7.0)

        with self.assertRaises(ConversionError):
            convert_optional(Double(4.4), IntScalar)
        with self.assertRaises(ConversionError):
            convert_optional(Integer([1, 2]), IntScalar)


if __name__ == '__main__':
    unittest.main()
