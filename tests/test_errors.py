#!/usr/bin/env python3
'''Unit tests for the error reporter'''

from pathlib import Path
import sys
import unittest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hostbridge import *


class TestErrorReporter(unittest.TestCase):
    '''Test display names and message format'''

    def test_display_names_total(self):
        '''Test that every target kind and host variant has a name'''
        for kind in TargetKind:
            with self.subTest(kind = kind):
                self.assertIn(kind, TARGET_DISPLAY_NAMES)

        for host_type in HostType:
            with self.subTest(host_type = host_type):
                self.assertIn(host_type, HOST_DISPLAY_NAMES)

    def test_format(self):
        '''Test the literal message format'''
        self.assertEqual(format_error(DoubleVector, HostType.String), 'Expected Doubles got String')
        self.assertEqual(format_error(IntScalar, Double(1.0)), 'Expected Integer got Double')
        self.assertEqual(format_error(NativeTarget.enum(['A']), HostType.Integer), 'Expected Factor got Integer')

    def test_detail_appended(self):
        '''Test that str() appends the detail after the message'''
        error = ConversionError(ErrorKind.LengthMismatch, DoubleScalar, Double([1.0, 2.0]), 'length != 1')
        self.assertEqual(error.message, 'Expected Double got Double')
        self.assertEqual(str(error), 'Expected Double got Double (length != 1)')
        self.assertEqual(error.actual, HostType.Double)

    def test_within_prefixes_context(self):
        '''Test wrapping an error with the place it happened'''
        error = ConversionError.type_mismatch(IntScalar, HostType.String)
        wrapped = error.within("argument 'x'")

        self.assertEqual(wrapped.kind, ErrorKind.TypeMismatch)
        self.assertEqual(wrapped.detail, "argument 'x'")
        self.assertEqual(str(wrapped.within('outer')), "Expected Integer got String (outer: argument 'x')")

    def test_is_value_error(self):
        '''Test that conversion errors are ValueErrors'''
        self.assertTrue(issubclass(ConversionError, ValueError))

    def test_stable(self):
        '''Test that the same input always gives the same message'''
        messages = {str(ConversionError.type_mismatch(StringVector, Null())) for _ in range(3)}
        self.assertEqual(messages, {'Expected Strings got Null'})


if __name__ == '__main__':
    unittest.main()
