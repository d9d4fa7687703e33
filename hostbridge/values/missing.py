'''
Missingness Model - per-primitive missing-value sentinels

Every host primitive has its own encoding of "no value":

- Logical / Integer / factor codes: the minimum 32-bit integer
- Double: a NaN whose low 32-bit word is 1954
- String: a dedicated sentinel object

A plain NaN (any other payload) is a present double, not a missing one.
'''

import math
import struct

__all__ = [
    'INT_MIN',
    'INT_MAX',
    'NA_INTEGER',
    'NA_LOGICAL',
    'NA_REAL',
    'NA_REAL_BITS',
    'NA_REAL_LOW_WORD',
    'NA_STRING',
    'NA',
    'double_bits',
    'double_from_bits',
    'is_na_integer',
    'is_na_logical',
    'is_na_real',
    'is_na_string',
    'is_missing_double',
]

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

NA_INTEGER = INT_MIN
NA_LOGICAL = INT_MIN

NA_REAL_LOW_WORD = 1954
NA_REAL_BITS = 0x7FF00000_00000000 | NA_REAL_LOW_WORD


def double_bits(value: float) -> int:
    '''Raw IEEE-754 bit pattern of a double'''
    return struct.unpack('<Q', struct.pack('<d', value))[0]


def double_from_bits(bits: int) -> float:
    return struct.unpack('<d', struct.pack('<Q', bits))[0]


NA_REAL = double_from_bits(NA_REAL_BITS)


class _NAString:
    '''Missing element of a String vector'''

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NA_STRING'

    def __reduce__(self):
        return (_NAString, ())


class _Missing:
    '''Generic missing indicator

    Stands for "missing" without carrying a primitive type. It is never
    equal to any typed missing value, in particular not to NA_REAL.
    '''

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NA'

    def __bool__(self):
        raise TypeError('truth value of NA is ambiguous')

    def __reduce__(self):
        return (_Missing, ())


NA_STRING = _NAString()
NA = _Missing()


def is_na_integer(value: int) -> bool:
    return value == NA_INTEGER


def is_na_logical(value: int) -> bool:
    return value == NA_LOGICAL


def is_na_real(value: float) -> bool:
    '''True only for the NA_REAL NaN, not for other NaNs'''
    if not math.isnan(value):
        return False

    return (double_bits(value) & 0xFFFFFFFF) == NA_REAL_LOW_WORD


def is_na_string(value) -> bool:
    return value is NA_STRING


def is_missing_double(value) -> bool:
    '''Check a native double for the missing-double marker'''
    return isinstance(value, float) and is_na_real(value)
