'''
Error Reporter - conversion failures and their uniform message format

Every failure reads "Expected <target> got <actual>", for example
"Expected Doubles got String". Display names are fixed per target kind and
per host variant so callers can match on message content.
'''

from typing import Optional

from ..common import *
from ..values import HostType, HostValue
from .targets import NativeTarget, TargetKind

__all__ = [
    'ErrorKind',
    'ConversionError',
    'TARGET_DISPLAY_NAMES',
    'HOST_DISPLAY_NAMES',
    'target_display_name',
    'host_display_name',
    'format_error',
]


class ErrorKind(IntEnum2):
    '''Conversion failure taxonomy'''
    LengthMismatch          = 0     # Scalar expected, length != 1
    TypeMismatch            = 1     # Variant does not match the target
    MissingValueDisallowed  = 2     # Missing element where the target forbids it
    InvalidEnumLevel        = 3     # Not a scalar factor, or label outside the allowed set
    OutOfLimits             = 4     # Native integer does not fit the host's 32 bits


TARGET_DISPLAY_NAMES = {
    TargetKind.BoolScalar   : 'Logical',
    TargetKind.IntScalar    : 'Integer',
    TargetKind.DoubleScalar : 'Double',
    TargetKind.StringScalar : 'String',
    TargetKind.BoolVector   : 'Logicals',
    TargetKind.IntVector    : 'Integers',
    TargetKind.DoubleVector : 'Doubles',
    TargetKind.StringVector : 'Strings',
    TargetKind.Enum         : 'Factor',
    TargetKind.Record       : 'List',
}

HOST_DISPLAY_NAMES = {
    HostType.Null       : 'Null',
    HostType.Logical    : 'Logical',
    HostType.Integer    : 'Integer',
    HostType.Double     : 'Double',
    HostType.String     : 'String',
    HostType.Factor     : 'Factor',
    HostType.List       : 'List',
}


def target_display_name(target: NativeTarget | TargetKind) -> str:
    kind = target.kind if isinstance(target, NativeTarget) else target
    return TARGET_DISPLAY_NAMES[kind]


def host_display_name(actual: HostValue | HostType) -> str:
    host_type = actual.type if isinstance(actual, HostValue) else actual
    return HOST_DISPLAY_NAMES[host_type]


def format_error(expected: NativeTarget | TargetKind, actual: HostValue | HostType) -> str:
    return f'Expected {target_display_name(expected)} got {host_display_name(actual)}'


class ConversionError(ValueError):
    '''A host value could not be converted to its declared native target

    Attributes:
        kind:     failure category
        expected: declared native target
        actual:   variant tag of the offending host value
        detail:   optional reason, appended to the message in parentheses
    '''

    def __init__(self, kind: ErrorKind, expected: NativeTarget, actual: HostValue | HostType, detail: Optional[str] = None):
        self.kind = kind
        self.expected = expected
        self.actual = actual.type if isinstance(actual, HostValue) else actual
        self.detail = detail
        super().__init__(str(self))

    @property
    def message(self) -> str:
        return format_error(self.expected, self.actual)

    def __str__(self) -> str:
        if self.detail:
            return f'{self.message} ({self.detail})'

        return self.message

    def __repr__(self) -> str:
        return f'ConversionError({self.kind}, {self.message!r}, detail = {self.detail!r})'

    def __reduce__(self):
        return (ConversionError, (self.kind, self.expected, self.actual, self.detail))

    def within(self, context: str) -> 'ConversionError':
        '''Copy of this error with context prefixed to the detail

        Used when a value is converted as part of something larger,
        e.g. "argument 'x'" or "field 'name'".
        '''
        detail = f'{context}: {self.detail}' if self.detail else context
        return ConversionError(self.kind, self.expected, self.actual, detail)

    @classmethod
    def type_mismatch(cls, expected: NativeTarget, actual: HostValue | HostType, detail: Optional[str] = None) -> 'ConversionError':
        return cls(ErrorKind.TypeMismatch, expected, actual, detail)

    @classmethod
    def length_mismatch(cls, expected: NativeTarget, actual: HostValue) -> 'ConversionError':
        return cls(ErrorKind.LengthMismatch, expected, actual, 'length != 1')

    @classmethod
    def missing_value(cls, expected: NativeTarget, actual: HostValue, detail: Optional[str] = None) -> 'ConversionError':
        return cls(ErrorKind.MissingValueDisallowed, expected, actual, detail or 'missing value')

    @classmethod
    def invalid_level(cls, expected: NativeTarget, actual: HostValue | HostType, detail: str = 'invalid level') -> 'ConversionError':
        return cls(ErrorKind.InvalidEnumLevel, expected, actual, detail)

    @classmethod
    def out_of_limits(cls, expected: NativeTarget, value: int) -> 'ConversionError':
        # A value that does not fit 32 bits would need a host double
        return cls(ErrorKind.OutOfLimits, expected, HostType.Double, f'{value} outside 32-bit integer range')
