'''
Scalar Converter - extract a single native value from a length-1 host value

Checks run in a fixed order: null, length, variant, missing. A host value
therefore reports LengthMismatch for length 0 or >1 whatever its variant.
Double never narrows to integer, even when the value is integral.
'''

from typing import Any, Callable

from ..values import HostType, HostValue
from .targets import NativeTarget, TargetKind
from .errors import ConversionError

__all__ = [
    'convert_scalar',
    'convert_optional',
]


_EXTRACTORS: dict[TargetKind, Callable[[Any], Any]] = {
    TargetKind.BoolScalar   : bool,
    TargetKind.IntScalar    : int,
    TargetKind.DoubleScalar : float,    # Integer sources are promoted here
    TargetKind.StringScalar : str,
}


def convert_scalar(value: HostValue, target: NativeTarget) -> bool | int | float | str:
    '''Convert a length-1 host value to a native scalar

    Args:
        value:  Host value supplied by the caller
        target: One of the scalar targets

    Returns:
        bool, int, float or str, independent of the host value

    Raises:
        ConversionError: TypeMismatch, LengthMismatch or MissingValueDisallowed
        ValueError: target is not a scalar target
    '''
    if not target.is_scalar():
        raise ValueError(f'convert_scalar needs a scalar target, got {target}')

    if value.type == HostType.Null:
        raise ConversionError.type_mismatch(target, value)

    if len(value) != 1:
        raise ConversionError.length_mismatch(target, value)

    if not target.accepts(value.type):
        raise ConversionError.type_mismatch(target, value)

    if value.is_na_at(0):
        raise ConversionError.missing_value(target, value)

    return _EXTRACTORS[target.kind](value.values[0])


def convert_optional(value: HostValue, target: NativeTarget) -> bool | int | float | str | None:
    '''Like convert_scalar, but Null or a single missing value gives None'''
    if value.type == HostType.Null or value.is_na():
        return None

    return convert_scalar(value, target)
