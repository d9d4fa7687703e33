'''
Vector Converter - extract a homogeneous native list from a host vector

Any length is accepted, zero included. Missing elements fail the conversion
for Logical, Integer and String sources; Double sources keep them as the
NA_REAL missing-double marker.
'''

from typing import Iterator, Optional

from ..common import default_integer_vector_widening
from ..values import HostType, HostValue
from .targets import NativeTarget, TargetKind, StringVector
from .errors import ConversionError

__all__ = [
    'convert_vector',
    'iter_strings',
]


_ELEMENT_CONVERTERS = {
    TargetKind.BoolVector   : bool,
    TargetKind.IntVector    : int,
    TargetKind.DoubleVector : float,
    TargetKind.StringVector : str,
}


def convert_vector(value: HostValue, target: NativeTarget, widen: Optional[bool] = None) -> list:
    '''Convert a host vector to a native list

    Args:
        value:  Host value supplied by the caller
        target: One of the vector targets
        widen:  Accept Integer sources for DoubleVector; None reads the
                integer_vector_widening config key

    Returns:
        A new list with the host value's length and element order

    Raises:
        ConversionError: TypeMismatch or MissingValueDisallowed
        ValueError: target is not a vector target
    '''
    if not target.is_vector():
        raise ValueError(f'convert_vector needs a vector target, got {target}')

    if widen is None:
        widen = default_integer_vector_widening()

    if not target.accepts(value.type, widen = widen):
        raise ConversionError.type_mismatch(target, value)

    if not target.accepts_missing(value.type):
        for i in range(len(value)):
            if value.is_na_at(i):
                raise ConversionError.missing_value(target, value, f'element {i + 1} is missing')

    convert = _ELEMENT_CONVERTERS[target.kind]
    return [convert(v) for v in value.values]


def iter_strings(value: HostValue) -> Iterator[Optional[str]]:
    '''Iterate the text of a String vector or the labels of a Factor

    Missing elements are yielded as None.
    '''
    if value.type == HostType.String:
        for i, v in enumerate(value.values):
            yield None if value.is_na_at(i) else v

    elif value.type == HostType.Factor:
        yield from value.labels()

    else:
        raise ConversionError.type_mismatch(StringVector, value)
