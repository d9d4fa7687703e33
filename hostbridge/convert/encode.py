'''
Return Encoder - native values back into host values

Without a declared target the host variant is inferred from the Python
type. Python ints outside the host's 32-bit range become Doubles, as the
host itself stores them; when an integer target is declared they raise
OutOfLimits instead. None stands for a missing element (or Null at the top
level when nothing is declared); a scalar target takes None only when it is
optional. Ready host values are checked against the declared target too.
'''

import enum
from typing import Any, Iterable, Optional

from ..values import *
from .targets import NativeTarget, TargetKind
from .errors import ConversionError
from .factor import EnumValue, convert_enum, encode_enum

__all__ = [
    'encode_value',
    'infer_host_type',
]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_missing(value) -> bool:
    return value is None or value is NA or value is NA_STRING


def _fits_integer(value: int) -> bool:
    # INT_MIN is taken by the missing sentinel
    return INT_MIN < value <= INT_MAX


def infer_host_type(value: Any) -> HostType:
    '''Host variant a native Python value would naturally map to'''
    if isinstance(value, HostValue):
        return value.type

    if value is None:
        return HostType.Null

    if isinstance(value, bool):
        return HostType.Logical

    if _is_int(value):
        return HostType.Integer if _fits_integer(value) else HostType.Double

    if isinstance(value, float):
        return HostType.Double

    if isinstance(value, str):
        return HostType.String

    if isinstance(value, (EnumValue, enum.Enum)):
        return HostType.Factor

    return HostType.List


def _infer_vector(items: list) -> HostValue:
    present = [v for v in items if not _is_missing(v)]

    if all(isinstance(v, bool) for v in present):
        return Logical(items)

    if all(_is_int(v) for v in present):
        if all(_fits_integer(v) for v in present):
            return Integer(items)
        return Double(items)

    if all(_is_int(v) or isinstance(v, float) for v in present):
        return Double(items)

    if all(isinstance(v, str) for v in present):
        return String(items)

    raise ValueError(f'Cannot encode mixed-type sequence {items!r}')


def _infer(value: Any) -> HostValue:
    if isinstance(value, HostValue):
        return value

    if value is None:
        return Null()

    if isinstance(value, bool):
        return Logical([value])

    if _is_int(value):
        return Integer([value]) if _fits_integer(value) else Double([value])

    if isinstance(value, float):
        return Double([value])

    if isinstance(value, str):
        return String([value])

    if isinstance(value, enum.Enum):
        return encode_enum(value, type(value))

    if isinstance(value, EnumValue):
        raise ValueError(f'Encoding {value!r} needs its label set; declare an Enum target')

    if isinstance(value, dict):
        return HostList([_infer(v) for v in value.values()], [str(k) for k in value.keys()])

    if isinstance(value, (list, tuple)):
        return _infer_vector(list(value))

    raise ValueError(f'Cannot encode {type(value).__name__} value {value!r}')


def _check_elements(items: Iterable, target: NativeTarget, accept) -> list:
    items = list(items)
    for item in items:
        if not _is_missing(item) and not accept(item):
            raise ConversionError.type_mismatch(target, infer_host_type(item))

    return items


def _check_int_limits(items: list, target: NativeTarget):
    for item in items:
        if not _is_missing(item) and not _fits_integer(item):
            raise ConversionError.out_of_limits(target, item)


def _encode_declared(value: Any, target: NativeTarget) -> HostValue:
    kind = target.kind

    if kind == TargetKind.Enum:
        if not isinstance(value, (EnumValue, enum.Enum)):
            raise ConversionError.type_mismatch(target, infer_host_type(value))
        return encode_enum(value, target)

    if kind == TargetKind.Record:
        if not isinstance(value, dict):
            raise ConversionError.type_mismatch(target, infer_host_type(value))
        names = [name for name, _ in target.fields]
        items = []
        for name, field_target in target.fields:
            try:
                items.append(_encode_declared(value.get(name), field_target))
            except ConversionError as e:
                raise e.within(f'field {name!r}') from e
        return HostList(items, names)

    if target.is_scalar():
        # A scalar return of None is a missing value of the declared type
        items = [value]
    else:
        if isinstance(value, (str, bytes, dict)) or not isinstance(value, Iterable):
            raise ConversionError.type_mismatch(target, infer_host_type(value))
        items = list(value)

    if kind in (TargetKind.BoolScalar, TargetKind.BoolVector):
        host = Logical(_check_elements(items, target, lambda v: isinstance(v, bool)))

    elif kind in (TargetKind.IntScalar, TargetKind.IntVector):
        items = _check_elements(items, target, _is_int)
        _check_int_limits(items, target)
        host = Integer(items)

    elif kind in (TargetKind.DoubleScalar, TargetKind.DoubleVector):
        host = Double(_check_elements(items, target, lambda v: _is_int(v) or isinstance(v, float)))

    else:
        host = String(_check_elements(items, target, lambda v: isinstance(v, str)))

    if target.is_scalar() and not target.optional and host.is_na_at(0):
        raise ConversionError.missing_value(target, host)

    return host


def _check_host_value(value: HostValue, target: NativeTarget) -> HostValue:
    '''Check a ready host value against the declared target'''
    kind = target.kind

    if kind == TargetKind.Enum:
        if value.type != HostType.Factor:
            raise ConversionError.type_mismatch(target, value)
        # Levels become exactly the declared labels
        return encode_enum(convert_enum(value, target), target)

    if kind == TargetKind.Record:
        if value.type != HostType.List:
            raise ConversionError.type_mismatch(target, value)
        names = [name for name, _ in target.fields]
        items = []
        for name, field_target in target.fields:
            element = value.get(name)
            try:
                items.append(_check_host_value(Null() if element is None else element, field_target))
            except ConversionError as e:
                raise e.within(f'field {name!r}') from e
        return HostList(items, names)

    if target.is_scalar():
        if target.optional and value.is_null():
            return value

        if value.type != target.element_type:
            raise ConversionError.type_mismatch(target, value)

        if len(value) != 1:
            raise ConversionError.length_mismatch(target, value)

        if not target.optional and value.is_na_at(0):
            raise ConversionError.missing_value(target, value)

        return value

    if value.type != target.element_type:
        raise ConversionError.type_mismatch(target, value)

    return value


def encode_value(value: Any, target: Optional[NativeTarget] = None) -> HostValue:
    '''Encode a native value as a fresh host value

    Args:
        value:  bool, int, float, str, None, EnumValue / Enum member,
                list / tuple of scalars, dict of values, or a HostValue
        target: Declared return type; None infers the variant

    Raises:
        ConversionError: value does not match target (TypeMismatch), a
            scalar result is not of length 1 (LengthMismatch) or missing for a
            non-optional target (MissingValueDisallowed), an enum result uses
            an undeclared level (InvalidEnumLevel), or an
            integer does not fit 32 bits (OutOfLimits)
        ValueError: value cannot be encoded at all
    '''
    if target is None:
        return _infer(value)

    if isinstance(value, HostValue):
        return _check_host_value(value, target)

    return _encode_declared(value, target)
