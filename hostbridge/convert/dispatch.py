'''Route a host value to the converter matching its declared target'''

from typing import Any, Optional

from ..values import HostValue
from .targets import NativeTarget, TargetKind
from .scalar import convert_scalar, convert_optional
from .vector import convert_vector
from .factor import convert_enum
from .record import convert_record

__all__ = [
    'convert_value',
]


def convert_value(value: HostValue, target: NativeTarget, widen: Optional[bool] = None) -> Any:
    '''Convert value to target with the scalar, vector, enum or record converter

    Args:
        value:  Host value supplied by the caller
        target: Declared native target
        widen:  Passed to convert_vector for DoubleVector targets
    '''
    if not isinstance(value, HostValue):
        raise ValueError(f'Expected a HostValue, got {type(value).__name__}')

    if target.is_scalar():
        if target.optional:
            return convert_optional(value, target)
        return convert_scalar(value, target)

    if target.is_vector():
        return convert_vector(value, target, widen = widen)

    if target.kind == TargetKind.Enum:
        return convert_enum(value, target)

    return convert_record(value, target, widen = widen)
