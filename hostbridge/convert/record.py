'''
Record Converter - named host lists into mappings and field records

A record target lists (name, target) pairs; each field is looked up by name
in the host list, the way the host's `$` accessor does, and converted with
its own target. An absent field is converted as Null.
'''

from typing import Any, Optional

from ..values import HostType, HostValue, Null
from .targets import NativeTarget, TargetKind
from .errors import ConversionError

__all__ = [
    'convert_mapping',
    'convert_record',
]

_ANY_RECORD = NativeTarget.record({})


def convert_mapping(value: HostValue) -> dict[str, HostValue]:
    '''Convert a host list to a name -> element mapping

    Unnamed elements are keyed by the empty string; for repeated names the
    last element wins.
    '''
    if value.type != HostType.List:
        raise ConversionError.type_mismatch(_ANY_RECORD, value)

    return {name or '': element for name, element in value.items()}


def convert_record(value: HostValue, target: NativeTarget | dict[str, NativeTarget],
                   widen: Optional[bool] = None) -> dict[str, Any]:
    '''Convert a named host list field by field

    Args:
        value:  Host list supplied by the caller
        target: Record target, or a name -> target mapping
        widen:  Passed on to fields with DoubleVector targets

    Returns:
        dict of converted field values in declaration order

    Raises:
        ConversionError: value is not a list, or a field fails to convert;
            the detail names the field
    '''
    from .dispatch import convert_value

    if isinstance(target, dict):
        target = NativeTarget.record(target)

    if target.kind != TargetKind.Record:
        raise ValueError(f'convert_record needs a Record target, got {target}')

    if value.type != HostType.List:
        raise ConversionError.type_mismatch(target, value)

    result = {}
    for name, field_target in target.fields:
        element = value.get(name)
        if element is None:
            element = Null()

        try:
            result[name] = convert_value(element, field_target, widen = widen)
        except ConversionError as e:
            raise e.within(f'field {name!r}') from e

    return result
