'''
Enum/Factor Converter - closed enumerations <-> host factors

Inbound, only a length-1 Factor whose levels all belong to the allowed
label set is accepted; a bare Integer code is never read as categorical.
Outbound, an enum value becomes a length-1 Factor carrying the full label
set in declaration order.
'''

import enum
from dataclasses import dataclass
from typing import Sequence, Union

from ..values import HostType, HostValue, Factor
from .targets import NativeTarget, TargetKind, enum_labels
from .errors import ConversionError

__all__ = [
    'EnumValue',
    'convert_enum',
    'encode_enum',
    'enum_labels',
]


@dataclass(frozen = True)
class EnumValue:
    '''A native closed-enumeration value, identified by its label'''
    label: str

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_member(cls, member: enum.Enum) -> 'EnumValue':
        return cls(member.name)

    def to_member(self, enum_cls: type[enum.Enum]) -> enum.Enum:
        '''Look up the Python Enum member with this label'''
        try:
            return enum_cls[self.label]
        except KeyError:
            raise ValueError(f'{enum_cls.__name__} has no member {self.label!r}') from None


LabelSet = Union[Sequence[str], type[enum.Enum], NativeTarget]


def _enum_target(allowed_labels: LabelSet) -> NativeTarget:
    if isinstance(allowed_labels, NativeTarget):
        if allowed_labels.kind != TargetKind.Enum:
            raise ValueError(f'Expected an Enum target, got {allowed_labels}')

        return allowed_labels

    return NativeTarget.enum(allowed_labels)


def convert_enum(value: HostValue, allowed_labels: LabelSet) -> EnumValue:
    '''Convert a scalar host factor to an enum value

    Args:
        value:          Host value supplied by the caller
        allowed_labels: Ordered label set, a Python Enum class or an Enum target

    Returns:
        EnumValue of the selected label

    Raises:
        ConversionError: InvalidEnumLevel when value is not a factor, is not
            of length 1, or uses a level outside allowed_labels;
            MissingValueDisallowed when the selected code is missing
    '''
    target = _enum_target(allowed_labels)

    if value.type != HostType.Factor:
        raise ConversionError.invalid_level(target, value, 'not a factor')

    if len(value) != 1:
        raise ConversionError.invalid_level(target, value, 'length != 1')

    allowed = set(target.labels)
    for level in value.levels:
        if level not in allowed:
            raise ConversionError.invalid_level(target, value, f'invalid level {level!r}')

    if value.is_na_at(0):
        raise ConversionError.missing_value(target, value)

    label = value.label_at(0)
    if label not in allowed:
        raise ConversionError.invalid_level(target, value, f'invalid level {label!r}')

    return EnumValue(label)


def encode_enum(value: Union[EnumValue, enum.Enum], label_set: LabelSet) -> Factor:
    '''Encode an enum value as a length-1 host factor

    The factor's levels are exactly label_set, in order, so that
    convert_enum(encode_enum(v, labels), labels) == v.
    '''
    target = _enum_target(label_set)

    if isinstance(value, enum.Enum):
        value = EnumValue.from_member(value)

    if value.label not in target.labels:
        raise ConversionError.invalid_level(target, HostType.Factor, f'invalid level {value.label!r}')

    return Factor.from_codes([target.labels.index(value.label) + 1], target.labels)
