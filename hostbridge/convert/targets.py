'''
Native Targets - declared parameter and return types at a call boundary

A NativeTarget names the native type a value must be converted to. Each
target kind is matched by exactly one host variant; the only cross-variant
pairing is the integer -> double widening.
'''

import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common import *
from ..values import HostType

__all__ = [
    'TargetKind',
    'NativeTarget',
    'enum_labels',
    'BoolScalar',
    'IntScalar',
    'DoubleScalar',
    'StringScalar',
    'BoolVector',
    'IntVector',
    'DoubleVector',
    'StringVector',
]


class TargetKind(IntEnum2):
    '''Kinds of native targets'''
    BoolScalar   = 0
    IntScalar    = 1
    DoubleScalar = 2
    StringScalar = 3
    BoolVector   = 4
    IntVector    = 5
    DoubleVector = 6
    StringVector = 7
    Enum         = 8
    Record       = 9


_SCALAR_KINDS = frozenset({
    TargetKind.BoolScalar,
    TargetKind.IntScalar,
    TargetKind.DoubleScalar,
    TargetKind.StringScalar,
})

_VECTOR_KINDS = frozenset({
    TargetKind.BoolVector,
    TargetKind.IntVector,
    TargetKind.DoubleVector,
    TargetKind.StringVector,
})

# Host variant that matches each target exactly
_ELEMENT_TYPES = {
    TargetKind.BoolScalar   : HostType.Logical,
    TargetKind.IntScalar    : HostType.Integer,
    TargetKind.DoubleScalar : HostType.Double,
    TargetKind.StringScalar : HostType.String,
    TargetKind.BoolVector   : HostType.Logical,
    TargetKind.IntVector    : HostType.Integer,
    TargetKind.DoubleVector : HostType.Double,
    TargetKind.StringVector : HostType.String,
    TargetKind.Enum         : HostType.Factor,
    TargetKind.Record       : HostType.List,
}


def enum_labels(enum_cls: type[enum.Enum]) -> tuple[str, ...]:
    '''Ordered label set of a Python Enum class

    Member declaration order is level order; values are not used.
    '''
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
        raise ValueError(f'{enum_cls!r} is not an Enum class')

    labels = tuple(member.name for member in enum_cls)
    if not labels:
        raise ValueError(f'Enum {enum_cls.__name__} has no members')

    return labels


@dataclass(frozen = True)
class NativeTarget:
    '''Declared native type

    Attributes:
        kind:     target kind
        labels:   ordered allowed labels (Enum only)
        fields:   (name, target) pairs (Record only)
        optional: scalar that also accepts Null / a missing value as None
    '''
    kind: TargetKind
    labels: tuple = ()
    fields: tuple = ()
    optional: bool = False

    def __str__(self) -> str:
        if self.kind == TargetKind.Enum:
            return f'Enum{list(self.labels)!r}'

        if self.kind == TargetKind.Record:
            inner = ', '.join(f'{name}: {target}' for name, target in self.fields)
            return f'Record{{{inner}}}'

        return f'{self.kind.name}?' if self.optional else self.kind.name

    @classmethod
    def enum(cls, labels: 'Sequence[str] | type[enum.Enum]') -> 'NativeTarget':
        '''Create an Enum target from labels or a Python Enum class'''
        if isinstance(labels, type):
            labels = enum_labels(labels)

        if isinstance(labels, str):
            raise ValueError('Enum labels must be a sequence of strings, not a single string')

        labels = tuple(labels)
        if not labels:
            raise ValueError('Enum target needs at least one label')

        if len(set(labels)) != len(labels):
            raise ValueError(f'Duplicate enum labels: {list(labels)}')

        return cls(TargetKind.Enum, labels = labels)

    @classmethod
    def record(cls, fields: dict[str, 'NativeTarget']) -> 'NativeTarget':
        '''Create a Record target from an ordered name -> target mapping'''
        return cls(TargetKind.Record, fields = tuple(fields.items()))

    def as_optional(self) -> 'NativeTarget':
        if not self.is_scalar():
            raise ValueError(f'Only scalar targets can be optional, got {self}')

        return NativeTarget(self.kind, optional = True)

    def is_scalar(self) -> bool:
        return self.kind in _SCALAR_KINDS

    def is_vector(self) -> bool:
        return self.kind in _VECTOR_KINDS

    @property
    def element_type(self) -> HostType:
        '''Host variant that satisfies this target without coercion'''
        return _ELEMENT_TYPES[self.kind]

    def accepts(self, host_type: HostType, widen: bool = False) -> bool:
        '''Check whether values of host_type may be converted to this target

        Args:
            host_type: Variant tag of the host value
            widen:     Allow Integer sources for DoubleVector

        Returns:
            True on an exact variant match, or for the integer -> double
            widening (always for DoubleScalar, only with widen for DoubleVector)
        '''
        if host_type == self.element_type:
            return True

        if host_type == HostType.Integer:
            if self.kind == TargetKind.DoubleScalar:
                return True

            if self.kind == TargetKind.DoubleVector and widen:
                return True

        return False

    def accepts_missing(self, host_type: HostType) -> bool:
        '''Only double vectors carry missing elements through'''
        return self.kind == TargetKind.DoubleVector and host_type == HostType.Double


BoolScalar   = NativeTarget(TargetKind.BoolScalar)
IntScalar    = NativeTarget(TargetKind.IntScalar)
DoubleScalar = NativeTarget(TargetKind.DoubleScalar)
StringScalar = NativeTarget(TargetKind.StringScalar)
BoolVector   = NativeTarget(TargetKind.BoolVector)
IntVector    = NativeTarget(TargetKind.IntVector)
DoubleVector = NativeTarget(TargetKind.DoubleVector)
StringVector = NativeTarget(TargetKind.StringVector)
