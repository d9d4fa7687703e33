'''
Host Value Model - tagged values as produced by the host runtime

Every host value is one of a closed set of variants keyed by HostType.
Element storage is an immutable tuple holding the host's own encoding,
missing elements included (see missing.py). Constructors accept None or NA
as a spelling of "missing" and store the variant's sentinel instead.
'''

import math
from typing import Any, Iterable, Iterator, Optional, Sequence

from ..common import *
from .missing import *

__all__ = [
    'HostType',
    'HostValue',
    'Null',
    'Logical',
    'Integer',
    'Double',
    'String',
    'Factor',
    'HostList',
]


class HostType(IntEnum2):
    '''Variant tags of host values'''
    Null    = 0
    Logical = 1
    Integer = 2
    Double  = 3
    String  = 4
    Factor  = 5
    List    = 6


def _is_missing_input(value) -> bool:
    return value is None or value is NA


def _as_elements(values) -> Iterable:
    # A bare scalar is a length-1 vector
    if isinstance(values, (str, bytes, bool, int, float)) or _is_missing_input(values) or values is NA_STRING:
        return (values,)

    return values


class HostValue(StrictBase):
    '''Base class of all host value variants'''

    TYPE: HostType = None

    values: tuple

    def __init__(self, values: Sequence = ()):
        self.values = tuple(values)

    def __setattr__(self, name, value):
        # Host values are read-only once built
        if name in self.__dict__:
            raise AttributeError(f'{type(self).__name__}.{name} is read-only')

        return super().__setattr__(name, value)

    @property
    def type(self) -> HostType:
        return self.TYPE

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator:
        return iter(self.values)

    def is_null(self) -> bool:
        return self.TYPE == HostType.Null

    def is_na_at(self, index: int) -> bool:
        '''Check whether the element at index is the missing sentinel'''
        return False

    def has_missing(self) -> bool:
        return any(self.is_na_at(i) for i in range(len(self)))

    def is_na(self) -> bool:
        '''True for a length-1 value whose only element is missing'''
        return len(self) == 1 and self.is_na_at(0)

    def _same_element(self, a, b) -> bool:
        return a == b

    def __eq__(self, other) -> bool:
        if not isinstance(other, HostValue) or other.TYPE != self.TYPE:
            return False

        if len(self) != len(other):
            return False

        return all(self._same_element(a, b) for a, b in zip(self.values, other.values))

    def __hash__(self) -> int:
        return hash((self.TYPE, len(self)))

    def _format_element(self, index: int) -> str:
        if self.is_na_at(index):
            return default_na_display()

        return repr(self.values[index])

    def _format_elements(self) -> str:
        limit = default_max_display_elements()
        items = [self._format_element(i) for i in range(min(len(self), limit))]
        if len(self) > limit:
            items.append(f'... +{len(self) - limit}')

        return ', '.join(items)

    def __repr__(self) -> str:
        return f'{self.TYPE.name}([{self._format_elements()}])'


class Null(HostValue):
    '''The host's null object; carries no elements'''

    TYPE = HostType.Null

    def __init__(self):
        super().__init__(())

    def __repr__(self) -> str:
        return 'Null()'


class Logical(HostValue):
    '''Tri-state booleans stored as 1 / 0 / NA_LOGICAL'''

    TYPE = HostType.Logical

    def __init__(self, values: Any = ()):
        elements = []
        for v in _as_elements(values):
            if _is_missing_input(v):
                elements.append(NA_LOGICAL)
            elif isinstance(v, bool):
                elements.append(int(v))
            else:
                raise ValueError(f'Logical element must be bool or missing, got {v!r}')

        super().__init__(elements)

    def is_na_at(self, index: int) -> bool:
        return is_na_logical(self.values[index])

    def _format_element(self, index: int) -> str:
        if self.is_na_at(index):
            return default_na_display()

        return 'True' if self.values[index] else 'False'


class Integer(HostValue):
    '''32-bit integers; INT_MIN is the missing sentinel'''

    TYPE = HostType.Integer

    def __init__(self, values: Any = ()):
        elements = []
        for v in _as_elements(values):
            if _is_missing_input(v):
                elements.append(NA_INTEGER)
            elif isinstance(v, int) and not isinstance(v, bool):
                if not INT_MIN <= v <= INT_MAX:
                    raise ValueError(f'Integer element {v} does not fit in 32 bits')
                elements.append(v)
            else:
                raise ValueError(f'Integer element must be int or missing, got {v!r}')

        super().__init__(elements)

    def is_na_at(self, index: int) -> bool:
        return is_na_integer(self.values[index])


class Double(HostValue):
    '''64-bit floats; the NA_REAL NaN is the missing sentinel'''

    TYPE = HostType.Double

    def __init__(self, values: Any = ()):
        elements = []
        for v in _as_elements(values):
            if _is_missing_input(v):
                elements.append(NA_REAL)
            elif isinstance(v, (int, float)) and not isinstance(v, bool):
                try:
                    elements.append(float(v))
                except OverflowError:
                    raise ValueError(f'Double element {v} is out of float range') from None
            else:
                raise ValueError(f'Double element must be a number or missing, got {v!r}')

        super().__init__(elements)

    def is_na_at(self, index: int) -> bool:
        return is_na_real(self.values[index])

    def _same_element(self, a, b) -> bool:
        # NaNs compare by payload so NA == NA but NA != NaN
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b) and is_na_real(a) == is_na_real(b)

        return a == b


class String(HostValue):
    '''Text elements; NA_STRING marks a missing element'''

    TYPE = HostType.String

    def __init__(self, values: Any = ()):
        elements = []
        for v in _as_elements(values):
            if _is_missing_input(v) or v is NA_STRING:
                elements.append(NA_STRING)
            elif isinstance(v, str):
                elements.append(v)
            else:
                raise ValueError(f'String element must be str or missing, got {v!r}')

        super().__init__(elements)

    def is_na_at(self, index: int) -> bool:
        return is_na_string(self.values[index])


class Factor(HostValue):
    '''Categorical values: 1-based integer codes into an ordered level set

    Factor(['B'], levels = ['A', 'B', 'C']) builds the factor from labels;
    labels not found in levels become missing codes, as the host does.
    Without levels, the sorted unique labels are used.
    '''

    TYPE = HostType.Factor

    levels: tuple

    def __init__(self, labels: Any = (), levels: Optional[Sequence[str]] = None):
        labels = list(_as_elements(labels))
        if levels is None:
            levels = sorted({l for l in labels if isinstance(l, str)})

        levels = self._check_levels(levels)
        index = {label: i + 1 for i, label in enumerate(levels)}

        codes = []
        for label in labels:
            if _is_missing_input(label) or label is NA_STRING:
                codes.append(NA_INTEGER)
            elif isinstance(label, str):
                codes.append(index.get(label, NA_INTEGER))
            else:
                raise ValueError(f'Factor label must be str or missing, got {label!r}')

        super().__init__(codes)
        self.levels = levels

    @classmethod
    def from_codes(cls, codes: Iterable, levels: Sequence[str]) -> 'Factor':
        '''Build a factor directly from 1-based codes'''
        levels = cls._check_levels(levels)
        elements = []
        for code in _as_elements(codes):
            if _is_missing_input(code) or code == NA_INTEGER:
                elements.append(NA_INTEGER)
            elif isinstance(code, int) and not isinstance(code, bool) and 1 <= code <= len(levels):
                elements.append(code)
            else:
                raise ValueError(f'Factor code {code!r} outside 1..{len(levels)}')

        factor = cls.__new__(cls)
        HostValue.__init__(factor, elements)
        factor.levels = levels
        return factor

    @staticmethod
    def _check_levels(levels: Sequence[str]) -> tuple:
        levels = tuple(levels)
        for level in levels:
            if not isinstance(level, str):
                raise ValueError(f'Factor level must be str, got {level!r}')

        if len(set(levels)) != len(levels):
            raise ValueError(f'Duplicate factor levels: {list(levels)}')

        return levels

    @property
    def codes(self) -> tuple:
        return self.values

    def is_na_at(self, index: int) -> bool:
        return is_na_integer(self.values[index])

    def label_at(self, index: int) -> Optional[str]:
        '''Label of the element at index, None when missing'''
        if self.is_na_at(index):
            return None

        return self.levels[self.values[index] - 1]

    def labels(self) -> list[Optional[str]]:
        return [self.label_at(i) for i in range(len(self))]

    def __eq__(self, other) -> bool:
        return super().__eq__(other) and self.levels == other.levels

    def __hash__(self) -> int:
        return hash((self.TYPE, len(self), self.levels))

    def _format_element(self, index: int) -> str:
        label = self.label_at(index)
        return default_na_display() if label is None else repr(label)

    def __repr__(self) -> str:
        return f'Factor([{self._format_elements()}], levels = {list(self.levels)!r})'


class HostList(HostValue):
    '''Generic host list: a sequence of host values with optional names'''

    TYPE = HostType.List

    names: Optional[tuple]

    def __init__(self, values: Sequence[HostValue] = (), names: Optional[Sequence[str]] = None):
        values = tuple(values)
        for v in values:
            if not isinstance(v, HostValue):
                raise ValueError(f'List element must be a HostValue, got {v!r}')

        if names is not None:
            names = tuple(names)
            if len(names) != len(values):
                raise ValueError(f'List has {len(values)} elements but {len(names)} names')

        super().__init__(values)
        self.names = names

    @classmethod
    def from_dict(cls, items: dict) -> 'HostList':
        return cls(list(items.values()), list(items.keys()))

    def get(self, name: str) -> Optional[HostValue]:
        '''First element with the given name, like the host's `$` accessor'''
        if self.names is None:
            return None

        for n, v in zip(self.names, self.values):
            if n == name:
                return v

        return None

    def items(self) -> list[tuple[Optional[str], HostValue]]:
        names = self.names if self.names is not None else (None,) * len(self)
        return list(zip(names, self.values))

    def __eq__(self, other) -> bool:
        return super().__eq__(other) and self.names == other.names

    def __hash__(self) -> int:
        return hash((self.TYPE, len(self)))

    def __repr__(self) -> str:
        parts = []
        for name, value in self.items():
            parts.append(f'{name} = {value!r}' if name is not None else repr(value))

        return f'HostList([{", ".join(parts)}])'
