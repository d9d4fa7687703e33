'''
Native Signatures - declared parameter and return targets of native functions

Signatures are written in code or loaded from YAML:

    enums:
      Model: [Mean, Linear, Binomial, Poisson]

    functions:
      fit:
        params:
          - {name: x, type: 'double[]'}
          - {name: model, type: Model}
          - {name: weight, type: 'double?'}
        return: 'double[]'
'''

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from ..convert import *

__all__ = [
    'ParamSpec',
    'NativeSignature',
    'SignatureDB',
    'parse_type',
    'TYPE_NAMES',
]


TYPE_NAMES = {
    'logical'   : BoolScalar,
    'integer'   : IntScalar,
    'double'    : DoubleScalar,
    'string'    : StringScalar,
    'logical[]' : BoolVector,
    'integer[]' : IntVector,
    'double[]'  : DoubleVector,
    'string[]'  : StringVector,
}


def parse_type(type_name: str, enums: Optional[Dict[str, NativeTarget]] = None) -> NativeTarget:
    '''Parse a declared type name

    Args:
        type_name: 'integer', 'double[]', 'string?', or a declared enum name
        enums:     Known enum targets by name

    Returns:
        Matching NativeTarget

    Raises:
        ValueError: unknown type name, or '?' on a non-scalar type
    '''
    if not isinstance(type_name, str):
        raise ValueError(f'Type name must be a string, got {type_name!r}')

    name = type_name.strip()
    optional = name.endswith('?')
    if optional:
        name = name[:-1].strip()

    if name in TYPE_NAMES:
        target = TYPE_NAMES[name]
    elif enums and name in enums:
        target = enums[name]
    else:
        raise ValueError(f'Unknown type {type_name!r}')

    return target.as_optional() if optional else target


@dataclass
class ParamSpec:
    '''Declared parameter'''
    name: str
    target: NativeTarget


@dataclass
class NativeSignature:
    '''Declared parameters and return target of a native function'''
    name: str
    params: List[ParamSpec] = field(default_factory = list)
    returns: Optional[NativeTarget] = None     # None: return value is inferred

    def __post_init__(self):
        seen = set()
        for p in self.params:
            if p.name in seen:
                raise ValueError(f'{self.name}: duplicate parameter {p.name!r}')
            seen.add(p.name)

    @classmethod
    def of(cls, name: str, returns: Optional[NativeTarget] = None, **params: NativeTarget) -> 'NativeSignature':
        '''Build a signature from keyword targets, in keyword order'''
        return cls(name, [ParamSpec(n, t) for n, t in params.items()], returns)

    @property
    def param_names(self) -> List[str]:
        return [p.name for p in self.params]

    def __str__(self) -> str:
        params = ', '.join(f'{p.name}: {p.target}' for p in self.params)
        returns = self.returns if self.returns is not None else 'Any'
        return f'{self.name}({params}) -> {returns}'


class SignatureDB:
    '''Database of native function signatures and enum declarations'''

    def __init__(self):
        self.enums: Dict[str, NativeTarget] = {}
        self.functions: Dict[str, NativeSignature] = {}

    def load_yaml(self, path: str | Path):
        '''Load enums and signatures from YAML file'''
        with open(path, 'r', encoding = 'utf-8') as f:
            data = yaml.safe_load(f)

        self.load_dict(data)

    def load_dict(self, data: Optional[Dict]):
        if not data:
            return

        # Enums first, function types may refer to them
        self._load_enums(data.get('enums', {}))
        self._load_functions(data.get('functions', {}))

    def _load_enums(self, enums_data: Optional[Dict]):
        '''Load enum definitions: name -> ordered label list'''
        if not enums_data:
            return

        for name, labels in enums_data.items():
            if not isinstance(labels, list):
                raise ValueError(f"Enum '{name}' must list its labels")

            self.enums[name] = NativeTarget.enum([str(l) for l in labels])

    def _load_functions(self, funcs_data: Optional[Dict]):
        '''Load function signatures'''
        if not funcs_data:
            return

        for name, sig_data in funcs_data.items():
            self.functions[name] = self._parse_function_sig(name, sig_data or {})

    def _parse_function_sig(self, name: str, data: Dict) -> NativeSignature:
        params = [self._parse_param(name, p) for p in data.get('params') or []]
        returns = data.get('return')
        return NativeSignature(
            name    = name,
            params  = params,
            returns = parse_type(returns, self.enums) if returns is not None else None,
        )

    def _parse_param(self, func_name: str, data: Any) -> ParamSpec:
        if not isinstance(data, dict):
            raise ValueError(f"{func_name}: parameter {data!r} missing type")

        name = data.get('name')
        if not name:
            raise ValueError(f'{func_name}: parameter without name')

        param_type = data.get('type')
        if not param_type:
            raise ValueError(f"{func_name}: parameter '{name}' missing type")

        return ParamSpec(name, parse_type(param_type, self.enums))

    def add(self, signature: NativeSignature):
        self.functions[signature.name] = signature

    def add_enum(self, name: str, labels: Sequence[str] | type) -> NativeTarget:
        '''Declare an enum from labels or a Python Enum class'''
        target = NativeTarget.enum(labels)
        self.enums[name] = target
        return target

    def get_function(self, name: str) -> Optional[NativeSignature]:
        '''Get function signature by name'''
        return self.functions.get(name)

    def get_enum(self, name: str) -> Optional[NativeTarget]:
        return self.enums.get(name)
