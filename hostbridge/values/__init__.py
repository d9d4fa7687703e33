'''Host values and their missing-value sentinels'''

from .missing import *
from .host import *

__all__ = [
    # Missingness
    'INT_MIN',
    'INT_MAX',
    'NA_INTEGER',
    'NA_LOGICAL',
    'NA_REAL',
    'NA_REAL_BITS',
    'NA_STRING',
    'NA',
    'double_bits',
    'double_from_bits',
    'is_na_integer',
    'is_na_logical',
    'is_na_real',
    'is_na_string',
    'is_missing_double',

    # Host values
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
