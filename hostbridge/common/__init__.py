'''Shared helpers - configuration, display enums, strict attribute classes'''

from .config import *
from .enum import *
from .strict_base import *

__all__ = [
    # Configuration
    'Config',
    'get_config',
    'init_config',
    'default_integer_vector_widening',
    'default_na_display',
    'default_max_display_elements',

    # Base classes
    'IntEnum2',
    'StrictBase',
]
