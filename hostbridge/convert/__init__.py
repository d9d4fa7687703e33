'''Host value -> native value conversion and the reverse encoding'''

from .targets import *
from .errors import *
from .scalar import *
from .vector import *
from .factor import *
from .record import *
from .dispatch import *
from .encode import *

__all__ = [
    # Targets
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

    # Error Reporter
    'ErrorKind',
    'ConversionError',
    'TARGET_DISPLAY_NAMES',
    'HOST_DISPLAY_NAMES',
    'target_display_name',
    'host_display_name',
    'format_error',

    # Converters
    'convert_scalar',
    'convert_optional',
    'convert_vector',
    'iter_strings',
    'EnumValue',
    'convert_enum',
    'encode_enum',
    'convert_mapping',
    'convert_record',
    'convert_value',

    # Return Encoder
    'encode_value',
    'infer_host_type',
]
