'''Native call boundary: signatures, argument marshalling, return encoding'''

from .signature import *
from .call import *

__all__ = [
    'ParamSpec',
    'NativeSignature',
    'SignatureDB',
    'parse_type',
    'TYPE_NAMES',
    'CallBoundary',
    'native_function',
]
