'''
hostbridge - marshal values between a dynamic host runtime and native code

Host values (Null, Logical, Integer, Double, String, Factor, HostList) are
converted to the native targets a function declares, or rejected with a
ConversionError reading "Expected <target> got <actual>".
'''

from . import values, convert, boundary
from .common import Config, get_config, init_config
from .values import *
from .convert import *
from .boundary import *

__version__ = '0.1.0'

__all__ = [
    'Config',
    'get_config',
    'init_config',
    *values.__all__,
    *convert.__all__,
    *boundary.__all__,
]
