'''
Call Boundary - marshal host arguments into a native function and back

Every argument is converted before the native function runs; the first
failing argument aborts the call with a ConversionError naming it. The
return value is encoded against the declared return target, or inferred.
'''

import logging
from typing import Any, Callable, List, Optional

from ..common import *
from ..values import HostValue
from ..convert import *
from .signature import NativeSignature, ParamSpec

__all__ = [
    'CallBoundary',
    'native_function',
]

logger = logging.getLogger(__name__)


class CallBoundary(StrictBase):
    '''Binds a native callable to its signature

    Attributes:
        signature: declared parameter and return targets
        func:      native implementation, called with converted arguments
        widen:     integer -> double widening for vector arguments (None: config)
    '''

    signature: NativeSignature
    func: Callable
    widen: Optional[bool]

    def __init__(self, signature: NativeSignature, func: Callable, widen: Optional[bool] = None):
        self.signature = signature
        self.func = func
        self.widen = widen

    def bind(self, *args: HostValue, **kwargs: HostValue) -> List[Any]:
        '''Convert host arguments to native values in parameter order

        Raises:
            TypeError: wrong number or names of arguments
            ConversionError: an argument does not convert; detail names it
        '''
        host_args = self._match_arguments(args, kwargs)

        native_args = []
        for param, value in zip(self.signature.params, host_args):
            native_args.append(self._convert_argument(param, value))

        return native_args

    def _match_arguments(self, args: tuple, kwargs: dict) -> List[HostValue]:
        params = self.signature.params
        if len(args) > len(params):
            raise TypeError(f'{self.signature.name}() takes {len(params)} arguments but {len(args)} were given')

        matched = list(args)
        for param in params[len(args):]:
            if param.name not in kwargs:
                raise TypeError(f'{self.signature.name}() missing argument {param.name!r}')
            matched.append(kwargs.pop(param.name))

        if kwargs:
            raise TypeError(f'{self.signature.name}() got unexpected arguments {sorted(kwargs)}')

        return matched

    def _convert_argument(self, param: ParamSpec, value: HostValue) -> Any:
        try:
            native = convert_value(value, param.target, widen = self.widen)

        except ConversionError as e:
            logger.info(f'{self.signature.name}: rejected argument {param.name!r}: {e}')
            raise e.within(f'argument {param.name!r}') from e

        logger.debug(f'{self.signature.name}: {param.name} = {value!r} -> {param.target}')
        return native

    def finish(self, result: Any) -> HostValue:
        '''Encode the native return value for the host'''
        try:
            return encode_value(result, self.signature.returns)

        except ConversionError as e:
            raise e.within(f'return value of {self.signature.name}') from e

    def __call__(self, *args: HostValue, **kwargs: HostValue) -> HostValue:
        native_args = self.bind(*args, **kwargs)
        return self.finish(self.func(*native_args))

    @property
    def name(self) -> str:
        return self.signature.name

    def __repr__(self) -> str:
        return f'CallBoundary({self.signature})'


def native_function(signature: Optional[NativeSignature] = None, *, returns: Optional[NativeTarget] = None,
                    widen: Optional[bool] = None, **params: NativeTarget) -> Callable[[Callable], CallBoundary]:
    '''Decorator wrapping a Python function in a CallBoundary

    Either pass a full signature, or the parameter targets as keywords:

        @native_function(x = DoubleVector, model = NativeTarget.enum(Model), returns = DoubleScalar)
        def fit(x, model):
            ...
    '''
    def decorate(func: Callable) -> CallBoundary:
        sig = signature
        if sig is None:
            sig = NativeSignature.of(func.__name__, returns = returns, **params)

        elif params or returns is not None:
            raise ValueError('Pass either a signature or keyword targets, not both')

        return CallBoundary(sig, func, widen = widen)

    return decorate
