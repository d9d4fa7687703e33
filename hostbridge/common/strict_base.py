'''
Strict base class that prevents dynamic attribute assignment
'''

import inspect

__all__ = [
    'StrictBase',
]


class StrictBase:
    '''Base class that only allows annotated attributes

    Prevents accidental typos when setting attributes.
    Subclasses must use type annotations to declare allowed attributes;
    annotations are collected along the whole class hierarchy.
    '''
    _allowed_attrs_: frozenset[str]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        allowed = set()
        for klass in cls.__mro__:
            allowed.update(inspect.get_annotations(klass).keys())

        allowed.discard('_allowed_attrs_')
        cls._allowed_attrs_ = frozenset(allowed)

    def __setattr__(self, name, value):
        if name not in self._allowed_attrs_:
            raise AttributeError(f"Unknown attribute {name!r}")

        return object.__setattr__(self, name, value)
