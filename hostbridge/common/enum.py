from enum import IntEnum

__all__ = [
    'IntEnum2',
]


class IntEnum2(IntEnum):
    '''IntEnum that prints as its bare member name'''

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()
