from typing import Any, Self

from ..errors import IncomparableFieldError
from .types.direction import DEFAULT_DIRECTION, Direction
from .types.value import compare_values

import logging
logger = logging.getLogger(__name__)


def _runtime_type(a : Any, b : Any) -> Any :
    if type(a) is type(b) :
        return type(a)
    return type(a) | type(b)


class ValueComparator :
    """Compares two values of one field.

    Descending order inverts the natural result for this field only.
    """
    __slots__ = ('field_', 'value_type_', 'direction_')

    def __init__(self, field : str, value_type : Any = Any, direction : Direction = DEFAULT_DIRECTION) :
        self.field_ = field
        self.value_type_ = value_type
        self.direction_ = direction

    @property
    def field(self) -> str :
        return self.field_

    @property
    def value_type(self) -> Any :
        return self.value_type_

    @property
    def direction(self) -> Direction :
        return self.direction_

    def compare(self, a : Any, b : Any) -> int :
        try :
            result = compare_values(a, b)
        except TypeError as e :
            logger.debug(f"Cannot compare {a!r} and {b!r} for field {self.field_}: {e}")
            raise IncomparableFieldError(self.field_, _runtime_type(a, b)) from e

        return result * self.direction_.sign

    def __call__(self, a : Any, b : Any) -> int :
        return self.compare(a, b)

    def inverted(self) -> Self :
        return type(self)(self.field_, self.value_type_, self.direction_.invert())

    def __repr__(self) :
        return f"ValueComparator({self.field_}, {self.direction_.value})"
