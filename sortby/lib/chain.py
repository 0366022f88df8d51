from functools import cmp_to_key
from typing import Any, Callable, Iterable, NamedTuple, Self

from ..errors import IncomparableFieldError
from .comparator import ValueComparator
from .resolver import FieldAccessor
from .types.direction import Direction
from .types.sort_token import SortToken
from .types.value import is_orderable

import logging
logger = logging.getLogger(__name__)


class SortKey(NamedTuple) :
    accessor : FieldAccessor
    comparator : ValueComparator

    @classmethod
    def create(cls, accessor : FieldAccessor, direction : Direction) -> Self :
        if not is_orderable(accessor.value_type) :
            raise IncomparableFieldError(accessor.name, accessor.value_type)
        return cls(accessor, ValueComparator(accessor.name, accessor.value_type, direction))

    @property
    def direction(self) -> Direction :
        return self.comparator.direction

    @property
    def token(self) -> SortToken :
        return SortToken(self.accessor.name, self.comparator.direction)

    def compare(self, a : Any, b : Any) -> int :
        return self.comparator.compare(self.accessor.get_value(a), self.accessor.get_value(b))


class CompositeComparator :
    """Compares two records key by key.

    The first key that does not compare equal decides. Without keys every
    pair of records compares equal.
    """
    __slots__ = ('keys_',)

    def __init__(self, keys : Iterable[SortKey] = ()) :
        self.keys_ : tuple[SortKey, ...] = tuple(keys)

    def __call__(self, a : Any, b : Any) -> int :
        for key in self.keys_ :
            result = key.compare(a, b)
            if result != 0 :
                return result
        return 0

    @property
    def keys(self) -> tuple[SortKey, ...] :
        return self.keys_

    @property
    def tokens(self) -> tuple[SortToken, ...] :
        return tuple(k.token for k in self.keys_)

    @property
    def is_identity(self) -> bool :
        return len(self.keys_) == 0

    def then(self, key : SortKey) -> 'CompositeComparator' :
        return CompositeComparator((*self.keys_, key))

    def sort_key(self) -> Callable[[Any], Any] :
        return cmp_to_key(self)

    def sort(self, rows : Iterable[Any]) -> list[Any] :
        # sorted() is stable, equal records keep their input order.
        return sorted(rows, key=self.sort_key())

    def __repr__(self) :
        return f"CompositeComparator({', '.join(str(t) for t in self.tokens)})"


class OrderChain :
    """Builds a CompositeComparator one key at a time.

    The first key added is the primary order, each later key only breaks
    ties left by the keys before it.
    """
    def __init__(self, keys : Iterable[SortKey] = ()) :
        self.keys : list[SortKey] = list(keys)

    @property
    def has_ordered(self) -> bool :
        return len(self.keys) > 0

    def add(self, accessor : FieldAccessor, direction : Direction) -> Self :
        key = SortKey.create(accessor, direction)
        if self.has_ordered :
            logger.debug(f"Then by {key.token}")
        else :
            logger.debug(f"Order by {key.token}")
        self.keys.append(key)
        return self

    def build(self) -> CompositeComparator :
        return CompositeComparator(self.keys)
