from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Iterator, Self

from .parser import format_spec, parse
from .lib.cache import SchemaCache
from .lib.chain import CompositeComparator, OrderChain
from .lib.resolver import FieldResolver
from .lib.schema import Schema
from .lib.types.direction import DEFAULT_DIRECTION, Direction, as_direction
from .lib.types.sort_token import SortToken

import logging
logger = logging.getLogger(__name__)


class OrderedSequence(Sequence) :
    """The result of `order()`.

    Sorting happens on first access and is done only once. More keys can
    be appended with `then_by()`, which returns a new OrderedSequence.
    """
    def __init__(self, source : Iterable[Any],
                 comparator : CompositeComparator,
                 record_type : Any = None, *,
                 resolver : FieldResolver) :
        self.source_ = source
        self.comparator_ = comparator
        self.record_type_ = record_type
        self.resolver_ = resolver
        self.buffer_ : Sequence[Any] | None = source if isinstance(source, Sequence) else None
        self.sorted_ : Sequence[Any] | None = None

    def _rows(self) -> Sequence[Any] :
        if self.buffer_ is None :
            logger.debug(f"Buffering {type(self.source_).__name__} input")
            self.buffer_ = list(self.source_)
        return self.buffer_

    def _sorted(self) -> Sequence[Any] :
        if self.sorted_ is None :
            rows = self._rows()
            if self.comparator_.is_identity :
                self.sorted_ = rows
            else :
                logger.debug(f"Sorting {len(rows)} rows by '{format_spec(self.keys)}'")
                self.sorted_ = self.comparator_.sort(rows)
        return self.sorted_

    def _extend(self, tokens : Iterable[SortToken]) -> Self :
        record_type = self.record_type
        if record_type is None :
            # No rows, nothing to resolve against.
            return self

        rows = self._rows()
        sample = rows[0] if len(rows) > 0 else None

        chain = OrderChain(self.comparator_.keys)
        for token in tokens :
            accessor = self.resolver_.resolve(record_type, token.field, sample=sample)
            if accessor is None :
                continue
            chain.add(accessor, token.direction)

        return type(self)(rows, chain.build(), record_type, resolver=self.resolver_)

    #################################################################
    # Public API
    #################################################################
    @property
    def source(self) -> Iterable[Any] :
        return self.source_

    @property
    def comparator(self) -> CompositeComparator :
        return self.comparator_

    @property
    def keys(self) -> tuple[SortToken, ...] :
        return self.comparator_.tokens

    @property
    def is_ordered(self) -> bool :
        return not self.comparator_.is_identity

    @property
    def record_type(self) -> Any :
        if self.record_type_ is None :
            rows = self._rows()
            if len(rows) == 0 :
                return None
            first = rows[0]
            if isinstance(first, Mapping) :
                self.record_type_ = Schema.infer(rows)
            else :
                self.record_type_ = type(first)
        return self.record_type_

    def then_by(self, field : str, direction : Direction | str = DEFAULT_DIRECTION) -> Self :
        return self._extend((SortToken(field, as_direction(direction)),))

    def then_by_descending(self, field : str) -> Self :
        return self.then_by(field, Direction.DESCENDING)

    def then_by_spec(self, spec : str | None, default_direction : Direction | str = DEFAULT_DIRECTION) -> Self :
        tokens = parse(spec, default_direction)
        if not tokens :
            return self
        return self._extend(tokens)

    def to_list(self) -> list[Any] :
        return list(self._sorted())

    def __iter__(self) -> Iterator[Any] :
        return iter(self._sorted())

    def __len__(self) :
        return len(self._sorted())

    def __getitem__(self, index) :
        return self._sorted()[index]

    def __repr__(self) :
        return f"OrderedSequence('{format_spec(self.keys)}')"


def order(data : Iterable[Any],
          spec : str | None,
          default_direction : Direction | str = DEFAULT_DIRECTION, *,
          record_type : Any = None,
          ignore_case : bool = False,
          cache : SchemaCache | None = None) -> OrderedSequence :
    """Order `data` by a sort spec such as "last_name desc, age".

    Keys apply in spec order: the first is the primary key, later ones
    break ties. Unknown fields and unknown direction words are ignored.
    An empty spec leaves the input order alone.

    `record_type` is the class of the records, or a Schema for mapping
    rows. It defaults to the type of the first record.
    """
    resolver = FieldResolver(cache, ignore_case=ignore_case)
    result = OrderedSequence(data, CompositeComparator(), record_type, resolver=resolver)

    tokens = parse(spec, default_direction)
    if not tokens :
        logger.debug("Empty sort spec, keeping input order")
        return result

    return result._extend(tokens)
