from collections import OrderedDict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeAlias
import threading

import logging
logger = logging.getLogger(__name__)

FieldTable : TypeAlias = Mapping[str, Any]

DEFAULT_MAX_SIZE = 256


@dataclass
class CacheStats :
    hits : int = 0
    misses : int = 0
    evictions : int = 0
    size : int = 0
    types : int = 0

class SchemaCache :
    """
    Field tables keyed by record type, least recently used evicted first.

    A table is loaded once per record type and is read-only afterwards.
    Lookups read the dict without waiting on the lock. Loading, eviction and
    the recency bookkeeping happen under the lock; a hit that finds the lock
    busy skips the bookkeeping, so `hits` is a lower bound when many threads
    read at once. `misses` and `evictions` are exact.
    """
    def __init__(self, max_size : int = DEFAULT_MAX_SIZE) :
        if max_size < 1 :
            raise ValueError(f"Cache size must be positive, got {max_size}")
        self.max_size = max_size
        self.tables : OrderedDict[Any, FieldTable] = OrderedDict()
        self._lock = threading.Lock()
        self._stats = CacheStats(size = max_size)

    @property
    def stats(self) -> CacheStats :
        with self._lock :
            self._stats.types = len(self.tables)
            # return a copy.
            return CacheStats(**self._stats.__dict__)

    def _touch(self, record_type : Any) :
        if not self._lock.acquire(blocking=False) :
            return
        try :
            self._stats.hits += 1
            if record_type in self.tables :
                self.tables.move_to_end(record_type)
        finally :
            self._lock.release()

    def get(self, record_type : Any, loader : Callable[[Any], Mapping[str, Any]]) -> FieldTable :
        table = self.tables.get(record_type)
        if table is not None :
            self._touch(record_type)
            return table

        with self._lock :
            table = self.tables.get(record_type)
            if table is not None :
                self._stats.hits += 1
                self.tables.move_to_end(record_type)
                return table

            self._stats.misses += 1
            logger.debug(f"Loading field table for {record_type}")
            table = MappingProxyType(dict(loader(record_type)))
            self.tables[record_type] = table
            while len(self.tables) > self.max_size :
                evicted, _ = self.tables.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Evicted field table for {evicted}")

        return table

    def clear(self) :
        with self._lock :
            self.tables = OrderedDict()
