"""Schemas for mapping records.

Attribute records (dataclasses, named tuples, classes with properties)
carry their own field declarations. Dict rows do not, so they are described
by a Schema: an ordered tuple of FieldSpec, one per column.
"""
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, NamedTuple, Self, get_type_hints

from ..globals import TYPES

import logging
logger = logging.getLogger(__name__)


class FieldSpec(NamedTuple) :
    name : str
    type : Any

def cspec(name : str, type : Any = Any) -> FieldSpec :
    return FieldSpec(name, type)


class Schema :
    def __init__(self, fields : Iterable[FieldSpec]) :
        self.orig_spec = tuple(fields)
        self.fields : tuple[FieldSpec, ...] = self._reform_spec()

    def _reform_spec(self) -> tuple[FieldSpec, ...] :
        retval = []
        nameset = set()
        for s in self.orig_spec :
            if s.name in nameset :
                raise ValueError(f"Duplicate field name {s.name} in schema")
            nameset.add(s.name)

            field_type = s.type
            if isinstance(field_type, str) :
                if field_type not in TYPES :
                    raise ValueError(f"Invalid type {field_type} for field {s.name}")
                field_type = TYPES[field_type]

            retval.append(FieldSpec(s.name, field_type))

        return tuple(retval)

    #################################################################
    # Public API
    #################################################################
    @classmethod
    def infer(cls, rows : Iterable[Mapping[str, Any]]) -> Self :
        """Build a schema from the keys of the rows.

        A field whose non-null values all share one type gets that type,
        anything else is typed Any.
        """
        seen : dict[str, set[type]] = {}
        for row in rows :
            for key, value in row.items() :
                if not isinstance(key, str) :
                    continue
                value_types = seen.setdefault(key, set())
                if value is not None :
                    value_types.add(type(value))

        fields = []
        for name, value_types in seen.items() :
            field_type = value_types.pop() if len(value_types) == 1 else Any
            fields.append(FieldSpec(name, field_type))

        logger.debug(f"Inferred schema {fields}")
        return cls(fields)

    @classmethod
    def from_typed_dict(cls, typed_dict : type) -> Self :
        return cls(FieldSpec(n, t) for n, t in get_type_hints(typed_dict).items())

    def spec_for_field(self, name : str) -> FieldSpec | None :
        spec = [x for x in self.fields if x.name == name]
        if len(spec) != 1 :
            return None
        return spec[0]

    def field_names(self) -> list[str] :
        return [x.name for x in self.fields]

    def __iter__(self) -> Iterator[FieldSpec] :
        return iter(self.fields)

    def __len__(self) :
        return len(self.fields)

    # Equal schemas share one entry in the resolver cache.
    def __eq__(self, other) :
        if isinstance(other, Schema) :
            return self.fields == other.fields
        return False

    def __hash__(self) :
        return hash(self.fields)

    def __repr__(self) :
        return f"Schema({list(self.fields)})"
