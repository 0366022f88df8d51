from dataclasses import InitVar, dataclass
from functools import cached_property
from operator import attrgetter
from types import MemberDescriptorType
from typing import Any, Callable, Collection, Mapping, get_type_hints
import inspect

from ..globals import PUBLIC_NAME_REGEX
from .cache import SchemaCache
from .schema import Schema
from .types.value import is_nullable, strip_qualifiers

import logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldAccessor :
    name : str
    value_type : Any
    getter : Callable[[Any], Any]

    def get_value(self, record : Any) -> Any :
        return self.getter(record)

    @property
    def nullable(self) -> bool :
        return is_nullable(self.value_type)


def _is_public(name : str) -> bool :
    return PUBLIC_NAME_REGEX.match(name) is not None

def _mapping_getter(name : str) -> Callable[[Any], Any] :
    def getter(row : Mapping[str, Any]) -> Any :
        return row.get(name)
    return getter

def _class_hints(record_type : type) -> dict[str, Any] :
    try :
        return get_type_hints(record_type)
    except (NameError, TypeError) as e :
        # Unresolvable forward references. Keep the raw annotations, the
        # values get checked when they are compared.
        logger.debug(f"Falling back to raw annotations for {record_type}: {e}")
        hints : dict[str, Any] = {}
        for klass in reversed(record_type.__mro__) :
            hints.update(inspect.get_annotations(klass))
        return hints

def _return_hint(func : Callable) -> Any :
    try :
        return get_type_hints(func).get("return", Any)
    except (NameError, TypeError) :
        return inspect.get_annotations(func).get("return", Any)

def _attribute_getter(name : str) -> Callable[[Any], Any] :
    # Instance attributes may be missing on some records, they read as None.
    def getter(record : Any) -> Any :
        return getattr(record, name, None)
    return getter

def _load_fields(record_type : Any) -> dict[str, FieldAccessor] :
    if isinstance(record_type, Schema) :
        return { s.name : FieldAccessor(s.name, s.type, _mapping_getter(s.name))
                 for s in record_type if _is_public(s.name) }

    if not isinstance(record_type, type) :
        raise ValueError(f"Invalid record type {record_type!r}")

    annotated : dict[str, FieldAccessor] = {}
    for name, hint in _class_hints(record_type).items() :
        if not _is_public(name) or isinstance(hint, InitVar) :
            continue
        annotated[name] = FieldAccessor(name, strip_qualifiers(hint), attrgetter(name))

    fields = dict(annotated)

    # collections.namedtuple carries no annotations.
    for name in getattr(record_type, "_fields", ()) :
        if _is_public(name) and name not in fields :
            fields[name] = FieldAccessor(name, Any, attrgetter(name))

    # Names whose accessor came from a property, a later class may shadow them.
    from_property : set[str] = set()

    for klass in reversed(record_type.__mro__) :
        for name, member in vars(klass).items() :
            if not _is_public(name) :
                continue
            if isinstance(member, property) and member.fget is not None :
                fields[name] = FieldAccessor(name, _return_hint(member.fget), attrgetter(name))
                from_property.add(name)
            elif isinstance(member, cached_property) :
                fields[name] = FieldAccessor(name, _return_hint(member.func), attrgetter(name))
                from_property.add(name)
            elif isinstance(member, MemberDescriptorType) :
                # __slots__ entry
                fields[name] = annotated.get(name, FieldAccessor(name, Any, attrgetter(name)))
                from_property.discard(name)
            elif name in from_property :
                logger.debug(f"{klass.__qualname__}.{name} shadows an inherited property")
                from_property.discard(name)
                if name in annotated :
                    fields[name] = annotated[name]
                else :
                    del fields[name]

    return fields

_DEFAULT_CACHE = SchemaCache()

def default_cache() -> SchemaCache :
    return _DEFAULT_CACHE


class FieldResolver :
    """Turns field names into accessors for one kind of record.

    `record_type` is either a class or a Schema describing mapping rows.
    """
    def __init__(self, cache : SchemaCache | None = None, *, ignore_case : bool = False) :
        self.cache = cache if cache is not None else _DEFAULT_CACHE
        self.ignore_case = ignore_case

    def fields(self, record_type : Any) -> Mapping[str, FieldAccessor] :
        return self.cache.get(record_type, _load_fields)

    def _match(self, names : Collection[str], field_name : str) -> str | None :
        if field_name in names :
            return field_name
        if self.ignore_case :
            folded = field_name.casefold()
            return next((n for n in names if n.casefold() == folded), None)
        return None

    def _instance_field(self, record_type : Any, sample : Any, field_name : str) -> FieldAccessor | None :
        """Look for a plain instance attribute on a sample record.

        Only used for records of exactly `record_type` whose class does not
        declare the field. The type is unknown, values are checked when
        compared.
        """
        if isinstance(record_type, Schema) or type(sample) is not record_type :
            return None
        attributes = getattr(sample, "__dict__", None)
        if attributes is None :
            return None

        name = self._match([n for n in attributes if _is_public(n)], field_name)
        if name is None :
            return None
        logger.debug(f"Field {name} found as an instance attribute of {record_type}")
        return FieldAccessor(name, Any, _attribute_getter(name))

    def resolve(self, record_type : Any, field_name : str, sample : Any = None) -> FieldAccessor | None :
        """Accessor for `field_name` on `record_type`, or None.

        `sample` is a record of that type. Plain classes declare nothing, so
        their instance attributes are looked up on it.
        """
        if not _is_public(field_name) :
            logger.debug(f"'{field_name}' is not a public field name")
            return None

        table = self.fields(record_type)
        name = self._match(table, field_name)
        accessor = table[name] if name is not None else None

        if accessor is None and sample is not None :
            accessor = self._instance_field(record_type, sample, field_name)

        if accessor is None :
            logger.debug(f"Field {field_name} not found on {record_type}")

        return accessor
