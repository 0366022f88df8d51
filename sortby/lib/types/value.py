import math
import types
import typing
from decimal import Decimal
from typing import Any, ClassVar, Final, ForwardRef, TypeVar, Union, get_args, get_origin

# These define rich comparison (or inherit it from object) without having
# a total order.
UNORDERED_TYPES = (dict, complex, set, frozenset, type(None))

_QUALIFIERS = (ClassVar, Final, typing.Annotated)


def strip_qualifiers(value_type : Any) -> Any :
    """Remove ClassVar[], Final[] and Annotated[] wrappers."""
    while get_origin(value_type) in _QUALIFIERS :
        args = get_args(value_type)
        if len(args) == 0 :
            return Any
        value_type = args[0]
    return value_type

def type_name(value_type : Any) -> str :
    if isinstance(value_type, str) :
        return value_type
    if isinstance(value_type, type) and get_origin(value_type) is None :
        return value_type.__qualname__
    return repr(value_type).replace("typing.", "")

def is_nullable(value_type : Any) -> bool :
    value_type = strip_qualifiers(value_type)
    if value_type is Any or value_type is None :
        return True
    origin = get_origin(value_type)
    if origin is Union or origin is types.UnionType :
        return type(None) in get_args(value_type)
    return False

def is_orderable(value_type : Any) -> bool :
    """Does the declared type have a natural ordering?

    Types that cannot be checked ahead of time (Any, type variables,
    unresolved forward references) are reported as orderable. Their values
    are checked when they are actually compared.
    """
    value_type = strip_qualifiers(value_type)

    if value_type is Any or isinstance(value_type, (TypeVar, str, ForwardRef)) :
        return True

    origin = get_origin(value_type)
    if origin is Union or origin is types.UnionType :
        members = [m for m in get_args(value_type) if m is not type(None)]
        return len(members) > 0 and all(is_orderable(m) for m in members)

    if origin is typing.Literal :
        return all(is_orderable(type(v)) for v in get_args(value_type))

    if origin is not None :
        value_type = origin

    if not isinstance(value_type, type) :
        return True

    if value_type is object or issubclass(value_type, UNORDERED_TYPES) :
        return False

    return getattr(value_type, "__lt__", None) is not object.__lt__

def _is_nan(value : Any) -> bool :
    if isinstance(value, float) :
        return math.isnan(value)
    if isinstance(value, Decimal) :
        return value.is_nan()
    return False

def compare_values(a : Any, b : Any) -> int :
    """Natural order of two values, None first, then NaN.

    NaN equals NaN and is lower than every number. Otherwise only `<` is
    used. Raises TypeError for values that cannot be ordered.
    """
    if a is None :
        return 0 if b is None else -1
    if b is None :
        return 1
    a_nan = _is_nan(a)
    b_nan = _is_nan(b)
    if a_nan or b_nan :
        return int(b_nan) - int(a_nan)
    if a < b :
        return -1
    if b < a :
        return 1
    return 0
