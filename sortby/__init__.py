"""This is sortby.

sortby orders sequences of records by a client supplied sort spec such as
"last_name desc, age".
"""

from .globals import SORTBY_VERSION
__version__ = SORTBY_VERSION

from .errors import IncomparableFieldError
from .lib.types.direction import Direction
from .lib.types.sort_token import SortToken
from .lib.schema import FieldSpec, Schema, cspec
from .lib.resolver import FieldAccessor, FieldResolver
from .lib.chain import CompositeComparator, OrderChain
from .parser import parse, format_spec
from .ordering import OrderedSequence, order

__all__ = [
    "Direction", "SortToken",
    "FieldSpec", "Schema", "cspec",
    "FieldAccessor", "FieldResolver",
    "CompositeComparator", "OrderChain",
    "IncomparableFieldError",
    "parse", "format_spec",
    "OrderedSequence", "order",
]
