import regex as re
from datetime import date, datetime, time, timedelta
from decimal import Decimal

SORTBY_VERSION = "0.1.0"

# Field names must be public attributes: no leading underscore, no dots.
PUBLIC_NAME_REGEX = re.compile(r'^[a-zA-Z][a-zA-Z0-9_]*$')

TYPES = {
    "str" : str,
    "int" : int,
    "float" : float,
    "bool" : bool,
    "bytes" : bytes,
    "date" : date,
    "datetime" : datetime,
    "time" : time,
    "timedelta" : timedelta,
    "decimal" : Decimal,
}
