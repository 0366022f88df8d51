from typing import NamedTuple

from .direction import Direction


class SortToken(NamedTuple) :
    field : str
    direction : Direction

    def __str__(self) :
        return f"{self.field} {self.direction.value}"
