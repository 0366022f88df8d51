from enum import Enum


class Direction(Enum) :
    ASCENDING = "asc"
    DESCENDING = "desc"

    def invert(self) -> 'Direction' :
        if self is Direction.ASCENDING :
            return Direction.DESCENDING
        return Direction.ASCENDING

    @property
    def sign(self) -> int :
        return 1 if self is Direction.ASCENDING else -1

    @classmethod
    def from_word(cls, word : str) -> 'Direction | None' :
        """Matching is exact. 'ASC' or 'Desc' are not direction words."""
        return _DIRECTION_WORDS.get(word)

    def __str__(self) :
        return self.value


_DIRECTION_WORDS = {
    "asc" : Direction.ASCENDING,
    "ascending" : Direction.ASCENDING,
    "desc" : Direction.DESCENDING,
    "descending" : Direction.DESCENDING,
}

DEFAULT_DIRECTION = Direction.ASCENDING

def as_direction(value : Direction | str) -> Direction :
    if isinstance(value, Direction) :
        return value
    if isinstance(value, str) :
        direction = Direction.from_word(value)
        if direction is not None :
            return direction
    raise ValueError(f"Invalid sort direction {value!r}")
