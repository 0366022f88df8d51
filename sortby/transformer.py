from lark import Transformer, Token, v_args

from .lib.types.direction import Direction
from .lib.types.sort_token import SortToken

import logging
logger = logging.getLogger(__name__)


@v_args(inline=True)
class SortSpecTransformer(Transformer) :
    def __init__(self, default_direction : Direction) :
        super().__init__()
        self.default_direction = default_direction

    def spec(self, *segments : SortToken | None) -> tuple[SortToken, ...] :
        return tuple(s for s in segments if s is not None)

    def segment(self, *words : Token) -> SortToken | None :
        if len(words) == 0 :
            return None

        field = words[0].value
        direction = self.default_direction

        if len(words) > 1 :
            word = words[1].value
            found = Direction.from_word(word)
            if found is None :
                logger.debug(f"Unknown direction '{word}' for field {field}, using {direction.value}")
            else :
                direction = found

        if len(words) > 2 :
            logger.debug(f"Ignoring extra words {[w.value for w in words[2:]]} for field {field}")

        return SortToken(field, direction)
