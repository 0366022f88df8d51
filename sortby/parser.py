from lark import Lark
from pathlib import Path
from typing import Iterable

from .transformer import SortSpecTransformer
from .lib.types.direction import DEFAULT_DIRECTION, Direction, as_direction
from .lib.types.sort_token import SortToken

import logging
logger = logging.getLogger(__name__)

_PARSER = None
def _get_parser() :
    global _PARSER

    if _PARSER is None :
        with open(Path(__file__).parent / "sort_spec.lark", "r") as f :
           grammar_text = f.read()

        _PARSER = Lark(grammar_text, parser="lalr", start="spec")

    return _PARSER

def parse(spec : str | None, default_direction : Direction | str = DEFAULT_DIRECTION) -> tuple[SortToken, ...] :
    """Split a spec like "last_name desc, age" into sort tokens.

    Empty segments are dropped. A missing or unknown direction word falls
    back to `default_direction`.
    """
    direction = as_direction(default_direction)

    if spec is None or spec.strip() == "" :
        return ()

    tree = _get_parser().parse(spec)
    logger.debug(f"tree = {tree}")
    tokens = SortSpecTransformer(direction).transform(tree)
    logger.debug(f"tokens = {tokens}")
    return tokens

def format_spec(tokens : Iterable[SortToken]) -> str :
    return ", ".join(str(t) for t in tokens)
