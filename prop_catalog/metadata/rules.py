"""
Ordered matcher rules for the optional modifier tokens that follow the size.

Each rule is tried once, in list order, against the next unconsumed token.
A match assigns one field and consumes the token. Order matters: a degree
token such as '5deg' must be claimed before the blade-count check sees it.
"""
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .. import config

Number = Optional[float]

_NUMBER_RE = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$')


def parse_number(text: Optional[str]) -> Number:
    """Plain decimal numbers only; anything else (incl. 'nan', '1e3') is None."""
    if text is None:
        return None
    text = text.strip()
    if not _NUMBER_RE.match(text):
        return None
    return float(text)


def parse_int(text: Optional[str]) -> Optional[int]:
    value = parse_number(text)
    if value is None or not value.is_integer():
        return None
    return int(value)


@dataclass(frozen=True)
class ModifierRule:
    name: str                                   # field assigned on match
    matches: Callable[[str], bool]
    value: Callable[[str], Union[float, int, None]]


MODIFIER_RULES: List[ModifierRule] = [
    ModifierRule(
        name='degree',
        matches=lambda tok: tok.endswith(config.DEG_SUFFIX),
        value=lambda tok: parse_number(tok[:-len(config.DEG_SUFFIX)]),
    ),
    ModifierRule(
        name='blade_count',
        matches=lambda tok: len(tok) == config.BLADE_TOKEN_LEN and tok.endswith(config.BLADE_SUFFIX),
        value=lambda tok: parse_int(tok[:-len(config.BLADE_SUFFIX)]),
    ),
    ModifierRule(
        name='specimen',
        matches=lambda tok: config.SPECIMEN_MARKER in tok,
        value=lambda tok: parse_int(tok.replace(config.SPECIMEN_MARKER, '')),
    ),
]


def apply_modifier_rules(tokens: Sequence[str],
                         rules: Sequence[ModifierRule] = MODIFIER_RULES) -> Tuple[Dict[str, Union[float, int, None]], int]:
    """
    Runs rules over tokens from the left.

    Returns:
        (assigned fields, number of tokens consumed)
    """
    fields: Dict[str, Union[float, int, None]] = {}
    pos = 0
    for rule in rules:
        if pos >= len(tokens):
            break
        tok = tokens[pos]
        if rule.matches(tok):
            fields[rule.name] = rule.value(tok)
            pos += 1
    return fields, pos
