"""
gotpasswd.charset

Partition the printable ASCII range into named character classes.
The dictionary is built once at import and is read-only afterwards.
"""

import unicodedata
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


PRINTABLE_FIRST = 0x20
PRINTABLE_LAST = 0x7E


class CharacterKind(Enum):
    ALPHABET = "alphabet"
    NUMBER = "number"
    SYMBOL = "symbol"
    UNDERSCORE = "underscore"
    SPACE = "space"


def classify(ch: str) -> Optional[CharacterKind]:
    """
    Return the class of a single character, or None if it fits none.
    Punctuation other than the underscore is not a symbol and is excluded.
    """
    category = unicodedata.category(ch)
    if category.startswith("L"):
        return CharacterKind.ALPHABET
    if category.startswith("N"):
        return CharacterKind.NUMBER
    if category.startswith("S"):
        return CharacterKind.SYMBOL
    if ch.isspace():
        return CharacterKind.SPACE
    # connector punctuation, not caught by the predicates above
    if ch == "_":
        return CharacterKind.UNDERSCORE
    return None


def build_dictionary(first: int = PRINTABLE_FIRST, last: int = PRINTABLE_LAST) -> Dict[CharacterKind, str]:
    pools: Dict[CharacterKind, list] = {kind: [] for kind in CharacterKind}
    for code in range(first, last + 1):
        ch = chr(code)
        if not ch.isprintable():
            raise RuntimeError("Internal error, cannot construct character dictionary")
        kind = classify(ch)
        if kind is not None:
            pools[kind].append(ch)
    return {kind: "".join(chars) for kind, chars in pools.items()}


DICTIONARY: Dict[CharacterKind, str] = build_dictionary()


def describe_dictionary() -> Iterator[Tuple[CharacterKind, str]]:
    for kind in CharacterKind:
        yield kind, DICTIONARY[kind]
