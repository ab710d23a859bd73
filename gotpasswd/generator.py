"""
gotpasswd.generator
Secure password generator using Python's secrets module.
"""

import logging
from secrets import SystemRandom
from typing import Iterable, Iterator

from .charset import DICTIONARY, CharacterKind
from .config import Config

logger = logging.getLogger(__name__)

_sysrand = SystemRandom()


class GenerationError(RuntimeError):
    pass


def candidate_pool(kinds: Iterable[CharacterKind]) -> str:
    """Concatenate the characters of each requested kind, in request order."""
    return "".join(DICTIONARY[kind] for kind in kinds)


def generate(config: Config) -> str:
    """
    Generate one password of config.length characters.
    Errors from the OS random source propagate; there is no weaker fallback.
    """
    pool = candidate_pool(config.kinds)
    if not pool:
        raise GenerationError("Internal error, cannot work with empty candidates")

    password_chars = []
    for _ in range(config.length):
        password_chars.append(pool[_sysrand.randrange(len(pool))])
    return "".join(password_chars)


def generate_many(config: Config) -> Iterator[str]:
    logger.debug(
        "Generating %d password(s) of length %d from %d candidates",
        config.count, config.length, len(candidate_pool(config.kinds)),
    )
    for _ in range(config.count):
        yield generate(config)
