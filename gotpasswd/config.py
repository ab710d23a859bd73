# gotpasswd/config.py
"""
Run configuration for gotpasswd.

Defaults come from a JSON settings file at $GOTPASSWD_CONFIG or
~/.gotpasswd/config.json (keys: kinds, length, count). Command line flags
override them, and both go through Config.from_options before generation.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .charset import CharacterKind

logger = logging.getLogger(__name__)

DEFAULT_KINDS = "alphabet,number,symbol,underscore,space"

DEFAULTS: Dict[str, Any] = {
    "kinds": DEFAULT_KINDS,
    "length": 8,
    "count": 1,
}

CONFIG_ENV_VAR = "GOTPASSWD_CONFIG"


class ConfigError(ValueError):
    """Invalid user configuration. Reported before anything is generated."""


def parse_kinds(text: str) -> Tuple[CharacterKind, ...]:
    """
    Parse a comma separated list of class names, e.g. "number,underscore".
    Repeated names are kept once, in first-seen order.
    """
    kinds: List[CharacterKind] = []
    for candidate in text.split(","):
        name = candidate.strip()
        try:
            kind = CharacterKind(name)
        except ValueError:
            raise ConfigError(f"Unknown character kind: {name}") from None
        if kind not in kinds:
            kinds.append(kind)
    return tuple(kinds)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Config:
    kinds: Tuple[CharacterKind, ...]
    length: int
    count: int

    @classmethod
    def from_options(cls, kinds: str, length: int, count: int) -> "Config":
        # settings file values arrive here unchecked
        if not isinstance(kinds, str):
            raise ConfigError("Character kinds must be a comma separated string")
        parsed = parse_kinds(kinds)
        if not _is_int(length) or length <= 0:
            raise ConfigError("Length of password must be positive")
        if not _is_int(count) or count <= 0:
            raise ConfigError("Number of passwords must be positive")
        return cls(kinds=parsed, length=length, count=count)


def config_path(override: Optional[str] = None) -> str:
    if override:
        return override
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return env
    return os.path.join(os.path.expanduser("~"), ".gotpasswd", "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Return the settings merged over DEFAULTS. A missing or unreadable file
    yields the defaults; values are validated later with the flags.
    """
    p = config_path(path)
    out = DEFAULTS.copy()
    if not os.path.exists(p):
        logger.debug("No settings file at %s, using defaults", p)
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring settings file %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return out
    # only known keys
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    logger.debug("Loaded settings from %s", p)
    return out
