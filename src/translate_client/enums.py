"""Enumerated values accepted by the translate API."""

from enum import Enum
from typing import Any


class _ApiEnum(str, Enum):
    @classmethod
    def exists(cls, value: Any) -> bool:
        return any(value == member.value for member in cls)


class Formality(_ApiEnum):
    """Formality level of the translated text."""
    FORMAL = "FORMAL"
    INFORMAL = "INFORMAL"


class Profanity(_ApiEnum):
    """Profanity handling of the translated text."""
    MASK = "MASK"
