"""Core identifier generation primitives."""

from controly_ids.core.checked import CheckedGenerator, ExistenceChecker
from controly_ids.core.generator import (
    DEFAULT_ALPHABET,
    DEFAULT_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
    BoundedGenerator,
    Generator,
    normalize_alphabet,
)
from controly_ids.core.sampling import random_string


__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_LENGTH",
    "DEFAULT_MAX_ATTEMPTS",
    "BoundedGenerator",
    "CheckedGenerator",
    "ExistenceChecker",
    "Generator",
    "normalize_alphabet",
    "random_string",
]
