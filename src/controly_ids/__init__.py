"""Controly IDs - short, collision-free random identifiers."""

from ._version import __version__
from .core.checked import CheckedGenerator, ExistenceChecker
from .core.default import (
    exists,
    generate,
    get_default_generator,
    reset_default_generator,
)
from .core.generator import DEFAULT_ALPHABET, Generator
from .exceptions import (
    EntropyUnavailableError,
    ErrorType,
    GeneratorConfigError,
    GeneratorSaturatedError,
    IdGenerationError,
)


__all__ = [
    "DEFAULT_ALPHABET",
    "CheckedGenerator",
    "EntropyUnavailableError",
    "ErrorType",
    "ExistenceChecker",
    "Generator",
    "GeneratorConfigError",
    "GeneratorSaturatedError",
    "IdGenerationError",
    "__version__",
    "exists",
    "generate",
    "get_default_generator",
    "reset_default_generator",
]
