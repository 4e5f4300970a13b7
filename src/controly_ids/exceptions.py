"""Exception hierarchy for identifier generation.

All exceptions use proper exception chaining with the `from` keyword.
Error types use StrEnum for type safety and autocompletion.
"""

from enum import StrEnum
from typing import Any


class ErrorType(StrEnum):
    """Error type codes attached to every generation error."""

    INVALID_CONFIG = "invalid_config"
    ENTROPY_UNAVAILABLE = "entropy_unavailable"
    SATURATED = "saturated"


# ============================================================================
# Base Exceptions
# ============================================================================


class IdGenerationError(Exception):
    """Base exception for all identifier generation errors.

    Carries a machine-readable error type and structured details so callers
    can decide whether to reconfigure and retry.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: ErrorType = ErrorType.SATURATED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}


# ============================================================================
# Configuration Errors
# ============================================================================


class GeneratorConfigError(IdGenerationError):
    """Generator was constructed with an unusable alphabet, length or retry bound."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            error_type=ErrorType.INVALID_CONFIG,
            details=details,
        )


# ============================================================================
# Generation Errors
# ============================================================================


class EntropyUnavailableError(IdGenerationError):
    """The secure random source failed to produce a value."""

    def __init__(
        self,
        message: str = "Secure random source unavailable",
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            error_type=ErrorType.ENTROPY_UNAVAILABLE,
            details=details,
        )


class GeneratorSaturatedError(IdGenerationError):
    """No unused identifier was found within the retry budget."""

    def __init__(
        self,
        max_attempts: int,
        *,
        collisions: int = 0,
        entropy_failures: int = 0,
    ) -> None:
        super().__init__(
            f"Failed to generate a unique ID after {max_attempts} attempts",
            error_type=ErrorType.SATURATED,
            details={
                "max_attempts": max_attempts,
                "collisions": collisions,
                "entropy_failures": entropy_failures,
            },
        )
        self.max_attempts = max_attempts
        self.collisions = collisions
        self.entropy_failures = entropy_failures


__all__ = [
    "EntropyUnavailableError",
    "ErrorType",
    "GeneratorConfigError",
    "GeneratorSaturatedError",
    "IdGenerationError",
]
