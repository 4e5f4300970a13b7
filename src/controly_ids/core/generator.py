"""Bounded-retry random identifier generators.

A generator draws fixed-length candidates from an alphabet and accepts the
first one that is not already taken. The retry budget is bounded, and
failure is always raised, never returned as an empty string.
"""

import threading
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

from structlog import get_logger

from controly_ids.core.sampling import random_string
from controly_ids.exceptions import (
    EntropyUnavailableError,
    GeneratorConfigError,
    GeneratorSaturatedError,
)


if TYPE_CHECKING:
    from controly_ids.config.settings import GeneratorSettings


logger = get_logger(__name__)

DEFAULT_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTUVWXYZ"
DEFAULT_LENGTH = 8
DEFAULT_MAX_ATTEMPTS = 1000


def normalize_alphabet(alphabet: str | Iterable[str]) -> tuple[str, ...]:
    """Validate an alphabet and return it as an ordered tuple of symbols.

    Raises:
        GeneratorConfigError: If the alphabet is empty, has a symbol that is not
            a single character, or repeats a symbol

    """
    symbols = tuple(alphabet)
    if not symbols:
        raise GeneratorConfigError("Alphabet must not be empty")

    bad = [s for s in symbols if not isinstance(s, str) or len(s) != 1]
    if bad:
        raise GeneratorConfigError(
            "Alphabet symbols must be single characters",
            details={"invalid_symbols": bad},
        )

    duplicates = sorted(s for s, count in Counter(symbols).items() if count > 1)
    if duplicates:
        raise GeneratorConfigError(
            "Alphabet symbols must be distinct",
            details={"duplicate_symbols": duplicates},
        )

    return symbols


class BoundedGenerator(ABC):
    """Shared attempt loop; subclasses decide whether a candidate is free."""

    def __init__(
        self,
        alphabet: str | Iterable[str],
        length: int,
        max_attempts: int,
    ) -> None:
        if length < 1:
            raise GeneratorConfigError(
                f"length must be at least 1, got {length}",
                details={"length": length},
            )
        if max_attempts < 0:
            raise GeneratorConfigError(
                f"max_attempts must not be negative, got {max_attempts}",
                details={"max_attempts": max_attempts},
            )

        self._alphabet = normalize_alphabet(alphabet)
        self._length = length
        self._max_attempts = max_attempts

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    @property
    def length(self) -> int:
        return self._length

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def keyspace_size(self) -> int:
        """Number of distinct identifiers this generator can ever produce."""
        return len(self._alphabet) ** self._length

    @abstractmethod
    def _claim(self, candidate: str) -> bool:
        """Return True if ``candidate`` is free and now taken by the caller."""

    def generate(self) -> str:
        """Generate a fresh identifier.

        Returns:
            An identifier of exactly ``length`` symbols from ``alphabet``

        Raises:
            EntropyUnavailableError: If every attempt failed to draw randomness
            GeneratorSaturatedError: If no free identifier was found within
                ``max_attempts`` attempts

        """
        collisions = 0
        entropy_failures = 0
        last_entropy_error: EntropyUnavailableError | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                candidate = random_string(self._length, self._alphabet)
            except EntropyUnavailableError as e:
                entropy_failures += 1
                last_entropy_error = e
                logger.warning(
                    "id_entropy_unavailable",
                    attempt=attempt,
                    max_attempts=self._max_attempts,
                    error=str(e),
                )
                continue

            if self._claim(candidate):
                logger.debug("id_generated", id=candidate, attempt=attempt)
                return candidate
            collisions += 1

        logger.error(
            "id_generator_saturated",
            max_attempts=self._max_attempts,
            collisions=collisions,
            entropy_failures=entropy_failures,
        )

        if last_entropy_error is not None and entropy_failures == self._max_attempts:
            raise EntropyUnavailableError(
                f"Secure random source failed on all {self._max_attempts} attempts",
                details={"max_attempts": self._max_attempts},
            ) from last_entropy_error

        raise GeneratorSaturatedError(
            self._max_attempts,
            collisions=collisions,
            entropy_failures=entropy_failures,
        )


class Generator(BoundedGenerator):
    """Generator that remembers every identifier it has issued.

    Uniqueness holds for the lifetime of the instance only. The issued set
    only grows. Duplicate check and insert happen under one lock, so the
    instance may be shared between threads.
    """

    def __init__(
        self,
        alphabet: str | Iterable[str] = DEFAULT_ALPHABET,
        length: int = DEFAULT_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Initialize the generator.

        Args:
            alphabet: Distinct symbols identifiers are composed of
            length: Symbols per identifier
            max_attempts: Upper bound on draws per ``generate`` call

        Raises:
            GeneratorConfigError: If any argument is out of range

        """
        super().__init__(alphabet, length, max_attempts)
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: "GeneratorSettings") -> "Generator":
        """Build a generator from configuration settings."""
        return cls(
            alphabet=settings.alphabet,
            length=settings.length,
            max_attempts=settings.max_attempts,
        )

    def _claim(self, candidate: str) -> bool:
        with self._lock:
            if candidate in self._issued:
                return False
            self._issued.add(candidate)
            return True

    def exists(self, identifier: str) -> bool:
        """Check whether this instance has issued ``identifier``."""
        with self._lock:
            return identifier in self._issued

    @property
    def issued(self) -> frozenset[str]:
        """Snapshot of every identifier issued so far."""
        with self._lock:
            return frozenset(self._issued)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.exists(identifier)

    def __len__(self) -> int:
        with self._lock:
            return len(self._issued)

    def __repr__(self) -> str:
        issued = len(self)
        return (
            f"{type(self).__name__}(alphabet={''.join(self._alphabet)!r}, "
            f"length={self._length}, max_attempts={self._max_attempts}, "
            f"issued={issued})"
        )


__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_LENGTH",
    "DEFAULT_MAX_ATTEMPTS",
    "BoundedGenerator",
    "Generator",
    "normalize_alphabet",
]
