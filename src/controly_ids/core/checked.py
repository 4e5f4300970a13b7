"""Identifier generation checked against an external registry."""

from collections.abc import Iterable
from typing import Protocol

from controly_ids.core.generator import (
    DEFAULT_ALPHABET,
    DEFAULT_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
    BoundedGenerator,
)


class ExistenceChecker(Protocol):
    """Anything that can tell whether an identifier is already in use."""

    def exists(self, identifier: str) -> bool: ...


class CheckedGenerator(BoundedGenerator):
    """Generator that asks an external checker whether a candidate is taken.

    Keeps no record of its own. The caller registers the returned identifier
    (for example by saving the display it names) and is responsible for
    serializing generate-then-register if it needs that to be atomic.
    """

    def __init__(
        self,
        checker: ExistenceChecker,
        alphabet: str | Iterable[str] = DEFAULT_ALPHABET,
        length: int = DEFAULT_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        super().__init__(alphabet, length, max_attempts)
        self._checker = checker

    def _claim(self, candidate: str) -> bool:
        return not self._checker.exists(candidate)


__all__ = ["CheckedGenerator", "ExistenceChecker"]
