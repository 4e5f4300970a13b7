"""Tests for generation against an external existence check."""

import pytest

from controly_ids.core.checked import CheckedGenerator
from controly_ids.exceptions import GeneratorConfigError, GeneratorSaturatedError


class InMemoryDisplayRepository:
    """Minimal repository that knows which display IDs are taken."""

    def __init__(self, taken: set[str] | None = None) -> None:
        self.taken = set(taken or ())
        self.lookups: list[str] = []

    def exists(self, identifier: str) -> bool:
        self.lookups.append(identifier)
        return identifier in self.taken


class TestCheckedGenerator:
    """Tests for CheckedGenerator."""

    def test_returns_identifier_unknown_to_checker(self) -> None:
        """Test that a free candidate is returned on the first attempt."""
        repo = InMemoryDisplayRepository()
        gen = CheckedGenerator(repo, length=6)

        identifier = gen.generate()

        assert len(identifier) == 6
        assert repo.lookups == [identifier]

    def test_does_not_register_identifier(self) -> None:
        """Test that registration is left to the caller."""
        repo = InMemoryDisplayRepository()
        gen = CheckedGenerator(repo, alphabet="A", length=2)

        assert gen.generate() == "AA"
        assert gen.generate() == "AA"

    def test_skips_taken_identifiers(self) -> None:
        """Test that taken candidates are retried."""
        repo = InMemoryDisplayRepository(taken={"AA", "AB", "BA"})
        gen = CheckedGenerator(repo, alphabet="AB", length=2)

        for _ in range(20):
            assert gen.generate() == "BB"

    def test_saturates_when_everything_is_taken(self) -> None:
        """Test that a full registry raises after max_attempts lookups."""
        repo = InMemoryDisplayRepository(taken={"A"})
        gen = CheckedGenerator(repo, alphabet="A", length=1, max_attempts=7)

        with pytest.raises(GeneratorSaturatedError) as exc_info:
            gen.generate()

        assert exc_info.value.collisions == 7
        assert len(repo.lookups) == 7

    def test_validates_configuration(self) -> None:
        """Test that construction shares the generator validation."""
        with pytest.raises(GeneratorConfigError):
            CheckedGenerator(InMemoryDisplayRepository(), alphabet="")
