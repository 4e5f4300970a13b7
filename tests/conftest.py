"""Shared test fixtures."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from controly_ids.core.default import reset_default_generator
from controly_ids.core.generator import Generator


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Run each test without CONTROLY_IDS_* variables, a .env file, or shared state."""
    for key in list(os.environ):
        if key.upper().startswith("CONTROLY_IDS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_default_generator()

    yield

    reset_default_generator()
    structlog.reset_defaults()


@pytest.fixture
def generator() -> Generator:
    """Create a generator with the reference alphabet and defaults."""
    return Generator()


@pytest.fixture
def single_symbol_generator() -> Generator:
    """Create a generator whose keyspace holds exactly one identifier."""
    return Generator(alphabet="A", length=3, max_attempts=50)
