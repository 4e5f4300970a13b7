"""Process-wide default generator.

Prefer constructing a ``Generator`` and passing it to the code that needs
identifiers. The shared instance exists for call sites that only need the
reference alphabet and defaults.
"""

import threading

from structlog import get_logger

from controly_ids.config.settings import GeneratorSettings, get_settings
from controly_ids.core.generator import Generator


logger = get_logger(__name__)

_default_generator: Generator | None = None
_default_lock = threading.Lock()


def get_default_generator(settings: GeneratorSettings | None = None) -> Generator:
    """Return the shared generator, creating it on first use.

    Args:
        settings: Settings used only when the instance does not exist yet.
            Defaults to settings loaded from the environment.

    Returns:
        The process-wide Generator

    """
    global _default_generator

    with _default_lock:
        if _default_generator is None:
            settings = settings or get_settings()
            _default_generator = Generator.from_settings(settings)
            logger.debug(
                "default_id_generator_created",
                alphabet_size=len(_default_generator.alphabet),
                length=_default_generator.length,
                max_attempts=_default_generator.max_attempts,
            )
        return _default_generator


def reset_default_generator() -> None:
    """Drop the shared generator and its issued identifiers (useful for testing)."""
    global _default_generator

    with _default_lock:
        _default_generator = None


def generate() -> str:
    """Generate an identifier from the shared generator."""
    return get_default_generator().generate()


def exists(identifier: str) -> bool:
    """Check whether the shared generator has issued ``identifier``."""
    return get_default_generator().exists(identifier)
