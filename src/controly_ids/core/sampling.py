"""Random draw primitive used by the identifier generators."""

import secrets
from collections.abc import Sequence

from controly_ids.exceptions import EntropyUnavailableError


def random_string(length: int, alphabet: Sequence[str]) -> str:
    """Draw a string of independent, uniformly chosen symbols.

    Uses ``secrets.randbelow`` which samples by rejection, so every symbol is
    equally likely regardless of the alphabet size.

    Args:
        length: Number of symbols to draw
        alphabet: Non-empty sequence of symbols

    Returns:
        The concatenated symbols

    Raises:
        ValueError: If length is negative or the alphabet is empty
        EntropyUnavailableError: If the system random source fails

    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    size = len(alphabet)
    if size == 0:
        raise ValueError("alphabet must not be empty")

    try:
        return "".join(alphabet[secrets.randbelow(size)] for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailableError(
            f"Failed to generate random number: {e}",
            details={"length": length, "alphabet_size": size},
        ) from e
