"""Pronounceable random word generation.

Words alternate strictly between vowels and consonants. All draws come from a
RandomSource; the default is backed by the operating system CSPRNG through the
secrets module, so output is not reproducible. Tests pass a scripted source.
"""

import secrets
from typing import Protocol

from loguru import logger

from stringutils.core.config import WordLengthRange
from stringutils.utils.constants import Constants


class RandomSource(Protocol):
    """Capability for drawing uniform random integers."""

    def randbelow(self, n: int) -> int:
        """Return a random integer in [0, n)."""


class SecureRandomSource:
    """RandomSource backed by secrets.SystemRandom (os.urandom)."""

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        return self._rng.randrange(n)


_default_source = SecureRandomSource()


class _GuardedDraws:
    """Draws from a RandomSource, falling back to 0 once the source fails.

    The first failure is logged; every later draw returns 0 without touching
    the source, so a dead source yields min_len letters starting with a vowel.
    """

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng
        self.failed = False

    def randbelow(self, n: int) -> int:
        if self.failed:
            return 0
        try:
            return self._rng.randbelow(n)
        except (OSError, NotImplementedError) as e:
            logger.warning(f"Random source unavailable ({e}), using deterministic fallback")
            self.failed = True
            return 0


def random_word(min_len: int, max_len: int, rng: RandomSource | None = None) -> str:
    """Generate a lowercase word alternating vowels and consonants.

    min_len is raised to 2 if smaller, and max_len to min_len if smaller.
    A coin flip decides whether the word starts with a vowel. If the random
    source is unavailable the word has min_len letters, starts with a vowel
    and uses the first letter of each alphabet.

    Args:
        min_len: Minimum word length
        max_len: Maximum word length (inclusive)
        rng: Random source; defaults to the secure system source

    Returns:
        Word with a length in [min_len, max_len]
    """
    if rng is None:
        rng = _default_source
    bounds = WordLengthRange(min_len=min_len, max_len=max_len)
    draws = _GuardedDraws(rng)

    length = bounds.min_len + draws.randbelow(bounds.span)
    start_with_vowel = draws.randbelow(2) == 0

    letters = []
    for i in range(length):
        alphabet = Constants.VOWELS if (i % 2 == 0) == start_with_vowel else Constants.CONSONANTS
        letters.append(alphabet[draws.randbelow(len(alphabet))])
    return "".join(letters)
