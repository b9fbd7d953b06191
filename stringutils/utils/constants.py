"""Constants used throughout the stringutils codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Truncation
    ELLIPSIS = "..."
    """Marker appended to truncated text."""

    MIN_TRUNCATE_LENGTH = 4
    """Smallest max length that leaves room for one code point plus the ellipsis."""

    # Search
    NOT_FOUND = -1
    """Index returned when a value is not present in a sequence."""

    # Stringify
    NIL_PLACEHOLDER = "<nil>"
    """Text form of an absent value."""

    # Random words
    VOWELS = "aeiou"
    """Vowel alphabet for generated words."""

    CONSONANTS = "bcdfghjklmnpqrstvwxyz"
    """Consonant alphabet for generated words (remaining lowercase letters)."""

    MIN_WORD_LENGTH = 2
    """Shortest word the generator will produce."""

    # Deduplication
    DEDUP_SMALL_INPUT_THRESHOLD = 16
    """Inputs up to this size are deduplicated with a linear scan of the result."""
