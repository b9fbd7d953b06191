"""Text shaping: truncation, whitespace normalization and affix removal.

Lengths are counted in code points, which is what len() on a str measures.
"""

import re

from stringutils.utils.constants import Constants

# Unicode whitespace except the ASCII information separators U+001C-U+001F
_WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")


def _split_words(text: str) -> list[str]:
    """Split on runs of whitespace (ASCII and Unicode), dropping empty pieces."""
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def truncate(text: str, max_len: int) -> str:
    """Cut text to max_len code points, ending with an ellipsis if cut.

    e.g., truncate("hello world", 6) -> 'hel...'

    Args:
        text: Text to shorten
        max_len: Maximum length of the result in code points

    Returns:
        text unchanged if it fits, the shortened text with the ellipsis if it
        does not, or an empty string if max_len leaves no room for content
    """
    if max_len < Constants.MIN_TRUNCATE_LENGTH:
        return ""
    if len(text) <= max_len:
        return text
    return text[: max_len - len(Constants.ELLIPSIS)] + Constants.ELLIPSIS


def truncate_words(text: str, max_words: int) -> str:
    """Cut text to max_words words, ending with an ellipsis if cut.

    Text that already fits is returned as-is, original spacing included.
    A cut result is rejoined with single spaces.

    e.g., truncate_words("hello beautiful world", 2) -> 'hello beautiful...'
    """
    if max_words <= 0:
        return ""
    words = _split_words(text)
    if len(words) <= max_words:
        return text
    return " ".join(words[:max_words]) + Constants.ELLIPSIS


def normalize_whitespace(text: str) -> str:
    """Collapse each run of whitespace to one space and trim both ends."""
    return " ".join(_split_words(text))


def is_blank(text: str) -> bool:
    """Check whether text is empty or whitespace only."""
    return not normalize_whitespace(text)


def remove_prefix(text: str, prefix: str) -> str:
    """Remove prefix from the start of text once, if present."""
    if prefix and text.startswith(prefix):
        return text[len(prefix) :]
    return text


def remove_suffix(text: str, suffix: str) -> str:
    """Remove suffix from the end of text once, if present."""
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text
