"""Validated parameter models."""

from loguru import logger
from pydantic import BaseModel, model_validator

from stringutils.utils.constants import Constants


class WordLengthRange(BaseModel):
    """Inclusive length bounds for generated words.

    Out-of-range bounds are clamped rather than rejected: min_len is raised to
    Constants.MIN_WORD_LENGTH and max_len is raised to min_len.
    """

    min_len: int = Constants.MIN_WORD_LENGTH
    max_len: int = Constants.MIN_WORD_LENGTH

    @model_validator(mode="after")
    def clamp_bounds(self) -> "WordLengthRange":
        """Apply the clamp rules after field validation."""
        if self.min_len < Constants.MIN_WORD_LENGTH:
            logger.debug(f"min_len {self.min_len} raised to {Constants.MIN_WORD_LENGTH}")
            self.min_len = Constants.MIN_WORD_LENGTH
        if self.max_len < self.min_len:
            logger.debug(f"max_len {self.max_len} raised to {self.min_len}")
            self.max_len = self.min_len
        return self

    @property
    def span(self) -> int:
        """Number of distinct lengths in the range."""
        return self.max_len - self.min_len + 1
