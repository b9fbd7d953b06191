"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or by callers outside the package.
"""
# pylint: disable=all
# Pydantic model validator - used by framework via @model_validator decorator
_.clamp_bounds  # noqa: F821  # unused method (stringutils/core/config.py:20)

# Functions used via imports - vulture can't detect usage through imports
dedup_big  # unused function (stringutils/core/sets.py:51)
