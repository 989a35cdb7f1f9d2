# src/rating/errors.py
from __future__ import annotations


class RatingError(Exception):
    """Base exception for the rating engine."""


class ConfigurationError(RatingError):
    """
    The engine was built with an inconsistent knowledge base or rule sequence.

    Raised for a missing rate/factor key, a rule that depends on a rule which
    does not run before it, or duplicate rule names. No sane premium can be
    produced, so callers should let it propagate.
    """


class PremiumSealedError(RatingError):
    """Raised when a premium is mutated after the engine has returned it."""
