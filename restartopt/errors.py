"""Exception types raised by restartopt.

Both concrete errors also derive from :class:`ValueError`, so callers that
already guard optimizer construction with ``except ValueError`` keep working.
"""

from __future__ import annotations


class RestartOptError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfigurationError(RestartOptError, ValueError):
    """An optimizer was given hyperparameters it cannot run with."""


class InvalidProblemError(RestartOptError, ValueError):
    """A problem or its bounds violate the collaborator contract."""


__all__ = ["InvalidConfigurationError", "InvalidProblemError", "RestartOptError"]
