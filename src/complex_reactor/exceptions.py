"""ComplexReactor exception hierarchy.

All library-specific exceptions inherit from :class:`ComplexReactorError`,
enabling callers to catch the broad base class or narrow subtypes. The two
reactor errors also subclass the matching builtin so plain ``ValueError`` /
``IndexError`` handlers keep working.
"""

from __future__ import annotations


class ComplexReactorError(Exception):
    """Base exception for all ComplexReactor errors."""


class InvalidParameterError(ComplexReactorError, ValueError):
    """A ratio outside [0, 1] or a negative reagent quantity."""


class IndexOutOfRangeError(ComplexReactorError, IndexError):
    """Requested output index has no stored result."""


class ConfigurationError(ComplexReactorError):
    """Config file missing, unreadable, or structurally invalid."""


__all__ = [
    "ComplexReactorError",
    "InvalidParameterError",
    "IndexOutOfRangeError",
    "ConfigurationError",
]
