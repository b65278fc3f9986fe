"""Exceptions raised while fetching, extracting and rendering colors."""

from __future__ import annotations


class ColorListError(Exception):
    """Base class for every failure that aborts a run."""


class FetchError(ColorListError, RuntimeError):
    """The source page could not be retrieved."""


class SelectorError(ColorListError, ValueError):
    """The node selector failed to compile."""


class MissingAttributeError(ColorListError, LookupError):
    """An RGB candidate node lacks the attribute carrying its values."""


class PatternNotFoundError(ColorListError, ValueError):
    """No RGB triple was found in an attribute string."""


class InvalidDigitsError(ColorListError, ValueError):
    """A captured channel value is not a run of ASCII digits."""


class NumericOverflowError(ColorListError, ValueError):
    """A captured channel value does not fit in 0-255."""


class FormatError(ColorListError, RuntimeError):
    """Rendering or writing the output document failed."""


class MisalignedPairError(ColorListError, ValueError):
    """A component pair is not one name followed by one RGB triple."""
