"""
Exceptions raised by the psychrometric engine.

All of them derive from ValueError so callers (and the API layer) can keep
handling calculation problems the same way they handle bad input values.
"""


class PsychroError(ValueError):
    """Base class for psychrometric calculation errors."""


class DomainInvalidError(PsychroError):
    """An input or result lies outside the documented range of a correlation."""


class UnsupportedPropertyError(PsychroError):
    """The requested property has no implementation (entropy)."""


class ConvergenceError(PsychroError):
    """The wet-bulb iteration failed to converge."""

    def __init__(self, message: str, iterations: int = 0, last_estimate: float = float("nan")):
        super().__init__(message)
        self.iterations = iterations
        self.last_estimate = last_estimate


class InvalidSelectorError(PsychroError):
    """Unknown property selector, or a selector that is not valid in this role."""
