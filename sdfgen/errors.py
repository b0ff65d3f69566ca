"""Exceptions raised by the distance field engine."""


class SDFError(ValueError):
    """Base class for signed distance field errors."""


class InvalidDimensions(SDFError):
    """Raised for zero-sized images or inputs whose dimensions do not match."""


class InsufficientInputs(SDFError):
    """Raised when fewer than two fields are passed to a blend."""
