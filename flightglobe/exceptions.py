"""
Exception types raised by flightglobe.
"""


class ValidationError(ValueError):
    """Raised immediately when an input or configuration is malformed.

    Examples are a longitude outside [-180, 180] passed to timezone
    derivation, or a flight leg whose arrival is not after its departure.
    Subclasses ValueError so callers may catch either.
    """
    pass
