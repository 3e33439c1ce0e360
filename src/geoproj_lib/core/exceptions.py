"""Custom exceptions for geoproj-lib."""


class GeoProjError(Exception):
    """Base exception for geoproj-lib."""

    pass


class RangeError(GeoProjError):
    """Raised when a coordinate is outside its allowed range."""

    pass


class FormatError(GeoProjError):
    """Raised when a GEOREF string is malformed."""

    pass


class ProjectionError(GeoProjError):
    """Raised when projection setup fails."""

    pass


class GeometryError(GeoProjError):
    """Raised when geometry operations fail."""

    pass


class ValidationError(GeoProjError):
    """Raised when input validation fails."""

    pass
