"""Core functionality for geoproj-lib."""

from geoproj_lib.core.exceptions import (
    FormatError,
    GeometryError,
    GeoProjError,
    ProjectionError,
    RangeError,
    ValidationError,
)
from geoproj_lib.core.helpers import ang_normalize

__all__ = [
    "ang_normalize",
    "GeoProjError",
    "RangeError",
    "FormatError",
    "ProjectionError",
    "GeometryError",
    "ValidationError",
]
