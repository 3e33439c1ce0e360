# src/geoproj_lib/gnomonic/config.py
import math
import sys
from dataclasses import dataclass

from geoproj_lib.core.exceptions import ValidationError

EPS0 = sys.float_info.epsilon
EPS = 0.01 * math.sqrt(EPS0)


@dataclass(frozen=True)
class GnomonicConfig:
    """Configuration for the gnomonic reverse solver.

    Attributes:
        max_iterations: Newton iterations before reverse gives up (NaN result)
        tolerance: Step size, as a fraction of the equatorial radius, below
            which the next evaluation is accepted
    """

    max_iterations: int = 10
    tolerance: float = EPS

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValidationError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )
        if not (math.isfinite(self.tolerance) and self.tolerance > 0):
            raise ValidationError(f"tolerance must be positive, got {self.tolerance}")
