"""geoproj-lib: GEOREF grid codec and gnomonic projection."""

__version__ = "0.1.0"

from .gnomonic import Gnomonic, GnomonicConfig, GnomonicProjector

__all__ = ["__version__", "Gnomonic", "GnomonicConfig", "GnomonicProjector"]
