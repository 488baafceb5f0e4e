"""Signal generation functions for the vector signal generator."""

from .generator import SignalGenerator
from .iq import generate_iq
from .spectrum import compute_spectrum
from .export import export_csv, export_bin, load_csv, load_bin

__all__ = [
    "SignalGenerator",
    "generate_iq",
    "compute_spectrum",
    "export_csv",
    "export_bin",
    "load_csv",
    "load_bin",
]
