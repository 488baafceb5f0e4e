"""Vector Signal Generator - continuous-phase I/Q synthesis of CW, AM, FM, PM, pulse and multitone signals."""

from .objects.enums import ModulationType, MultitonePhase, SpectrumScale, TimeDomainUnit
from .objects.config import SignalConfig
from .objects.params import AppParams, load_params_or_keep
from .objects.metadata import IQMetadata, SpectrumMetadata
from .simulation.generator import SignalGenerator
from .simulation.iq import generate_iq
from .simulation.spectrum import compute_spectrum
from .simulation.export import export_csv, export_bin, load_csv, load_bin

__version__ = "0.1.0"

__all__ = [
    "ModulationType",
    "MultitonePhase",
    "SpectrumScale",
    "TimeDomainUnit",
    "SignalConfig",
    "AppParams",
    "load_params_or_keep",
    "IQMetadata",
    "SpectrumMetadata",
    "SignalGenerator",
    "generate_iq",
    "compute_spectrum",
    "export_csv",
    "export_bin",
    "load_csv",
    "load_bin",
]
