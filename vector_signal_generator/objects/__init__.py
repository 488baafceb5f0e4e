"""Object definitions for the vector signal generator."""

from .config import SignalConfig
from .params import AppParams, load_params_or_keep
from .metadata import IQMetadata, SpectrumMetadata
from .enums import (
    ModulationType,
    MultitonePhase,
    SpectrumScale,
    TimeDomainUnit,
)

__all__ = [
    "SignalConfig",
    "AppParams",
    "load_params_or_keep",
    "IQMetadata",
    "SpectrumMetadata",
    "ModulationType",
    "MultitonePhase",
    "SpectrumScale",
    "TimeDomainUnit",
]
