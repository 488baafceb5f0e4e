"""Enumerations for the vector signal generator."""

from enum import Enum


class ModulationType(Enum):
    """Modulation applied to the carrier."""
    CW = "CW"
    AM = "AM"
    FM = "FM"
    PM = "PM"
    PULSE = "Pulse"
    MULTITONE = "Multitone"


class MultitonePhase(Enum):
    """Initial phase schedule for multitone components."""
    ZERO = "Zero"
    RANDOM = "Random"
    SCHROEDER = "Schroeder"


class SpectrumScale(Enum):
    """Magnitude scale of a spectrum trace."""
    LINEAR = "Linear"
    DECIBEL = "Decibel"


class TimeDomainUnit(Enum):
    """Horizontal axis unit for time-domain plots."""
    SECONDS = "Seconds"
    SAMPLES = "Samples"
