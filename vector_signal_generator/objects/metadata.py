"""Metadata classes for generated signals."""

import attrs
from datetime import datetime

from .enums import ModulationType, SpectrumScale


@attrs.define
class IQMetadata:
    """
    Metadata for generated IQ data.

    Parameters
    ----------
    sample_rate_hz : float
        Sample rate in Hz
    carrier_frequency_hz : float
        Carrier frequency in Hz
    duration_s : float
        Duration of IQ data in seconds
    num_samples : int
        Number of IQ samples
    modulation : ModulationType
        Modulation the samples were generated with
    amplitude : float
        Output amplitude factor applied to the samples
    timestamp : datetime, optional
        Generation timestamp
    """

    sample_rate_hz: float = attrs.field()
    carrier_frequency_hz: float = attrs.field()
    duration_s: float = attrs.field()
    num_samples: int = attrs.field()
    modulation: ModulationType = attrs.field()
    amplitude: float = attrs.field(default=1.0)
    timestamp: datetime = attrs.field(factory=datetime.now)

    def __str__(self) -> str:
        """String representation of IQ metadata."""
        return (
            f"IQ Metadata:\n"
            f"  Modulation: {self.modulation.value}\n"
            f"  Sample Rate: {self.sample_rate_hz / 1e3:.3f} kHz\n"
            f"  Carrier Frequency: {self.carrier_frequency_hz / 1e3:.3f} kHz\n"
            f"  Duration: {self.duration_s:.6f} s\n"
            f"  Number of Samples: {self.num_samples:,}\n"
            f"  Amplitude: {self.amplitude:g}\n"
            f"  Timestamp: {self.timestamp.isoformat()}"
        )


@attrs.define
class SpectrumMetadata:
    """
    Metadata for a computed spectrum.

    Parameters
    ----------
    sample_rate_hz : float
        Sample rate of the transformed samples in Hz
    num_points : int
        Transform length (number of frequency bins)
    scale : SpectrumScale
        Magnitude scale of the trace
    timestamp : datetime, optional
        Generation timestamp
    """

    sample_rate_hz: float = attrs.field()
    num_points: int = attrs.field()
    scale: SpectrumScale = attrs.field()
    timestamp: datetime = attrs.field(factory=datetime.now)

    @property
    def bin_width_hz(self) -> float:
        """Frequency spacing between adjacent bins in Hz."""
        return self.sample_rate_hz / self.num_points

    def __str__(self) -> str:
        """String representation of spectrum metadata."""
        return (
            f"Spectrum Metadata:\n"
            f"  Sample Rate: {self.sample_rate_hz / 1e3:.3f} kHz\n"
            f"  Bin Width: {self.bin_width_hz:.3f} Hz\n"
            f"  Number of Points: {self.num_points:,}\n"
            f"  Scale: {self.scale.value}\n"
            f"  Timestamp: {self.timestamp.isoformat()}"
        )
