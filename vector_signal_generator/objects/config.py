"""SignalConfig class definition."""

import numbers

import attrs
import numpy as np

from .enums import ModulationType, MultitonePhase
from ..utils import validate_non_negative, validate_positive, validate_range

MAX_SEED = 2 ** 64 - 1


@attrs.define(frozen=True)
class SignalConfig:
    """
    Immutable description of the waveform a SignalGenerator produces.

    Parameters
    ----------
    carrier_frequency_hz : float
        Carrier frequency in Hz (>= 0)
    sample_rate_hz : float
        Sample rate in Hz (> 0)
    modulation : ModulationType
        Modulation kind, default CW
    modulation_frequency_hz : float, optional
        Modulating tone frequency for AM/FM/PM, pulse repetition frequency for
        PULSE. Ignored for CW and MULTITONE.
    modulation_strength : float, optional
        AM: modulation index. FM: frequency deviation in Hz. PM: phase
        modulation index (beta) in radians. PULSE: duty cycle (0 to 1).
        Ignored for CW and MULTITONE.
    tone_count : int, optional
        Number of multitone components, default 1
    tone_spacing_hz : float, optional
        Spacing between adjacent multitone components in Hz
    initial_phase : MultitonePhase, optional
        Initial phase schedule for multitone components, default ZERO
    seed : int, optional
        Seed for RANDOM multitone phases (unsigned 64-bit), default 0
    """

    carrier_frequency_hz: float = attrs.field()
    sample_rate_hz: float = attrs.field()
    modulation: ModulationType = attrs.field(default=ModulationType.CW)
    modulation_frequency_hz: float = attrs.field(default=0.0)
    modulation_strength: float = attrs.field(default=0.0)
    tone_count: int = attrs.field(default=1)
    tone_spacing_hz: float = attrs.field(default=0.0)
    initial_phase: MultitonePhase = attrs.field(default=MultitonePhase.ZERO)
    seed: int = attrs.field(default=0)

    @carrier_frequency_hz.validator
    def _validate_carrier_frequency_hz(self, attribute, value):
        validate_non_negative(value, "carrier_frequency_hz")

    @sample_rate_hz.validator
    def _validate_sample_rate_hz(self, attribute, value):
        validate_positive(value, "sample_rate_hz")

    @modulation.validator
    def _validate_modulation(self, attribute, value):
        if not isinstance(value, ModulationType):
            raise ValueError(f"modulation must be a ModulationType, got {value!r}")

    @modulation_frequency_hz.validator
    def _validate_modulation_frequency_hz(self, attribute, value):
        validate_non_negative(value, "modulation_frequency_hz")

    @tone_count.validator
    def _validate_tone_count(self, attribute, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"tone_count must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"tone_count must be at least 1, got {value}")

    @tone_spacing_hz.validator
    def _validate_tone_spacing_hz(self, attribute, value):
        validate_non_negative(value, "tone_spacing_hz")

    @initial_phase.validator
    def _validate_initial_phase(self, attribute, value):
        if not isinstance(value, MultitonePhase):
            raise ValueError(f"initial_phase must be a MultitonePhase, got {value!r}")

    @seed.validator
    def _validate_seed(self, attribute, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"seed must be an integer, got {value!r}")
        validate_range(value, 0, MAX_SEED, "seed")

    def __attrs_post_init__(self):
        """Check modulation_strength against the range of the selected kind."""
        strength = self.modulation_strength
        if self.modulation == ModulationType.AM:
            validate_non_negative(strength, "AM modulation index")
        elif self.modulation == ModulationType.FM:
            validate_non_negative(strength, "FM deviation")
        elif self.modulation == ModulationType.PM:
            validate_non_negative(strength, "PM modulation index")
        elif self.modulation == ModulationType.PULSE:
            validate_range(strength, 0.0, 1.0, "Pulse duty cycle")

    @property
    def tone_offsets_hz(self) -> np.ndarray:
        """
        Frequency offsets of the multitone components from the carrier.

        Tones are placed symmetrically: tone ``k`` sits at
        ``(k - (tone_count - 1) / 2) * tone_spacing_hz``.

        Returns
        -------
        np.ndarray
            Offsets in Hz, one per tone
        """
        center = (self.tone_count - 1) / 2
        return (np.arange(self.tone_count) - center) * self.tone_spacing_hz

    @property
    def tone_frequencies_hz(self) -> np.ndarray:
        """Absolute frequencies of the multitone components in Hz."""
        return self.carrier_frequency_hz + self.tone_offsets_hz

    def evolve(self, **changes) -> 'SignalConfig':
        """Return a validated copy with ``changes`` applied."""
        return attrs.evolve(self, **changes)

    def __str__(self) -> str:
        """String representation of the configuration."""
        base = (
            f"{self.modulation.value} @ {self.carrier_frequency_hz:.3f} Hz, "
            f"Fs={self.sample_rate_hz:.3f} Hz"
        )
        if self.modulation == ModulationType.CW:
            return base
        if self.modulation == ModulationType.MULTITONE:
            return (
                f"{base}, {self.tone_count} tones x {self.tone_spacing_hz:.3f} Hz, "
                f"phase={self.initial_phase.value}, seed={self.seed}"
            )
        return (
            f"{base}, Fm={self.modulation_frequency_hz:.3f} Hz, "
            f"strength={self.modulation_strength:g}"
        )
