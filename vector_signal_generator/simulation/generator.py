"""Stateful phase-accumulator signal generator."""

import logging
import math
from typing import List, Optional

import numpy as np

from ..objects.config import SignalConfig
from ..objects.enums import ModulationType
from ..utils import TWO_PI, phase_increment, wrap_phase
from .multitone import initial_tone_phases

logger = logging.getLogger(__name__)


class SignalGenerator:
    """
    Produces continuous-phase I/Q samples one at a time or in blocks.

    The generator owns three phase accumulators: the carrier phase, the
    modulation phase, and one phase per multitone component. The
    configuration is passed on every call and may change between calls;
    carrier and modulation phases carry over unchanged. Tone phases are
    rebuilt from the configured schedule whenever the tone count differs from
    the count they were built for.

    A generator must be driven by one caller at a time. Use one instance per
    independent signal stream.
    """

    def __init__(self):
        self.carrier_phase = 0.0
        self.modulation_phase = 0.0
        self._tone_phases = np.zeros(0)
        self._tone_count: Optional[int] = None
        self._tone_increments = np.zeros(0)
        self._increments_config: Optional[SignalConfig] = None

    @property
    def tone_phases(self) -> List[float]:
        """Copy of the current multitone phases (empty before first use)."""
        return self._tone_phases.tolist()

    def reset(self) -> None:
        """Return all accumulators to their initial state."""
        self.carrier_phase = 0.0
        self.modulation_phase = 0.0
        self._tone_phases = np.zeros(0)
        self._tone_count = None

    def generate_one(self, config: SignalConfig) -> complex:
        """
        Advance by one sample period and return the sample.

        Parameters
        ----------
        config : SignalConfig
            Waveform description

        Returns
        -------
        complex
            I/Q sample (real = in-phase, imag = quadrature)
        """
        if config.modulation == ModulationType.MULTITONE:
            return self._next_multitone_sample(config)

        self.modulation_phase = wrap_phase(
            self.modulation_phase
            + phase_increment(config.modulation_frequency_hz, config.sample_rate_hz)
        )

        frequency_hz = config.carrier_frequency_hz
        amplitude = 1.0
        modulation = config.modulation
        strength = config.modulation_strength

        if modulation == ModulationType.AM:
            amplitude = 1.0 + strength * math.cos(self.modulation_phase)
        elif modulation == ModulationType.FM:
            frequency_hz = config.carrier_frequency_hz + strength * math.cos(self.modulation_phase)
        elif modulation == ModulationType.PULSE:
            # ON for the first duty-cycle fraction of each pulse period
            amplitude = 1.0 if self.modulation_phase < strength * TWO_PI else 0.0

        self.carrier_phase = wrap_phase(
            self.carrier_phase + phase_increment(frequency_hz, config.sample_rate_hz)
        )

        output_phase = self.carrier_phase
        if modulation == ModulationType.PM:
            output_phase += strength * math.cos(self.modulation_phase)

        return complex(amplitude * math.cos(output_phase), amplitude * math.sin(output_phase))

    def generate_block(self, config: SignalConfig, count: int) -> np.ndarray:
        """
        Generate ``count`` consecutive samples.

        Equivalent to calling generate_one ``count`` times, so splitting a
        request into several blocks yields the same samples as one block.

        Parameters
        ----------
        config : SignalConfig
            Waveform description
        count : int
            Number of samples

        Returns
        -------
        np.ndarray
            Complex samples (complex128)

        Raises
        ------
        ValueError
            If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        block = np.empty(count, dtype=np.complex128)
        for i in range(count):
            block[i] = self.generate_one(config)
        return block

    def _initialize_tone_phases(self, config: SignalConfig) -> None:
        """Rebuild tone phases from the configured schedule."""
        logger.debug(
            "Initializing %d tone phases (%s, seed=%d)",
            config.tone_count, config.initial_phase.value, config.seed,
        )
        phases = initial_tone_phases(config.initial_phase, config.tone_count, config.seed)
        self._tone_phases = np.array(phases, dtype=float)
        self._tone_count = config.tone_count

    def _next_multitone_sample(self, config: SignalConfig) -> complex:
        """Sum of equal-amplitude tones, normalized by the tone count."""
        if self._tone_count != config.tone_count:
            self._initialize_tone_phases(config)
        if config is not self._increments_config:
            self._tone_increments = phase_increment(
                config.tone_frequencies_hz, config.sample_rate_hz
            )
            self._increments_config = config

        phases = self._tone_phases
        phases += self._tone_increments
        # Single-subtraction wrap per tone
        phases[phases >= TWO_PI] -= TWO_PI

        scale = 1.0 / config.tone_count
        return complex(np.sum(np.cos(phases)) * scale, np.sum(np.sin(phases)) * scale)
