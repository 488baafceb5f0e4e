"""Tests for SignalConfig validation and derived values."""

import attrs
import numpy as np
import pytest

from vector_signal_generator.objects.config import MAX_SEED, SignalConfig
from vector_signal_generator.objects.enums import ModulationType, MultitonePhase


class TestSignalConfigInstantiation:
    """Test SignalConfig construction."""

    def test_defaults(self):
        """Test default modulation settings."""
        config = SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=100e3)

        assert config.modulation == ModulationType.CW
        assert config.modulation_frequency_hz == 0.0
        assert config.modulation_strength == 0.0
        assert config.tone_count == 1
        assert config.initial_phase == MultitonePhase.ZERO
        assert config.seed == 0

    def test_frozen(self, cw_config):
        """Test that a config cannot be modified in place."""
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            cw_config.carrier_frequency_hz = 5.0

    def test_evolve(self, cw_config):
        """Test that evolve returns a modified copy."""
        changed = cw_config.evolve(carrier_frequency_hz=200.0)

        assert changed.carrier_frequency_hz == 200.0
        assert cw_config.carrier_frequency_hz == 100.0

    def test_max_seed_accepted(self):
        """Test that the full unsigned 64-bit seed range is accepted."""
        config = SignalConfig(carrier_frequency_hz=0.0, sample_rate_hz=1.0, seed=MAX_SEED)
        assert config.seed == MAX_SEED


class TestSignalConfigValidation:
    """Test SignalConfig validation errors."""

    def test_zero_sample_rate(self):
        """Test that a zero sample rate is rejected."""
        with pytest.raises(ValueError, match="sample_rate_hz must be positive"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=0.0)

    def test_negative_carrier(self):
        """Test that a negative carrier frequency is rejected."""
        with pytest.raises(ValueError, match="carrier_frequency_hz must be non-negative"):
            SignalConfig(carrier_frequency_hz=-1.0, sample_rate_hz=1e3)

    def test_negative_modulation_frequency(self):
        """Test that a negative modulating frequency is rejected."""
        with pytest.raises(ValueError, match="modulation_frequency_hz must be non-negative"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, modulation_frequency_hz=-5.0)

    def test_zero_tone_count(self):
        """Test that at least one tone is required."""
        with pytest.raises(ValueError, match="tone_count must be at least 1"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, tone_count=0)

    def test_float_tone_count(self):
        """Test that a non-integer tone count is rejected."""
        with pytest.raises(ValueError, match="tone_count must be an integer"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, tone_count=2.5)

    def test_negative_spacing(self):
        """Test that a negative tone spacing is rejected."""
        with pytest.raises(ValueError, match="tone_spacing_hz must be non-negative"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, tone_spacing_hz=-1.0)

    def test_modulation_must_be_enum(self):
        """Test that a plain string is not accepted as modulation."""
        with pytest.raises(ValueError, match="modulation must be a ModulationType"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, modulation="AM")

    def test_initial_phase_must_be_enum(self):
        """Test that a plain string is not accepted as initial phase."""
        with pytest.raises(ValueError, match="initial_phase must be a MultitonePhase"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, initial_phase="Random")

    @pytest.mark.parametrize("seed", [-1, MAX_SEED + 1])
    def test_seed_out_of_range(self, seed):
        """Test that seeds outside the unsigned 64-bit range are rejected."""
        with pytest.raises(ValueError, match="seed must be between"):
            SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, seed=seed)

    @pytest.mark.parametrize("modulation,message", [
        (ModulationType.AM, "AM modulation index"),
        (ModulationType.FM, "FM deviation"),
        (ModulationType.PM, "PM modulation index"),
    ])
    def test_negative_strength(self, modulation, message):
        """Test that AM/FM/PM strengths must be non-negative."""
        with pytest.raises(ValueError, match=message):
            SignalConfig(
                carrier_frequency_hz=1e3,
                sample_rate_hz=1e4,
                modulation=modulation,
                modulation_strength=-0.1,
            )

    @pytest.mark.parametrize("duty", [-0.1, 1.5])
    def test_pulse_duty_out_of_range(self, duty):
        """Test that the pulse duty cycle must lie in [0, 1]."""
        with pytest.raises(ValueError, match="Pulse duty cycle must be between"):
            SignalConfig(
                carrier_frequency_hz=1e3,
                sample_rate_hz=1e4,
                modulation=ModulationType.PULSE,
                modulation_frequency_hz=100.0,
                modulation_strength=duty,
            )

    def test_strength_ignored_for_cw(self):
        """Test that CW does not check the modulation strength."""
        config = SignalConfig(carrier_frequency_hz=1e3, sample_rate_hz=1e4, modulation_strength=-3.0)
        assert config.modulation_strength == -3.0

    def test_am_overmodulation_allowed(self):
        """Test that AM indices above 1 are accepted."""
        config = SignalConfig(
            carrier_frequency_hz=1e3,
            sample_rate_hz=1e4,
            modulation=ModulationType.AM,
            modulation_strength=2.0,
        )
        assert config.modulation_strength == 2.0

    def test_evolve_revalidates(self, pulse_config):
        """Test that evolve runs the same validation as construction."""
        with pytest.raises(ValueError, match="Pulse duty cycle"):
            pulse_config.evolve(modulation_strength=2.0)


class TestToneLayout:
    """Test multitone frequency layout."""

    def test_odd_count_centered(self):
        """Test that an odd tone count puts one tone on the carrier."""
        config = SignalConfig(
            carrier_frequency_hz=1e3,
            sample_rate_hz=1e4,
            modulation=ModulationType.MULTITONE,
            tone_count=3,
            tone_spacing_hz=100.0,
        )
        assert np.allclose(config.tone_offsets_hz, [-100.0, 0.0, 100.0])
        assert np.allclose(config.tone_frequencies_hz, [900.0, 1000.0, 1100.0])

    def test_even_count_straddles_carrier(self):
        """Test that an even tone count places no tone on the carrier."""
        config = SignalConfig(
            carrier_frequency_hz=0.0,
            sample_rate_hz=1e4,
            modulation=ModulationType.MULTITONE,
            tone_count=2,
            tone_spacing_hz=100.0,
        )
        assert np.allclose(config.tone_offsets_hz, [-50.0, 50.0])

    def test_offsets_symmetric(self, multitone_config):
        """Test that offsets sum to zero."""
        assert np.sum(multitone_config.tone_offsets_hz) == pytest.approx(0.0)


class TestSignalConfigStr:
    """Test SignalConfig string representation."""

    def test_cw_str(self, cw_config):
        """Test that CW shows only carrier and rate."""
        text = str(cw_config)
        assert text.startswith("CW @ 100.000 Hz")
        assert "Fm=" not in text

    def test_modulated_str(self, am_config):
        """Test that modulated kinds show modulating frequency and strength."""
        text = str(am_config)
        assert "AM" in text
        assert "Fm=100.000 Hz" in text
        assert "strength=0.5" in text

    def test_multitone_str(self, multitone_config):
        """Test that multitone shows the tone layout."""
        text = str(multitone_config)
        assert "8 tones" in text
        assert "phase=Random" in text
        assert "seed=42" in text
