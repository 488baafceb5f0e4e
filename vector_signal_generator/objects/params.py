"""AppParams class definition and JSON persistence."""

import json
import logging
from enum import Enum
from typing import Any, Dict, Tuple

import attrs

from .config import MAX_SEED, SignalConfig
from .enums import ModulationType, MultitonePhase, SpectrumScale, TimeDomainUnit
from ..utils import validate_non_negative, validate_range

logger = logging.getLogger(__name__)

MAX_CARRIER_FREQUENCY_HZ = 10e9
MAX_AMPLITUDE = 1e6
MIN_SAMPLE_RATE_HZ = 1e3
MAX_SAMPLE_RATE_HZ = 1e9
MAX_NUM_SAMPLES = 1_000_000
MAX_AM_INDEX = 10.0
MAX_PM_INDEX = 100.0
MAX_TONE_COUNT = 100

# Frequencies limited to half the sample rate
NYQUIST_LIMITED_FIELDS = (
    "carrier_frequency_hz",
    "am_mod_freq_hz",
    "fm_mod_freq_hz",
    "fm_deviation_hz",
    "pm_mod_freq_hz",
    "pulse_freq_hz",
)
PHASE_RATE_FIELDS = NYQUIST_LIMITED_FIELDS + (
    "sample_rate_hz",
    "multitone_count",
    "multitone_spacing_hz",
)


@attrs.define
class AppParams:
    """
    User-level parameter set of the signal generator application.

    Each modulation kind keeps its own modulating frequency and strength so
    that switching kinds does not lose the settings of the others. The
    parameters reduce to a SignalConfig through ``to_config()``.

    Parameters
    ----------
    carrier_frequency_hz : float
        Carrier frequency in Hz (0 to 10 GHz, at most half the sample rate)
    amplitude : float
        Output amplitude factor applied to generated samples
    sample_rate_hz : float
        Sample rate in Hz (1 kHz to 1 GHz)
    num_samples : int
        Number of samples per snapshot or export
    spectrum_scale : SpectrumScale
        Magnitude scale of the spectrum plot
    modulation : ModulationType
        Selected modulation kind
    am_mod_freq_hz, am_mod_index : float
        AM modulating frequency and modulation index (0 to 10)
    fm_mod_freq_hz, fm_deviation_hz : float
        FM modulating frequency and frequency deviation (each at most half the
        sample rate; the other modulating frequencies share that limit)
    pm_mod_freq_hz, pm_mod_index : float
        PM modulating frequency and modulation index beta (0 to 100)
    pulse_freq_hz, pulse_duty_cycle : float
        Pulse repetition frequency and duty cycle (0 to 1)
    multitone_count : int
        Number of multitone components (1 to 100)
    multitone_spacing_hz : float
        Spacing between multitone components in Hz
    multitone_phase : MultitonePhase
        Initial phase schedule of the multitone components
    seed : int
        Seed for RANDOM multitone phases
    time_domain_unit : TimeDomainUnit
        Horizontal axis unit of the time-domain plot
    show_time_domain, show_freq_domain : bool
        Which plots to render
    """

    carrier_frequency_hz: float = attrs.field(default=1000.0)
    amplitude: float = attrs.field(default=1.0)
    sample_rate_hz: float = attrs.field(default=100000.0)
    num_samples: int = attrs.field(default=1000)
    spectrum_scale: SpectrumScale = attrs.field(default=SpectrumScale.DECIBEL)
    modulation: ModulationType = attrs.field(default=ModulationType.CW)
    am_mod_freq_hz: float = attrs.field(default=100.0)
    am_mod_index: float = attrs.field(default=0.5)
    fm_mod_freq_hz: float = attrs.field(default=100.0)
    fm_deviation_hz: float = attrs.field(default=1000.0)
    pm_mod_freq_hz: float = attrs.field(default=100.0)
    pm_mod_index: float = attrs.field(default=1.0)
    pulse_freq_hz: float = attrs.field(default=1000.0)
    pulse_duty_cycle: float = attrs.field(default=0.5)
    multitone_count: int = attrs.field(default=10)
    multitone_spacing_hz: float = attrs.field(default=1000.0)
    multitone_phase: MultitonePhase = attrs.field(default=MultitonePhase.RANDOM)
    seed: int = attrs.field(default=0)
    time_domain_unit: TimeDomainUnit = attrs.field(default=TimeDomainUnit.SECONDS)
    show_time_domain: bool = attrs.field(default=True)
    show_freq_domain: bool = attrs.field(default=True)

    @carrier_frequency_hz.validator
    def _validate_carrier_frequency_hz(self, attribute, value):
        validate_range(value, 0.0, MAX_CARRIER_FREQUENCY_HZ, "carrier_frequency_hz")
        self._check_phase_rates(attribute.name, value)

    @amplitude.validator
    def _validate_amplitude(self, attribute, value):
        validate_range(value, 0.0, MAX_AMPLITUDE, "amplitude")

    @sample_rate_hz.validator
    def _validate_sample_rate_hz(self, attribute, value):
        self._check_phase_rates(attribute.name, value)

    @num_samples.validator
    def _validate_num_samples(self, attribute, value):
        validate_range(value, 1, MAX_NUM_SAMPLES, "num_samples")

    @am_mod_freq_hz.validator
    @fm_mod_freq_hz.validator
    @pm_mod_freq_hz.validator
    @pulse_freq_hz.validator
    def _validate_modulating_frequency(self, attribute, value):
        self._check_phase_rates(attribute.name, value)

    @am_mod_index.validator
    def _validate_am_mod_index(self, attribute, value):
        validate_range(value, 0.0, MAX_AM_INDEX, "am_mod_index")

    @fm_deviation_hz.validator
    def _validate_fm_deviation_hz(self, attribute, value):
        validate_non_negative(value, "fm_deviation_hz")
        self._check_phase_rates(attribute.name, value)

    @pm_mod_index.validator
    def _validate_pm_mod_index(self, attribute, value):
        validate_range(value, 0.0, MAX_PM_INDEX, "pm_mod_index")

    @pulse_duty_cycle.validator
    def _validate_pulse_duty_cycle(self, attribute, value):
        validate_range(value, 0.0, 1.0, "pulse_duty_cycle")

    @multitone_count.validator
    def _validate_multitone_count(self, attribute, value):
        validate_range(value, 1, MAX_TONE_COUNT, "multitone_count")
        self._check_phase_rates(attribute.name, value)

    @multitone_spacing_hz.validator
    def _validate_multitone_spacing_hz(self, attribute, value):
        validate_non_negative(value, "multitone_spacing_hz")
        self._check_phase_rates(attribute.name, value)

    @seed.validator
    def _validate_seed(self, attribute, value):
        validate_range(value, 0, MAX_SEED, "seed")

    def _check_phase_rates(self, name: str, value) -> None:
        """
        Keep every per-sample phase increment at or below 2*pi.

        The generator wraps its phases with a single subtraction, which only
        holds while no oscillator runs faster than the sample rate. Carrier,
        modulating frequencies and FM deviation are therefore limited to half
        the sample rate, and the highest multitone component to the sample
        rate. Runs from every validator involved, with ``value`` standing in
        for the field being set, so that attribute assignment is checked the
        same way as construction.

        Raises
        ------
        ValueError
            If a frequency exceeds its limit
        """
        rates = {field: getattr(self, field) for field in PHASE_RATE_FIELDS}
        rates[name] = value

        sample_rate_hz = rates['sample_rate_hz']
        validate_range(sample_rate_hz, MIN_SAMPLE_RATE_HZ, MAX_SAMPLE_RATE_HZ, "sample_rate_hz")

        nyquist_hz = sample_rate_hz / 2
        for field in NYQUIST_LIMITED_FIELDS:
            validate_range(rates[field], 0.0, nyquist_hz, field)

        center = (rates['multitone_count'] - 1) / 2
        highest_tone_hz = rates['carrier_frequency_hz'] + center * rates['multitone_spacing_hz']
        if highest_tone_hz > sample_rate_hz:
            raise ValueError(
                f"Highest multitone frequency must not exceed sample_rate_hz "
                f"({sample_rate_hz}), got {highest_tone_hz}"
            )
    @property
    def modulation_settings(self) -> Tuple[float, float]:
        """
        Modulating frequency and strength of the selected modulation.

        Returns
        -------
        Tuple[float, float]
            (modulation_frequency_hz, modulation_strength); (0, 0) for CW and
            MULTITONE
        """
        if self.modulation == ModulationType.AM:
            return self.am_mod_freq_hz, self.am_mod_index
        if self.modulation == ModulationType.FM:
            return self.fm_mod_freq_hz, self.fm_deviation_hz
        if self.modulation == ModulationType.PM:
            return self.pm_mod_freq_hz, self.pm_mod_index
        if self.modulation == ModulationType.PULSE:
            return self.pulse_freq_hz, self.pulse_duty_cycle
        return 0.0, 0.0

    def to_config(self) -> SignalConfig:
        """Build the SignalConfig the generator consumes."""
        mod_freq_hz, mod_strength = self.modulation_settings
        return SignalConfig(
            carrier_frequency_hz=self.carrier_frequency_hz,
            sample_rate_hz=self.sample_rate_hz,
            modulation=self.modulation,
            modulation_frequency_hz=mod_freq_hz,
            modulation_strength=mod_strength,
            tone_count=self.multitone_count,
            tone_spacing_hz=self.multitone_spacing_hz,
            initial_phase=self.multitone_phase,
            seed=self.seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary for JSON serialization."""
        data = attrs.asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppParams':
        """
        Create parameters from dictionary.

        Parameters
        ----------
        data : Dict[str, Any]
            Dictionary representation from to_dict()

        Returns
        -------
        AppParams
            Reconstructed parameters

        Raises
        ------
        KeyError
            If a field is missing
        ValueError
            If a field holds an invalid value
        """
        return cls(
            carrier_frequency_hz=float(data['carrier_frequency_hz']),
            amplitude=float(data['amplitude']),
            sample_rate_hz=float(data['sample_rate_hz']),
            num_samples=int(data['num_samples']),
            spectrum_scale=SpectrumScale(data['spectrum_scale']),
            modulation=ModulationType(data['modulation']),
            am_mod_freq_hz=float(data['am_mod_freq_hz']),
            am_mod_index=float(data['am_mod_index']),
            fm_mod_freq_hz=float(data['fm_mod_freq_hz']),
            fm_deviation_hz=float(data['fm_deviation_hz']),
            pm_mod_freq_hz=float(data['pm_mod_freq_hz']),
            pm_mod_index=float(data['pm_mod_index']),
            pulse_freq_hz=float(data['pulse_freq_hz']),
            pulse_duty_cycle=float(data['pulse_duty_cycle']),
            multitone_count=int(data['multitone_count']),
            multitone_spacing_hz=float(data['multitone_spacing_hz']),
            multitone_phase=MultitonePhase(data['multitone_phase']),
            seed=int(data['seed']),
            time_domain_unit=TimeDomainUnit(data['time_domain_unit']),
            show_time_domain=bool(data['show_time_domain']),
            show_freq_domain=bool(data['show_freq_domain']),
        )

    @classmethod
    def from_file(cls, filepath: str) -> 'AppParams':
        """
        Load parameters from a JSON file.

        Parameters
        ----------
        filepath : str
            Path to JSON file

        Returns
        -------
        AppParams
            Loaded parameters
        """
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls.from_dict(data)

    @staticmethod
    def to_file(params: 'AppParams', filepath: str) -> None:
        """
        Save parameters to a JSON file.

        Parameters
        ----------
        params : AppParams
            Parameters to save
        filepath : str
            Path to output JSON file
        """
        with open(filepath, 'w') as f:
            json.dump(params.to_dict(), f, indent=2)


def load_params_or_keep(filepath: str, current: AppParams) -> AppParams:
    """
    Load parameters from ``filepath``, keeping ``current`` if that fails.

    A missing, unreadable or malformed file is logged and leaves the caller's
    parameters untouched.

    Parameters
    ----------
    filepath : str
        Path to JSON file
    current : AppParams
        Parameters returned when loading fails

    Returns
    -------
    AppParams
        Loaded parameters, or ``current``
    """
    try:
        return AppParams.from_file(filepath)
    except OSError as e:
        logger.warning("Failed to read parameters file %s: %s", filepath, e)
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Failed to parse parameters from %s: %s", filepath, e)
    return current
