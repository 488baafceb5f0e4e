"""Initial phase schedules for multitone synthesis."""

import math
from typing import List

import numpy as np

from ..objects.enums import MultitonePhase
from ..utils import TWO_PI


def zero_phases(tone_count: int) -> List[float]:
    """All tones start in phase."""
    return [0.0] * tone_count


def random_phases(tone_count: int, seed: int) -> List[float]:
    """
    Draw one phase per tone uniformly from [0, 2*pi).

    Draws come from a private ``numpy.random.Generator`` seeded with ``seed``
    and are taken in tone index order, so identical ``(seed, tone_count)``
    always yields the identical sequence. The global numpy random state is
    never touched.

    Parameters
    ----------
    tone_count : int
        Number of tones
    seed : int
        Unsigned 64-bit seed

    Returns
    -------
    List[float]
        Phases in radians
    """
    rng = np.random.default_rng(seed)
    return [float(phase) for phase in rng.uniform(0.0, TWO_PI, size=tone_count)]


def schroeder_phases(tone_count: int) -> List[float]:
    """
    Schroeder phase schedule, which keeps the peak-to-average power ratio of
    the tone sum low.

    Tone ``k`` starts at ``-pi * k * (k - 1) / tone_count``. The values are
    returned unwrapped.

    Parameters
    ----------
    tone_count : int
        Number of tones

    Returns
    -------
    List[float]
        Phases in radians
    """
    return [-math.pi * k * (k - 1) / tone_count for k in range(tone_count)]


def initial_tone_phases(mode: MultitonePhase, tone_count: int, seed: int = 0) -> List[float]:
    """
    Initial phases of ``tone_count`` tones for the given schedule.

    Parameters
    ----------
    mode : MultitonePhase
        Phase schedule
    tone_count : int
        Number of tones
    seed : int, optional
        Seed used by the RANDOM schedule

    Returns
    -------
    List[float]
        Phases in radians, one per tone

    Raises
    ------
    ValueError
        If mode is not a known schedule
    """
    if mode == MultitonePhase.ZERO:
        return zero_phases(tone_count)
    if mode == MultitonePhase.RANDOM:
        return random_phases(tone_count, seed)
    if mode == MultitonePhase.SCHROEDER:
        return schroeder_phases(tone_count)
    raise ValueError(f"Unknown multitone phase mode: {mode}")


def crest_factor_db(samples: np.ndarray) -> float:
    """
    Crest factor (peak-to-average power ratio) of a sample block in dB.

    Parameters
    ----------
    samples : np.ndarray
        Complex samples

    Returns
    -------
    float
        10*log10(max|x|^2 / mean|x|^2)
    """
    power = np.abs(samples) ** 2
    return float(10 * np.log10(np.max(power) / np.mean(power)))
