"""Utility functions for phase arithmetic, level conversion and validation."""

import math
import numpy as np

TWO_PI = 2.0 * math.pi

# Floor applied to dB magnitudes so that empty bins stay plottable
DB_FLOOR = -120.0


def wrap_phase(phase: float) -> float:
    """
    Fold an accumulated phase back below 2*pi with a single subtraction.

    Only valid while the increment added since the last wrap is at most 2*pi.
    A phase of exactly 2*pi folds to 0, so wrapped phases lie in [0, 2*pi);
    a strict ``>`` comparison would leave 2*pi itself in place. Phases below
    zero are returned unchanged.

    Parameters
    ----------
    phase : float
        Accumulated phase in radians

    Returns
    -------
    float
        Wrapped phase in radians
    """
    if phase >= TWO_PI:
        phase -= TWO_PI
    return phase


def phase_increment(frequency_hz: float, sample_rate_hz: float) -> float:
    """Phase advance in radians per sample for a tone at ``frequency_hz``."""
    return TWO_PI * frequency_hz / sample_rate_hz


def magnitude_to_db(magnitude: np.ndarray, floor_db: float = DB_FLOOR) -> np.ndarray:
    """
    Convert linear magnitudes to dB (20*log10), clamped at ``floor_db``.

    Parameters
    ----------
    magnitude : np.ndarray
        Linear magnitudes (>= 0)
    floor_db : float
        Lowest value returned, default -120 dB

    Returns
    -------
    np.ndarray
        Magnitudes in dB
    """
    magnitude = np.asarray(magnitude, dtype=float)
    with np.errstate(divide='ignore'):
        db = 20 * np.log10(magnitude)
    return np.maximum(db, floor_db)


def validate_positive(value: float, name: str) -> None:
    """Validate that a value is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is zero or positive."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_range(value: float, min_val: float, max_val: float, name: str) -> None:
    """Validate that a value is within a range."""
    if not min_val <= value <= max_val:
        raise ValueError(f"{name} must be between {min_val} and {max_val}, got {value}")
