"""Magnitude spectrum of generated IQ data."""

import numpy as np
from scipy import fft
from typing import Tuple

from ..objects.enums import SpectrumScale
from ..objects.metadata import SpectrumMetadata
from ..utils import DB_FLOOR, magnitude_to_db, validate_positive


def spectrum_frequencies(num_points: int, sample_rate_hz: float) -> np.ndarray:
    """
    Frequency of each bin of a centered spectrum.

    Bin ``i`` maps to ``(i - num_points / 2) * sample_rate_hz / num_points``.

    Parameters
    ----------
    num_points : int
        Transform length
    sample_rate_hz : float
        Sample rate in Hz

    Returns
    -------
    np.ndarray
        Bin frequencies in Hz
    """
    return (np.arange(num_points) - num_points / 2) * sample_rate_hz / num_points


def compute_spectrum(
    samples: np.ndarray,
    sample_rate_hz: float,
    scale: SpectrumScale = SpectrumScale.DECIBEL,
    floor_db: float = DB_FLOOR,
) -> Tuple[np.ndarray, np.ndarray, SpectrumMetadata]:
    """
    Compute the centered magnitude spectrum of a block of IQ samples.

    A forward DFT the length of the block is taken, bins are reordered so
    that output bin ``i`` holds DFT bin ``(i + n // 2) % n`` (zero frequency
    in the middle), and magnitudes are divided by the block length.

    Parameters
    ----------
    samples : np.ndarray
        Complex IQ samples
    sample_rate_hz : float
        Sample rate in Hz
    scale : SpectrumScale, optional
        LINEAR magnitudes or DECIBEL (20*log10), default DECIBEL
    floor_db : float, optional
        Lowest dB value returned, default -120 dB

    Returns
    -------
    frequencies : np.ndarray
        Bin frequencies in Hz
    magnitude : np.ndarray
        Normalized magnitude (linear or dB)
    metadata : SpectrumMetadata
        Metadata about the spectrum

    Raises
    ------
    ValueError
        If samples is empty or sample_rate_hz is not positive
    """
    validate_positive(sample_rate_hz, "sample_rate_hz")
    samples = np.asarray(samples, dtype=np.complex128)
    num_points = len(samples)
    if num_points == 0:
        raise ValueError("samples must not be empty")

    spectrum = fft.fft(samples)
    spectrum = np.roll(spectrum, -(num_points // 2))

    magnitude = np.abs(spectrum) / num_points
    if scale == SpectrumScale.DECIBEL:
        magnitude = magnitude_to_db(magnitude, floor_db)

    frequencies = spectrum_frequencies(num_points, sample_rate_hz)

    metadata = SpectrumMetadata(
        sample_rate_hz=sample_rate_hz,
        num_points=num_points,
        scale=scale,
    )

    return frequencies, magnitude, metadata
