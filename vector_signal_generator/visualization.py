"""Time-domain and spectrum plots of generated IQ data."""

import logging
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .objects.enums import SpectrumScale, TimeDomainUnit
from .objects.params import AppParams
from .simulation.spectrum import compute_spectrum

logger = logging.getLogger(__name__)


def time_axis(num_samples: int, sample_rate_hz: float, unit: TimeDomainUnit) -> np.ndarray:
    """
    Horizontal axis values for a time-domain plot.

    Parameters
    ----------
    num_samples : int
        Number of samples
    sample_rate_hz : float
        Sample rate in Hz
    unit : TimeDomainUnit
        SECONDS (index / sample rate) or SAMPLES (raw index)

    Returns
    -------
    np.ndarray
        Axis values
    """
    index = np.arange(num_samples, dtype=float)
    if unit == TimeDomainUnit.SECONDS:
        return index / sample_rate_hz
    return index


def plot_time_domain(ax, samples: np.ndarray, sample_rate_hz: float,
                     unit: TimeDomainUnit = TimeDomainUnit.SECONDS):
    """Plot the I and Q components against time or sample index."""
    x = time_axis(len(samples), sample_rate_hz, unit)
    ax.plot(x, np.real(samples), linewidth=0.8, label='I')
    ax.plot(x, np.imag(samples), linewidth=0.8, label='Q')
    ax.set_xlabel('Time (s)' if unit == TimeDomainUnit.SECONDS else 'Sample')
    ax.set_ylabel('Amplitude')
    ax.set_title('Time Domain')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right')
    return ax


def plot_spectrum(ax, frequencies_hz: np.ndarray, magnitude: np.ndarray,
                  scale: SpectrumScale = SpectrumScale.DECIBEL):
    """Plot a centered magnitude spectrum."""
    ax.plot(frequencies_hz, magnitude, linewidth=0.8, label='Magnitude')
    ax.set_xlabel('Frequency (Hz)')
    ax.set_ylabel('Magnitude (dB)' if scale == SpectrumScale.DECIBEL else 'Magnitude')
    ax.set_title('Frequency Domain')
    ax.grid(True, alpha=0.3)
    return ax


def create_signal_figure(samples: np.ndarray, params: AppParams,
                         show_time_domain: Optional[bool] = None,
                         show_freq_domain: Optional[bool] = None):
    """
    Build a figure with the time-domain and/or spectrum view of ``samples``.

    Parameters
    ----------
    samples : np.ndarray
        Complex samples (already scaled by the output amplitude)
    params : AppParams
        Parameters the samples were generated with; supply the sample rate,
        time unit, spectrum scale and default plot selection
    show_time_domain : bool, optional
        Override params.show_time_domain
    show_freq_domain : bool, optional
        Override params.show_freq_domain

    Returns
    -------
    matplotlib.figure.Figure
        The figure

    Raises
    ------
    ValueError
        If both views are disabled
    """
    if show_time_domain is None:
        show_time_domain = params.show_time_domain
    if show_freq_domain is None:
        show_freq_domain = params.show_freq_domain

    num_plots = int(show_time_domain) + int(show_freq_domain)
    if num_plots == 0:
        raise ValueError("At least one of the time or frequency views must be enabled")

    fig, axes = plt.subplots(num_plots, 1, figsize=(12, 4 * num_plots), squeeze=False)
    axes = axes.flatten()

    idx = 0
    if show_time_domain:
        plot_time_domain(axes[idx], samples, params.sample_rate_hz, params.time_domain_unit)
        idx += 1
    if show_freq_domain:
        frequencies, magnitude, _ = compute_spectrum(
            samples, params.sample_rate_hz, params.spectrum_scale
        )
        plot_spectrum(axes[idx], frequencies, magnitude, params.spectrum_scale)

    fig.suptitle(str(params.to_config()))
    fig.tight_layout()
    return fig


def save_signal_plot(filepath: str, samples: np.ndarray, params: AppParams, dpi: int = 150) -> None:
    """Render create_signal_figure to an image file."""
    fig = create_signal_figure(samples, params)
    fig.savefig(filepath, dpi=dpi)
    plt.close(fig)
    logger.info("Plot saved to %s", filepath)
