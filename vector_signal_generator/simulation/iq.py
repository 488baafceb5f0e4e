"""IQ block generation for a snapshot or export run."""

import logging
import numpy as np
from typing import Optional, Tuple

from ..objects.config import SignalConfig
from ..objects.metadata import IQMetadata
from ..utils import validate_non_negative
from .generator import SignalGenerator

logger = logging.getLogger(__name__)


def generate_iq(
    config: SignalConfig,
    num_samples: int,
    amplitude: float = 1.0,
    generator: Optional[SignalGenerator] = None,
) -> Tuple[np.ndarray, IQMetadata]:
    """
    Generate a block of IQ samples scaled by an output amplitude.

    Without a ``generator`` a fresh one is created, so every call starts
    from zero phase. Pass a long-lived generator to continue a stream.

    Parameters
    ----------
    config : SignalConfig
        Waveform description
    num_samples : int
        Number of samples to generate
    amplitude : float, optional
        Output amplitude factor applied to every sample, default 1.0
    generator : SignalGenerator, optional
        Generator whose state the block continues from

    Returns
    -------
    iq_data : np.ndarray
        Complex IQ samples (complex128)
    metadata : IQMetadata
        Metadata about the generated IQ data

    Raises
    ------
    ValueError
        If num_samples or amplitude is negative
    """
    if num_samples < 0:
        raise ValueError(f"num_samples must be non-negative, got {num_samples}")
    validate_non_negative(amplitude, "amplitude")

    if generator is None:
        generator = SignalGenerator()

    logger.debug("Generating %d samples: %s", num_samples, config)
    iq_data = generator.generate_block(config, num_samples) * amplitude

    metadata = IQMetadata(
        sample_rate_hz=config.sample_rate_hz,
        carrier_frequency_hz=config.carrier_frequency_hz,
        duration_s=num_samples / config.sample_rate_hz,
        num_samples=num_samples,
        modulation=config.modulation,
        amplitude=amplitude,
    )

    return iq_data, metadata
