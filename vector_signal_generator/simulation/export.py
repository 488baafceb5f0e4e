"""Export of IQ samples to text and binary files."""

import logging
import numpy as np

logger = logging.getLogger(__name__)

# Interleaved little-endian float32: I (4 bytes) then Q (4 bytes) per sample
BIN_DTYPE = np.dtype('<f4')
BYTES_PER_SAMPLE = 2 * BIN_DTYPE.itemsize


def _interleave(samples: np.ndarray) -> np.ndarray:
    """Stack real and imaginary parts as an (N, 2) array."""
    samples = np.asarray(samples, dtype=np.complex128)
    return np.column_stack((samples.real, samples.imag))


def export_csv(filepath: str, samples: np.ndarray) -> None:
    """
    Write samples as two comma-separated columns (real, imag), no header.

    Values are written with 17 significant digits, enough to read back the
    exact float64 values.

    Parameters
    ----------
    filepath : str
        Path to output file
    samples : np.ndarray
        Complex samples, already scaled by the output amplitude
    """
    np.savetxt(filepath, _interleave(samples), fmt='%.17g', delimiter=',')
    logger.info("Exported %d samples to %s", len(samples), filepath)


def export_bin(filepath: str, samples: np.ndarray) -> None:
    """
    Write samples as interleaved little-endian float32 pairs.

    Each sample takes 8 bytes: the real part followed by the imaginary part.
    Samples are narrowed from float64 to float32.

    Parameters
    ----------
    filepath : str
        Path to output file
    samples : np.ndarray
        Complex samples, already scaled by the output amplitude
    """
    _interleave(samples).astype(BIN_DTYPE).tofile(filepath)
    logger.info("Exported %d samples to %s", len(samples), filepath)


def load_csv(filepath: str) -> np.ndarray:
    """
    Read samples written by export_csv.

    Parameters
    ----------
    filepath : str
        Path to CSV file

    Returns
    -------
    np.ndarray
        Complex samples (complex128)
    """
    data = np.loadtxt(filepath, delimiter=',', ndmin=2)
    if data.size == 0:
        return np.zeros(0, dtype=np.complex128)
    return data[:, 0] + 1j * data[:, 1]


def load_bin(filepath: str) -> np.ndarray:
    """
    Read samples written by export_bin.

    Parameters
    ----------
    filepath : str
        Path to binary file

    Returns
    -------
    np.ndarray
        Complex samples (complex64)

    Raises
    ------
    ValueError
        If the file size is not a whole number of samples
    """
    raw = np.fromfile(filepath, dtype=BIN_DTYPE)
    if len(raw) % 2:
        raise ValueError(
            f"{filepath} holds {len(raw)} float32 values, expected an even count"
        )
    return raw.astype(np.float32).view(np.complex64)
