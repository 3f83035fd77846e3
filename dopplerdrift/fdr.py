"""
# fdr.py
Frequency drift rate (fdr) matrix buffers shared by the FFT and integer shift backends.
"""
import numbers
import numpy as np


def spectrogram_shape(spectrogram):
    """ Return (Nf, Nt) for a 2D spectrogram, raising ValueError otherwise. """
    shape = np.shape(spectrogram)
    if len(shape) != 2:
        raise ValueError(f"spectrogram must be 2D (frequency, time) but has {len(shape)} dimensions")
    return shape


def create_fdr(spectrogram, rates):
    """
    Create an uninitialized matrix suitable for use with intfdr_into or fftfdr_into.

    Parameters
    ----------
    spectrogram : 2D array
        Spectrogram with frequency on axis 0 and time on axis 1.
    rates : int or sequence
        Number of rates, or the rates themselves.

    Returns
    -------
    numpy array of shape (spectrogram.shape[0], Nr) with the dtype of spectrogram,
    where Nr is rates or len(rates).
    """
    nf = spectrogram_shape(spectrogram)[0]
    if isinstance(rates, numbers.Integral):
        n_rates = int(rates)
    else:
        n_rates = len(rates)
    if n_rates < 0:
        raise ValueError(f"create_fdr: number of rates ({n_rates}) cannot be negative")
    return np.empty((nf, n_rates), dtype=np.asarray(spectrogram).dtype)
