r""" Integer shift de-doppler functions.

The same operation as fftfdr, but each time column is rolled by a whole number
of channels, round(n * rate), instead of a fractional Fourier shift.  Shifts are
in the same direction as the FFT backend, so for rates where n * rate is a whole
number the two backends agree.
"""


import numpy as np

from ..errors import check_shape
from ..fdr import create_fdr, spectrogram_shape


def _shifts(n_ints, rate):
    """ Channel shift for each time column. """
    return np.rint(np.arange(n_ints) * rate).astype(np.int64)


def intshift_into(dest, spectrogram, rate):
    """
    Store the de-dopplered spectrogram for rate into dest, which is returned.

    Parameters:
    ----------
    dest : 2D array
        Output, same shape as spectrogram.  Must not overlap spectrogram.
    spectrogram : 2D array
        Data, frequency on axis 0 and time on axis 1.
    rate : float
        Signal drift rate [channels per time step]
    """
    spectrogram = np.asarray(spectrogram)
    n_chans, n_ints = spectrogram_shape(spectrogram)
    check_shape("intshift destination", np.shape(dest), (n_chans, n_ints))

    # For each time column,
    #      roll all of the fine channel power values by round(n * rate).
    for ii, shift in enumerate(_shifts(n_ints, rate)):
        dest[:, ii] = np.roll(spectrogram[:, ii], shift)
    return dest


def intshift(spectrogram, rate):
    """ Return the de-dopplered spectrogram for rate (see intshift_into). """
    spectrogram = np.asarray(spectrogram)
    return intshift_into(np.empty_like(spectrogram), spectrogram, rate)


def intfdr_into(fdr, spectrogram, rates):
    """
    Same as intfdr, but store the results in fdr, which is also returned.
    The shape of fdr must be (spectrogram.shape[0], len(rates)).
    """
    spectrogram = np.asarray(spectrogram)
    n_chans, n_ints = spectrogram_shape(spectrogram)
    check_shape("intfdr destination", np.shape(fdr), (n_chans, len(rates)))

    # Output channel j of column n comes from input channel (j - shift) mod n_chans.
    chans = np.arange(n_chans)[:, np.newaxis]
    cols = np.arange(n_ints)[np.newaxis, :]
    for ii, rate in enumerate(rates):
        src = (chans - _shifts(n_ints, rate)[np.newaxis, :]) % n_chans
        fdr[:, ii] = spectrogram[src, cols].sum(axis=1)
    return fdr


def intfdr(spectrogram, rates):
    """
    Compute the frequency drift rate matrix of spectrogram for rates by integer shifts.

    Column i of the returned (spectrogram.shape[0], len(rates)) matrix is the time
    sum of intshift(spectrogram, rates[i]).
    """
    fdr = create_fdr(spectrogram, rates)
    return intfdr_into(fdr, spectrogram, rates)
