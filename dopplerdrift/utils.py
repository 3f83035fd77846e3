"""
# utils.py
useful helper functions for drift rates and drift-rate matrices
"""
import math
import numpy as np
from astropy import units as u


def db(x, offset=0):
    """ Convert linear to dB """
    return 10 * np.log10(x + offset)


def rebin(d, n_x=None, n_y=None):
    """ Rebin data by averaging bins together

    Args:
    d (np.array): data
    n_x (int): number of bins in x dir to rebin into one
    n_y (int): number of bins in y dir to rebin into one

    Returns:
    d: rebinned data with shape (n_x, n_y)
    """
    n_x = 1 if n_x is None else math.ceil(n_x)
    n_y = 1 if n_y is None else math.ceil(n_y)

    if d.ndim == 2:
        d = d[:int(d.shape[0] // n_x) * n_x, :int(d.shape[1] // n_y) * n_y]
        d = d.reshape((d.shape[0] // n_x, n_x, d.shape[1] // n_y, n_y))
        d = d.mean(axis=3)
        d = d.mean(axis=1)
    elif d.ndim == 1:
        d = d[:int(d.shape[0] // n_x) * n_x]
        d = d.reshape((d.shape[0] // n_x, n_x))
        d = d.mean(axis=1)
    else:
        raise RuntimeError("Only NDIM <= 2 supported")
    return d


def _to_value(x, unit):
    if isinstance(x, u.Quantity):
        return x.to_value(unit)
    return x


def drift_rate_to_bins(drift_rate, tsamp, foff):
    """
    Convert a physical drift rate into frequency bins per time step.

    Parameters
    ----------
    drift_rate : float, array or astropy Quantity
        Signal drift rate [Hz/s].
    tsamp : float or astropy Quantity
        Time sampling interval [s].
    foff : float or astropy Quantity
        Fine channel bandwidth [MHz].  May be negative for descending frequency files.

    Returns
    -------
    Drift rate in channels per time step, as used by fftfdr and intfdr.
    """
    drift_rate = _to_value(drift_rate, u.Hz / u.s)
    tsamp = _to_value(tsamp, u.s)
    chan_bw = _to_value(foff, u.MHz) * 1e6
    if chan_bw == 0:
        raise ValueError("drift_rate_to_bins: foff must be nonzero")
    bins = np.asarray(drift_rate, dtype=float) * tsamp / chan_bw
    if bins.ndim == 0:
        return float(bins)
    return bins
