import numpy as np

from .config import plt
from .plot_utils import calc_extent, prepare_image


def plot_fdr(fdr, rates, freqs=None, logged=False, cb=True, **kwargs):
    """ Plot a frequency drift rate matrix

    Args:
        fdr (np.array): (Nf, Nr) drift rate matrix from fftfdr or intfdr
        rates (sequence): the Nr drift rates [channels per time step]
        freqs (np.array): optional channel frequencies in MHz, default channel number
        logged (bool): Plot in linear (False) or dB units (True),
        cb (bool): for plotting the colorbar
        kwargs: keyword args to be passed to matplotlib imshow()
    """
    plot_data = prepare_image(fdr, logged)
    plot_r = np.asarray(rates, dtype='float64')
    if freqs is None:
        plot_f = np.arange(fdr.shape[0])
        xlabel = "Channel"
    else:
        plot_f = np.asarray(freqs)
        xlabel = "Frequency [MHz]"

    extent = calc_extent(plot_f, plot_r)

    plt.imshow(plot_data,
               aspect='auto',
               origin='lower',
               rasterized=True,
               interpolation='nearest',
               extent=extent,
               cmap='viridis',
               **kwargs
               )
    if cb:
        plt.colorbar()
    plt.xlabel(xlabel)
    plt.ylabel("Drift rate [channels / step]")
