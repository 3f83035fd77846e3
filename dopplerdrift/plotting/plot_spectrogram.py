import numpy as np

from .config import plt
from .plot_utils import calc_extent, prepare_image


def plot_spectrogram(spectrogram, freqs=None, logged=False, cb=True, **kwargs):
    """ Plot waterfall of a spectrogram, e.g. one de-dopplered by fdshift

    Args:
        spectrogram (np.array): (Nf, Nt) data
        freqs (np.array): optional channel frequencies in MHz, default channel number
        logged (bool): Plot in linear (False) or dB units (True),
        cb (bool): for plotting the colorbar
        kwargs: keyword args to be passed to matplotlib imshow()
    """
    plot_data = prepare_image(spectrogram, logged)
    plot_t = np.arange(spectrogram.shape[1])
    if freqs is None:
        plot_f = np.arange(spectrogram.shape[0])
        xlabel = "Channel"
    else:
        plot_f = np.asarray(freqs)
        xlabel = "Frequency [MHz]"

    extent = calc_extent(plot_f, plot_t)

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
    plt.ylabel("Time [samples]")
