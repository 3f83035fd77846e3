import os
import numpy as np

from dopplerdrift import fftfdr, fdshift
from dopplerdrift.plotting import plot_fdr, plot_spectrogram, plot_config
plot_config.set_mpl_backend("Agg")
from tests.data import drifting_spectrogram, test_output


def test_plot_fdr():
    spectrogram = drifting_spectrogram(f_start=20, rate=1.0, noise=True)
    rates = np.linspace(-2, 2, 17)
    fdr = fftfdr(spectrogram, rates)
    freqs = 1400.0 + np.arange(spectrogram.shape[0]) * 1e-6

    plt = plot_config.plt
    plt.figure("TEST PLOTTING", figsize=(10, 8))
    plt.subplot(3, 1, 1)
    plot_spectrogram(spectrogram)
    plt.subplot(3, 1, 2)
    plot_spectrogram(fdshift(spectrogram, -1.0), freqs=freqs, logged=True)
    plt.subplot(3, 1, 3)
    plot_fdr(fdr, rates, logged=True)
    plt.tight_layout()
    png = os.path.join(test_output, "test_plotting.png")
    plt.savefig(png)
    plt.close("all")
    assert os.path.exists(png)


def test_plot_fdr_single_rate():
    spectrogram = drifting_spectrogram(f_start=5, rate=0.0)
    plt = plot_config.plt
    plt.figure()
    plot_fdr(fftfdr(spectrogram, [0.0]), [0.0], cb=False)
    plt.close("all")


def test_backend():
    assert plot_config.get_mpl_backend().lower() == "agg"
