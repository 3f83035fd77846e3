from .plot_fdr import plot_fdr
from .plot_spectrogram import plot_spectrogram
from . import config as plot_config
