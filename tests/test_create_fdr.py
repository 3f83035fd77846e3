import numpy as np
import pytest

import dopplerdrift as dd
from tests.data import noise_spectrogram, NF


def test_create_fdr_from_count():
    spectrogram = noise_spectrogram()
    fdr = dd.create_fdr(spectrogram, 7)
    assert fdr.shape == (NF, 7)
    assert fdr.dtype == spectrogram.dtype


def test_create_fdr_from_rates():
    spectrogram = noise_spectrogram(dtype=np.float32)
    rates = np.linspace(-2, 2, 9)
    fdr = dd.create_fdr(spectrogram, rates)
    assert fdr.shape == (NF, len(rates))
    assert fdr.dtype == np.float32
    assert dd.create_fdr(spectrogram, [0.5, 1.5]).shape == (NF, 2)


def test_create_fdr_no_rates():
    assert dd.create_fdr(noise_spectrogram(), []).shape == (NF, 0)


def test_create_fdr_bad_input():
    with pytest.raises(ValueError):
        dd.create_fdr(np.zeros(8), 3)
    with pytest.raises(ValueError):
        dd.create_fdr(np.zeros((8, 4)), -1)
