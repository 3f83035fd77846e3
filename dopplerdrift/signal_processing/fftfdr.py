r"""
FFT based de-doppler functions.

A drifting narrowband signal in a spectrogram (frequency on axis 0, time on
axis 1) is re-aligned into a fixed channel by circularly shifting time column
n by n*rate channels.  The shift is fractional and is applied in the Fourier
domain: each column is transformed to its half-spectrum and multiplied by the
phase ramp exp(-2j*pi*k*n*rate/Nf) (shift theorem).

For a drift-rate matrix only the time sum of the shifted spectrogram is
needed.  As the inverse transform is linear, the columns are summed in the
Fourier domain first, so each rate costs one backward transform instead of
one per time sample.

Typical use:

    ws = fftfdr_workspace(spectrogram)
    fdr = fftfdr(spectrogram, rates, ws)

A workspace holds scratch buffers that every call overwrites.  It is tied to
one spectrogram shape and must not be shared by concurrent callers; give each
worker thread its own.
"""

import numpy as np

from ..config import get_logger, DEFAULT_UNALIGNED, DEFAULT_NORMALIZE, PHASOR_RATE_DTYPE
from ..errors import check_shape, IncompatibleWorkspaceError
from ..fdr import create_fdr, spectrogram_shape
from .fft_plans import RealForwardPlan, RealBackwardPlan, half_length, working_dtypes

logger = get_logger(__name__)


def _cycles(kn, r, N, rate_dtype=PHASOR_RATE_DTYPE, out=None):
    """ Phase argument k*n*r/N in cycles, reduced into [0, 1). """
    if rate_dtype is not None:
        r = rate_dtype(r)
    out = np.multiply(kn, np.float64(r) / N, out=out)
    return np.mod(out, 1.0, out=out)


def phasor(k, n, r, N, rate_dtype=PHASOR_RATE_DTYPE):
    """
    Return exp(-2j*pi*k*n*r/N).

    Multiplying bin k of the half-spectrum of time column n by this value
    circularly shifts that column by n*r channels.

    Parameters
    ----------
    k : int or int array
        Zero based frequency bin in the half-spectrum.
    n : int or int array
        Zero based time column.
    r : float
        Drift rate [channels per time step].
    N : int
        Full length of the frequency axis (not the half-spectrum length).
    rate_dtype : numpy float type or None
        r is cast to this type first.  None keeps full precision.

    Array arguments broadcast against each other.
    """
    return np.exp(-2j * np.pi * _cycles(np.multiply(k, n), r, N, rate_dtype))


class FFTFDRWorkspace():
    """ Scratch buffers and FFT plans for one spectrogram shape (Nf, Nt).

    Attributes:
        mat: complex (Nf//2+1, Nt) half-spectra of the time columns
        vec: complex (Nf//2+1,) time sum of mat
        fplan: forward plan, real (Nf, Nt) -> mat
        bplan1d: backward plan, vec -> real (Nf,)
        bplan2d: backward plan, mat -> real (Nf, Nt)
    """

    def __init__(self, shape, dtype, unaligned=DEFAULT_UNALIGNED, normalize=DEFAULT_NORMALIZE,
                 rate_dtype=PHASOR_RATE_DTYPE):
        self.shape = tuple(shape)
        nf, nt = self.shape
        nh = half_length(nf)

        self.fplan = RealForwardPlan(self.shape, dtype)
        self.mat = np.empty((nh, nt), dtype=self.fplan.cdtype)
        self.vec = np.empty(nh, dtype=self.fplan.cdtype)
        self.bplan1d = RealBackwardPlan(self.vec.shape, nf, dtype, normalize=normalize, unaligned=unaligned)
        # The 2d plan transforms each column of mat; the FFT itself is still 1D.
        self.bplan2d = RealBackwardPlan(self.mat.shape, nf, dtype, normalize=normalize, unaligned=False)
        self.rate_dtype = rate_dtype

        # k*n for every element of mat, and room for the phase ramp.
        self._kn = np.multiply.outer(np.arange(nh, dtype=np.float64), np.arange(nt, dtype=np.float64))
        self._phase = np.empty_like(self._kn)
        self._ramp = np.empty_like(self.mat)

        logger.debug(f"FFTFDRWorkspace: shape {self.shape}, half-spectrum {self.mat.shape} {self.mat.dtype}, "
                     f"unaligned={unaligned}, normalize={normalize}, rate_dtype={rate_dtype}")

    def __repr__(self):
        return "FFTFDRWorkspace(shape=%s, dtype=%s)" % (self.shape, self.fplan.rdtype)

    @property
    def nf(self):
        return self.shape[0]

    @property
    def nt(self):
        return self.shape[1]

    def check(self, spectrogram):
        """ Raise IncompatibleWorkspaceError unless spectrogram has this workspace's shape and working dtype. """
        if spectrogram.shape != self.shape:
            raise IncompatibleWorkspaceError(
                f"workspace was built for shape {self.shape} but the spectrogram has shape {spectrogram.shape}")
        rdtype = working_dtypes(spectrogram.dtype)[0]
        if rdtype != self.fplan.rdtype:
            raise IncompatibleWorkspaceError(
                f"workspace works in {self.fplan.rdtype} but the spectrogram ({spectrogram.dtype}) needs {rdtype}")

    def forward(self, spectrogram):
        """ Transform every column of spectrogram into mat. """
        self.fplan.execute(self.mat, spectrogram)

    def apply_phase_ramp(self, rate):
        """ Multiply mat in place by phasor(k, n, rate, Nf) for every (k, n). """
        _cycles(self._kn, rate, self.nf, self.rate_dtype, out=self._phase)
        np.multiply(self._phase, -2.0 * np.pi, out=self._phase)
        np.cos(self._phase, out=self._ramp.real)
        np.sin(self._phase, out=self._ramp.imag)
        self.mat *= self._ramp


def fftfdr_workspace(spectrogram, unaligned=DEFAULT_UNALIGNED, normalize=DEFAULT_NORMALIZE,
                     rate_dtype=PHASOR_RATE_DTYPE):
    """
    Create the buffers and FFT plans needed by fftfdr, fdshiftsum and fdshift.

    Parameters
    ----------
    spectrogram : 2D array
        Real valued (Nf, Nt) data, or just something with its shape and dtype.
    unaligned : bool
        By default the destination of fdshiftsum may be any view (such as a
        column of a C ordered drift-rate matrix).  Pass False if destinations
        will always be contiguous arrays of the working dtype, and results are
        written to them directly.
    normalize : bool
        Scale backward transforms by 1/Nf (default).  False gives unscaled
        results, Nf times larger.
    rate_dtype : numpy float type or None
        Precision of the rate used for the phase ramps.

    Returns
    -------
    FFTFDRWorkspace
    """
    spectrogram = np.asarray(spectrogram)
    shape = spectrogram_shape(spectrogram)
    return FFTFDRWorkspace(shape, spectrogram.dtype, unaligned=unaligned, normalize=normalize,
                           rate_dtype=rate_dtype)


def _prepare(spectrogram, workspace):
    spectrogram_shape(spectrogram)
    if workspace is None:
        workspace = fftfdr_workspace(spectrogram)
    else:
        workspace.check(spectrogram)
    return workspace


def fdshift_into(dest, spectrogram, rate, workspace=None):
    """
    Store the de-dopplered spectrogram for rate into dest, which is returned.

    Column n of the result is column n of spectrogram circularly shifted by
    n*rate channels.  dest must have the shape of spectrogram.  The workspace
    scratch buffers are overwritten.
    """
    spectrogram = np.asarray(spectrogram)
    check_shape("fdshift destination", np.shape(dest), np.shape(spectrogram))
    workspace = _prepare(spectrogram, workspace)

    workspace.forward(spectrogram)
    workspace.apply_phase_ramp(rate)
    workspace.bplan2d.execute(dest, workspace.mat)
    return dest


def fdshift(spectrogram, rate, workspace=None):
    """ Return the de-dopplered spectrogram for rate (see fdshift_into). """
    spectrogram = np.asarray(spectrogram)
    dest = np.empty_like(spectrogram)
    return fdshift_into(dest, spectrogram, rate, workspace)


def fdshiftsum_into(dest, spectrogram, rate, workspace=None):
    """
    Store the time integrated, drift compensated spectrum for rate into dest.

    Equivalent to fdshift(spectrogram, rate).sum(axis=1), but the sum over
    time is taken in the Fourier domain so only one backward FFT is needed.
    dest must have length Nf.  The workspace scratch buffers are overwritten.
    """
    spectrogram = np.asarray(spectrogram)
    check_shape("fdshiftsum destination", np.shape(dest), np.shape(spectrogram)[:1])
    workspace = _prepare(spectrogram, workspace)

    workspace.forward(spectrogram)
    workspace.apply_phase_ramp(rate)
    np.sum(workspace.mat, axis=1, out=workspace.vec)
    workspace.bplan1d.execute(dest, workspace.vec)
    return dest


def fdshiftsum(spectrogram, rate, workspace=None):
    """ Return the time integrated, drift compensated spectrum for rate (see fdshiftsum_into). """
    spectrogram = np.asarray(spectrogram)
    dest = np.empty(spectrogram.shape[:1], dtype=spectrogram.dtype)
    return fdshiftsum_into(dest, spectrogram, rate, workspace)


def fftfdr_into(fdr, spectrogram, rates, workspace=None):
    """
    Same as fftfdr, but store the results in fdr, which is also returned.
    The shape of fdr must be (spectrogram.shape[0], len(rates)).
    """
    spectrogram = np.asarray(spectrogram)
    nf = spectrogram_shape(spectrogram)[0]
    check_shape("fftfdr destination", np.shape(fdr), (nf, len(rates)))
    workspace = _prepare(spectrogram, workspace)

    logger.debug(f"fftfdr: {len(rates)} rates, spectrogram shape {spectrogram.shape}")
    for ii, rate in enumerate(rates):
        fdshiftsum_into(fdr[:, ii], spectrogram, rate, workspace)
    return fdr


def fftfdr(spectrogram, rates, workspace=None):
    """
    Compute the frequency drift rate matrix of spectrogram for rates.

    Axis 0 of spectrogram is frequency and axis 1 is time.  Column i of the
    returned (spectrogram.shape[0], len(rates)) matrix is
    fdshiftsum(spectrogram, rates[i]), in the order rates are given.  A
    workspace from fftfdr_workspace may be passed and is then shared by all
    rates; otherwise one is created.
    """
    fdr = create_fdr(spectrogram, rates)
    return fftfdr_into(fdr, spectrogram, rates, workspace)
