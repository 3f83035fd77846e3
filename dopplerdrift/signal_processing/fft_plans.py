r"""
Real-input FFT "plans" along the frequency axis of a spectrogram.

numpy has no planner, so a plan here records everything about a transform
that is fixed for a given spectrogram shape (length, axis, scaling, working
dtypes, output policy) and then only executes.  All execution writes into
caller supplied buffers through the ``out=`` argument of numpy.fft
(numpy >= 2.0), so repeated executions do not allocate their outputs.
"""

import numpy as np


def working_dtypes(dtype):
    """ Return (real, complex) working dtypes for spectrogram data of type dtype. """
    rdtype = np.result_type(dtype, np.float32)
    if not np.issubdtype(rdtype, np.floating):
        raise TypeError(f"working_dtypes: spectrogram dtype {dtype} is not real-valued")
    cdtype = np.result_type(rdtype, np.complex64)
    return rdtype, cdtype


def half_length(nf):
    """ Number of complex values in the half-spectrum of a real length-nf signal. """
    return nf // 2 + 1


class RealForwardPlan:
    """ Unnormalised real-to-complex FFT of length nf along axis 0.

    Input is real with shape (nf, ...), output is complex with
    shape (nf//2+1, ...).
    """

    def __init__(self, shape, dtype):
        self.shape = tuple(shape)
        self.nf = self.shape[0]
        self.rdtype, self.cdtype = working_dtypes(dtype)
        self.out_shape = (half_length(self.nf),) + self.shape[1:]

    def __repr__(self):
        return "RealForwardPlan(n=%d, shape=%s, dtype=%s)" % (self.nf, self.shape, self.rdtype)

    def execute(self, out, inp):
        """ Store the forward transform of inp into out, which is returned. """
        if inp.dtype != self.rdtype:
            inp = inp.astype(self.rdtype)
        return np.fft.rfft(inp, n=self.nf, axis=0, norm="backward", out=out)


class RealBackwardPlan:
    """ Complex-to-real FFT of length nf along axis 0.

    Input is a complex half-spectrum with shape (nf//2+1, ...), output is real
    with shape (nf, ...).  With normalize=True the result is divided by nf, so
    that it inverts RealForwardPlan.  With normalize=False the result is
    unscaled, i.e. nf times larger.

    With unaligned=True the transform is computed into a private contiguous
    buffer and copied into the destination, which may then be any strided
    view of any real dtype.  Integer destinations get the result rounded to
    the nearest integer.  With unaligned=False the transform is written
    straight into destinations whose dtype is the working dtype.
    """

    def __init__(self, in_shape, nf, dtype, normalize=True, unaligned=False):
        self.in_shape = tuple(in_shape)
        self.nf = nf
        if self.in_shape[0] != half_length(nf):
            raise ValueError(f"RealBackwardPlan: input length {self.in_shape[0]} does not match n={nf}")
        self.rdtype, self.cdtype = working_dtypes(dtype)
        self.out_shape = (nf,) + self.in_shape[1:]
        self.normalize = normalize
        self.unaligned = unaligned
        self.norm = "backward" if normalize else "forward"
        self._scratch = np.empty(self.out_shape, dtype=self.rdtype) if unaligned else None

    def __repr__(self):
        return "RealBackwardPlan(n=%d, shape=%s, dtype=%s, normalize=%s, unaligned=%s)" \
            % (self.nf, self.in_shape, self.rdtype, self.normalize, self.unaligned)

    def execute(self, out, inp):
        """ Store the backward transform of inp into out, which is returned. """
        if self.unaligned or out.dtype != self.rdtype:
            scratch = self._scratch
            if scratch is None:
                scratch = np.empty(self.out_shape, dtype=self.rdtype)
            np.fft.irfft(inp, n=self.nf, axis=0, norm=self.norm, out=scratch)
            if np.issubdtype(out.dtype, np.integer):
                np.rint(scratch, out=scratch)
            out[...] = scratch
            return out
        return np.fft.irfft(inp, n=self.nf, axis=0, norm=self.norm, out=out)
