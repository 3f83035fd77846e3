from .fftfdr import phasor, FFTFDRWorkspace, fftfdr_workspace, \
    fdshift, fdshift_into, fdshiftsum, fdshiftsum_into, fftfdr, fftfdr_into
from .intfdr import intshift, intshift_into, intfdr, intfdr_into
