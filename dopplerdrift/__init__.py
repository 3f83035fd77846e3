from .errors import DopplerDriftError, ShapeMismatchError, IncompatibleWorkspaceError
from .fdr import create_fdr
from .signal_processing import phasor, FFTFDRWorkspace, fftfdr_workspace, \
    fdshift, fdshift_into, fdshiftsum, fdshiftsum_into, fftfdr, fftfdr_into, \
    intshift, intshift_into, intfdr, intfdr_into
from . import utils

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('dopplerdrift')
except PackageNotFoundError:
    __version__ = '0.0.0 - please install via pip/setup.py'
