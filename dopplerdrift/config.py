"""
dopplerdrift configuration.
Defaults used when building FFT workspaces, and the logging set up shared by the package.
"""
import sys
import logging
import numpy as np

# Workspace defaults.
DEFAULT_UNALIGNED   = True          # Destinations of fdshiftsum may be strided views
DEFAULT_NORMALIZE   = True          # Divide backward transforms by Nf (zero drift is an identity)
PHASOR_RATE_DTYPE   = np.float32    # Rates are cast to this before computing phase ramps; None = full precision

# Logging.
LOG_LEVEL = logging.INFO

if LOG_LEVEL == logging.INFO:
    LOG_STREAM = sys.stdout
    LOG_FORMAT = '%(name)-15s %(levelname)-8s %(message)s'
else:
    LOG_STREAM = sys.stderr
    LOG_FORMAT = '%(relativeCreated)5d %(name)-15s %(levelname)-8s %(message)s'


def get_logger(name):
    """ Return the module logger for name, setting up the root handler on first use. """
    logging.basicConfig(format=LOG_FORMAT, stream=LOG_STREAM, level=LOG_LEVEL)
    return logging.getLogger(name)
