"""
# errors.py
Exceptions raised by the de-doppler routines.
"""


class DopplerDriftError(Exception):
    """ Base class for dopplerdrift errors """


class ShapeMismatchError(DopplerDriftError, ValueError):
    """ A destination buffer does not have the shape the operation requires """


class IncompatibleWorkspaceError(DopplerDriftError, ValueError):
    """ A workspace was built for a spectrogram of a different shape """


def check_shape(what, actual, expected):
    """ Raise ShapeMismatchError unless actual == expected.

    Args:
        what (str): name of the buffer, used in the message
        actual (tuple): shape found
        expected (tuple): shape required
    """
    if tuple(actual) != tuple(expected):
        raise ShapeMismatchError(f"{what} has shape {tuple(actual)} but {tuple(expected)} is required")
