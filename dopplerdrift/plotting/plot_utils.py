import numpy as np

from .config import MAX_IMSHOW_POINTS
from ..utils import rebin, db


def calc_extent(plot_x, plot_y):
    """ Setup plotting edges, from the first bin's start to the last bin's end.
    """
    x_step = plot_x[1] - plot_x[0] if len(plot_x) > 1 else 1
    y_step = plot_y[1] - plot_y[0] if len(plot_y) > 1 else 1
    return (plot_x[0], plot_x[-1] + x_step, plot_y[0], plot_y[-1] + y_step)


def prepare_image(data, logged):
    """ Convert a (frequency, y) matrix into an imshow image with frequency on x.

    imshow does not support int8, so convert to floating point, then
    decimate so the image is under MAX_IMSHOW_POINTS.
    """
    plot_data = np.asarray(data, dtype='float32').T

    if logged:
        plot_data = db(np.abs(plot_data), offset=1e-12)

    dec_fac_x, dec_fac_y = 1, 1
    if plot_data.shape[0] > MAX_IMSHOW_POINTS[0]:
        dec_fac_x = int(plot_data.shape[0] / MAX_IMSHOW_POINTS[0])

    if plot_data.shape[1] > MAX_IMSHOW_POINTS[1]:
        dec_fac_y = int(plot_data.shape[1] / MAX_IMSHOW_POINTS[1])

    return rebin(plot_data, dec_fac_x, dec_fac_y)
