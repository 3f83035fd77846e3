"""
dopplerdrift Plotting Configuration
This file is imported by the other plotting source files.
matplotlib backends info:
https://matplotlib.org/3.5.0/users/explain/backends.html#:~:text=By%20default%2C%20Matplotlib%20should%20automatically,to%20worry%20about%20the%20backend.
"""
import matplotlib

# Define plt for caller.
import matplotlib.pyplot as plt
plt.rcParams['axes.formatter.useoffset'] = False

#Define some constants for caller.
MAX_IMSHOW_POINTS   = (8192, 4096)           # Max number of points in imshow plot


def get_mpl_backend():
    return matplotlib.get_backend()


def set_mpl_backend(backend):
    matplotlib.use(backend)
