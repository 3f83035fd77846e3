"""
setup.py -- setup script for use of packages.
"""
from setuptools import setup, find_packages

__version__ = '0.1.0'

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("requirements.txt", "r") as fh:
    install_requires = fh.readlines()

extras_require = {
      'test': [
          'pytest',
      ]
}

setup(name='dopplerdrift',
      version=__version__,
      description='FFT shift-and-sum frequency drift rate (de-Doppler) matrices for narrowband signal searches',
      long_description=long_description,
      long_description_content_type='text/markdown',
      license='BSD',
      install_requires=install_requires,
      extras_require=extras_require,
      packages=find_packages(exclude=['tests', 'tests.*']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.9',
      classifiers=[
          'Development Status :: 4 - Beta',
          'Natural Language :: English',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: BSD License',
          'Topic :: Scientific/Engineering :: Astronomy',
      ],
)
