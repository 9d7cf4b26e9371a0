#! /usr/bin/env python

from setuptools import setup

MAJOR, MINOR, MICRO = 0, 1, 0
DEV_ITER = 0
DEV = True

if DEV:
    VERSION = "{}.{}.dev{}".format(MAJOR, MINOR, DEV_ITER)
else:
    VERSION = "{}.{}.{}".format(MAJOR, MINOR, MICRO)

setup(
    name="parcelact",
    description="parcelact: droplet activation statistics from the pyrcel parcel model",
    long_description="""
        This code drives the pyrcel adiabatic cloud parcel model for a set of lognormal
        aerosol modes and an initial thermodynamic state, and condenses the simulation
        into maximum supersaturation, per-mode and bulk activated number concentrations,
        cloud droplet number concentration, and discretized aerosol size distributions.
    """,
    license="New BSD (3-clause)",
    version=VERSION,
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "pyrcel",
        "pyyaml",
        "scipy",
        "xarray",
    ],
    extras_require={"test": ["pytest"]},
    packages=["parcelact", "parcelact.scripts", "parcelact.test"],
    entry_points={
        "console_scripts": ["run_activation=parcelact.scripts.run_activation:main"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: Unix",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
)
