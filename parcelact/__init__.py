"""
Parcel Model Activation Bridge
------------------------------

This module drives the pyrcel adiabatic cloud parcel model for a set of
lognormal aerosol modes, and condenses its output into droplet activation
statistics and discretized aerosol size distributions.

"""

from importlib.metadata import version as _version

try:
    __version__ = _version("parcelact")
except Exception:
    # This is a local copy, or a copy that was not installed via setuptools
    __version__ = "local"

from .aerosol import *
from .backend import *
from .distributions import *
from .driver import *
from .namelist import *
from .output import write_result
from .result import *
from .translate import *
from .util import (
    ExternalComputationError,
    InputError,
    NamelistError,
    OutputError,
    ParcelActError,
    ShapeError,
)
