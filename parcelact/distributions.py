""" Discretized representations of aerosol size distributions.

The parcel model slices each lognormal mode into bins itself; the routines
here only post-process those bin edges and per-bin number concentrations
into midpoints, logarithmic bin widths and spectral densities.

"""
import numpy as np
import pandas as pd

from . import constants as c
from .util import InputError, ShapeError

__all__ = ["SizeDistribution", "discretize", "from_species"]


def _frozen(x):
    x = np.array(x, dtype=float)
    x.flags.writeable = False
    return x


class SizeDistribution(object):
    """Binned aerosol size distribution.

    Instances are normally built with :func:`discretize` or
    :func:`from_species` rather than directly.

    Attributes
    ----------
    edges : array of floats of length ``bins + 1``
        Bin edge diameters, micron.
    midpoints : array of floats of length ``bins``
        Geometric mean of adjacent edges, micron.
    dlnD : array of floats of length ``bins``
        Logarithmic bin widths, always positive.
    density : array of floats of length ``bins``
        Spectral density dN/dlnD, cm**-3.
    number : array of floats of length ``bins``
        Number concentration in each bin, cm**-3.
    form : str
        Functional form the bins were cut from, e.g. ``'lognormal'``.
    label : str
        Name of the mode this distribution describes.
    params : tuple
        ``(N, mu, sigma)`` of the parent mode, if known.

    """

    __slots__ = ("edges", "midpoints", "dlnD", "density", "number", "form", "label", "params")

    def __init__(self, edges, midpoints, dlnD, density, number, form, label, params=()):
        arrays = dict(
            edges=_frozen(edges),
            midpoints=_frozen(midpoints),
            dlnD=_frozen(dlnD),
            density=_frozen(density),
            number=_frozen(number),
        )
        nbins = len(arrays["number"])
        for name in ("midpoints", "dlnD", "density"):
            if len(arrays[name]) != nbins:
                raise ShapeError(
                    "%s has %d entries, expected %d" % (name, len(arrays[name]), nbins),
                    stage="aggregation",
                )
        if len(arrays["edges"]) not in (0, nbins + 1):
            raise ShapeError(
                "expected %d bin edges, got %d" % (nbins + 1, len(arrays["edges"])),
                stage="aggregation",
            )

        for name, arr in arrays.items():
            object.__setattr__(self, name, arr)
        object.__setattr__(self, "form", form)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "params", tuple(params))

    def __setattr__(self, name, value):
        raise AttributeError("SizeDistribution is immutable")

    @property
    def bins(self):
        return len(self.number)

    def total(self):
        """Total number concentration across all bins, cm**-3."""
        return float(np.sum(self.number))

    def to_dataframe(self):
        """Tabulate the distribution, indexed by bin midpoint (micron)."""
        df = pd.DataFrame(
            {"number": self.number, "density": self.density, "dlnD": self.dlnD},
            index=pd.Index(self.midpoints, name="Dp"),
        )
        return df

    def __eq__(self, other):
        if not isinstance(other, SizeDistribution):
            return NotImplemented
        return (
            self.form == other.form
            and self.label == other.label
            and self.params == other.params
            and all(
                np.array_equal(getattr(self, k), getattr(other, k))
                for k in ("edges", "midpoints", "dlnD", "density", "number")
            )
        )

    __hash__ = None

    def __repr__(self):
        return "SizeDistribution | %s (%s), %d bins, Total = %2.2e |" % (
            self.label,
            self.form,
            self.bins,
            self.total(),
        )


def discretize(edges, number, label, form="lognormal", params=()):
    """Derive a :class:`SizeDistribution` from bin edges and per-bin number
    concentrations.

    .. math::
        D_{p,i} = \\sqrt{D_i D_{i+1}}, \\quad
        \\Delta\\ln D_i = \\left|\\ln(D_i / D_{i+1})\\right|, \\quad
        \\frac{dN}{d\\ln D}_i = N_i / \\Delta\\ln D_i

    Parameters
    ----------
    edges : array_like of floats
        Monotonic bin edge diameters; either ordering is accepted.
    number : array_like of floats
        Number concentration in each bin, one fewer than ``edges``.
    label : str
        Name of the mode.
    form : str, optional (default='lognormal')
        Tag for the distribution the bins came from.
    params : tuple, optional
        Parent mode parameters, carried along for reference.

    Returns
    -------
    SizeDistribution
        Empty if fewer than two edges were given.

    Raises
    ------
    ShapeError
        If ``number`` doesn't have exactly one fewer entry than ``edges``.
    InputError
        If any edge is not strictly positive, or the edges are not strictly
        monotonic.

    Examples
    --------

    >>> sd = discretize([4.0, 1.0], [10.0], "test")
    >>> sd.midpoints
    array([2.])

    """
    edges = np.asarray(edges, dtype=float)
    number = np.asarray(number, dtype=float)

    if len(edges) < 2:
        if len(number):
            raise ShapeError(
                "%d bin concentrations given without bin edges" % len(number),
                stage="aggregation",
            )
        empty = np.empty(0)
        return SizeDistribution(empty, empty, empty, empty, empty, form, label, params)

    if len(number) != len(edges) - 1:
        raise ShapeError(
            "need %d bin concentrations for %d edges, got %d"
            % (len(edges) - 1, len(edges), len(number)),
            stage="aggregation",
        )
    if np.any(~(edges > 0)):
        raise InputError("bin edges must be positive", stage="aggregation")
    steps = np.diff(edges)
    if not (np.all(steps > 0) or np.all(steps < 0)):
        raise InputError("bin edges must be strictly monotonic", stage="aggregation")

    lo, hi = edges[:-1], edges[1:]
    midpoints = np.sqrt(lo * hi)
    dlnD = np.abs(np.log(lo / hi))
    density = number / dlnD

    return SizeDistribution(edges, midpoints, dlnD, density, number, form, label, params)


def from_species(handle, params=()):
    """Build the size distribution of a binned aerosol species.

    The parcel model keeps bin edge *radii* in micron and bin number
    concentrations in m**-3; these are converted to diameters and cm**-3
    here, and nowhere else.

    Parameters
    ----------
    handle : SpeciesHandle
        Binned aerosol species returned by the model backend.
    params : tuple, optional
        Parent mode parameters.

    """
    edges = c.RADIUS_TO_DIAMETER * np.asarray(handle.bin_radii, dtype=float)
    number = np.asarray(handle.bin_number_concentrations, dtype=float) * c.PER_M3_TO_CM3
    return discretize(edges, number, handle.label, form="lognormal", params=params)
