""" Containers for the physical parameters handed to the parcel model.

Both containers are immutable and check their values on construction, so
that a non-physical setup is caught before any work is handed off to the
parcel model.

"""
from collections import namedtuple
from numbers import Integral

import numpy as np

from . import constants as c
from .util import InputError

__all__ = ["AerosolMode", "InitialState"]


def _check(cond, msg):
    if not cond:
        raise InputError(msg, stage="translation")


class AerosolMode(namedtuple("AerosolMode", ["N", "mu", "sigma", "kappa", "bins", "label"])):
    """Lognormal aerosol mode.

    Parameters
    ----------
    N : float
        Total number concentration, cm**-3.
    mu : float
        Geometric mean *diameter*, micron.
    sigma : float
        Geometric standard deviation, unitless; must exceed 1.
    kappa : float
        Hygroscopicity parameter.
    bins : int
        Number of bins used to discretize the mode.
    label : str
        Name of the mode; used as the key into per-mode output.

    Examples
    --------

    >>> sulfate = AerosolMode(N=1000.0, mu=0.05, sigma=2.0, kappa=0.54,
    ...                       bins=200, label="sulfate")

    """

    __slots__ = ()

    def __new__(cls, N, mu, sigma, kappa, bins, label):
        _check(np.isfinite(N) and N > 0, "N must be positive (got %r)" % N)
        _check(np.isfinite(mu) and mu > 0, "mu must be positive (got %r)" % mu)
        _check(np.isfinite(sigma) and sigma > 1, "sigma must exceed 1 (got %r)" % sigma)
        _check(np.isfinite(kappa) and kappa >= 0, "kappa must be >= 0 (got %r)" % kappa)
        _check(
            isinstance(bins, Integral) and not isinstance(bins, bool) and bins > 0,
            "bins must be a positive integer (got %r)" % (bins,),
        )
        _check(isinstance(label, str) and label, "label must be a non-empty string")
        return super().__new__(
            cls, float(N), float(mu), float(sigma), float(kappa), int(bins), label
        )

    @classmethod
    def from_dict(cls, d):
        """Build a mode from a namelist entry, accepting ``name`` as an alias
        for ``label``."""
        label = d.get("label", d.get("name"))
        return cls(d["N"], d["mu"], d["sigma"], d["kappa"], d["bins"], label)

    def __repr__(self):
        return "%s | N = %2.2e, mu = %2.2e, sigma = %2.2e, kappa = %2.2f, bins = %d |" % (
            self.label,
            self.N,
            self.mu,
            self.sigma,
            self.kappa,
            self.bins,
        )


class InitialState(namedtuple("InitialState", ["T", "P", "S", "accom", "V"])):
    """Initial thermodynamic state of the parcel.

    Parameters
    ----------
    T : float
        Temperature, K.
    P : float
        Pressure, Pa.
    S : float
        Supersaturation as a fraction; 0.0 is 100% RH and negative values
        are sub-saturated.
    accom : float
        Mass accommodation coefficient, (0, 1].
    V : float
        Updraft speed, m/s.

    """

    __slots__ = ()

    def __new__(cls, T, P, S, accom, V):
        _check(np.isfinite(T) and T > 0, "T must be positive (got %r)" % T)
        _check(np.isfinite(P) and P > 0, "P must be positive (got %r)" % P)
        _check(np.isfinite(S) and S >= -1.0, "S must be >= -1 (got %r)" % S)
        _check(
            np.isfinite(accom) and 0 < accom <= 1,
            "accom must be in (0, 1] (got %r)" % accom,
        )
        _check(np.isfinite(V) and V > 0, "updraft speed V must be positive (got %r)" % V)
        return super().__new__(cls, float(T), float(P), float(S), float(accom), float(V))

    @classmethod
    def from_dict(cls, d):
        """Build an initial state from the ``initial_conditions`` section of a
        namelist. Supersaturation may be given directly or as
        ``relative_humidity``."""
        if "supersaturation" in d:
            S = d["supersaturation"]
        else:
            S = -1.0 * (1.0 - d["relative_humidity"])
        return cls(
            T=d["temperature"],
            P=d["pressure"],
            S=S,
            accom=d.get("accommodation", c.ACCOM),
            V=d["updraft_speed"],
        )

    @property
    def t_end(self):
        """Integration end time, s."""
        return c.Z_TOP / self.V

    @property
    def output_dt(self):
        """Output interval, s."""
        return c.DZ_OUTPUT / self.V
