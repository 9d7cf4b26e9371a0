""" Interface to the pyrcel parcel model library.

pyrcel is loaded by an explicit call to :func:`initialize` (done for you when
a :class:`PyrcelBackend` is constructed) rather than when this module is
imported. Anything crossing back from pyrcel is repackaged into the plain
records defined here before the rest of the package touches it.

Any object implementing the five methods of :class:`PyrcelBackend` can be
passed to :func:`parcelact.run` in its place.

"""
import threading
from collections import namedtuple

import numpy as np

from .util import ExternalComputationError

__all__ = ["ActivationStats", "PyrcelBackend", "SpeciesHandle", "initialize"]

_lock = threading.Lock()
_pm = None

#: Binned aerosol species as seen by this package. ``bin_radii`` are bin edge
#: radii in micron, ``bin_number_concentrations`` are in m**-3 and ``total_N``
#: is in cm**-3. ``native`` is the library's own object.
SpeciesHandle = namedtuple(
    "SpeciesHandle", ["label", "total_N", "bin_radii", "bin_number_concentrations", "native"]
)

#: Output of the binned activation diagnostic: equilibrium and kinetic
#: activated fractions, N_kn / N_eq, and the unactivated share of N_kn.
ActivationStats = namedtuple("ActivationStats", ["eq", "kn", "alpha", "phi"])


def initialize():
    """Load the pyrcel library, once per process.

    Safe to call repeatedly and from several threads; later calls return the
    already-loaded module.

    Returns
    -------
    module
        The imported ``pyrcel`` package.

    Raises
    ------
    ExternalComputationError
        If pyrcel can't be imported.

    """
    global _pm
    with _lock:
        if _pm is None:
            try:
                import pyrcel
            except ImportError as e:
                raise ExternalComputationError(
                    "Could not import pyrcel: %s" % e, stage="initialization", original=e
                ) from e
            _pm = pyrcel
    return _pm


class PyrcelBackend(object):
    """Default model backend, delegating to pyrcel."""

    def __init__(self):
        self.pm = initialize()

    def lognormal(self, mu, sigma, N):
        """Lognormal distribution; ``mu`` is the median *radius*, micron."""
        return self.pm.Lognorm(mu=mu, sigma=sigma, N=N)

    def aerosol_species(self, label, distribution, kappa, bins):
        aer = self.pm.AerosolSpecies(label, distribution, kappa=kappa, bins=bins)
        return SpeciesHandle(
            label=label,
            total_N=float(aer.total_N),
            bin_radii=np.asarray(aer.rs, dtype=float),
            bin_number_concentrations=np.asarray(aer.Nis, dtype=float),
            native=aer,
        )

    def parcel_model(self, handles, V, T0, S0, P0, accom, console=False):
        return self.pm.ParcelModel(
            [h.native for h in handles], V, T0, S0, P0, console=console, accom=accom
        )

    def integrate(self, model, t_end, output_dt, solver, output_fmt, terminate):
        """Run the model; returns the parcel trajectory DataFrame and a dict of
        per-species wet radius DataFrames keyed by label."""
        return model.run(
            t_end,
            output_dt=output_dt,
            solver=solver,
            output_fmt=output_fmt,
            terminate=terminate,
        )

    def binned_activation(self, smax, T, rs, handle):
        eq, kn, alpha, phi = self.pm.binned_activation(smax, T, rs, handle.native)
        return ActivationStats(float(eq), float(kn), float(alpha), float(phi))
