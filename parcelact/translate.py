""" Translate aerosol modes into the parcel model's aerosol species.
"""
from .util import ExternalComputationError, ParcelActError

__all__ = ["translate"]


def translate(mode, backend):
    """Build the binned aerosol species for a mode.

    The parcel model parameterizes lognormal modes by median *radius*, so the
    mode's geometric mean diameter is halved; ``sigma`` and ``N`` pass
    through unchanged.

    Parameters
    ----------
    mode : :class:`AerosolMode`
    backend : model backend, e.g. :class:`PyrcelBackend`

    Returns
    -------
    SpeciesHandle

    Raises
    ------
    ExternalComputationError
        If the backend rejects the mode.

    """
    try:
        dist = backend.lognormal(mu=0.5 * mode.mu, sigma=mode.sigma, N=mode.N)
        return backend.aerosol_species(mode.label, dist, kappa=mode.kappa, bins=mode.bins)
    except ParcelActError:
        raise
    except Exception as e:
        raise ExternalComputationError(
            "Could not build aerosol species '%s': %r" % (mode.label, e),
            stage="translation",
            original=e,
        ) from e
