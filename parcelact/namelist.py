""" Read simulation namelists.

A namelist is a YAML file with three sections::

    initial_aerosol:
      - name: sulfate
        N: 1000.0
        mu: 0.05
        sigma: 2.0
        kappa: 0.54
        bins: 200
    initial_conditions:
      temperature: 283.15
      pressure: 85000.0
      relative_humidity: 0.98
      updraft_speed: 0.5
    experiment_control:
      name: sulfate_run
      output_dir: output

"""
import yaml

from .aerosol import AerosolMode, InitialState
from .util import NamelistError

__all__ = ["parse_namelist", "read_namelist"]

DEFAULT_CONTROL = {"name": "parcelact", "output_dir": ".", "format": "nc"}


def _section(y, key):
    if not isinstance(y, dict) or key not in y:
        raise NamelistError("namelist has no '%s' section" % key)
    return y[key]


def parse_namelist(y):
    """Convert an in-memory namelist into model inputs.

    Parameters
    ----------
    y : dict
        Namelist contents.

    Returns
    -------
    modes : list of :class:`AerosolMode`
    initial : :class:`InitialState`
    control : dict
        Experiment control, with defaults filled in.

    """
    aerosols = _section(y, "initial_aerosol") or []
    modes = []
    for i, ap in enumerate(aerosols, start=1):
        try:
            modes.append(AerosolMode.from_dict(ap))
        except (AttributeError, KeyError, TypeError) as e:
            raise NamelistError("aerosol mode %d is malformed (%r)" % (i, e)) from e

    ic = _section(y, "initial_conditions")
    try:
        initial = InitialState.from_dict(ic)
    except (AttributeError, KeyError, TypeError) as e:
        raise NamelistError("initial_conditions is malformed (%r)" % e) from e

    control = dict(DEFAULT_CONTROL)
    control.update(y.get("experiment_control") or {})

    return modes, initial, control


def read_namelist(path):
    """Read a YAML namelist from disk; see :func:`parse_namelist`."""
    try:
        with open(path, "rb") as f:
            y = yaml.safe_load(f)
    except IOError as e:
        raise NamelistError("Couldn't read file %s" % path) from e
    except yaml.YAMLError as e:
        raise NamelistError("Couldn't parse %s: %s" % (path, e)) from e
    return parse_namelist(y)
