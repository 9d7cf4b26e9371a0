import os.path
from datetime import datetime as ddt

import numpy as np
import xarray as xr

from . import __version__ as ver
from .util import OutputError

#: Acceptable output formats
OUTPUT_FORMATS = ["nc", "csv"]


def get_timestamp(fmt="%m%d%y_%H%M%S"):
    """Get current timestamp in MMDDYY_hhmmss format."""

    current_time = ddt.now()
    timestamp = current_time.strftime(fmt)

    return timestamp


def write_result(filename=None, result=None, format=None, engine=None):
    """Write a run's results to disk.

    Parameters
    ----------
    filename : str
        Full filename to write output; if not supplied, will default
        to the current timestamp
    result : RunResult
        Results of a completed run
    format : str
        Format to use from ``OUTPUT_FORMATS``; must be supplied if no
        filename is provided, and overrides the filename's extension
    engine : str, optional
        netCDF backend passed on to xarray, e.g. ``'scipy'``

    Returns
    -------
    list of str
        Paths of the files which were written.

    """
    if result is None:
        raise OutputError("Need to supply a result to write")

    if not filename:
        if not format:
            raise OutputError("Must supply either a filename or format.")
        basename = get_timestamp()
    else:
        basename, extension = os.path.splitext(filename)
        if not format:
            format = extension[1:]  # strip '.'
    if format not in OUTPUT_FORMATS:
        raise OutputError("Please supply a format from %r" % OUTPUT_FORMATS)

    if format == "csv":
        return _write_csv(basename, result)

    ds = result_to_dataset(result)
    out_file = basename + ".nc"
    try:
        ds.to_netcdf(out_file, engine=engine)
    except (IOError, ValueError, RuntimeError) as e:
        raise OutputError("Couldn't write %s: %r" % (out_file, e)) from e
    return [out_file]


def _write_csv(basename, result):
    written = []

    def save(df, suffix):
        fn = "%s_%s.csv" % (basename, suffix)
        try:
            df.to_csv(fn)
        except IOError as e:
            raise OutputError("Couldn't write %s: %r" % (fn, e)) from e
        written.append(fn)

    # Parcel data
    save(result.to_dataframe(), "parcel")

    # Per-mode activation and size distributions
    save(result.mode_summary(), "modes")
    for dist in result.distributions:
        save(dist.to_dataframe(), dist.label)

    return written


def result_to_dataset(result):
    """Pack a :class:`RunResult` into an :class:`xarray.Dataset`.

    The trajectory lives on a ``time`` dimension (one entry per output
    step); each mode gets its own ``<label>_bins`` dimension. Scalar
    results are stored as global attributes.

    """
    ds = xr.Dataset(
        attrs={
            "Conventions": "CF-1.0",
            "source": "parcelact v%s" % ver,
            "smax": result.smax,
            "T_final": result.T_final,
            "Nt": result.Nt,
            "af": result.af,
            "CDNC": result.CDNC,
        }
    )

    nt = len(result.z)
    ds.coords["time"] = (
        "time",
        np.arange(nt, dtype=np.int32),
        {"long_name": "output step"},
    )

    ## Parcel data
    ds["height"] = (
        ("time",),
        result.z,
        {"units": "meters", "long_name": "Parcel height above start"},
    )
    ds["T"] = (("time",), result.T, {"units": "K", "long_name": "Temperature"})
    ds["wc"] = (
        ("time",),
        result.wc,
        {"units": "g/kg", "long_name": "Liquid water mixing ratio"},
    )
    ds["S"] = (("time",), result.S, {"units": "%", "long_name": "Supersaturation"})

    ## Size distributions
    for dist, Nd, stats in zip(result.distributions, result.Nds, result.activation):
        label = dist.label
        aer_coord = "%s_bins" % label

        ds.coords[aer_coord] = (
            aer_coord,
            np.arange(1, dist.bins + 1, dtype=np.int32),
            {"long_name": "%s size bin number" % label},
        )
        ds["%s_Dp" % label] = (
            (aer_coord,),
            dist.midpoints,
            {"units": "micron", "long_name": "%s bin midpoint diameter" % label},
        )
        ds["%s_dlnD" % label] = (
            (aer_coord,),
            dist.dlnD,
            {"long_name": "%s logarithmic bin width" % label},
        )
        ds["%s_N" % label] = (
            (aer_coord,),
            dist.number,
            {"units": "cm-3", "long_name": "%s bin number concentration" % label},
        )
        ds["%s_dNdlnD" % label] = (
            (aer_coord,),
            dist.density,
            {"units": "cm-3", "long_name": "%s spectral density" % label},
        )
        ds["%s_Nd" % label] = (
            (),
            float(Nd),
            {
                "units": "cm-3",
                "long_name": "%s activated number concentration" % label,
                "eq": stats.eq,
                "kn": stats.kn,
            },
        )

    return ds
