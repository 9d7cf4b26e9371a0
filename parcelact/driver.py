""" Drive a parcel model simulation and aggregate its activation statistics.

:func:`run` is the workhorse: it hands a set of aerosol modes and an
initial state to the parcel model, integrates through a fixed 300 m ascent,
and rolls the output up into a :class:`RunResult`. :func:`sweep` repeats
this over a range of updraft speeds.

"""
from collections import namedtuple

import numpy as np
import pandas as pd

from . import constants as c
from .aerosol import InitialState
from .distributions import from_species
from .result import RunResult
from .translate import translate
from .util import ExternalComputationError, InputError, ParcelActError, ShapeError

__all__ = ["Trajectory", "run", "summarize_activation", "sweep"]

#: Parcel trajectory converted to output units (m, K, g/kg, %) plus the final
#: wet radii of each mode's bins (m).
Trajectory = namedtuple("Trajectory", ["z", "T", "wc", "S", "final_radii"])


def summarize_activation(activated, totals):
    """Roll per-mode activated number concentrations into bulk statistics.

    Parameters
    ----------
    activated : array_like of floats
        Activated number concentration in each mode.
    totals : array_like of floats
        Total number concentration in each mode.

    Returns
    -------
    Nt, af, CDNC : floats
        Total number, activated fraction and droplet number. The activated
        fraction is 0 if there is no aerosol at all.

    """
    Nt = float(np.sum(totals))
    CDNC = float(np.sum(activated))
    af = CDNC / Nt if Nt > 0 else 0.0
    return Nt, af, CDNC


def _read_output(parcel_df, aerosol_dfs, handles):
    """Validate the model output and convert it to a :class:`Trajectory`."""
    missing = [v for v in c.TRAJECTORY_VARS if v not in parcel_df]
    if missing:
        raise ShapeError(
            "parcel output is missing column(s) %s" % ", ".join(missing),
            stage="aggregation",
        )
    nt = len(parcel_df)
    if nt == 0:
        raise ShapeError("parcel output has no rows", stage="aggregation")

    final_radii = []
    for h in handles:
        if h.label not in aerosol_dfs:
            raise ShapeError("no trace output for mode '%s'" % h.label, stage="aggregation")
        trace = np.asarray(aerosol_dfs[h.label])
        nbins = len(h.bin_number_concentrations)
        if trace.ndim != 2 or trace.shape != (nt, nbins):
            raise ShapeError(
                "trace for mode '%s' has shape %r, expected %r"
                % (h.label, trace.shape, (nt, nbins)),
                stage="aggregation",
            )
        final_radii.append(trace[-1, :])

    return Trajectory(
        z=parcel_df["z"].to_numpy(dtype=float),
        T=parcel_df["T"].to_numpy(dtype=float),
        wc=parcel_df["wc"].to_numpy(dtype=float) * c.WC_SCALE,
        S=parcel_df["S"].to_numpy(dtype=float) * c.S_SCALE,
        final_radii=final_radii,
    )


def _external(stage, what, e):
    """Wrap a failure raised by the model backend."""
    return ExternalComputationError("%s failed: %r" % (what, e), stage=stage, original=e)


def run(modes, initial, backend=None, console=False):
    """Set up and run the parcel model, then compute activation statistics.

    The parcel is lifted through :const:`constants.Z_TOP` meters with output
    every :const:`constants.DZ_OUTPUT` meters, using the CVODE integrator and
    without stopping early at the supersaturation maximum.

    Parameters
    ----------
    modes : sequence of :class:`AerosolMode`
        Aerosol populations in the parcel; labels must be unique.
    initial : :class:`InitialState`
        Initial thermodynamic state and updraft speed.
    backend : optional
        Model backend; defaults to a new :class:`PyrcelBackend`.
    console : boolean, optional
        Print progress to the terminal, and turn on the model's own output.

    Returns
    -------
    RunResult

    Raises
    ------
    InputError
        If the updraft speed isn't positive or mode labels repeat.
    ExternalComputationError
        If the parcel model fails; ``stage`` tells where.
    ShapeError
        If the model output doesn't have the expected layout.

    """
    modes = list(modes)
    if not initial.V > 0:
        raise InputError(
            "updraft speed must be positive (got %r)" % initial.V, stage="translation"
        )
    labels = [m.label for m in modes]
    if len(set(labels)) != len(labels):
        raise InputError("mode labels must be unique: %r" % labels, stage="translation")

    if backend is None:
        from .backend import PyrcelBackend

        backend = PyrcelBackend()

    if console:
        print("Constructing aerosol modes")
    handles = []
    for i, mode in enumerate(modes, start=1):
        h = translate(mode, backend)
        if console:
            print("   {:2d})".format(i), mode)
        handles.append(h)

    t_end, output_dt = initial.t_end, initial.output_dt
    if console:
        print()
        print("Integration control")
        print("----------------------------")
        print("         solver: ", c.SOLVER)
        print("          t_end: ", t_end)
        print("      output dt: ", output_dt)

    try:
        model = backend.parcel_model(
            handles,
            initial.V,
            initial.T,
            initial.S,
            initial.P,
            accom=initial.accom,
            console=console,
        )
    except ParcelActError:
        raise
    except Exception as e:
        raise _external("simulation", "model setup", e) from e

    try:
        parcel_df, aerosol_dfs = backend.integrate(
            model,
            t_end,
            output_dt,
            solver=c.SOLVER,
            output_fmt=c.OUTPUT_FMT,
            terminate=c.TERMINATE,
        )
    except ParcelActError:
        raise
    except Exception as e:
        raise _external("simulation", "integration", e) from e

    traj = _read_output(parcel_df, aerosol_dfs, handles)

    T_final = traj.T[-1]
    smax = traj.S.max()

    activation = []
    for mode, h, rs in zip(modes, handles, traj.final_radii):
        try:
            stats = backend.binned_activation(smax / c.S_SCALE, T_final, rs, h)
        except ParcelActError:
            raise
        except Exception as e:
            raise _external("aggregation", "activation of '%s'" % mode.label, e) from e
        activation.append(stats)

    totals = np.array([h.total_N for h in handles], dtype=float)
    Nds = np.array([stats.eq for stats in activation], dtype=float) * totals
    Nt, af, CDNC = summarize_activation(Nds, totals)

    distributions = [
        from_species(h, params=(mode.N, mode.mu, mode.sigma)) for mode, h in zip(modes, handles)
    ]

    if console:
        print()
        print("ACTIVATION")
        print("%10s %10s %10s %8s" % ("mode", "N", "Nd", "eq"))
        for label, N, Nd, stats in zip(labels, totals, Nds, activation):
            print("%10s %10.2f %10.2f %8.4f" % (label, N, Nd, stats.eq))
        print("   Smax = %2.4f%%, CDNC = %4.1f, af = %1.4f" % (smax, CDNC, af))

    return RunResult(
        z=traj.z,
        T=traj.T,
        wc=traj.wc,
        S=traj.S,
        smax=smax,
        T_final=T_final,
        Nt=Nt,
        af=af,
        CDNC=CDNC,
        Nds=Nds,
        Nts=totals,
        activation=activation,
        distributions=distributions,
        labels=labels,
        traces=[aerosol_dfs[label] for label in labels],
        parcel=parcel_df,
    )


def sweep(modes, initial, updrafts, backend=None, console=False):
    """Repeat :func:`run` over a range of updraft speeds.

    Parameters
    ----------
    modes : sequence of :class:`AerosolMode`
    initial : :class:`InitialState`
        Base initial state; its updraft speed is replaced for each run.
    updrafts : sequence of floats
        Updraft speeds to simulate, m/s.
    backend, console : optional
        As for :func:`run`; one backend is shared by every run.

    Returns
    -------
    DataFrame
        Indexed by updraft speed, with columns ``smax``, ``Nt``, ``af`` and
        ``CDNC``.

    """
    if backend is None:
        from .backend import PyrcelBackend

        backend = PyrcelBackend()

    modes, updrafts = list(modes), list(updrafts)
    rows = []
    for V in updrafts:
        state = InitialState(T=initial.T, P=initial.P, S=initial.S, accom=initial.accom, V=V)
        if console:
            print("V = %5.2f m/s" % V)
        res = run(modes, state, backend=backend, console=console)
        rows.append([res.smax, res.Nt, res.af, res.CDNC])

    return pd.DataFrame(
        rows,
        index=pd.Index(np.asarray(updrafts, dtype=float), name="V"),
        columns=["smax", "Nt", "af", "CDNC"],
    )
