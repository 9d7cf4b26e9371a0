""" Container for the output of a single parcel model run.
"""
import pandas as pd

from .distributions import _frozen

__all__ = ["RunResult"]


class RunResult(object):
    """Summary of one parcel model simulation.

    Attributes
    ----------
    z, T, wc, S : arrays of floats
        Parcel height (m), temperature (K), liquid water mixing ratio (g/kg)
        and supersaturation (%) at each output step.
    smax : float
        Maximum supersaturation, %.
    T_final : float
        Temperature at the last output step, K.
    Nt : float
        Total aerosol number concentration over all modes, cm**-3.
    af : float
        Bulk activated fraction, ``CDNC / Nt`` (0 when ``Nt`` is 0).
    CDNC : float
        Cloud droplet number concentration, cm**-3.
    Nds : array of floats
        Activated number concentration of each mode, in input order, cm**-3.
    Nts : array of floats
        Total number concentration of each mode after binning, cm**-3.
    activation : list of :class:`ActivationStats`
        Full activation diagnostics for each mode.
    distributions : list of :class:`SizeDistribution`
        Discretized size distribution of each mode.
    labels : list of str
        Mode labels, in input order.
    traces : list of DataFrames
        Per-mode wet radius histories, as returned by the model.
    parcel : DataFrame
        Raw parcel trajectory, as returned by the model.

    """

    __slots__ = (
        "z",
        "T",
        "wc",
        "S",
        "smax",
        "T_final",
        "Nt",
        "af",
        "CDNC",
        "Nds",
        "Nts",
        "activation",
        "distributions",
        "labels",
        "traces",
        "parcel",
    )

    def __init__(
        self,
        z,
        T,
        wc,
        S,
        smax,
        T_final,
        Nt,
        af,
        CDNC,
        Nds,
        Nts,
        activation,
        distributions,
        labels,
        traces,
        parcel,
    ):
        object.__setattr__(self, "z", _frozen(z))
        object.__setattr__(self, "T", _frozen(T))
        object.__setattr__(self, "wc", _frozen(wc))
        object.__setattr__(self, "S", _frozen(S))
        object.__setattr__(self, "smax", float(smax))
        object.__setattr__(self, "T_final", float(T_final))
        object.__setattr__(self, "Nt", float(Nt))
        object.__setattr__(self, "af", float(af))
        object.__setattr__(self, "CDNC", float(CDNC))
        object.__setattr__(self, "Nds", _frozen(Nds))
        object.__setattr__(self, "Nts", _frozen(Nts))
        object.__setattr__(self, "activation", list(activation))
        object.__setattr__(self, "distributions", list(distributions))
        object.__setattr__(self, "labels", list(labels))
        object.__setattr__(self, "traces", list(traces))
        object.__setattr__(self, "parcel", parcel)

    def __setattr__(self, name, value):
        raise AttributeError("RunResult is immutable")

    def to_dataframe(self):
        """Parcel trajectory in output units, one row per output step."""
        return pd.DataFrame({"z": self.z, "T": self.T, "wc": self.wc, "S": self.S})

    def summary(self):
        return dict(smax=self.smax, T_final=self.T_final, Nt=self.Nt, af=self.af, CDNC=self.CDNC)

    def mode_summary(self):
        """Per-mode totals and activation diagnostics, indexed by label."""
        columns = ["Nt", "Nd", "eq", "kn", "alpha", "phi"]
        rows = [
            [Nt, Nd, stats.eq, stats.kn, stats.alpha, stats.phi]
            for Nt, Nd, stats in zip(self.Nts, self.Nds, self.activation)
        ]
        df = pd.DataFrame(rows, index=pd.Index(self.labels, name="mode"), columns=columns)
        return df

    def __repr__(self):
        return "RunResult | Smax = %2.3f%%, Nt = %2.2e, CDNC = %2.2e, af = %1.3f |" % (
            self.smax,
            self.Nt,
            self.CDNC,
            self.af,
        )
