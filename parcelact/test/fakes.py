""" In-memory stand-in for the parcel model backend.

Produces output with the same layout as pyrcel, from fixed analytic
profiles, so the aggregation logic can be exercised without integrating
the model.
"""
import numpy as np
import pandas as pd

from ..backend import ActivationStats, SpeciesHandle

STATE_VARS = ["z", "P", "T", "wv", "wc", "wi", "S"]

WC_END = 0.002  # kg/kg
S_MAX = 0.00129  # fraction
T_START, T_END = 283.15, 280.15  # K


class FakeBackend(object):
    """Records every call, and returns canned output.

    Parameters
    ----------
    eq : dict, optional
        Equilibrium activated fraction to report for each label (default 0.5).
    fail : dict, optional
        Map of method name to an exception instance to raise from it.

    """

    def __init__(self, eq=None, fail=None):
        self.eq = eq or {}
        self.fail = fail or {}
        self.calls = {
            "lognormal": [],
            "aerosol_species": [],
            "parcel_model": [],
            "integrate": [],
            "binned_activation": [],
        }
        self.parcel_df = None
        self.aerosol_dfs = None

    def _call(self, name, **kwargs):
        self.calls[name].append(kwargs)
        if name in self.fail:
            raise self.fail[name]

    def lognormal(self, mu, sigma, N):
        self._call("lognormal", mu=mu, sigma=sigma, N=N)
        return dict(mu=mu, sigma=sigma, N=N)

    def aerosol_species(self, label, distribution, kappa, bins):
        self._call(
            "aerosol_species", label=label, distribution=distribution, kappa=kappa, bins=bins
        )
        mu, sigma, N = distribution["mu"], distribution["sigma"], distribution["N"]
        # Same bin placement as pyrcel; even split of N across the bins
        lr = np.log10(mu / (10.0 * sigma))
        rr = np.log10(mu * 10.0 * sigma)
        rs = np.logspace(lr, rr, num=bins + 1)
        Nis = np.full(bins, N / bins) * 1e6
        return SpeciesHandle(
            label=label,
            total_N=float(np.sum(Nis) * 1e-6),
            bin_radii=rs,
            bin_number_concentrations=Nis,
            native=None,
        )

    def parcel_model(self, handles, V, T0, S0, P0, accom, console=False):
        self._call(
            "parcel_model", handles=handles, V=V, T0=T0, S0=S0, P0=P0, accom=accom, console=console
        )
        return dict(handles=handles, V=V, T0=T0, S0=S0, P0=P0)

    def integrate(self, model, t_end, output_dt, solver, output_fmt, terminate):
        self._call(
            "integrate",
            model=model,
            t_end=t_end,
            output_dt=output_dt,
            solver=solver,
            output_fmt=output_fmt,
            terminate=terminate,
        )
        if self.parcel_df is not None:
            return self.parcel_df, self.aerosol_dfs

        nt = int(round(t_end / output_dt)) + 1
        time = np.linspace(0.0, t_end, nt)
        frac = time / t_end
        x = np.zeros((nt, len(STATE_VARS)))
        x[:, 0] = model["V"] * time
        x[:, 1] = model["P0"] - 10.0 * x[:, 0]
        x[:, 2] = T_START + (T_END - T_START) * frac
        x[:, 4] = WC_END * frac
        # Peak part way up, then relax
        x[:, 6] = S_MAX * np.sin(np.pi * frac) ** 2
        x[nt // 4, 6] = S_MAX
        parcel_df = pd.DataFrame(
            {var: x[:, i] for i, var in enumerate(STATE_VARS)}, index=time
        )

        aerosol_dfs = {}
        for h in model["handles"]:
            nr = len(h.bin_number_concentrations)
            growth = 1.0 + np.outer(frac, np.ones(nr))
            radii = growth * (h.bin_radii[:-1] * 1e-6)
            aerosol_dfs[h.label] = pd.DataFrame(
                radii, index=time, columns=["r%03d" % i for i in range(nr)]
            )
        return parcel_df, aerosol_dfs

    def binned_activation(self, smax, T, rs, handle):
        self._call("binned_activation", smax=smax, T=T, rs=np.array(rs), handle=handle)
        eq = self.eq.get(handle.label, 0.5)
        return ActivationStats(eq=eq, kn=eq, alpha=1.0, phi=0.0)
