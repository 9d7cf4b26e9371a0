"""
Software utilities

"""


class ParcelActError(Exception):
    """Custom exception to throw while translating, running or aggregating
    a parcel model simulation.

    Parameters
    ----------
    error_str : str
        Description of what went wrong.
    stage : str, optional
        Pipeline stage which raised the error; one of ``'initialization'``,
        ``'translation'``, ``'simulation'`` or ``'aggregation'``.

    """

    def __init__(self, error_str, stage=None):
        super().__init__(error_str)
        self.error_str = error_str
        self.stage = stage

    def __str__(self):
        if self.stage:
            return "[%s] %s" % (self.stage, self.error_str)
        return str(self.error_str)


class InputError(ParcelActError):
    """Non-physical parameters supplied by the caller."""


class ShapeError(ParcelActError):
    """Output from the parcel model didn't have the expected layout."""


class ExternalComputationError(ParcelActError):
    """The parcel model library failed; the original exception is kept
    on ``original`` and chained as the cause."""

    def __init__(self, error_str, stage=None, original=None):
        super().__init__(error_str, stage)
        self.original = original


class NamelistError(ParcelActError):
    """A YAML namelist is missing required sections or keys."""


class OutputError(ParcelActError):
    """Results could not be written to disk."""
