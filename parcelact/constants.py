""" Fixed run control and unit conversion factors used when driving the
parcel model.

================= ============= ========== ==========================
Name              Value         Units      Description
================= ============= ========== ==========================
``Z_TOP``         300.0         m          depth of the simulated ascent;
                                           ``t_end = Z_TOP / V``
``DZ_OUTPUT``     1.0           m          vertical output spacing;
                                           ``output_dt = DZ_OUTPUT / V``
``SOLVER``        'cvode'                  stiff integrator alias
``OUTPUT_FMT``    'dataframes'             model output format alias
``WC_SCALE``      1000.0        g/kg       liquid water, kg/kg -> g/kg
``S_SCALE``       100.0         %          supersaturation, fraction -> %
``PER_M3_TO_CM3`` 1e-6                     number, m**-3 -> cm**-3
================= ============= ========== ==========================

"""

Z_TOP = 300.0  #: Depth of ascent, m
DZ_OUTPUT = 1.0  #: Output spacing, m
SOLVER = "cvode"  #: Integrator alias understood by pyrcel
OUTPUT_FMT = "dataframes"  #: pyrcel output format alias
TERMINATE = False  #: Don't stop the integration once Smax is reached

WC_SCALE = 1e3  #: kg/kg -> g/kg
S_SCALE = 1e2  #: fraction -> percent
PER_M3_TO_CM3 = 1e-6  #: m**-3 -> cm**-3
RADIUS_TO_DIAMETER = 2.0

# Columns of the parcel trajectory table this package reads
TRAJECTORY_VARS = ["z", "T", "wc", "S"]

# Default mass accommodation coefficient
ACCOM = 1.0
