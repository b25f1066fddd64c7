"""Static sample datasets.

Reference data that never changes between runs: the monthly temperature
averages used to demonstrate fusing sources that report in different units.

Adding a new module:
1. Create ``reference/{name}.py`` with constants and a loader
2. Re-export from this ``__init__.py``
"""

from temperature_fusion.reference.climate import OAKLAND_METADATA as OAKLAND_METADATA
from temperature_fusion.reference.climate import OAKLAND_TEMPS_F as OAKLAND_TEMPS_F
from temperature_fusion.reference.climate import TANGIERS_METADATA as TANGIERS_METADATA
from temperature_fusion.reference.climate import TANGIERS_TEMPS_C as TANGIERS_TEMPS_C
from temperature_fusion.reference.climate import load_sample_sources as load_sample_sources
