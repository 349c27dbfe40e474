"""
Constants and error taxonomy.

The polyhedron contract lives in spec.structures; import it from there
(it depends on geometry, which depends on these constants).
"""

from .constants import *
from .errors import (
    ConwayError,
    OpError,
    AlreadyHasSeedError,
    NoSeedSetError,
    NoOperationsError,
    NotationError,
    InternalConsistencyError,
    MissingSeedError,
    DegenerateGeometryError,
)
