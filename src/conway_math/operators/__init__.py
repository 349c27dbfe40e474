"""Conway operators - dual, kis, truncate - and the incidence helpers they share."""

from .incidence import (
    VertexEdge,
    build_edges,
    faces_per_vertex,
    vertex_edges,
)
from .dual import dual
from .kis import kis
from .truncate import truncate
