"""spatial-vectors — derived vector and quaternion operations.

Componentwise builders, snapping, spatial predicates, nearest/farthest
search and rigid rotation over small numpy vectors (float2, float3, int2,
int3) and (x, y, z, w) quaternions.

Public API::

    from spatial_vectors import float3, add, round_, closest, rotate
"""

from .types import (
    AxisOperand,
    VectorKind,
    as_vector,
    float2,
    float3,
    infinity,
    int2,
    int3,
    kind_of,
    quaternion,
    quaternion_identity,
    zero,
)
from .builders import (
    BuilderOp,
    add,
    add_vector,
    componentwise,
    div,
    div_vector,
    mod,
    mul,
    sub,
    sub_vector,
    with_,
    with_origin,
)
from .metrics import (
    DistanceMetric,
    cross,
    direction_to,
    distance,
    distance_from,
    is_beyond,
    is_beyond_box,
    is_within,
    is_within_box,
    magnitude,
    manhattan_distance_from,
    perp,
    perp_xy,
    perp_xz,
    perp_yz,
    sqr_distance_from,
    sqr_magnitude,
)
from .rounding import (
    ceil,
    clamp,
    clamp_magnitude,
    clamp_vector,
    floor,
    floor_to_int,
    round_,
    set_magnitude,
    to_float,
    to_int,
)
from .convert import (
    flat,
    from_xy,
    from_xz,
    from_yz,
    swap,
    swap_backwards,
    swap_forwards,
    to_matrix,
    to_xy,
    to_xz,
    to_yz,
    translate,
)
from .search import (
    Closeness,
    EmptyPolicy,
    average,
    closeness_than,
    closest,
    closest_to,
    farthest,
    fold_closest,
    is_closer_than,
    is_closer_to,
)
from .rotation import conjugate, euler, inverse, multiply, normalize, rotate

__version__ = "0.1.0"
__all__ = [
    "AxisOperand",
    "VectorKind",
    "as_vector",
    "float2",
    "float3",
    "int2",
    "int3",
    "quaternion",
    "quaternion_identity",
    "kind_of",
    "zero",
    "infinity",
    "BuilderOp",
    "componentwise",
    "with_",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "add_vector",
    "sub_vector",
    "div_vector",
    "with_origin",
    "DistanceMetric",
    "magnitude",
    "sqr_magnitude",
    "distance",
    "distance_from",
    "sqr_distance_from",
    "manhattan_distance_from",
    "direction_to",
    "cross",
    "perp",
    "perp_xy",
    "perp_xz",
    "perp_yz",
    "is_within",
    "is_beyond",
    "is_within_box",
    "is_beyond_box",
    "round_",
    "floor",
    "ceil",
    "floor_to_int",
    "to_int",
    "to_float",
    "clamp",
    "clamp_vector",
    "set_magnitude",
    "clamp_magnitude",
    "to_xy",
    "to_xz",
    "to_yz",
    "from_xy",
    "from_xz",
    "from_yz",
    "flat",
    "swap",
    "swap_forwards",
    "swap_backwards",
    "to_matrix",
    "translate",
    "EmptyPolicy",
    "closest",
    "farthest",
    "average",
    "is_closer_than",
    "closeness_than",
    "is_closer_to",
    "Closeness",
    "fold_closest",
    "closest_to",
    "multiply",
    "euler",
    "conjugate",
    "inverse",
    "normalize",
    "rotate",
]
