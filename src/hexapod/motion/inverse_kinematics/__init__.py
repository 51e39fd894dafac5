from .homogeneous_transformations import (
    EulerAngle,
    RotationAxis,
    Vector3,
    ZERO_VECTOR,
    identity,
    inverse,
    make_matrix44,
    multiply_matrices,
)
from .leg_solver import JointAngles, LegGeometry, forward_kinematics, solve
from .segment import Segment

__all__ = [
    'EulerAngle',
    'RotationAxis',
    'Vector3',
    'ZERO_VECTOR',
    'identity',
    'inverse',
    'make_matrix44',
    'multiply_matrices',
    'JointAngles',
    'LegGeometry',
    'forward_kinematics',
    'solve',
    'Segment',
]
