"""
Vectors, single-axis rotations and homogeneous transforms for the hexapod.

All matrices are 4x4 numpy arrays acting on column vectors. Angles are given
in degrees at the public surface and converted to radians internally.
"""

from dataclasses import dataclass
from enum import Enum
from math import cos, radians, sin, sqrt

import numpy as np

# ---------------------------------------------------------------------------
# Homogeneous transform helpers
# ---------------------------------------------------------------------------


def _rotate_x(theta: float) -> np.ndarray:
    """Rotation about X-axis."""
    return np.array(
        [
            [1, 0, 0, 0],
            [0, cos(theta), -sin(theta), 0],
            [0, sin(theta), cos(theta), 0],
            [0, 0, 0, 1],
        ]
    )


def _rotate_y(theta: float) -> np.ndarray:
    """Rotation about Y-axis."""
    return np.array(
        [
            [cos(theta), 0, sin(theta), 0],
            [0, 1, 0, 0],
            [-sin(theta), 0, cos(theta), 0],
            [0, 0, 0, 1],
        ]
    )


def _rotate_z(theta: float) -> np.ndarray:
    """Rotation about Z-axis."""
    return np.array(
        [
            [cos(theta), -sin(theta), 0, 0],
            [sin(theta), cos(theta), 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ]
    )


def translate_xyz(x: float, y: float, z: float) -> np.ndarray:
    """
    Creates a homogeneous transformation matrix for translation.
    Translates by the given x, y, z offsets.
    """
    return np.array(
        [
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def identity() -> np.ndarray:
    return np.eye(4)


def inverse(transform: np.ndarray) -> np.ndarray:
    """
    Computes the inverse of a rigid homogeneous transformation matrix.
    Transposes the rotation matrix and adjusts the translation vector accordingly.
    """
    rotation_matrix = transform[0:3, 0:3]
    translation_vector = transform[0:3, 3]
    inverse_transform = np.eye(4)
    inverse_transform[0:3, 0:3] = rotation_matrix.T
    inverse_transform[0:3, 3] = -rotation_matrix.T @ translation_vector
    return inverse_transform


def multiply_matrices(*matrices: np.ndarray) -> np.ndarray:
    """Compose transforms left to right, so the last one is applied first."""
    result = np.eye(4)
    for matrix in matrices:
        result = result @ matrix
    return result


# ---------------------------------------------------------------------------
# Euler rotations
# ---------------------------------------------------------------------------


class RotationAxis(Enum):
    """The three principal axes an Euler rotation can turn about.

    Heading turns about the vertical Y axis, attitude about Z and bank about X.
    """

    HEADING = 'heading'
    ATTITUDE = 'attitude'
    BANK = 'bank'


_AXIS_ROTATIONS = {
    RotationAxis.HEADING: _rotate_y,
    RotationAxis.ATTITUDE: _rotate_z,
    RotationAxis.BANK: _rotate_x,
}


@dataclass(frozen=True)
class EulerAngle:
    """A rotation of ``degrees`` about exactly one principal axis."""

    axis: RotationAxis
    degrees: float

    @classmethod
    def heading(cls, degrees: float) -> 'EulerAngle':
        return cls(RotationAxis.HEADING, degrees)

    @classmethod
    def attitude(cls, degrees: float) -> 'EulerAngle':
        return cls(RotationAxis.ATTITUDE, degrees)

    @classmethod
    def bank(cls, degrees: float) -> 'EulerAngle':
        return cls(RotationAxis.BANK, degrees)

    def matrix(self) -> np.ndarray:
        return _AXIS_ROTATIONS[self.axis](radians(self.degrees))


# ---------------------------------------------------------------------------
# Vector3
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vector3:
    """An immutable point or offset in 3D space (mm)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def blend(self, other: 'Vector3', weight: float) -> 'Vector3':
        """Return the point ``weight`` of the way from this vector to ``other``."""
        return Vector3(
            self.x + (other.x - self.x) * weight,
            self.y + (other.y - self.y) * weight,
            self.z + (other.z - self.z) * weight,
        )

    def distance(self, other: 'Vector3') -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return sqrt(dx * dx + dy * dy + dz * dz)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def with_y(self, y: float) -> 'Vector3':
        return Vector3(self.x, y, self.z)

    def multiply_by_matrix44(self, matrix: np.ndarray) -> 'Vector3':
        """Transform this point by a homogeneous matrix."""
        result = matrix @ np.array([self.x, self.y, self.z, 1.0])
        return Vector3(float(result[0]), float(result[1]), float(result[2]))

    def __str__(self) -> str:
        return f'({self.x:.2f}, {self.y:.2f}, {self.z:.2f})'


ZERO_VECTOR = Vector3(0.0, 0.0, 0.0)


def make_matrix44(translation: Vector3, rotation: EulerAngle) -> np.ndarray:
    """Build the transform that rotates by ``rotation`` and then translates by ``translation``."""
    return translate_xyz(translation.x, translation.y, translation.z) @ rotation.matrix()
