# segment.py
"""
Kinematic chain nodes.

A segment rotates about one axis relative to the end of its parent and then
extends by a fixed offset. Chains are rebuilt for every solve, so segments
never change after construction.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .homogeneous_transformations import EulerAngle, Vector3, ZERO_VECTOR, identity, translate_xyz


@dataclass(frozen=True)
class Segment:
    name: str
    parent: Optional['Segment']
    rotation: EulerAngle
    offset: Vector3

    @classmethod
    def root(cls, position: Vector3) -> 'Segment':
        """A zero-rotation segment that only places the chain at ``position``."""
        return cls('root', None, EulerAngle.heading(0.0), position)

    def start_matrix(self) -> np.ndarray:
        """Transform from this segment's frame (before its offset) to the chain's base frame."""
        parent_matrix = self.parent.end_matrix() if self.parent is not None else identity()
        return parent_matrix @ self.rotation.matrix()

    def end_matrix(self) -> np.ndarray:
        return self.start_matrix() @ translate_xyz(self.offset.x, self.offset.y, self.offset.z)

    def start(self) -> Vector3:
        return ZERO_VECTOR.multiply_by_matrix44(self.start_matrix())

    def end(self) -> Vector3:
        return ZERO_VECTOR.multiply_by_matrix44(self.end_matrix())
