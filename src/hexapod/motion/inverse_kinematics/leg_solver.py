# leg_solver.py
"""
Closed-form inverse kinematics for one four-joint leg.

Targets are expressed in the leg frame: the origin sits on the coxa pivot,
+X points straight out along the leg's heading and +Y points up. The coxa
turns about Y. The femur, tibia and tarsus all turn about the axis
perpendicular to the leg plane, so once the coxa angle is known the rest of
the chain is a planar problem solved with three triangles:

    r   femur pivot (end of the coxa)
    v   foot target
    vv  ankle, held ``tarsus`` mm straight above ``v`` so the tarsus lands vertically
    t   reference point ``plumb_depth`` mm straight below ``r``

Joint angles are geometric: femur is the elevation of the femur above
horizontal, tibia and tarsus are the downward bend at the knee and ankle.
"""

from dataclasses import dataclass
from math import acos, atan2, degrees, hypot, isfinite, nan
from typing import Tuple

import hexapod.constants as constants
from hexapod import labels
from hexapod.exceptions import UnreachableTargetError

from .homogeneous_transformations import EulerAngle, Vector3, ZERO_VECTOR
from .segment import Segment


@dataclass(frozen=True)
class LegGeometry:
    """Static segment dimensions of a leg (mm)."""

    coxa: float = constants.COXA_LENGTH
    coxa_drop: float = constants.COXA_DROP
    femur: float = constants.FEMUR_LENGTH
    tibia: float = constants.TIBIA_LENGTH
    tarsus: float = constants.TARSUS_LENGTH
    plumb_depth: float = constants.PLUMB_DEPTH

    @property
    def max_reach(self) -> float:
        return self.femur + self.tibia + self.tarsus


@dataclass(frozen=True)
class JointAngles:
    coxa: float
    femur: float
    tibia: float
    tarsus: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.coxa, self.femur, self.tibia, self.tarsus

    def is_finite(self) -> bool:
        return all(isfinite(angle) for angle in self.as_tuple())


def _sss(a: float, b: float, c: float) -> float:
    """Angle (degrees) opposite side ``a`` of the triangle with sides a, b, c.

    Returns NaN when the sides do not form a triangle.
    """
    if b == 0 or c == 0:
        return nan

    cosine = (b * b + c * c - a * a) / (2 * b * c)
    if abs(cosine) > 1 + constants.ACOS_TOLERANCE:
        return nan

    return degrees(acos(max(-1.0, min(1.0, cosine))))


def build_segments(angles: JointAngles, geometry: LegGeometry = LegGeometry()) -> Tuple[Segment, Segment, Segment, Segment]:
    """Build the coxa, femur, tibia and tarsus segments for the given joint angles."""
    root = Segment.root(ZERO_VECTOR)
    coxa = Segment('coxa', root, EulerAngle.heading(angles.coxa), Vector3(geometry.coxa, geometry.coxa_drop, 0))
    femur = Segment('femur', coxa, EulerAngle.attitude(angles.femur), Vector3(geometry.femur, 0, 0))
    tibia = Segment('tibia', femur, EulerAngle.attitude(-angles.tibia), Vector3(geometry.tibia, 0, 0))
    tarsus = Segment('tarsus', tibia, EulerAngle.attitude(-angles.tarsus), Vector3(geometry.tarsus, 0, 0))
    return coxa, femur, tibia, tarsus


def forward_kinematics(angles: JointAngles, geometry: LegGeometry = LegGeometry()) -> Vector3:
    """Return the foot position, in the leg frame, for the given joint angles."""
    *_, tarsus = build_segments(angles, geometry)
    return tarsus.end()


def solve(target: Vector3, geometry: LegGeometry = LegGeometry(), leg_name: str = '') -> JointAngles:
    """Solve the joint angles which put the foot on ``target`` (leg frame).

    Raises:
        UnreachableTargetError: if the target lies inside the femur pivot or
            any joint angle has no real solution.
    """
    coxa_angle = degrees(atan2(-target.z, target.x))

    # The femur pivot moves with the coxa, so build it before solving the rest.
    coxa_segment, _, _, _ = build_segments(JointAngles(coxa_angle, 0.0, 0.0, 0.0), geometry)
    r = coxa_segment.end()

    if hypot(target.x, target.z) - geometry.coxa <= 0:
        raise UnreachableTargetError(leg_name, target, labels.LEG_UNREACHABLE.format(leg_name, target))

    v = target
    vv = v.add(Vector3(0, geometry.tarsus, 0))
    t = r.subtract(Vector3(0, geometry.plumb_depth, 0))

    a = geometry.femur
    b = geometry.tibia
    c = geometry.tarsus
    d = r.distance(vv)
    e = r.distance(v)
    f = r.distance(t)
    g = t.distance(v)

    aa = _sss(b, a, d)
    bb = _sss(c, d, e)
    cc = _sss(g, e, f)
    dd = _sss(a, d, b)
    ee = _sss(e, c, d)
    hh = 180 - aa - dd

    angles = JointAngles(
        coxa=coxa_angle,
        femur=(aa + bb + cc) - 90,
        tibia=180 - hh,
        tarsus=180 - (dd + ee),
    )

    if not angles.is_finite():
        raise UnreachableTargetError(leg_name, target, labels.LEG_UNREACHABLE.format(leg_name, target))

    return angles
