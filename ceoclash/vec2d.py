"""Two-dimensional vectors of doubles and a few helpers built on them."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable

_NUDGE = sys.float_info.min
_BOX_SENTINEL = 9999999.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def det(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def magsq(self) -> float:
        return self.dot(self)

    def mag(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        return self * (1.0 / (self.mag() + _NUDGE))

    def with_length(self, length: float) -> Vec2:
        return self.normalized() * length

    def lerp(self, other: Vec2, t: float) -> Vec2:
        return self * (1.0 - t) + other * t

    def dist(self, other: Vec2) -> float:
        return (self - other).mag()

    def distsq(self, other: Vec2) -> float:
        return (self - other).magsq()

    def perp(self) -> Vec2:
        """Rotated by +90 degrees."""
        return Vec2(-self.y, self.x)

    def rperp(self) -> Vec2:
        """Rotated by -90 degrees."""
        return Vec2(self.y, -self.x)

    def project(self, other: Vec2) -> Vec2:
        """Projection of this vector onto ``other``."""
        return other * (self.dot(other) / other.dot(other))

    def heading(self) -> float:
        return math.atan2(self.y, self.x)

    def rough_heading8(self) -> float:
        """Heading snapped to the centre of one of 8 sectors."""
        x, y = self.x, self.y
        if x > 0:
            if y > 0:
                return 1.1780972450961724 if x < y else 0.3926990816987241
            return -1.1780972450961724 if x < -y else -0.3926990816987241
        if y > 0:
            return 1.9634954084936207 if -x < y else 2.7488935718910690
        return -1.9634954084936207 if x > y else -2.7488935718910690

    def rough_heading16(self) -> float:
        """Heading snapped to the centre of one of 16 sectors."""
        x, y = self.x, self.y
        if x > 0:
            if y > 0:
                if x < y:
                    return 1.3744467859455345 if 2.414213 * x < y else 0.9817477042468103
                return 0.5890486225480862 if 0.414213 * x < y else 0.1963495408493620
            if x < -y:
                return -1.3744467859455345 if 2.414213 * x < -y else -0.9817477042468103
            return -0.5890486225480862 if 0.414213 * x < -y else -0.1963495408493620
        if y > 0:
            if -x < y:
                return 1.7671458676442586 if -2.414213 * x < y else 2.1598449493429828
            return 2.5525440310417070 if -0.414213 * x < y else 2.9452431127404311
        if x > y:
            return -1.7671458676442586 if 2.414213 * x > y else -2.1598449493429828
        return -2.5525440310417070 if 0.414213 * x > y else -2.9452431127404311

    def rough_heading32(self) -> float:
        """Heading snapped to the centre of one of 32 sectors."""
        x, y = self.x, self.y
        if x > 0:
            if y > 0:
                if x < y:
                    if 2.414213 * x < y:
                        return 1.4726215563702154 if 5.027339 * x < y else 1.2762720155208536
                    return 1.0799224746714913 if 1.496605 * x < y else 0.8835729338221293
                if 0.414213 * x < y:
                    return 0.6872233929727672 if 0.668178 * x < y else 0.4908738521234052
                return 0.2945243112740431 if 0.198912 * x < y else 0.0981747704246810
            if x < -y:
                if 2.414213 * x < -y:
                    return -1.4726215563702154 if 5.027339 * x < -y else -1.2762720155208536
                return -1.0799224746714913 if 1.496605 * x < -y else -0.8835729338221293
            if 0.414213 * x < -y:
                return -0.6872233929727672 if 0.668178 * x < -y else -0.4908738521234052
            return -0.2945243112740431 if 0.198912 * x < -y else -0.0981747704246810
        if y > 0:
            if -x < y:
                if -2.414213 * x < y:
                    return 1.6689710972195777 if -5.027339 * x < y else 1.8653206380689396
                return 2.0616701789183018 if -1.496605 * x < y else 2.2580197197676637
            if -0.414213 * x < y:
                return 2.4543692606170260 if -0.668178 * x < y else 2.6507188014663878
            return 2.8470683423157501 if -0.198912 * x < y else 3.0434178831651120
        if x > y:
            if 2.414213 * x > y:
                return -1.6689710972195777 if 5.027339 * x > y else -1.8653206380689396
            return -2.0616701789183018 if 1.496605 * x > y else -2.2580197197676637
        if 0.414213 * x > y:
            return -2.4543692606170260 if 0.668178 * x > y else -2.6507188014663878
        return -2.8470683423157501 if 0.198912 * x > y else -3.0434178831651120

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> Vec2:
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def to_polar(self) -> Vec2:
        """(magnitude, heading) packed into a vector."""
        return Vec2(self.mag(), self.heading())

    def angle_between(self, other: Vec2) -> float:
        return math.atan2(self.det(other), self.dot(other))

    def rotated(self, theta: float) -> Vec2:
        co = math.cos(theta)
        si = math.sin(theta)
        return Vec2(self.x * co - self.y * si, self.x * si + self.y * co)

    def rotate_by(self, other: Vec2) -> Vec2:
        """Complex multiplication; scales unless ``other`` is a unit vector."""
        return Vec2(self.x * other.x - self.y * other.y, self.x * other.y + self.y * other.x)

    def unrotate_by(self, other: Vec2) -> Vec2:
        """Inverse of :meth:`rotate_by` for a unit ``other``."""
        return Vec2(self.x * other.x + self.y * other.y, self.y * other.x - self.x * other.y)


def inside_angle(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Angle at ``b`` of the triangle a-b-c."""
    d0 = b.distsq(a)
    d2 = b.distsq(c)
    return math.acos((d0 + d2 - a.distsq(c)) / (2 * math.sqrt(d0) * math.sqrt(d2)))


def medicenter(points: Iterable[Vec2]) -> Vec2:
    """Centre of the bounding box of ``points``.

    The box starts from +/-9999999 on each axis, so an empty input gives the origin.
    """
    lo_x = lo_y = _BOX_SENTINEL
    hi_x = hi_y = -_BOX_SENTINEL
    for p in points:
        lo_x = min(lo_x, p.x)
        lo_y = min(lo_y, p.y)
        hi_x = max(hi_x, p.x)
        hi_y = max(hi_y, p.y)
    return Vec2(lo_x, lo_y).lerp(Vec2(hi_x, hi_y), 0.5)