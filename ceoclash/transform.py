"""A pan-and-zoom transform between world and screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .rects import Rect
from .vec2d import Vec2


@dataclass
class Transform:
    """Translate by (-tx, -ty), scale by ``s``, then translate by (cx, cy).

    ``invs`` caches ``1 / s``; change the scale with :meth:`set_scale` so the
    two stay in step.
    """

    tx: float = 0.0
    ty: float = 0.0
    cx: int = 0
    cy: int = 0
    s: float = 1.0
    invs: float = 1.0

    def set_scale(self, s: float) -> None:
        self.s = s
        self.invs = 1 / s

    def apply_x(self, x: float) -> float:
        return self.cx + self.s * (x - self.tx)

    def apply_y(self, y: float) -> float:
        return self.cy + self.s * (y - self.ty)

    def reverse_x(self, x: float) -> float:
        return (x - self.cx) * self.invs + self.tx

    def reverse_y(self, y: float) -> float:
        return (y - self.cy) * self.invs + self.ty

    def apply_vec(self, vec: Vec2) -> Vec2:
        return Vec2(self.apply_x(vec.x), self.apply_y(vec.y))

    def reverse_vec(self, vec: Vec2) -> Vec2:
        return Vec2(self.reverse_x(vec.x), self.reverse_y(vec.y))

    def apply_rect(self, rect: Rect) -> Rect:
        """Transform a rectangle onto the integer pixel grid, truncating toward zero."""
        return Rect(
            int(self.apply_x(rect.x)),
            int(self.apply_y(rect.y)),
            int(rect.w * self.s),
            int(rect.h * self.s),
        )

    def reverse_rect(self, rect: Rect) -> Rect:
        """Inverse of :meth:`apply_rect`, again truncating toward zero."""
        return Rect(
            int(self.reverse_x(rect.x)),
            int(self.reverse_y(rect.y)),
            int(rect.w * self.invs),
            int(rect.h * self.invs),
        )

    def apply_frect(self, rect: Rect) -> Rect:
        return Rect(
            self.apply_x(rect.x),
            self.apply_y(rect.y),
            rect.w * self.s,
            rect.h * self.s,
        )

    def reverse_frect(self, rect: Rect) -> Rect:
        return Rect(
            self.reverse_x(rect.x),
            self.reverse_y(rect.y),
            rect.w * self.invs,
            rect.h * self.invs,
        )