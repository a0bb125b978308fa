"""Axis-aligned rectangles, grid indices and clipped rectangle clusters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner, width and height."""

    x: float
    y: float
    w: float
    h: float

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies strictly inside the rectangle."""
        return self.x < x < self.right and self.y < y < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if the interiors intersect; shared edges do not count."""
        return rect_overlap(self.x, self.y, self.w, self.h, other.x, other.y, other.w, other.h)

    def touches(self, other: Rect) -> bool:
        """True if the rectangles intersect or share an edge or corner."""
        return (
            self.right >= other.x
            and other.right >= self.x
            and self.bottom >= other.y
            and other.bottom >= self.y
        )

    def union(self, other: Rect) -> Rect:
        """Grow this rectangle towards ``other``.

        The new width and height are measured from this rectangle's own origin.
        """
        x, y, w, h = self.x, self.y, self.w, self.h
        if other.x < self.x:
            x = other.x
        if other.y < self.y:
            y = other.y
        if other.right > self.right:
            w = other.right - self.x
        if other.bottom > self.bottom:
            h = other.bottom - self.y
        return Rect(x, y, w, h)

    def fit_into(self, other: Rect) -> Rect:
        """Scale and move this rectangle to fit centred inside ``other``."""
        if self.w / self.h > other.w / other.h:
            h = int(self.h * (other.w / self.w))
            return Rect(other.x, other.y + int((other.h - h) / 2), other.w, h)
        w = int(self.w * (other.h / self.h))
        return Rect(other.x + int((other.w - w) / 2), other.y, w, other.h)


def rect_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """True if the interiors of two rectangles intersect."""
    return ax + aw > bx and bx + bw > ax and ay + ah > by and by + bh > ay


@dataclass(frozen=True)
class Index2D:
    """A cell position on a grid."""

    i: int
    j: int

    def manhattan(self, other: Index2D) -> int:
        return abs(self.i - other.i) + abs(self.j - other.j)


@dataclass
class RectCluster:
    """A rectangle that has had other rectangles cut out of it."""

    original: Rect
    rects: List[Rect] = field(default_factory=list)

    def __init__(self, x, y, w, h):
        self.original = Rect(x, y, w, h)
        self.rects = [self.original]

    def clip(self, cut: Rect) -> None:
        """Remove ``cut`` from every piece, splitting pieces as needed."""
        existing = list(self.rects)
        for index, piece in enumerate(existing):
            updated, extra = _clip_piece(piece, cut)
            self.rects[index] = updated
            self.rects.extend(extra)

    def area(self) -> float:
        return sum(r.area for r in self.rects)


def _clip_piece(r: Rect, cut: Rect):
    if r.area <= 0:
        return r, []
    cut_r, cut_b = cut.right, cut.bottom
    r_r, r_b = r.right, r.bottom
    if cut.x >= r_r or cut.y >= r_b or cut_r <= r.x or cut_b <= r.y:
        return r, []

    top_in = r.y < cut.y < r_b
    bot_in = r.y < cut_b < r_b
    lef_in = r.x < cut.x < r_r
    rig_in = r.x < cut_r < r_r
    total = top_in + bot_in + lef_in + rig_in

    left_part = replace(r, w=cut.x - r.x)
    right_part = replace(r, x=cut_r, w=r_r - cut_r)

    if total == 0:
        return replace(r, w=0), []
    if total == 1:
        if top_in:
            return replace(r, h=cut.y - r.y), []
        if bot_in:
            return replace(r, y=cut_b, h=r_b - cut_b), []
        if lef_in:
            return left_part, []
        return right_part, []
    if total == 2:
        if rig_in and bot_in:
            return right_part, [Rect(r.x, cut_b, cut_r - r.x, r_b - cut_b)]
        if lef_in and bot_in:
            return left_part, [Rect(cut.x, cut_b, r_r - cut.x, r_b - cut_b)]
        if lef_in and top_in:
            return left_part, [Rect(cut.x, r.y, r_r - cut.x, cut.y - r.y)]
        if rig_in and top_in:
            return right_part, [Rect(r.x, r.y, cut_r - r.x, cut.y - r.y)]
        if lef_in and rig_in:
            return left_part, [Rect(cut_r, r.y, r_r - cut_r, r.h)]
        return replace(r, h=cut.y - r.y), [Rect(r.x, cut_b, r.w, r_b - cut_b)]
    if total == 3:
        if rig_in and bot_in and top_in:
            return right_part, [
                Rect(r.x, r.y, cut_r - r.x, cut.y - r.y),
                Rect(r.x, cut_b, cut_r - r.x, r_b - cut_b),
            ]
        if lef_in and bot_in and rig_in:
            return left_part, [
                Rect(cut.x, cut_b, cut.w, r_b - cut_b),
                Rect(cut_r, r.y, r_r - cut_r, r.h),
            ]
        if lef_in and top_in and bot_in:
            return left_part, [
                Rect(cut.x, r.y, r_r - cut.x, cut.y - r.y),
                Rect(cut.x, cut_b, r_r - cut.x, r_b - cut_b),
            ]
        return left_part, [
            Rect(cut.x, r.y, cut.w, cut.y - r.y),
            Rect(cut_r, r.y, r_r - cut_r, r.h),
        ]
    return left_part, [
        Rect(cut.x, r.y, cut.w, cut.y - r.y),
        Rect(cut.x, cut_b, cut.w, r_b - cut_b),
        Rect(cut_r, r.y, r_r - cut_r, r.h),
    ]