"""Two fighters on a flat stage: movement, jumping, walls and pushing."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Sequence

from .rects import Rect
from .vec2d import Vec2

PLAYER_ONE_KEYS = {"w": "up", "s": "down", "a": "left", "d": "right"}
PLAYER_TWO_KEYS = {"up": "up", "down": "down", "left": "left", "right": "right"}

_ACTIONS = ("up", "down", "left", "right")
_GRAVITY = 1


@dataclass
class Arena:
    """The stage: a floor line between two walls."""

    wall_left: float = 0.0
    wall_right: float = 0.0
    floor_y: float = 0.0


@dataclass
class Fighter:
    """A fighter whose position is the bottom centre of its hitbox."""

    direction: int = 0
    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    hitbox: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    crouch_height: float = 0.0
    airborne: bool = False
    in_control: bool = False
    walkspeed: float = 0.0
    jumppower: float = 0.0

    def _sync_hitbox(self) -> None:
        self.hitbox = replace(
            self.hitbox,
            x=self.pos.x - 0.5 * self.hitbox.w,
            y=self.pos.y - self.hitbox.h,
        )

    def place(self, x: float, y: float) -> None:
        """Put the fighter's feet at (x, y)."""
        self.pos = Vec2(x, y)
        self._sync_hitbox()

    def steer(self, up: bool, down: bool, left: bool, right: bool) -> Vec2:
        """Turn held directions into a displacement; up starts a jump from the ground."""
        dx = 0.0
        if left:
            dx = -1.0
        if right:
            dx = 1.0
        if up and not self.airborne:
            self.vel = Vec2(0, self.jumppower)
            self.airborne = True
            self.in_control = True
        return Vec2(dx, 0.0)

    def move(self, displacement: Vec2, arena: Arena) -> None:
        """Advance one frame: walk, fall, land and stay between the walls."""
        x, y = self.pos.x, self.pos.y
        if self.airborne:
            if self.in_control:
                x += displacement.x * self.walkspeed
                self.direction = int(displacement.x)
            y += self.vel.y
            self.vel = Vec2(self.vel.x, self.vel.y + _GRAVITY)
            if y > arena.floor_y:
                y = arena.floor_y
                self.airborne = False
        else:
            x += displacement.x * self.walkspeed
            self.direction = int(displacement.x)

        half = 0.5 * self.hitbox.w
        if x - half < arena.wall_left:
            x = arena.wall_left + half
        if x + half > arena.wall_right:
            x = arena.wall_right - half

        self.pos = Vec2(x, y)
        self._sync_hitbox()


def resolve_overlap(a: Fighter, b: Fighter) -> bool:
    """Push two overlapping fighters apart horizontally by equal amounts."""
    if not a.hitbox.overlaps(b.hitbox):
        return False
    left, right = (a, b) if a.pos.x < b.pos.x else (b, a)
    overlap = int(left.hitbox.right - right.hitbox.x)
    left.pos = Vec2(left.pos.x - 0.5 * overlap, left.pos.y)
    right.pos = Vec2(right.pos.x + 0.5 * overlap, right.pos.y)
    left.hitbox = replace(left.hitbox, x=left.pos.x - 0.5 * left.hitbox.w)
    right.hitbox = replace(right.hitbox, x=right.pos.x - 0.5 * right.hitbox.w)
    return True


@dataclass
class Controls:
    """Held directions for one player, driven by named keys."""

    bindings: Mapping[str, str]
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def __post_init__(self) -> None:
        unknown = set(self.bindings.values()) - set(_ACTIONS)
        if unknown:
            raise ValueError(f"unknown actions: {sorted(unknown)}")

    def press(self, key: str, pressed: bool) -> bool:
        """Record a key going down or up; False if the key is not bound."""
        action = self.bindings.get(key)
        if action is None:
            return False
        setattr(self, action, pressed)
        return True


def step(p1: Fighter, p2: Fighter, controls1: Controls, controls2: Controls, arena: Arena) -> bool:
    """Advance both fighters one frame; True if they had to be pushed apart."""
    d1 = p1.steer(controls1.up, controls1.down, controls1.left, controls1.right)
    d2 = p2.steer(controls2.up, controls2.down, controls2.left, controls2.right)
    p1.move(d1, arena)
    p2.move(d2, arena)
    return resolve_overlap(p1, p2)


def _spawn(x: float, y: float, w: float, h: float) -> Fighter:
    fighter = Fighter(hitbox=Rect(0, 0, w, h), walkspeed=5, jumppower=-20)
    fighter.place(x, y)
    return fighter


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((600, 400), pygame.RESIZABLE)
    except pygame.error as exc:
        print(f"Couldn't create window and renderer: {exc}", file=sys.stderr)
        pygame.quit()
        return 3
    pygame.display.set_caption("CEO_Clash")
    width, height = screen.get_size()

    arena = Arena(wall_left=0, wall_right=width, floor_y=height - 100)
    p1 = _spawn(100, arena.floor_y, 200, 350)
    p2 = _spawn(width - 100, arena.floor_y, 250, 300)
    controls1 = Controls(PLAYER_ONE_KEYS)
    controls2 = Controls(PLAYER_TWO_KEYS)

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                name = pygame.key.name(event.key)
                pressed = event.type == pygame.KEYDOWN
                if not controls1.press(name, pressed):
                    controls2.press(name, pressed)

        screen.fill((200, 200, 200))
        pygame.draw.line(screen, (0, 0, 0), (0, arena.floor_y), (width, arena.floor_y))

        step(p1, p2, controls1, controls2, arena)

        for fighter, colour in ((p1, (0, 0, 255)), (p2, (255, 0, 0))):
            box = fighter.hitbox
            rect = pygame.Rect(int(box.x), int(box.y), int(box.w), int(box.h))
            pygame.draw.rect(screen, colour, rect, width=1)

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()
    return 0