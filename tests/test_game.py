import pytest

from ceoclash.game import (
    PLAYER_ONE_KEYS,
    PLAYER_TWO_KEYS,
    Arena,
    Controls,
    Fighter,
    resolve_overlap,
    step,
)
from ceoclash.rects import Rect
from ceoclash.vec2d import Vec2

FLOOR = 300.0


def make_fighter(x, w=200, h=350):
    f = Fighter(hitbox=Rect(0, 0, w, h), walkspeed=5, jumppower=-20)
    f.place(x, FLOOR)
    return f


@pytest.fixture
def arena():
    return Arena(wall_left=0, wall_right=1000, floor_y=FLOOR)


def test_place_sets_hitbox_from_feet():
    f = make_fighter(100)
    assert f.pos == Vec2(100, FLOOR)
    assert f.hitbox.x == 100 - 0.5 * 200
    assert f.hitbox.bottom == FLOOR


def test_steer_right_wins_over_left():
    f = make_fighter(500)
    assert f.steer(False, False, True, True).x == 1
    assert f.steer(False, False, True, False).x == -1
    assert f.steer(False, False, False, False).x == 0


def test_steer_up_starts_jump_once():
    f = make_fighter(500)
    f.steer(True, False, False, False)
    assert f.airborne and f.in_control
    assert f.vel.y == f.jumppower
    f.vel = Vec2(0, 7)
    f.steer(True, False, False, False)
    assert f.vel.y == 7


def test_walk_on_ground(arena):
    f = make_fighter(500)
    f.move(Vec2(1, 0), arena)
    assert f.pos.x == 500 + f.walkspeed
    assert f.direction == 1
    assert f.hitbox.x == f.pos.x - 0.5 * f.hitbox.w


def test_jump_rises_then_lands(arena):
    f = make_fighter(500)
    f.steer(True, False, False, False)
    f.move(Vec2(0, 0), arena)
    assert f.pos.y == FLOOR + f.jumppower
    assert f.vel.y == f.jumppower + 1
    for _ in range(200):
        if not f.airborne:
            break
        f.move(Vec2(0, 0), arena)
    assert not f.airborne
    assert f.pos.y == FLOOR
    assert f.hitbox.bottom == FLOOR


def test_walls_clamp(arena):
    f = make_fighter(110)
    for _ in range(50):
        f.move(Vec2(-1, 0), arena)
    assert f.hitbox.x == arena.wall_left
    g = make_fighter(890)
    for _ in range(50):
        g.move(Vec2(1, 0), arena)
    assert g.hitbox.right == arena.wall_right


def test_resolve_overlap_pushes_apart_symmetrically():
    a = make_fighter(100, 200, 350)
    b = make_fighter(250, 250, 300)
    total = a.pos.x + b.pos.x
    assert resolve_overlap(b, a) is True
    assert a.hitbox.right == b.hitbox.x
    assert a.pos.x + b.pos.x == total
    assert not a.hitbox.overlaps(b.hitbox)


def test_resolve_overlap_without_contact():
    a = make_fighter(100)
    b = make_fighter(800)
    assert resolve_overlap(a, b) is False
    assert a.pos.x == 100 and b.pos.x == 800


def test_controls_press_and_release():
    c = Controls(PLAYER_ONE_KEYS)
    assert c.press("a", True) is True
    assert c.left is True
    assert c.press("a", False) is True
    assert c.left is False
    assert c.press("up", True) is False
    assert c.up is False


def test_controls_reject_unknown_action():
    with pytest.raises(ValueError):
        Controls({"q": "punch"})


def test_step_moves_and_separates(arena):
    p1 = make_fighter(300, 200, 350)
    p2 = make_fighter(520, 250, 300)
    c1 = Controls(PLAYER_ONE_KEYS)
    c2 = Controls(PLAYER_TWO_KEYS)
    c1.press("d", True)
    c2.press("left", True)
    for _ in range(20):
        step(p1, p2, c1, c2, arena)
        assert not p1.hitbox.overlaps(p2.hitbox)
    assert p1.direction == 1
    assert p2.direction == -1