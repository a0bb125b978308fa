"""Numeric helpers: ranges, mappings, angles, randomness."""

from __future__ import annotations

import bisect
import math
import random
from typing import List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

PHI = 1.6180339887498948482045868343656381177203091798057628621
SQRT2 = 1.4142135623730950488016887242096980785696718753769480731
SQRT2O2 = 0.7071067811865475244008443621048490392848359376884740365
SQRT3 = 1.7320508075688772935274463415058723669428052538103806280
EULER = 2.7182818284590452353602874713526624977572470936999595749
TWO_PI = 6.2831853071795864769252867665590057683943387987502116419
PI = 3.1415926535897932384626433832795028841971693993751058209
HALF_PI = 1.5707963267948966192313216916397514420985846996875529104
QUARTER_PI = 0.7853981633974483096156608458198757210492923498437764552
ONE_OVER_PI = 0.3183098861837906715377675267450287240689192914809128974

_DEG_PER_RAD = 57.29577951308232087679815481410517033240547246656432154916
_RAD_PER_DEG = 0.017453292519943295769236907684886127134428718885417254560
_RAND_MAX = 32767
_ANGLE_STEP = 0.0001917534503


def _source(rng):
    return random if rng is None else rng


def sq(a: float) -> float:
    return a * a


def logarithm(base: float, x: float) -> float:
    return math.log2(x) / math.log2(base)


def get_divisors(n: int) -> List[int]:
    """The smaller divisor of each pair, excluding 1, in ascending order.

    Odd numbers are only tested against odd candidates.
    """
    root = math.isqrt(n)
    if n % 2 == 0:
        candidates = range(2, root + 1)
    else:
        candidates = range(3, root + 1, 2)
    return [d for d in candidates if n % d == 0]


def random_int(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Random integer in ``[low, high)``."""
    return low + _source(rng).randrange(high - low)


def random_float(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """Random float in ``[low, high)``."""
    return low + _source(rng).random() * (high - low)


def random_angle(rng: Optional[random.Random] = None) -> float:
    """Random angle in roughly ``[0, 2*pi]`` drawn from 32768 steps."""
    return _source(rng).randint(0, _RAND_MAX) * _ANGLE_STEP


def random_choice(rng: Optional[random.Random], *args: T) -> T:
    """One of ``args`` picked uniformly."""
    if not args:
        raise ValueError("random_choice needs at least one option")
    return args[random_int(0, len(args), rng)]


class PolarGaussian:
    """Standard normal samples by Marsaglia's polar method, produced in pairs."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = _source(rng)
        self._pending: Optional[float] = None

    def sample(self) -> float:
        if self._pending is not None:
            value, self._pending = self._pending, None
            return value
        while True:
            v1 = 2 * self._rng.random() - 1
            v2 = 2 * self._rng.random() - 1
            s = v1 * v1 + v2 * v2
            if 0 < s < 1:
                break
        factor = math.sqrt(-2 * math.log(s) / s)
        self._pending = v2 * factor
        return v1 * factor


def shuffle(deck: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Shuffle ``deck`` in place, swapping each of the first ``len - 2`` items forward."""
    size = len(deck)
    for i in range(size - 2):
        j = random_int(i + 1, size, rng)
        deck[i], deck[j] = deck[j], deck[i]


def lerp(start: float, stop: float, amt: float) -> float:
    return start + (stop - start) * amt


def map_range(value, source_lo, source_hi, dest_lo, dest_hi) -> float:
    """Linear mapping of ``value`` from one range onto another."""
    return dest_lo + (dest_hi - dest_lo) * ((value - source_lo) / (source_hi - source_lo))


def elliptical_map(value, source_lo, source_hi, dest_lo, dest_hi) -> float:
    """Quarter-ellipse mapping: ``dest_lo`` at ``source_lo``, ``dest_hi`` at ``source_hi``."""
    direction = math.copysign(1.0, dest_lo - dest_hi)
    return dest_hi + direction * math.sqrt(
        (1 - sq(value - source_lo) / sq(source_hi - source_lo)) * sq(dest_hi - dest_lo)
    )


def sigmoid_map(value, source_lo, source_hi, dest_lo, dest_hi) -> float:
    """Logistic mapping with the source range stretched over ``[-6, 6]``."""
    return adv_sigmoid_map(value, source_lo, source_hi, -6, 6, dest_lo, dest_hi)


def adv_sigmoid_map(value, source_lo, source_hi, s_lo, s_hi, dest_lo, dest_hi) -> float:
    """Logistic mapping with the source range stretched over ``[s_lo, s_hi]``."""
    z = map_range(value, source_lo, source_hi, s_lo, s_hi)
    return (dest_hi - dest_lo) * (1 / (1 + math.exp(-z))) + dest_lo


def cycle(a, low, high):
    """Wrap ``a`` to the opposite end when it leaves ``[low, high]``."""
    if a < low:
        return high
    if a > high:
        return low
    return a


def constrain(a, low, high):
    """Clamp ``a`` into ``[low, high]``."""
    if a < low:
        return low
    if a > high:
        return high
    return a


def count_set_bits(v: int) -> int:
    """Number of set bits in ``v`` taken as a 32-bit unsigned integer."""
    return bin(v & 0xFFFFFFFF).count("1")


def degrees(rad: float) -> float:
    return rad * _DEG_PER_RAD


def radians(deg: float) -> float:
    return deg * _RAD_PER_DEG


def rectify_angle(a: float) -> float:
    """Reduce ``a`` modulo 2*pi, keeping its sign."""
    return math.fmod(a, TWO_PI)


def angle_diff(a: float, b: float) -> float:
    """Signed difference ``a - b`` brought into ``[-pi, pi]``."""
    o = math.fmod(a - b, TWO_PI)
    if o > PI:
        o -= TWO_PI
    elif o < -PI:
        o += TWO_PI
    return o


def count_digits(n: int) -> int:
    """Number of decimal digits in ``n``, ignoring the sign."""
    return len(str(abs(n)))


def insert_sorted(values: List[int], n: int) -> None:
    """Insert ``n`` into the sorted list ``values`` unless it is already there."""
    i = bisect.bisect_left(values, n)
    if i < len(values) and values[i] == n:
        return
    values.insert(i, n)