# tilewalk/math.py
import math

from tilewalk.types import Scalar, Vector2

TAU = 2.0 * math.pi


# -- Vector Math --
def magnitude_vec(v: Vector2) -> Scalar:
    return math.hypot(*v)


def distance_sq(a: Vector2, b: Vector2) -> Scalar:
    """Returns squared distance (faster than sqrt for comparisons)."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def clamp(value: Scalar, lo: Scalar, hi: Scalar) -> Scalar:
    return max(lo, min(value, hi))


# -- Sampling --
def point_on_circle(center: Vector2, radius: Scalar, angle: Scalar) -> Vector2:
    return Vector2(
        center.x + radius * math.cos(angle),
        center.y + radius * math.sin(angle),
    )


def ring_angles(samples: int) -> list[float]:
    """Evenly spaced angles `TAU * i / samples` starting at 0."""
    return [TAU * i / samples for i in range(samples)]
