"""
Distance and angle helpers for hand landmarks.
"""
import math


def calculate_distance(a, b) -> float:
    """
    Euclidean distance between two landmarks.

    Args:
        a: First landmark (x, y and optional z attributes)
        b: Second landmark

    Returns:
        Distance in normalized coordinates
    """
    dx = a.x - b.x
    dy = a.y - b.y
    dz = getattr(a, "z", 0.0) - getattr(b, "z", 0.0)
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def calculate_angle(a, b, c) -> float:
    """
    Angle ABC in degrees, measured at vertex b.

    Coincident points give a zero-length vector and raise ZeroDivisionError.
    """
    v1 = (a.x - b.x, a.y - b.y, getattr(a, "z", 0.0) - getattr(b, "z", 0.0))
    v2 = (c.x - b.x, c.y - b.y, getattr(c, "z", 0.0) - getattr(b, "z", 0.0))

    dot = v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]
    mag1 = math.sqrt(v1[0] ** 2 + v1[1] ** 2 + v1[2] ** 2)
    mag2 = math.sqrt(v2[0] ** 2 + v2[1] ** 2 + v2[2] ** 2)

    cosine = dot / (mag1 * mag2)
    # Rounding can push collinear joints just outside acos's domain
    cosine = max(-1.0, min(1.0, cosine))
    return math.degrees(math.acos(cosine))
