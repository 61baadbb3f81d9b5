# collision.py

import numpy as np


def distance(a, b):
    """Euclidean distance between two (x, y) points."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def overlaps(center_a, radius_a, center_b, radius_b):
    """Return True if the circles touch or cross at their edges.

    The hit band is ``|ra - rb| <= d <= ra + rb``: a circle sitting strictly
    inside the other without touching its edge does not count.
    """
    d = distance(center_a, center_b)
    return abs(radius_a - radius_b) <= d <= radius_a + radius_b
