"""Winding number computation by ray casting."""

from vecraster.core.geometry import intersect
from vecraster.domain import Path, Segment, Vector2

# Direction of the test ray; crossings are counted towards negative x
RAY_STEP = Vector2(1.0, 0.0)


def make_test_ray(point: Vector2) -> Segment:
    """Horizontal ray from ``point`` pointing towards negative x."""
    return Segment(point, point - RAY_STEP)


def crossing_delta(segment: Segment) -> int:
    """Signed contribution of a crossed segment.

    Segments with ``end.y >= start.y`` count +1, the rest -1.
    Horizontal segments never reach this point since they are parallel to
    the ray.
    """
    return 1 if segment.end.y >= segment.start.y else -1


def compute_winding(path: Path, point: Vector2, epsilon: float = 0.0) -> int:
    """Compute the winding number of ``path`` around ``point``.

    Casts a horizontal ray from the point towards negative x and sums the
    signed crossings with every segment of the path. A crossing counts when
    it lies on the ray (``t >= 0``) and inside the segment, endpoints
    included (``0 <= u <= 1``).

    A ray passing exactly through a vertex shared by two segments is
    counted once per segment. Sampling at pixel centers keeps integer
    vertices off the ray.

    Segments with NaN coordinates fail both comparisons and contribute
    nothing.

    Args:
        path: Segments to test against
        point: Sample point
        epsilon: Parallel tolerance forwarded to ``intersect``

    Returns:
        Signed winding number
    """
    ray = make_test_ray(point)

    winding = 0
    for segment in path:
        hit = intersect(ray, segment, epsilon)
        if hit is None:
            continue

        t, u = hit
        ray_hit = t >= 0.0
        segment_hit = 0.0 <= u <= 1.0
        if ray_hit and segment_hit:
            winding += crossing_delta(segment)

    return winding
