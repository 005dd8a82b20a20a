"""Parametric line intersection.

Both lines are written as ``point + parameter * direction``:

    a_p + t * a_d = b_p + u * b_d

Rearranged into a 2x2 system:

    |a_d.x  -b_d.x| * |t| = b_p - a_p
    |a_d.y  -b_d.y|   |u|

whose closed-form inverse is

    1/det * |-b_d.y  b_d.x|    with det = a_d.x * (-b_d.y) - (-b_d.x) * a_d.y
            |-a_d.y  a_d.x|

All functions are pure and stateless.
"""

from vecraster.domain import Segment


def determinant(a: Segment, b: Segment) -> float:
    """Determinant of the system built from the two segment directions.

    Zero means the lines are parallel (or one of the segments has zero
    length).
    """
    a_d = a.direction
    b_d = b.direction
    return a_d.x * (-b_d.y) - (-b_d.x) * a_d.y


def intersect(a: Segment, b: Segment, epsilon: float = 0.0) -> tuple[float, float] | None:
    """Solve for the parameters where the infinite lines through a and b meet.

    The parameters are not clamped: callers test ``0 <= u <= 1`` for
    containment in ``b`` and the sign of ``t`` for the side of ``a``'s start.

    Args:
        a: First segment; ``t`` is measured along its direction
        b: Second segment; ``u`` is measured along its direction
        epsilon: Determinants with ``abs(det) <= epsilon`` count as parallel.
            The default 0.0 means exact comparison with zero.

    Returns:
        Tuple (t, u), or None when the lines are parallel, collinear, or
        either segment has zero length

    Examples:
        >>> from vecraster.domain import Segment, Vector2
        >>> a = Segment(Vector2(0.0, 0.0), Vector2(2.0, 2.0))
        >>> b = Segment(Vector2(0.0, 2.0), Vector2(2.0, 0.0))
        >>> intersect(a, b)
        (0.5, 0.5)
    """
    det = determinant(a, b)
    if epsilon > 0.0:
        if abs(det) <= epsilon:
            return None
    elif det == 0.0:
        return None

    a_p = a.start
    a_d = a.direction
    b_p = b.start
    b_d = b.direction

    dx = b_p.x - a_p.x
    dy = b_p.y - a_p.y
    inv_det = 1.0 / det

    t = inv_det * (-b_d.y * dx + b_d.x * dy)
    u = inv_det * (-a_d.y * dx + a_d.x * dy)
    return (t, u)
