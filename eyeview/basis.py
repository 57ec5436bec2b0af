import numpy as np
from .core import (
    ORTHOGONALITY_TOLERANCE, BEHIND_EYE,
    InvalidConfigurationError, DegenerateDirectionError,
)
from .vector import Vector3


class ViewBasis:
    """
    The anchor points of a view screen and the quantities derived from them.

    E is the eye, A the view-center point on the screen, and B and C mark the
    screen's local horizontal and vertical directions. The offsets E-A, B-A
    and C-A must be mutually orthogonal; they are generally not unit length.

    A ViewBasis is never modified after construction. A camera replaces its
    basis as a whole whenever its configuration changes.
    """
    __slots__ = ('_e', '_a', '_b', '_c', '_e_minus_a', '_b_minus_a', '_c_minus_a',
                 '_len2_ea', '_len2_ba', '_len2_ca')

    def __init__(self, e, a, b, c, tolerance: float = ORTHOGONALITY_TOLERANCE):
        self._e, self._a, self._b, self._c = (Vector3.of(p) for p in (e, a, b, c))

        self._e_minus_a = self._e - self._a
        self._b_minus_a = self._b - self._a
        self._c_minus_a = self._c - self._a

        self._validate(tolerance)

        self._len2_ea = self._e_minus_a.dot(self._e_minus_a)
        self._len2_ba = self._b_minus_a.dot(self._b_minus_a)
        self._len2_ca = self._c_minus_a.dot(self._c_minus_a)

        if min(self._len2_ea, self._len2_ba, self._len2_ca) == 0:
            raise InvalidConfigurationError("Anchor points must be distinct from the view-center point A.")

    @property
    def e(self) -> Vector3: return self._e

    @property
    def a(self) -> Vector3: return self._a

    @property
    def b(self) -> Vector3: return self._b

    @property
    def c(self) -> Vector3: return self._c

    @property
    def e_minus_a(self) -> Vector3: return self._e_minus_a

    @property
    def b_minus_a(self) -> Vector3: return self._b_minus_a

    @property
    def c_minus_a(self) -> Vector3: return self._c_minus_a

    @property
    def len2_ea(self) -> float: return self._len2_ea

    @property
    def len2_ba(self) -> float: return self._len2_ba

    @property
    def len2_ca(self) -> float: return self._len2_ca

    @classmethod
    def from_anchors(cls, e, a, b, c, tolerance: float = ORTHOGONALITY_TOLERANCE) -> 'ViewBasis':
        """
        Builds a basis directly from four anchor points.

        Args:
            e: The eye position.
            a: The view-center point.
            b: The point marking the screen's horizontal direction from A.
            c: The point marking the screen's vertical direction from A.
            tolerance (float, optional): Allowed absolute deviation of the
                pairwise dot products from zero. Defaults to 1e-7.

        Raises:
            InvalidConfigurationError: If E-A, B-A and C-A are not mutually
                perpendicular within `tolerance`.

        Example:
            >>> basis = ViewBasis.from_anchors((0, 0, 0), (10, 0, 0), (10, -1, 0), (10, 0, 1))
            >>> basis.project((20, 0, 0))
            (0.0, 0.0, 0.5)
        """
        return cls(e, a, b, c, tolerance=tolerance)

    def _validate(self, tolerance):
        pairs = (
            ('E-A', 'B-A', self.e_minus_a.dot(self.b_minus_a)),
            ('E-A', 'C-A', self.e_minus_a.dot(self.c_minus_a)),
            ('B-A', 'C-A', self.b_minus_a.dot(self.c_minus_a)),
        )
        for first, second, product in pairs:
            if not np.isfinite(product) or abs(product) > tolerance:
                raise InvalidConfigurationError(
                    f"View basis is not perpendicular: ({first}).({second}) = {product:.3e} "
                    f"exceeds tolerance {tolerance:.0e}."
                )

    def project(self, point):
        """
        Maps a world point onto the screen.

        Returns a tuple (beta, gamma, lambda). beta and gamma are the point's
        coordinates along B-A and C-A, scaled by lambda. lambda is such that
        E + lambda * (P - E) lies on the screen plane; for a point behind the
        eye it is replaced by BEHIND_EYE (-2) after beta and gamma have been
        computed from the original value.

        Raises:
            DegenerateDirectionError: If the point lies in the plane through E
                parallel to the screen (this includes E itself).
        """
        v = Vector3.of(point) - self.e

        denom = self.e_minus_a.dot(v)
        if denom == 0:
            raise DegenerateDirectionError(f"Point {tuple(Vector3.of(point))} lies in the eye plane; it has no projection.")
        lam = -self.len2_ea / denom

        beta = lam * self.b_minus_a.dot(v) / self.len2_ba
        gamma = lam * self.c_minus_a.dot(v) / self.len2_ca

        if lam < 0:
            lam = BEHIND_EYE

        return beta, gamma, lam

    def project_many(self, points) -> np.ndarray:
        """
        Vectorized `project` for an (N, 3) array of points.

        Returns an (N, 3) array whose rows are (beta, gamma, lambda).
        """
        pts = np.asarray(points, dtype=np.float64)
        if pts.shape == (3,):
            pts = pts.reshape(1, 3)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(f"Points must be an (N, 3) array of 3D coordinates, got shape {pts.shape}.")
        v = pts - np.asarray(self.e)

        denom = v @ np.asarray(self.e_minus_a)
        in_eye_plane = denom == 0
        if np.any(in_eye_plane):
            raise DegenerateDirectionError(
                f"{int(np.count_nonzero(in_eye_plane))} point(s) lie in the eye plane and have no projection."
            )
        lam = -self.len2_ea / denom

        beta = lam * (v @ np.asarray(self.b_minus_a)) / self.len2_ba
        gamma = lam * (v @ np.asarray(self.c_minus_a)) / self.len2_ca

        lam = np.where(lam < 0, BEHIND_EYE, lam)
        return np.column_stack((beta, gamma, lam))

    def __repr__(self):
        return f"ViewBasis(e={self.e!r}, a={self.a!r}, b={self.b!r}, c={self.c!r})"


def project(e, a, b, c, point):
    """
    Projects a single point through the view basis given by anchors E, A, B, C.

    Example:
        >>> project((0, 0, 0), (10, 0, 0), (10, -1, 0), (10, 0, 1), (20, 3, 4))
        (-1.5, 2.0, 0.5)
    """
    return ViewBasis.from_anchors(e, a, b, c).project(point)
