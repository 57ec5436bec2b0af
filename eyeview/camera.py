import sys
import math
import numbers
import numpy as np
from .core import UP, DEGENERACY_EPSILON, BEHIND_EYE, InvalidConfigurationError, DegenerateDirectionError
from .vector import Vector3
from .basis import ViewBasis


def _check_finite(name, value):
    if not isinstance(value, numbers.Real):
        raise InvalidConfigurationError(f"{name} must be a real number, got {type(value).__name__}.")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{name} must be finite, got {value}.")
    return value


def _check_positive(name, value):
    value = _check_finite(name, value)
    if value <= 0:
        raise InvalidConfigurationError(f"{name} must be a positive finite number, got {value}.")
    return value


def derive_basis(eye: Vector3, azimuth: float, altitude: float, distance: float, size: float) -> ViewBasis:
    """
    Derives the view basis E, A, B, C from the viewing parameters.

    A lies `distance` away from the eye along the direction given by the
    azimuth (in the horizontal plane) and altitude (elevation above it).
    B and C lie `size` away from A, B horizontally and C upwards on screen.
    """
    az = math.radians(azimuth)
    alt = math.radians(altitude)

    a = eye + Vector3(distance * math.cos(alt) * math.cos(az),
                      distance * math.cos(alt) * math.sin(az),
                      distance * math.sin(alt))

    a_towards_e = a.direction_to(eye)

    right = Vector3.of(UP).cross(a_towards_e)
    if right.magnitude() < DEGENERACY_EPSILON:
        raise DegenerateDirectionError(
            f"View direction at altitude {altitude} is parallel to the up vector; screen orientation is undefined."
        )
    a_towards_b = right.normalize()
    a_towards_c = a_towards_e.cross(a_towards_b)

    b = a + a_towards_b * size
    c = a + a_towards_c * size

    return ViewBasis(eye, a, b, c)


class Camera:
    """
    A virtual observer that projects world points onto its view screen.

    The view is set up the way a person would describe it: where the eye is,
    which compass direction it faces (azimuth), how far it looks up or down
    (altitude), how far away the screen is (distance) and how large the
    screen's unit is (size). From these the camera derives the view-center
    point A and the screen-basis points B and C, and keeps them until the
    next `shift` or `rotate`.
    """

    def __init__(self, eye=(50, 50, 0), azimuth=225.0, altitude=0.0, distance=2.0, size=1.0):
        """
        Initializes the camera.

        Args:
            eye (tuple, optional): Eye position. Defaults to (50, 50, 0).
            azimuth (float, optional): Horizontal viewing angle in degrees,
                measured from +X towards +Y. Defaults to 225.
            altitude (float, optional): Elevation angle in degrees above the
                horizontal plane. Defaults to 0.
            distance (float, optional): Distance from the eye to the
                view-center point A. Defaults to 2.
            size (float, optional): Distance from A to each of B and C.
                Defaults to 1.

        Raises:
            InvalidConfigurationError: If a parameter is out of range or the
                derived basis is not perpendicular.
            DegenerateDirectionError: If the camera looks straight up or down.

        Example:
            >>> from eyeview import Camera
            >>> cam = Camera(eye=(0, 0, 0), azimuth=0, altitude=0, distance=10, size=1)
            >>> cam.render((20, 0, 0))
            (0.0, 0.0, 0.5)
        """
        eye = Vector3.of(eye)
        azimuth = _check_finite("azimuth", azimuth)
        altitude = _check_finite("altitude", altitude)
        distance = _check_positive("distance", distance)
        size = _check_positive("size", size)
        self._apply(eye, azimuth, altitude, distance, size)

    def _apply(self, eye, azimuth, altitude, distance, size):
        # Derive before committing so a failure leaves the camera untouched.
        basis = derive_basis(eye, azimuth, altitude, distance, size)
        self._eye, self._azimuth, self._altitude = eye, azimuth, altitude
        self._distance, self._size = distance, size
        self._basis = basis

    @property
    def eye(self) -> Vector3: return self._eye

    @property
    def azimuth(self) -> float: return self._azimuth

    @property
    def altitude(self) -> float: return self._altitude

    @property
    def distance(self) -> float: return self._distance

    @property
    def size(self) -> float: return self._size

    @property
    def basis(self) -> ViewBasis: return self._basis

    @property
    def a(self) -> Vector3: return self._basis.a

    @property
    def b(self) -> Vector3: return self._basis.b

    @property
    def c(self) -> Vector3: return self._basis.c

    def render(self, point):
        """
        Computes the screen coordinates of a world point.

        Returns (beta, gamma, lambda). A lambda of -2 means the point is
        behind the eye and should not be drawn.
        """
        return self._basis.project(point)

    def render_many(self, points, verbose=False) -> np.ndarray:
        """
        Renders an (N, 3) array of points at once.

        Args:
            points (array-like): World points, one per row.
            verbose (bool, optional): Report how many points lie behind the
                eye. Defaults to False.

        Returns:
            np.ndarray: An (N, 3) array of (beta, gamma, lambda) rows.
        """
        result = self._basis.project_many(points)
        if verbose:
            behind = int(np.count_nonzero(result[:, 2] == BEHIND_EYE))
            print(f"INFO: {behind} of {len(result)} points lie behind the eye.", file=sys.stderr)
        return result

    def shift(self, dx, dy, dz) -> 'Camera':
        """Moves the eye by (dx, dy, dz) keeping the viewing direction."""
        offset = Vector3(_check_finite("dx", dx), _check_finite("dy", dy), _check_finite("dz", dz))
        self._apply(self._eye + offset, self._azimuth, self._altitude, self._distance, self._size)
        return self

    def rotate(self, amount) -> 'Camera':
        """Turns the camera by `amount` degrees of azimuth, wrapped into [0, 360)."""
        azimuth = (self._azimuth + _check_finite("amount", amount)) % 360.0
        if azimuth >= 360.0:
            azimuth -= 360.0
        self._apply(self._eye, azimuth, self._altitude, self._distance, self._size)
        return self

    def describe(self) -> str:
        return str(self)

    def __str__(self):
        return "Eye: %.2f %.2f %.2f Azi: %d Alt: %d" % (
            self._eye.x, self._eye.y, self._eye.z, int(self._azimuth), int(self._altitude))

    def __repr__(self):
        return (f"Camera(eye={tuple(self._eye)}, azimuth={self._azimuth}, altitude={self._altitude}, "
                f"distance={self._distance}, size={self._size})")
