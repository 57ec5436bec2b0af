import numpy as np
from .core import DegenerateDirectionError


class Vector3:
    """
    An immutable 3D vector of double-precision components.

    Every operation returns a new instance; the components are held in a
    read-only NumPy array so they cannot be changed in place.

    Example:
        >>> from eyeview import Vector3
        >>> a = Vector3(1, 0, 0)
        >>> b = Vector3(0, 1, 0)
        >>> a.cross(b)
        Vector3(0.0, 0.0, 1.0)
    """
    __slots__ = ('_xyz',)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        xyz = np.array([x, y, z], dtype=np.float64)
        xyz.flags.writeable = False
        self._xyz = xyz

    @classmethod
    def of(cls, value) -> 'Vector3':
        """Builds a Vector3 from another Vector3, a 3-sequence, or a NumPy array."""
        if isinstance(value, Vector3):
            return value
        raw = np.asarray(value)
        if raw.dtype.kind not in 'biuf':
            raise TypeError(f"Expected numeric components, got {raw.dtype}.")
        arr = raw.astype(np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.size}.")
        return cls(arr[0], arr[1], arr[2])

    @property
    def x(self) -> float: return float(self._xyz[0])

    @property
    def y(self) -> float: return float(self._xyz[1])

    @property
    def z(self) -> float: return float(self._xyz[2])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index):
        return float(self._xyz[index])

    def __len__(self):
        return 3

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._xyz.copy()
        return self._xyz.astype(dtype)

    def __repr__(self):
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def add(self, other) -> 'Vector3':
        return Vector3(*(self._xyz + Vector3.of(other)._xyz))

    def subtract(self, other) -> 'Vector3':
        return Vector3(*(self._xyz - Vector3.of(other)._xyz))

    def scale(self, k: float) -> 'Vector3':
        return Vector3(*(self._xyz * k))

    def dot(self, other) -> float:
        return float(np.dot(self._xyz, Vector3.of(other)._xyz))

    def cross(self, other) -> 'Vector3':
        """Right-handed cross product."""
        return Vector3(*np.cross(self._xyz, Vector3.of(other)._xyz))

    def magnitude(self) -> float:
        return float(np.linalg.norm(self._xyz))

    def normalize(self) -> 'Vector3':
        """
        Returns the unit vector pointing the same way.

        Raises:
            DegenerateDirectionError: If the vector has zero length.
        """
        m = self.magnitude()
        if m == 0:
            raise DegenerateDirectionError("Cannot normalize a zero-length vector.")
        return self.scale(1.0 / m)

    def direction_to(self, other) -> 'Vector3':
        """Unit vector pointing from this point towards `other`."""
        return Vector3.of(other).subtract(self).normalize()

    def is_close(self, other, atol: float = 1e-9) -> bool:
        """Checks if two vectors are equal within an absolute tolerance."""
        return bool(np.allclose(self._xyz, Vector3.of(other)._xyz, rtol=0.0, atol=atol))

    def __add__(self, other):
        if isinstance(other, (Vector3, tuple, list, np.ndarray)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, (Vector3, tuple, list, np.ndarray)):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (tuple, list, np.ndarray)):
            return Vector3.of(other).subtract(self)
        return NotImplemented

    def __mul__(self, k):
        if isinstance(k, (int, float, np.number)):
            return self.scale(k)
        return NotImplemented

    def __rmul__(self, k):
        return self.__mul__(k)

    def __truediv__(self, k):
        if isinstance(k, (int, float, np.number)):
            return self.scale(1.0 / k)
        return NotImplemented

    def __neg__(self):
        return self.scale(-1.0)
