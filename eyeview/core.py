import numpy as np

X, Y, Z = np.array([1.0, 0, 0]), np.array([0, 1.0, 0]), np.array([0, 0, 1.0])
for _axis in (X, Y, Z):
    _axis.flags.writeable = False

# Fixed "up" direction used when deriving the screen basis.
UP = Z

ORTHOGONALITY_TOLERANCE = 1e-7
DEGENERACY_EPSILON = 1e-12

# Returned in place of lambda for points behind the eye.
BEHIND_EYE = -2.0


class EyeviewError(Exception):
    """Base class for all errors raised by eyeview."""


class InvalidConfigurationError(EyeviewError, ValueError):
    """Raised when camera parameters or anchor points do not form a valid view basis."""


class DegenerateDirectionError(EyeviewError, ArithmeticError):
    """Raised when a direction cannot be determined (zero-length vector or division by zero)."""
