from .core import (
    X, Y, Z, UP, BEHIND_EYE, ORTHOGONALITY_TOLERANCE,
    EyeviewError, InvalidConfigurationError, DegenerateDirectionError,
)
from .vector import Vector3
from .basis import ViewBasis, project
from .camera import Camera, derive_basis
