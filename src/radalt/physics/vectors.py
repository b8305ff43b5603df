"""Vector mathematics for airframe geometry.

Body-frame convention used throughout the package:
    x: right wing positive
    y: up positive
    z: forward (nose) positive

Typical usage example:
    from radalt.physics.vectors import Vector3

    antenna = Vector3(0.0, -0.83, -9.89)  # below and aft of the CG
    earth = antenna.rotated(pitch_deg=3.0, bank_deg=0.0)
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


def attitude_matrix(pitch_deg: float, bank_deg: float) -> npt.NDArray[np.float64]:
    """Build the body-to-earth rotation matrix for an attitude.

    Bank is applied about the longitudinal axis first, then pitch about the
    lateral axis. Positive pitch raises the nose, positive bank lowers the
    right wing.

    Args:
        pitch_deg: Pitch angle in degrees.
        bank_deg: Bank angle in degrees.

    Returns:
        3x3 rotation matrix.
    """
    pitch = math.radians(pitch_deg)
    bank = math.radians(bank_deg)

    cos_p, sin_p = math.cos(pitch), math.sin(pitch)
    cos_b, sin_b = math.cos(bank), math.sin(bank)

    roll_matrix = np.array(
        [
            [cos_b, sin_b, 0.0],
            [-sin_b, cos_b, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    pitch_matrix = np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, cos_p, sin_p],
            [0.0, -sin_p, cos_p],
        ],
        dtype=np.float64,
    )

    return pitch_matrix @ roll_matrix


@dataclass
class Vector3:
    """3D vector with common operations.

    Attributes:
        x: Lateral component (right positive).
        y: Vertical component (up positive).
        z: Longitudinal component (forward positive).

    Examples:
        >>> Vector3(1.0, 2.0, 3.0) - Vector3(4.0, 5.0, 6.0)
        Vector3(x=-3.0, y=-3.0, z=-3.0)
    """

    x: float
    y: float
    z: float

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def horizontal_magnitude(self) -> float:
        """Length of the vector projected onto the horizontal plane."""
        return math.hypot(self.x, self.z)

    def rotated(self, pitch_deg: float, bank_deg: float) -> "Vector3":
        """Rotate a body-frame vector into the earth frame.

        Args:
            pitch_deg: Pitch angle in degrees.
            bank_deg: Bank angle in degrees.

        Returns:
            Earth-frame vector.
        """
        return Vector3.from_array(attitude_matrix(pitch_deg, bank_deg) @ self.to_array())

    def to_array(self) -> npt.NDArray[np.float64]:
        """Convert to numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: npt.NDArray[np.float64]) -> "Vector3":
        """Create vector from numpy array."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"
