"""Geometric primitives used by constraint models.

- Vector3: 3D vector (axes, positions)
- Quaternion: unit quaternion in (x, y, z, w) order
- Pose: position + orientation transform between two frames

Orientation conversions go through scipy's Rotation, using the URDF
convention for roll/pitch/yaw (fixed axes, applied X then Y then Z).
"""

import numpy as np
from pydantic import Field, model_validator
from scipy.spatial.transform import Rotation
from typing_extensions import Self

from urdf_constraints.data.arbitrary_types_model import FrozenModel

RPY_SEQUENCE = "xyz"


class Vector3(FrozenModel):
    """Three-component vector.

    Attributes:
        x: X component
        y: Y component
        z: Z component
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, array: np.ndarray | list[float] | tuple[float, ...]) -> "Vector3":
        values = np.asarray(array, dtype=float).reshape(-1)
        if values.shape != (3,):
            raise ValueError(f"Vector3 requires exactly 3 values, got shape {values.shape}")
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    def to_array(self) -> np.ndarray:
        """(3,) array of components."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def is_close(self, other: "Vector3", *, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), atol=atol))


class Quaternion(FrozenModel):
    """Unit quaternion, scalar last."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @model_validator(mode='after')
    def validate_norm(self) -> Self:
        """Reject zero-length quaternions."""
        if np.linalg.norm(self.to_array()) == 0.0:
            raise ValueError("Quaternion must have non-zero norm")
        return self

    @classmethod
    def from_rpy(cls, rpy: np.ndarray | list[float] | tuple[float, ...]) -> "Quaternion":
        """Create from roll/pitch/yaw angles in radians."""
        quat = Rotation.from_euler(RPY_SEQUENCE, np.asarray(rpy, dtype=float)).as_quat()
        return cls(x=float(quat[0]), y=float(quat[1]), z=float(quat[2]), w=float(quat[3]))

    def to_array(self) -> np.ndarray:
        """(4,) array in (x, y, z, w) order."""
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    def to_rotation(self) -> Rotation:
        return Rotation.from_quat(self.to_array())

    def to_rpy(self) -> np.ndarray:
        """Roll/pitch/yaw angles in radians."""
        return self.to_rotation().as_euler(RPY_SEQUENCE)


class Pose(FrozenModel):
    """Rigid transform from a parent frame to a child frame.

    The default instance is the identity transform.

    Attributes:
        position: Translation in meters
        rotation: Orientation as a unit quaternion
    """

    position: Vector3 = Field(default_factory=Vector3)
    rotation: Quaternion = Field(default_factory=Quaternion)

    @classmethod
    def identity(cls) -> "Pose":
        return cls()

    @classmethod
    def from_xyz_rpy(
        cls,
        *,
        xyz: np.ndarray | list[float] | tuple[float, ...] = (0.0, 0.0, 0.0),
        rpy: np.ndarray | list[float] | tuple[float, ...] = (0.0, 0.0, 0.0)
    ) -> "Pose":
        """Create pose from URDF-style xyz translation and rpy angles.

        Args:
            xyz: Translation (3,)
            rpy: Roll, pitch, yaw in radians (3,)

        Returns:
            New Pose
        """
        return cls(position=Vector3.from_array(xyz), rotation=Quaternion.from_rpy(rpy))

    @property
    def xyz(self) -> np.ndarray:
        return self.position.to_array()

    @property
    def rpy(self) -> np.ndarray:
        return self.rotation.to_rpy()

    @property
    def is_identity(self) -> bool:
        return self.is_close(Pose.identity())

    def to_matrix(self) -> np.ndarray:
        """Homogeneous transform.

        Returns:
            (4, 4) matrix
        """
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation.to_rotation().as_matrix()
        matrix[:3, 3] = self.position.to_array()
        return matrix

    def is_close(self, other: "Pose", *, atol: float = 1e-9) -> bool:
        """Compare transforms within tolerance.

        Quaternions q and -q describe the same orientation, so the
        rotation part is compared through the rotation matrix.
        """
        return bool(np.allclose(self.to_matrix(), other.to_matrix(), atol=atol))
