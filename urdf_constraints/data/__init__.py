"""Data models for constraints.

- Vector3, Quaternion, Pose: geometric primitives
- LoopConstraint, CouplingConstraint: constraint variants
- Constraint: tagged union over the variants
"""

from .pose import (
    Vector3,
    Quaternion,
    Pose,
)

from .constraint_models import (
    ConstraintClassType,
    LoopConstraintType,
    LOOP_CONSTRAINT_TYPE_NAMES,
    CONSTRAINT_CLASS_NAMES,
    DEFAULT_AXIS,
    BaseConstraint,
    LoopConstraint,
    CouplingConstraint,
    Constraint,
)

__all__ = [
    # Geometry
    "Vector3",
    "Quaternion",
    "Pose",
    # Constraints
    "ConstraintClassType",
    "LoopConstraintType",
    "LOOP_CONSTRAINT_TYPE_NAMES",
    "CONSTRAINT_CLASS_NAMES",
    "DEFAULT_AXIS",
    "BaseConstraint",
    "LoopConstraint",
    "CouplingConstraint",
    "Constraint",
]
