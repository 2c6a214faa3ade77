"""Constraint models.

Constraints tie two links (or joints) together outside the parent/child
tree of a robot description:
- LoopConstraint: closes a kinematic loop with a joint-like relationship
- CouplingConstraint: couples two joint motions by a fixed ratio

Constraint is a closed tagged union over both variants, discriminated by
class_type. Models are frozen once validated.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from urdf_constraints.data.arbitrary_types_model import FrozenModel
from urdf_constraints.data.pose import Pose, Vector3
from urdf_constraints.types.generic_types import ConstraintNameString, LinkNameString


class ConstraintClassType(str, Enum):
    """Constraint category. Values double as the XML `class` attribute."""
    LOOP = "loop"
    COUPLING = "coupling"


class LoopConstraintType(str, Enum):
    """Joint-like relationship of a loop constraint. Values are the XML `type` strings."""
    PLANAR = "planar"
    REVOLUTE = "revolute"
    CONTINUOUS = "continuous"
    PRISMATIC = "prismatic"
    FIXED = "fixed"


# Single string <-> enum vocabulary for both import and export
LOOP_CONSTRAINT_TYPE_NAMES: dict[str, LoopConstraintType] = {
    loop_type.value: loop_type for loop_type in LoopConstraintType
}
CONSTRAINT_CLASS_NAMES: dict[str, ConstraintClassType] = {
    class_type.value: class_type for class_type in ConstraintClassType
}

DEFAULT_AXIS = Vector3(x=1.0, y=0.0, z=0.0)


class BaseConstraint(FrozenModel):
    """Fields shared by every constraint variant.

    Not instantiated directly - use LoopConstraint or CouplingConstraint.

    Attributes:
        name: Constraint identifier, unique within a document
        predecessor_link_name: Link on the predecessor side (None = unset)
        successor_link_name: Link on the successor side (None = unset)
    """

    name: ConstraintNameString = Field(min_length=1)
    predecessor_link_name: LinkNameString | None = None
    successor_link_name: LinkNameString | None = None


class LoopConstraint(BaseConstraint):
    """Constraint closing a kinematic loop between two links.

    `axis` is only meaningful when `type` is not FIXED. For non-fixed
    constraints it defaults to (1, 0, 0); fixed constraints leave it unset.
    """

    class_type: Literal[ConstraintClassType.LOOP] = ConstraintClassType.LOOP
    type: LoopConstraintType
    predecessor_to_constraint_origin_transform: Pose = Field(default_factory=Pose)
    successor_to_constraint_origin_transform: Pose = Field(default_factory=Pose)
    axis: Vector3 | None = None

    @model_validator(mode='before')
    @classmethod
    def default_axis(cls, data: Any) -> Any:
        """Fill in the default axis for non-fixed constraints."""
        if isinstance(data, dict) and data.get("axis") is None:
            loop_type = data.get("type")
            if loop_type is not None and loop_type != LoopConstraintType.FIXED:
                data = {**data, "axis": DEFAULT_AXIS}
        return data

    @property
    def is_fixed(self) -> bool:
        return self.type == LoopConstraintType.FIXED


class CouplingConstraint(BaseConstraint):
    """Constraint coupling two joint motions by a ratio.

    A ratio of 0.0 means no ratio was given.
    """

    class_type: Literal[ConstraintClassType.COUPLING] = ConstraintClassType.COUPLING
    ratio: float = 0.0


Constraint = Annotated[LoopConstraint | CouplingConstraint, Field(discriminator="class_type")]
