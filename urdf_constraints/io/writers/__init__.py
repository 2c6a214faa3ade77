"""Writers module for urdf_constraints IO.

Provides:
- Attribute value formatters (float, vector, pose)
- export_constraint(): Constraint -> <constraint> element
- Robot description file writer

Usage:
    from urdf_constraints.io.writers import ConstraintXMLWriter

    writer = ConstraintXMLWriter()
    writer.write(filepath=Path("robot.urdf"), data={"constraints": constraints})
"""

from .writer_base import (
    BaseWriter,
    XMLWriter,
)

from .value_formatters import (
    format_float,
    format_vector3,
    export_pose,
)

from .constraint_writer import (
    export_constraint,
    ConstraintXMLWriter,
)

__all__ = [
    # Base writers
    "BaseWriter",
    "XMLWriter",
    # Values
    "format_float",
    "format_vector3",
    "export_pose",
    # Constraints
    "export_constraint",
    "ConstraintXMLWriter",
]
