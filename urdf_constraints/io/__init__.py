"""IO module for urdf_constraints.

Structure:
    io/
    ├── readers/     - Parse <constraint> elements and robot description files
    └── writers/     - Export constraints to elements and files

Usage:
    # Reading
    from urdf_constraints.io.readers import ConstraintXMLReader
    reader = ConstraintXMLReader()
    data = reader.read(filepath=Path("robot.urdf"))

    # Writing
    from urdf_constraints.io.writers import ConstraintXMLWriter
    writer = ConstraintXMLWriter()
    writer.write(filepath=Path("out.urdf"), data=data)
"""

# Readers
from .readers import (
    BaseReader,
    XMLReader,
    parse_float,
    parse_vector3,
    parse_pose,
    parse_constraint_base,
    parse_loop_constraint,
    parse_coupling_constraint,
    parse_constraint,
    detect_constraint_class,
    ConstraintXMLReader,
)

# Writers
from .writers import (
    BaseWriter,
    XMLWriter,
    format_float,
    format_vector3,
    export_pose,
    export_constraint,
    ConstraintXMLWriter,
)

__all__ = [
    # Readers
    "BaseReader",
    "XMLReader",
    "parse_float",
    "parse_vector3",
    "parse_pose",
    "parse_constraint_base",
    "parse_loop_constraint",
    "parse_coupling_constraint",
    "parse_constraint",
    "detect_constraint_class",
    "ConstraintXMLReader",
    # Writers
    "BaseWriter",
    "XMLWriter",
    "format_float",
    "format_vector3",
    "export_pose",
    "export_constraint",
    "ConstraintXMLWriter",
]
