"""Readers module for urdf_constraints IO.

Provides:
- Attribute value parsers (float, vector, pose)
- <constraint> element parsers
- Robot description file reader

Usage:
    from urdf_constraints.io.readers import ConstraintXMLReader

    reader = ConstraintXMLReader()
    data = reader.read(filepath=Path("robot.urdf"))
"""

from .reader_base import (
    BaseReader,
    XMLReader,
)

from .value_parsers import (
    parse_float,
    parse_vector3,
    parse_pose,
)

from .constraint_reader import (
    parse_constraint_base,
    parse_loop_constraint,
    parse_coupling_constraint,
    parse_constraint,
    detect_constraint_class,
    ConstraintXMLReader,
)

__all__ = [
    # Base readers
    "BaseReader",
    "XMLReader",
    # Values
    "parse_float",
    "parse_vector3",
    "parse_pose",
    # Constraints
    "parse_constraint_base",
    "parse_loop_constraint",
    "parse_coupling_constraint",
    "parse_constraint",
    "detect_constraint_class",
    "ConstraintXMLReader",
]
