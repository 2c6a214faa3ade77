"""urdf_constraints - kinematic constraint elements for robot descriptions.

Parses and serializes <constraint> elements that tie two links (or joints)
together outside the parent/child tree of a URDF-style document.

Main Components:

Models:
- LoopConstraint: closes a kinematic loop (planar, revolute, continuous, prismatic, fixed)
- CouplingConstraint: couples two joint motions by a ratio
- Constraint: tagged union over both, discriminated by class_type
- Pose, Vector3: geometry used by loop constraints

Parsing:
- parse_loop_constraint(): <constraint> element -> LoopConstraint
- parse_coupling_constraint(): <constraint> element -> CouplingConstraint
- parse_constraint(): detect category and parse
- ConstraintXMLReader: all constraints of a robot description file

Export:
- export_constraint(): Constraint -> <constraint> element
- ConstraintXMLWriter: write constraints as a robot description file

Usage:
    import xml.etree.ElementTree as ET
    from urdf_constraints import parse_constraint, export_constraint

    element = ET.fromstring('<constraint name="gear"><ratio value="2.5"/></constraint>')
    gear = parse_constraint(element)
    element_out = export_constraint(gear)
"""

from .config import ConstraintParserConfig

from .errors import (
    UNNAMED,
    ValueParseError,
    ConstraintError,
    MissingNameError,
    MissingEndpointError,
    MissingTypeError,
    UnknownTypeError,
    MalformedOriginError,
    MalformedAxisError,
    InvalidRatioError,
    UnknownClassTypeError,
    DuplicateConstraintError,
)

from .data import (
    Vector3,
    Quaternion,
    Pose,
    ConstraintClassType,
    LoopConstraintType,
    LOOP_CONSTRAINT_TYPE_NAMES,
    DEFAULT_AXIS,
    BaseConstraint,
    LoopConstraint,
    CouplingConstraint,
    Constraint,
)

from .io import (
    parse_float,
    parse_vector3,
    parse_pose,
    parse_constraint_base,
    parse_loop_constraint,
    parse_coupling_constraint,
    parse_constraint,
    ConstraintXMLReader,
    format_float,
    format_vector3,
    export_pose,
    export_constraint,
    ConstraintXMLWriter,
)

__all__ = [
    # Config
    "ConstraintParserConfig",
    # Errors
    "UNNAMED",
    "ValueParseError",
    "ConstraintError",
    "MissingNameError",
    "MissingEndpointError",
    "MissingTypeError",
    "UnknownTypeError",
    "MalformedOriginError",
    "MalformedAxisError",
    "InvalidRatioError",
    "UnknownClassTypeError",
    "DuplicateConstraintError",
    # Models
    "Vector3",
    "Quaternion",
    "Pose",
    "ConstraintClassType",
    "LoopConstraintType",
    "LOOP_CONSTRAINT_TYPE_NAMES",
    "DEFAULT_AXIS",
    "BaseConstraint",
    "LoopConstraint",
    "CouplingConstraint",
    "Constraint",
    # Parsing
    "parse_float",
    "parse_vector3",
    "parse_pose",
    "parse_constraint_base",
    "parse_loop_constraint",
    "parse_coupling_constraint",
    "parse_constraint",
    "ConstraintXMLReader",
    # Export
    "format_float",
    "format_vector3",
    "export_pose",
    "export_constraint",
    "ConstraintXMLWriter",
]
