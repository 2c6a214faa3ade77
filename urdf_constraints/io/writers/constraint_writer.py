"""Export constraints back to <constraint> elements.

export_constraint() is the inverse of parse_constraint(): every required
field survives a write/read cycle. The category is written as a `class`
attribute, so couplings without a ratio read back as couplings. Link names
that were never set are written as empty `link` attributes and read back
as unset.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from pydantic import Field

from urdf_constraints.config import ConstraintParserConfig
from urdf_constraints.data.constraint_models import (
    DEFAULT_AXIS,
    Constraint,
    ConstraintClassType,
    CouplingConstraint,
    LoopConstraint,
    LoopConstraintType,
)
from urdf_constraints.errors import DuplicateConstraintError, UnknownClassTypeError, UnknownTypeError
from urdf_constraints.io.readers.constraint_reader import PREDECESSOR_TAG, SUCCESSOR_TAG
from urdf_constraints.io.writers.value_formatters import export_pose, format_float, format_vector3
from urdf_constraints.io.writers.writer_base import XMLWriter

logger = logging.getLogger(__name__)


def _export_loop_fields(constraint: LoopConstraint, *, element: ET.Element) -> None:
    try:
        loop_type = LoopConstraintType(constraint.type)
    except ValueError as err:
        raise UnknownTypeError(
            constraint_name=constraint.name,
            field="type",
            detail=f"internal type tag {constraint.type!r} has no XML name"
        ) from err
    element.set("type", loop_type.value)

    export_pose(constraint.predecessor_to_constraint_origin_transform, parent=element.find(PREDECESSOR_TAG))
    export_pose(constraint.successor_to_constraint_origin_transform, parent=element.find(SUCCESSOR_TAG))

    # written for fixed constraints too, the parser ignores it there
    axis = constraint.axis if constraint.axis is not None else DEFAULT_AXIS
    ET.SubElement(element, "axis", attrib={"xyz": format_vector3(axis)})


def _export_coupling_fields(constraint: CouplingConstraint, *, element: ET.Element) -> None:
    ET.SubElement(element, "ratio", attrib={"value": format_float(constraint.ratio)})


def export_constraint(
    constraint: Constraint,
    *,
    parent: ET.Element | None = None,
    tag: str = "constraint",
    log: logging.Logger | None = None
) -> ET.Element:
    """Build a <constraint> element for a constraint.

    The element is only attached to `parent` once it is complete, so a
    failed export leaves the parent untouched.

    Args:
        constraint: LoopConstraint or CouplingConstraint
        parent: Optional element to append the result to
        tag: Tag of the new element
        log: Logger for debug messages (default: module logger)

    Returns:
        The new element

    Raises:
        UnknownClassTypeError: If the constraint carries no recognized class_type
        UnknownTypeError: If a loop constraint carries an unrecognized type
    """
    log = log or logger

    element = ET.Element(tag, attrib={"name": constraint.name or ""})
    ET.SubElement(element, PREDECESSOR_TAG, attrib={"link": constraint.predecessor_link_name or ""})
    ET.SubElement(element, SUCCESSOR_TAG, attrib={"link": constraint.successor_link_name or ""})

    class_type = getattr(constraint, "class_type", None)
    if class_type == ConstraintClassType.LOOP:
        _export_loop_fields(constraint, element=element)
    elif class_type == ConstraintClassType.COUPLING:
        _export_coupling_fields(constraint, element=element)
    else:
        raise UnknownClassTypeError(
            constraint_name=constraint.name,
            field="class_type",
            detail=f"{class_type!r} is not a known constraint class"
        )
    element.set("class", ConstraintClassType(class_type).value)

    log.debug(f"exported {type(constraint).__name__} [{constraint.name}]")

    if parent is not None:
        parent.append(element)
    return element


class ConstraintXMLWriter(XMLWriter):
    """Writer for constraints as a robot description document.

    Usage:
        writer = ConstraintXMLWriter()
        writer.write(
            filepath=Path("robot.urdf"),
            data={"robot_name": "arm", "constraints": [loop, gear]}
        )
    """

    config: ConstraintParserConfig = Field(default_factory=ConstraintParserConfig)

    def write(
        self,
        *,
        filepath: Path,
        data: dict[str, Any]
    ) -> None:
        """Write constraints to a new <robot> document.

        Args:
            filepath: Path to output file
            data: Dictionary with 'constraints' (list or name -> Constraint dict)
                  and optional 'robot_name'
        """
        self.validate_data(data=data, required_keys=["constraints"])

        root = ET.Element("robot")
        if data.get("robot_name"):
            root.set("name", data["robot_name"])

        constraints = data["constraints"]
        if isinstance(constraints, dict):
            constraints = list(constraints.values())
        self.append_to(root=root, constraints=constraints)

        self.write_tree(filepath=filepath, root=root, indent=self.config.xml_indent)
        logger.info(f"Wrote {len(constraints)} constraints to {filepath.name}")

    def append_to(self, *, root: ET.Element, constraints: list[Constraint]) -> list[ET.Element]:
        """Append exported constraints to an existing document root.

        Nothing is appended if any constraint fails to export.

        Raises:
            DuplicateConstraintError: If two constraints share a name
        """
        seen: set[str] = set()
        elements = []
        for constraint in constraints:
            if constraint.name in seen:
                raise DuplicateConstraintError(constraint_name=constraint.name, field="name")
            seen.add(constraint.name)
            elements.append(export_constraint(constraint, tag=self.config.constraint_tag, log=logger))

        root.extend(elements)
        return elements
