"""Parsers for <constraint> elements.

Each parser either returns a fully validated constraint or raises a
ConstraintError subclass - partially built constraints never escape.

Element vocabulary:

    <constraint name="loop1" type="revolute">
        <predecessor link="link_a">
            <origin xyz="0 0 0.1" rpy="0 0 0"/>
        </predecessor>
        <successor link="link_b"/>
        <axis xyz="0 0 1"/>
    </constraint>

    <constraint name="gear1" class="coupling">
        <predecessor link="joint_a"/>
        <successor link="joint_b"/>
        <ratio value="2.5"/>
    </constraint>
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from pydantic import Field

from urdf_constraints.config import ConstraintParserConfig
from urdf_constraints.data.constraint_models import (
    CONSTRAINT_CLASS_NAMES,
    DEFAULT_AXIS,
    LOOP_CONSTRAINT_TYPE_NAMES,
    Constraint,
    ConstraintClassType,
    CouplingConstraint,
    LoopConstraint,
    LoopConstraintType,
)
from urdf_constraints.data.pose import Pose, Vector3
from urdf_constraints.errors import (
    ConstraintError,
    DuplicateConstraintError,
    InvalidRatioError,
    MalformedAxisError,
    MalformedOriginError,
    MissingEndpointError,
    MissingNameError,
    MissingTypeError,
    UnknownClassTypeError,
    UnknownTypeError,
    ValueParseError,
)
from urdf_constraints.io.readers.reader_base import XMLReader
from urdf_constraints.io.readers.value_parsers import parse_float, parse_pose, parse_vector3
from urdf_constraints.types.generic_types import ConstraintBaseFields, EndpointTagString, LinkNameString

logger = logging.getLogger(__name__)

PREDECESSOR_TAG = "predecessor"
SUCCESSOR_TAG = "successor"
ENDPOINT_TAGS: tuple[EndpointTagString, EndpointTagString] = (PREDECESSOR_TAG, SUCCESSOR_TAG)


def _read_name(element: ET.Element) -> str:
    name = element.get("name")
    if not name:
        raise MissingNameError(field="name")
    return name


def _read_endpoint_link(
    *,
    element: ET.Element,
    tag: EndpointTagString,
    constraint_name: str,
    log: logging.Logger
) -> LinkNameString | None:
    endpoint = element.find(tag)
    if endpoint is None:
        return None

    link_name = endpoint.get("link")
    if link_name is None:
        log.info(f"no {tag} link name specified for constraint [{constraint_name}]. this might be the root?")
        return None
    # the writer emits link="" for an unset link name
    if link_name == "":
        return None
    return link_name


def parse_constraint_base(
    element: ET.Element,
    *,
    log: logging.Logger | None = None
) -> ConstraintBaseFields:
    """Read the fields shared by every constraint variant.

    Endpoint elements are optional here. One without a `link` attribute
    is logged at INFO and leaves the link name unset.

    Args:
        element: <constraint> element
        log: Logger for informational messages (default: module logger)

    Returns:
        (name, predecessor_link_name, successor_link_name)

    Raises:
        MissingNameError: If the `name` attribute is absent
    """
    log = log or logger

    name = _read_name(element)
    predecessor_link_name, successor_link_name = (
        _read_endpoint_link(element=element, tag=tag, constraint_name=name, log=log)
        for tag in ENDPOINT_TAGS
    )
    return name, predecessor_link_name, successor_link_name


def _parse_endpoint_origin(
    *,
    element: ET.Element,
    tag: EndpointTagString,
    constraint_name: str,
    config: ConstraintParserConfig,
    log: logging.Logger
) -> Pose:
    endpoint = element.find(tag)
    if endpoint is None:
        raise MissingEndpointError(constraint_name=constraint_name, field=tag)

    origin = endpoint.find("origin")
    if origin is None:
        log.debug(f"no origin under {tag} of constraint [{constraint_name}], using identity")
        return Pose.identity()

    try:
        return parse_pose(origin)
    except ValueParseError as err:
        if config.strict_origins:
            raise MalformedOriginError(constraint_name=constraint_name, field=tag, detail=str(err)) from err
        log.warning(f"malformed origin under {tag} of constraint [{constraint_name}] ({err}), using identity")
        return Pose.identity()


def _parse_loop_type(*, element: ET.Element, constraint_name: str) -> LoopConstraintType:
    type_name = element.get("type")
    if type_name is None:
        raise MissingTypeError(constraint_name=constraint_name, field="type")

    loop_type = LOOP_CONSTRAINT_TYPE_NAMES.get(type_name)
    if loop_type is None:
        raise UnknownTypeError(
            constraint_name=constraint_name,
            field="type",
            detail=f"'{type_name}' is not one of {sorted(LOOP_CONSTRAINT_TYPE_NAMES)}"
        )
    return loop_type


def _parse_axis(*, element: ET.Element, constraint_name: str, log: logging.Logger) -> Vector3:
    axis = element.find("axis")
    if axis is None:
        log.debug(f"no axis for constraint [{constraint_name}], using default {DEFAULT_AXIS.to_array()}")
        return DEFAULT_AXIS

    xyz = axis.get("xyz")
    if xyz is None:
        raise MalformedAxisError(constraint_name=constraint_name, field="axis", detail="missing xyz attribute")

    try:
        return parse_vector3(xyz)
    except ValueParseError as err:
        raise MalformedAxisError(constraint_name=constraint_name, field="axis", detail=str(err)) from err


def parse_loop_constraint(
    element: ET.Element,
    *,
    config: ConstraintParserConfig | None = None,
    log: logging.Logger | None = None
) -> LoopConstraint:
    """Parse a loop constraint.

    Both endpoint elements must exist, since each carries the transform
    from its link to the constraint frame. A missing <origin> under an
    endpoint means identity. The <axis> child is only read for non-fixed
    constraints and defaults to (1, 0, 0).

    Args:
        element: <constraint> element
        config: Parser configuration (default: ConstraintParserConfig())
        log: Logger for informational messages (default: module logger)

    Returns:
        Validated LoopConstraint

    Raises:
        MissingNameError, MissingEndpointError, MalformedOriginError,
        MissingTypeError, UnknownTypeError, MalformedAxisError
    """
    config = config or ConstraintParserConfig()
    log = log or logger

    name, predecessor_link_name, successor_link_name = parse_constraint_base(element, log=log)

    # type before geometry: an unknown type is reported even without endpoints
    loop_type = _parse_loop_type(element=element, constraint_name=name)

    predecessor_origin, successor_origin = (
        _parse_endpoint_origin(element=element, tag=tag, constraint_name=name, config=config, log=log)
        for tag in ENDPOINT_TAGS
    )

    axis = None
    if loop_type != LoopConstraintType.FIXED:
        axis = _parse_axis(element=element, constraint_name=name, log=log)

    return LoopConstraint(
        name=name,
        predecessor_link_name=predecessor_link_name,
        successor_link_name=successor_link_name,
        type=loop_type,
        predecessor_to_constraint_origin_transform=predecessor_origin,
        successor_to_constraint_origin_transform=successor_origin,
        axis=axis,
    )


def parse_coupling_constraint(
    element: ET.Element,
    *,
    log: logging.Logger | None = None
) -> CouplingConstraint:
    """Parse a coupling constraint.

    An absent <ratio> is valid and leaves the ratio at 0.0. A <ratio>
    whose `value` is missing or not a number is an error.

    Raises:
        MissingNameError, InvalidRatioError
    """
    log = log or logger

    name, predecessor_link_name, successor_link_name = parse_constraint_base(element, log=log)

    ratio = 0.0
    ratio_element = element.find("ratio")
    if ratio_element is None:
        log.debug(f"no ratio for constraint [{name}], leaving it unset")
    else:
        value = ratio_element.get("value")
        if value is None:
            raise InvalidRatioError(constraint_name=name, field="ratio", detail="missing value attribute")
        try:
            ratio = parse_float(value)
        except ValueParseError as err:
            raise InvalidRatioError(constraint_name=name, field="ratio", detail=str(err)) from err

    return CouplingConstraint(
        name=name,
        predecessor_link_name=predecessor_link_name,
        successor_link_name=successor_link_name,
        ratio=ratio,
    )


def detect_constraint_class(element: ET.Element) -> ConstraintClassType:
    """Determine the category of a <constraint> element.

    An explicit `class` attribute wins. Otherwise a `type` attribute marks
    a loop constraint and its absence a coupling constraint, so a bad
    `type` is always reported by the loop parser.

    Raises:
        UnknownClassTypeError: If `class` holds an unrecognized value
    """
    class_name = element.get("class")
    if class_name is not None:
        class_type = CONSTRAINT_CLASS_NAMES.get(class_name)
        if class_type is None:
            raise UnknownClassTypeError(
                constraint_name=element.get("name"),
                field="class",
                detail=f"'{class_name}' is not one of {sorted(CONSTRAINT_CLASS_NAMES)}"
            )
        return class_type

    if element.get("type") is not None:
        return ConstraintClassType.LOOP
    return ConstraintClassType.COUPLING


def parse_constraint(
    element: ET.Element,
    *,
    config: ConstraintParserConfig | None = None,
    log: logging.Logger | None = None
) -> Constraint:
    """Parse a <constraint> element of either category.

    The name is checked first so an unnamed element always fails with
    MissingNameError.
    """
    _read_name(element)

    class_type = detect_constraint_class(element)
    if class_type == ConstraintClassType.LOOP:
        return parse_loop_constraint(element, config=config, log=log)
    elif class_type == ConstraintClassType.COUPLING:
        return parse_coupling_constraint(element, log=log)
    raise UnknownClassTypeError(constraint_name=element.get("name"), field="class")


class ConstraintXMLReader(XMLReader):
    """Reader for constraints embedded in a robot description.

    Only direct children of the document root with the configured tag are
    considered constraints.

    Usage:
        reader = ConstraintXMLReader()
        data = reader.read(filepath=Path("robot.urdf"))
        loop = data["constraints"]["loop1"]
    """

    config: ConstraintParserConfig = Field(default_factory=ConstraintParserConfig)

    def read(self, *, filepath: Path) -> dict[str, Any]:
        """Read all constraints from a robot description file.

        Args:
            filepath: Path to URDF/XML file

        Returns:
            Dictionary with robot_name, constraints (name -> Constraint),
            skipped (list of error messages) and n_constraints
        """
        root = self.read_root(filepath=filepath)
        data = self.read_element(root=root)

        self.last_read_path = filepath
        self.last_read_data = data

        logger.info(f"Loaded {data['n_constraints']} constraints from {filepath.name}")
        return data

    def read_element(self, *, root: ET.Element) -> dict[str, Any]:
        """Read all constraints below an in-memory document root.

        Raises:
            ConstraintError: First failure, unless skip_invalid_constraints is set
            DuplicateConstraintError: If two constraints share a name
        """
        constraints: dict[str, Constraint] = {}
        skipped: list[str] = []

        for element in root.findall(self.config.constraint_tag):
            try:
                constraint = parse_constraint(element, config=self.config, log=logger)
            except ConstraintError as err:
                if not self.config.skip_invalid_constraints:
                    raise
                logger.warning(f"Skipping constraint: {err}")
                skipped.append(str(err))
                continue

            if constraint.name in constraints:
                raise DuplicateConstraintError(constraint_name=constraint.name, field="name")
            constraints[constraint.name] = constraint

        return {
            "robot_name": root.get("name"),
            "constraints": constraints,
            "skipped": skipped,
            "n_constraints": len(constraints),
        }
