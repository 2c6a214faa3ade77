"""Attribute value parsers.

- parse_float(): locale-independent decimal parsing
- parse_vector3(): whitespace-separated triple
- parse_pose(): <origin xyz="..." rpy="..."/> element to Pose
"""

import math
import re
import xml.etree.ElementTree as ET

from urdf_constraints.data.pose import Pose, Vector3
from urdf_constraints.errors import ValueParseError

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_float(text: str) -> float:
    """Parse a decimal number.

    Args:
        text: Attribute string (surrounding whitespace allowed)

    Returns:
        Parsed value

    Raises:
        ValueParseError: If text is not a finite decimal number
    """
    # float() alone also takes "1_5", "nan" and non-ASCII digits
    if text is None or DECIMAL_PATTERN.fullmatch(text.strip()) is None:
        raise ValueParseError(f"Cannot parse {text!r} as a number")

    value = float(text.strip())
    # overflow, e.g. "1e999"
    if not math.isfinite(value):
        raise ValueParseError(f"Value {text!r} is not finite")
    return value


def parse_vector3(text: str) -> Vector3:
    """Parse a whitespace-separated triple of floats.

    Raises:
        ValueParseError: If text does not hold exactly three numbers
    """
    if text is None:
        raise ValueParseError("Cannot parse a missing value as a vector")

    pieces = text.split()
    if len(pieces) != 3:
        raise ValueParseError(f"Expected 3 values in {text!r}, got {len(pieces)}")

    values = [parse_float(piece) for piece in pieces]
    return Vector3(x=values[0], y=values[1], z=values[2])


def parse_pose(element: ET.Element) -> Pose:
    """Parse an origin-like element into a Pose.

    Missing `xyz` or `rpy` attributes default to zero, so an empty
    element yields the identity transform.

    Args:
        element: Element carrying optional `xyz` and `rpy` attributes

    Returns:
        Parsed pose

    Raises:
        ValueParseError: If either attribute is malformed
    """
    xyz = element.get("xyz")
    rpy = element.get("rpy")

    position = parse_vector3(xyz) if xyz is not None else Vector3()
    if rpy is None:
        return Pose(position=position)

    angles = parse_vector3(rpy)
    pose = Pose.from_xyz_rpy(xyz=position.to_array(), rpy=angles.to_array())
    return pose
