"""Attribute value formatters - the inverse of io/readers/value_parsers.py.

Floats are written as the shortest decimal string that parses back to the
same value.
"""

import xml.etree.ElementTree as ET

import numpy as np

from urdf_constraints.data.pose import Pose, Vector3


def format_float(value: float) -> str:
    """Canonical decimal string, e.g. 2.5 -> "2.5", 1 -> "1.0"."""
    return repr(float(value))


def format_vector3(vector: Vector3 | np.ndarray) -> str:
    """Space-separated triple, e.g. "0.0 0.0 1.0"."""
    values = vector.to_array() if isinstance(vector, Vector3) else np.asarray(vector, dtype=float)
    return " ".join(format_float(value) for value in values)


def export_pose(pose: Pose, *, parent: ET.Element, tag: str = "origin") -> ET.Element:
    """Append an <origin xyz="..." rpy="..."/> element for a pose.

    Args:
        pose: Transform to write
        parent: Element the origin is appended to
        tag: Tag of the new element

    Returns:
        The new element
    """
    return ET.SubElement(
        parent,
        tag,
        attrib={
            "xyz": format_vector3(pose.xyz),
            "rpy": format_vector3(pose.rpy),
        },
    )
