"""Tests for constraint export.

Tests export_constraint and write/read cycles through the parsers.
"""

import xml.etree.ElementTree as ET

import pytest

from urdf_constraints.data.constraint_models import (
    CouplingConstraint,
    LoopConstraint,
    LoopConstraintType,
)
from urdf_constraints.data.pose import Pose, Vector3
from urdf_constraints.errors import UnknownClassTypeError, UnknownTypeError
from urdf_constraints.io.readers.constraint_reader import (
    parse_constraint,
    parse_coupling_constraint,
    parse_loop_constraint,
)
from urdf_constraints.io.writers.constraint_writer import export_constraint


class TestExportLoopConstraint:
    """Test loop constraint export."""

    def test_element_structure(self) -> None:
        """Should emit name, type, endpoints with origins and axis."""
        loop = LoopConstraint(
            name="loop",
            predecessor_link_name="a",
            successor_link_name="b",
            type=LoopConstraintType.PRISMATIC,
            axis=Vector3(x=0.0, y=0.0, z=1.0),
        )

        element = export_constraint(loop)

        assert element.tag == "constraint"
        assert element.get("name") == "loop"
        assert element.get("type") == "prismatic"
        assert element.get("class") == "loop"
        assert element.find("predecessor").get("link") == "a"
        assert element.find("successor").get("link") == "b"
        assert element.find("predecessor/origin") is not None
        assert element.find("successor/origin") is not None
        assert element.find("axis").get("xyz") == "0.0 0.0 1.0"

    def test_fixed_still_writes_axis(self) -> None:
        """Should emit an axis for fixed constraints, ignored on re-parse."""
        weld = LoopConstraint(name="weld", type=LoopConstraintType.FIXED)

        element = export_constraint(weld)

        assert element.find("axis") is not None
        assert parse_loop_constraint(element).axis is None

    def test_roundtrip(self, revolute_loop_element: ET.Element) -> None:
        """Should preserve type, axis and both transforms through export and re-parse."""
        original = parse_loop_constraint(revolute_loop_element)

        reparsed = parse_loop_constraint(export_constraint(original))

        assert reparsed.name == original.name
        assert reparsed.type == original.type
        assert reparsed.axis.is_close(original.axis)
        assert reparsed.predecessor_to_constraint_origin_transform.is_close(
            original.predecessor_to_constraint_origin_transform
        )
        assert reparsed.successor_to_constraint_origin_transform.is_close(
            original.successor_to_constraint_origin_transform
        )
        assert reparsed.predecessor_link_name == "thigh"
        assert reparsed.successor_link_name == "shin"

    def test_non_default_pose_roundtrip(self) -> None:
        """Should preserve an arbitrary transform."""
        pose = Pose.from_xyz_rpy(xyz=[1.25, -0.5, 2.0], rpy=[-0.4, 0.7, 2.9])
        loop = LoopConstraint(
            name="loop",
            type=LoopConstraintType.CONTINUOUS,
            predecessor_to_constraint_origin_transform=pose,
            axis=Vector3(x=0.0, y=-1.0, z=0.0),
        )

        reparsed = parse_loop_constraint(export_constraint(loop))

        assert reparsed.predecessor_to_constraint_origin_transform.is_close(pose)
        assert reparsed.successor_to_constraint_origin_transform.is_identity
        assert reparsed.axis == Vector3(x=0.0, y=-1.0, z=0.0)

    def test_unset_links_roundtrip_as_unset(self) -> None:
        """Should write empty link attributes that read back as unset."""
        loop = LoopConstraint(name="loop", type=LoopConstraintType.REVOLUTE)

        element = export_constraint(loop)
        reparsed = parse_loop_constraint(element)

        assert element.find("predecessor").get("link") == ""
        assert element.find("successor").get("link") == ""
        assert reparsed.predecessor_link_name is None
        assert reparsed.successor_link_name is None

    @pytest.mark.parametrize("declare_class", [True, False])
    def test_dispatch_roundtrip(self, declare_class: bool) -> None:
        """Should read back as a loop with or without the class attribute."""
        loop = LoopConstraint(name="slider", type=LoopConstraintType.PRISMATIC, axis=Vector3(x=0.0, y=1.0, z=0.0))
        element = export_constraint(loop)
        if not declare_class:
            del element.attrib["class"]

        reparsed = parse_constraint(element)

        assert isinstance(reparsed, LoopConstraint)
        assert reparsed.type == LoopConstraintType.PRISMATIC
        assert reparsed.axis == loop.axis

    def test_unknown_type_tag(self) -> None:
        """Should reject an internal type with no XML name."""
        loop = LoopConstraint.model_construct(name="loop", type="ball")

        with pytest.raises(UnknownTypeError):
            export_constraint(loop)


class TestExportCouplingConstraint:
    """Test coupling constraint export."""

    def test_ratio_scenario(self, coupling_element: ET.Element) -> None:
        """Should write ratio 2.5 and read it back."""
        gear = parse_coupling_constraint(coupling_element)

        element = export_constraint(gear)

        assert element.find("ratio").get("value") == "2.5"
        assert element.get("type") is None
        assert element.get("class") == "coupling"
        assert parse_coupling_constraint(element) == gear

    def test_dispatch_roundtrip(self) -> None:
        """Should be recognised as a coupling by the category dispatch."""
        gear = CouplingConstraint(name="gear", predecessor_link_name="a", successor_link_name="b", ratio=-0.75)

        assert parse_constraint(export_constraint(gear)) == gear

    def test_dispatch_roundtrip_without_class(self) -> None:
        """Should still read back as a coupling when the class attribute is dropped."""
        gear = CouplingConstraint(name="gear", ratio=3.0)
        element = export_constraint(gear)
        del element.attrib["class"]

        assert parse_constraint(element) == gear

    def test_zero_ratio(self) -> None:
        """Should write an unset ratio as 0.0."""
        element = export_constraint(CouplingConstraint(name="pass_through"))

        assert element.find("ratio").get("value") == "0.0"


class TestExportFailures:
    """Test export failure handling."""

    def test_unknown_class_type(self) -> None:
        """Should reject constraints with an unknown class tag."""
        bogus = CouplingConstraint.model_construct(name="bogus", class_type="gearbox")

        with pytest.raises(UnknownClassTypeError) as exc_info:
            export_constraint(bogus)

        assert exc_info.value.constraint_name == "bogus"

    def test_failed_export_leaves_parent_untouched(self) -> None:
        """Should not append anything to the parent on failure."""
        parent = ET.Element("robot")
        bogus = LoopConstraint.model_construct(name="bogus", type="ball")

        with pytest.raises(UnknownTypeError):
            export_constraint(bogus, parent=parent)

        assert len(parent) == 0

    def test_appends_to_parent(self) -> None:
        """Should append the finished element to the parent."""
        parent = ET.Element("robot")

        element = export_constraint(CouplingConstraint(name="gear", ratio=1.5), parent=parent)

        assert list(parent) == [element]
