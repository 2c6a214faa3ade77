"""Four-bar linkage demo - close a kinematic loop and couple two joints."""

from pathlib import Path
import logging

import numpy as np

from urdf_constraints import (
    ConstraintXMLReader,
    ConstraintXMLWriter,
    CouplingConstraint,
    LoopConstraint,
    LoopConstraintType,
    Pose,
    Vector3,
)

logger = logging.getLogger(__name__)


def build_four_bar_constraints(*, coupler_length: float, rocker_offset: float) -> list[LoopConstraint | CouplingConstraint]:
    """
    Build the constraints of a planar four-bar linkage.

    Args:
        coupler_length: Distance from the coupler joint to the loop closure (m)
        rocker_offset: Height of the loop closure above the rocker frame (m)

    Returns:
        Loop closure and crank/rocker coupling
    """
    loop = LoopConstraint(
        name="close_loop",
        predecessor_link_name="coupler",
        successor_link_name="rocker",
        type=LoopConstraintType.REVOLUTE,
        predecessor_to_constraint_origin_transform=Pose.from_xyz_rpy(xyz=[coupler_length, 0.0, 0.0]),
        successor_to_constraint_origin_transform=Pose.from_xyz_rpy(
            xyz=[0.0, 0.0, rocker_offset],
            rpy=[0.0, 0.0, np.pi / 2],
        ),
        axis=Vector3(x=0.0, y=0.0, z=1.0),
    )
    gear = CouplingConstraint(
        name="crank_gear",
        predecessor_link_name="crank_joint",
        successor_link_name="rocker_joint",
        ratio=-0.5,
    )
    return [loop, gear]


def run_four_bar_demo() -> None:
    """Write the four-bar constraints to a URDF file and read them back."""
    output_dir = Path("output/four_bar_demo")
    output_path = output_dir / "four_bar_constraints.urdf"

    logger.info("=" * 80)
    logger.info("FOUR-BAR CONSTRAINTS DEMO")
    logger.info("=" * 80)

    constraints = build_four_bar_constraints(coupler_length=0.5, rocker_offset=0.4)

    writer = ConstraintXMLWriter()
    writer.write(filepath=output_path, data={"robot_name": "four_bar", "constraints": constraints})

    reader = ConstraintXMLReader()
    data = reader.read(filepath=output_path)

    for name, constraint in data["constraints"].items():
        if isinstance(constraint, LoopConstraint):
            logger.info(f"  {name}: {constraint.type.value} loop, axis {constraint.axis.to_array()}")
            logger.info(f"    predecessor origin: xyz={constraint.predecessor_to_constraint_origin_transform.xyz}")
            logger.info(f"    successor origin:   rpy={constraint.successor_to_constraint_origin_transform.rpy}")
        else:
            logger.info(f"  {name}: coupling, ratio {constraint.ratio}")

    logger.info(f"\nResults saved to: {output_path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_four_bar_demo()
