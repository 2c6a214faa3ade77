"""Pytest configuration and fixtures for urdf_constraints tests.

Provides reusable fixtures for:
- <constraint> elements (loop, fixed, coupling)
- Robot description documents
- Temporary directories
- Injected loggers
"""

import logging
import shutil
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

TEST_LOGGER_NAME = "urdf_constraints.tests"


@pytest.fixture
def temp_dir() -> Path:
    """Create temporary directory for tests.

    Yields:
        Path to temporary directory (auto-cleaned up)
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp)


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger injected into parsers so emissions can be asserted with caplog."""
    return logging.getLogger(TEST_LOGGER_NAME)


@pytest.fixture
def fixed_loop_element() -> ET.Element:
    """Fixed loop constraint without origins."""
    return ET.fromstring(
        '<constraint name="c1" type="fixed">'
        '<predecessor link="L1"/>'
        '<successor link="L2"/>'
        '</constraint>'
    )


@pytest.fixture
def revolute_loop_element() -> ET.Element:
    """Revolute loop constraint with explicit origins and axis."""
    return ET.fromstring(
        '<constraint name="knee_loop" type="revolute">'
        '<predecessor link="thigh">'
        '<origin xyz="0.1 -0.2 0.3" rpy="0.1 0.2 0.3"/>'
        '</predecessor>'
        '<successor link="shin">'
        '<origin xyz="0 0 -0.25" rpy="0 1.0 0"/>'
        '</successor>'
        '<axis xyz="0 1 0"/>'
        '</constraint>'
    )


@pytest.fixture
def coupling_element() -> ET.Element:
    """Coupling constraint with ratio 2.5."""
    return ET.fromstring(
        '<constraint name="gear">'
        '<predecessor link="motor_joint"/>'
        '<successor link="wheel_joint"/>'
        '<ratio value="2.5"/>'
        '</constraint>'
    )


@pytest.fixture
def robot_urdf_content() -> str:
    """Robot description with links, joints and two constraints.

    Returns:
        URDF content string
    """
    return """<?xml version="1.0"?>
<robot name="four_bar">
  <link name="base"/>
  <link name="crank"/>
  <link name="coupler"/>
  <link name="rocker"/>
  <joint name="crank_joint" type="revolute">
    <parent link="base"/>
    <child link="crank"/>
  </joint>
  <constraint name="close_loop" type="revolute">
    <predecessor link="coupler">
      <origin xyz="0.5 0 0"/>
    </predecessor>
    <successor link="rocker">
      <origin xyz="0 0 0.4" rpy="0 0 1.5707963267948966"/>
    </successor>
    <axis xyz="0 0 1"/>
  </constraint>
  <constraint name="crank_gear">
    <predecessor link="crank_joint"/>
    <successor link="rocker_joint"/>
    <ratio value="-0.5"/>
  </constraint>
</robot>
"""


@pytest.fixture
def create_robot_urdf(temp_dir: Path, robot_urdf_content: str) -> Path:
    """Create robot description file.

    Returns:
        Path to URDF file
    """
    urdf_path = temp_dir / "four_bar.urdf"
    urdf_path.write_text(data=robot_urdf_content, encoding="utf-8")
    return urdf_path
