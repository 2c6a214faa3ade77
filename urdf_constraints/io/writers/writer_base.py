"""Base classes for robot description writers.

BaseWriter checks the data dictionary handed to write() and remembers the
last path written. XMLWriter serializes a finished <robot> tree to disk.
"""

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from urdf_constraints.data.arbitrary_types_model import ABaseModel


class BaseWriter(ABaseModel, ABC):
    """Writer of constraint data to robot description files."""

    last_write_path: Path | None = None

    @abstractmethod
    def write(
        self,
        *,
        filepath: Path,
        data: dict[str, Any]
    ) -> None:
        """Write constraint data to filepath."""
        pass

    def validate_data(self, *, data: dict[str, Any], required_keys: list[str]) -> None:
        """Raise ValueError naming every required key absent from data."""
        missing = sorted(set(required_keys) - set(data))
        if missing:
            raise ValueError(f"Constraint data is missing required keys: {missing}")


class XMLWriter(BaseWriter):
    """Writer of URDF/XML robot descriptions."""

    encoding: str = 'utf-8'

    def write_tree(self, *, filepath: Path, root: ET.Element, indent: str = "  ") -> None:
        """Write a <robot> tree with an XML declaration, creating parent directories.

        Args:
            filepath: Path to output file
            root: Document root element
            indent: Indentation per nesting level
        """
        filepath.parent.mkdir(parents=True, exist_ok=True)

        tree = ET.ElementTree(root)
        ET.indent(tree, space=indent)
        tree.write(filepath, encoding=self.encoding, xml_declaration=True)

        self.last_write_path = filepath
