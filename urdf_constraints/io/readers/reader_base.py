"""Base classes for robot description readers.

BaseReader keeps the bookkeeping every reader shares (the last path read
and what came out of it). XMLReader adds loading a robot description
file into an ElementTree root.
"""
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from urdf_constraints.data.arbitrary_types_model import ABaseModel


class BaseReader(ABaseModel, ABC):
    """Reader of constraint data from robot description files."""

    last_read_path: Path | None = None
    last_read_data: dict[str, Any] | None = None

    @abstractmethod
    def read(self, *, filepath: Path) -> dict[str, Any]:
        """Read a robot description and return its constraint data."""
        pass

    @abstractmethod
    def can_read(self, *, filepath: Path) -> bool:
        """Check whether filepath is a description this reader understands."""
        pass


class XMLReader(BaseReader):
    """Reader of URDF/XML robot descriptions."""

    suffixes: tuple[str, ...] = ('.urdf', '.xml')

    def can_read(self, *, filepath: Path) -> bool:
        return filepath.suffix.lower() in self.suffixes and filepath.is_file()

    def read_root(self, *, filepath: Path) -> ET.Element:
        """Parse a robot description and return its <robot> root.

        Raises:
            FileNotFoundError: If filepath does not exist
            ValueError: If filepath is not a file, is empty or is not
                well-formed XML
        """
        if not filepath.exists():
            raise FileNotFoundError(f"Robot description not found: {filepath}")
        if not filepath.is_file() or filepath.stat().st_size == 0:
            raise ValueError(f"Robot description is not a non-empty file: {filepath}")

        try:
            tree = ET.parse(source=filepath)
        except ET.ParseError as err:
            raise ValueError(f"Malformed XML in {filepath}: {err}") from err

        return tree.getroot()
