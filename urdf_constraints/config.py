"""Configuration for constraint parsing and export.

- ConstraintParserConfig: defaulting policy and document-level behaviour
"""

from dataclasses import dataclass


@dataclass
class ConstraintParserConfig:
    """Configuration for reading and writing <constraint> elements.

    The defaults reproduce the strict behaviour of the parser: a malformed
    <origin> is fatal and the first invalid constraint aborts a document.

    Attributes:
        strict_origins: Reject malformed <origin> elements (False = warn and use identity)
        skip_invalid_constraints: Skip constraints that fail to parse instead of aborting the document
        constraint_tag: Tag of constraint elements under the document root
        xml_indent: Indentation used when writing documents
    """

    # Defaulting policy
    strict_origins: bool = True

    # Document-level policy
    skip_invalid_constraints: bool = False
    constraint_tag: str = "constraint"

    # Output
    xml_indent: str = "  "
