"""Error taxonomy for constraint parsing and export.

Every failure is terminal for the constraint being processed. Each error
carries the constraint name (or UNNAMED before the name is known) and the
offending attribute or child tag.
"""

UNNAMED = "unnamed"


class ValueParseError(ValueError):
    """Raised when an attribute string cannot be converted to a number, vector or pose."""


class ConstraintError(ValueError):
    """Base class for all constraint parse/export failures.

    Attributes:
        constraint_name: Name of the offending constraint, or "unnamed"
        field: Attribute or child tag that caused the failure
    """

    description = "invalid constraint"

    def __init__(self, *, constraint_name: str | None = None, field: str, detail: str | None = None) -> None:
        self.constraint_name = constraint_name or UNNAMED
        self.field = field
        self.detail = detail
        message = f"{self.description} for constraint [{self.constraint_name}] (field: {field})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class MissingNameError(ConstraintError):
    description = "missing name attribute"


class MissingEndpointError(ConstraintError):
    description = "missing endpoint element"


class MissingTypeError(ConstraintError):
    description = "missing type attribute"


class UnknownTypeError(ConstraintError):
    description = "unknown loop constraint type"


class MalformedOriginError(ConstraintError):
    description = "malformed origin"


class MalformedAxisError(ConstraintError):
    description = "malformed axis"


class InvalidRatioError(ConstraintError):
    description = "invalid ratio"


class UnknownClassTypeError(ConstraintError):
    description = "unknown constraint class type"


class DuplicateConstraintError(ConstraintError):
    description = "duplicate constraint name"
