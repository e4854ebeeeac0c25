"""
Bounty validation core.
Violation taxonomy - every rejected field is reported as one explicit violation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class ViolationCode(str, Enum):
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    INCONSISTENT_PAIR = "INCONSISTENT_PAIR"
    INCOMPLETE_COMPOSITE = "INCOMPLETE_COMPOSITE"
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"


@dataclass(frozen=True)
class Violation:
    """A single violated constraint, keyed to the field path it applies to."""
    code: ViolationCode
    path: str
    message: str
    value: Optional[Any] = None

    def to_dict(self):
        return {
            "code": self.code.value,
            "path": self.path,
            "message": self.message,
            "value": self.value,
        }


def missing_required(path: str) -> Violation:
    return Violation(ViolationCode.MISSING_REQUIRED_FIELD, path, f"{path} is a required field")


def unknown_field(path: str, value: Any = None) -> Violation:
    return Violation(ViolationCode.UNKNOWN_FIELD, path, f"{path} is not a known field", value)


def invalid_enum(path: str, value: Any, allowed) -> Violation:
    return Violation(
        ViolationCode.INVALID_ENUM_VALUE,
        path,
        f"{path} must be one of the following values: {', '.join(allowed)}",
        value,
    )


def invalid_type(path: str, value: Any, expected: str) -> Violation:
    return Violation(ViolationCode.INVALID_TYPE, path, f"{path} must be a `{expected}` type", value)


def out_of_range(path: str, value: Any, minimum) -> Violation:
    return Violation(
        ViolationCode.OUT_OF_RANGE, path, f"{path} must be greater than or equal to {minimum}", value
    )


class BountyValidationError(ValueError):
    """Raised by callers that prefer exceptions over inspecting a result."""

    def __init__(self, violations: Tuple[Violation, ...]):
        self.violations = tuple(violations)
        super().__init__(
            f"{len(self.violations)} validation error(s): "
            + "; ".join(v.message for v in self.violations)
        )
