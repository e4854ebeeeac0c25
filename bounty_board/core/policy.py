"""
Bounty validation core.
Mode-aware field policy - decides whether an absent value is an error per operation mode.
"""

from enum import Enum


class OperationMode(Enum):
    """Operation a record is being validated for."""
    CREATE = "create"
    UPDATE = "update"

    @classmethod
    def from_http_method(cls, method: str) -> "OperationMode":
        """Map an HTTP verb to its operation mode (POST creates, PATCH updates)."""
        verb = (method or "").strip().upper()
        if verb == "POST":
            return cls.CREATE
        if verb == "PATCH":
            return cls.UPDATE
        raise ValueError(f"No operation mode for HTTP method: {method!r}")


class FieldKind(Enum):
    SCALAR = "scalar"
    COMPOSITE = "composite"


class FieldPolicy(Enum):
    """What absence of a field means."""
    REQUIRED = "required"
    # Absent on update leaves the stored value untouched
    OPTIONAL_PRESERVING = "optional_preserving"
    # Absent means "no value"; an explicit null clears the stored object
    OPTIONAL_CLEARABLE = "optional_clearable"


def resolve_policy(mode: OperationMode, kind: FieldKind) -> FieldPolicy:
    """
    Resolve the presence policy for a mode-governed field.

    Every governed field is required when creating. On update, scalars
    preserve their stored value when omitted, while composite objects are
    clearable because they are stored as a single unit and must never be
    merged field by field with a previous value.
    """
    if mode is OperationMode.CREATE:
        return FieldPolicy.REQUIRED
    if kind is FieldKind.COMPOSITE:
        return FieldPolicy.OPTIONAL_CLEARABLE
    return FieldPolicy.OPTIONAL_PRESERVING
