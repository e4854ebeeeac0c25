"""
Bounty validation core.
Composite constraint rules - consistency checks over grouped values that no single field can express.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from .errors import Violation, ViolationCode


def is_number(value: Any) -> bool:
    """Numeric presence: any int or float counts, including zero. Booleans do not."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_set(value: Any) -> bool:
    """Presence of a member inside a composite. Empty strings count as unset."""
    if value is None:
        return False
    if is_number(value):
        return True
    if isinstance(value, str):
        return value != ""
    return True


def both_or_neither(value: Optional[Mapping[str, Any]], first: str, second: str) -> bool:
    """
    Pairing rule: valid iff both members are set or neither is.

    An absent pair is valid; whether the pair itself is mandatory is decided
    by the field policy, not here.
    """
    if not isinstance(value, Mapping):
        return True
    return is_set(value.get(first)) == is_set(value.get(second))


def composite_complete(value: Optional[Mapping[str, Any]], fields: Sequence[str],
                       numeric_fields: Sequence[str] = ()) -> bool:
    """
    All-or-unit rule: valid iff the object is absent or every field is present.

    Numeric fields are present when they hold a number, so a zero amount or
    scale is never mistaken for a missing one.
    """
    if not isinstance(value, Mapping):
        return True
    for name in fields:
        member = value.get(name)
        if name in numeric_fields:
            if not is_number(member):
                return False
        elif not is_set(member):
            return False
    return True


@dataclass(frozen=True)
class CompositeRule:
    """A named predicate over a composite value with a message keyed to its path."""
    name: str
    predicate: Callable[[Any], bool]
    message: str
    code: ViolationCode

    def check(self, path: str, value: Any) -> Optional[Violation]:
        if self.predicate(value):
            return None
        return Violation(self.code, path, self.message.format(path=path))


def pairing_rule(first: str, second: str, message: str = None) -> CompositeRule:
    if message is None:
        message = "{path}." + first + " or {path}." + second + " is required"
    return CompositeRule(
        name="both-or-neither",
        predicate=lambda value: both_or_neither(value, first, second),
        message=message,
        code=ViolationCode.INCONSISTENT_PAIR,
    )


def completeness_rule(fields: Sequence[str], numeric_fields: Sequence[str] = ()) -> CompositeRule:
    fields = tuple(fields)
    numeric_fields = tuple(numeric_fields)
    return CompositeRule(
        name="composite-complete",
        predicate=lambda value: composite_complete(value, fields, numeric_fields),
        message="Missing one of [" + ", ".join(fields) + "] in {path}.",
        code=ViolationCode.INCOMPLETE_COMPOSITE,
    )
