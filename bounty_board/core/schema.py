"""
Bounty validation core.
Declarative schemas - field specs for the Bounty record and the claim action.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .config import get_default_currency, get_default_scale
from .policy import FieldKind, FieldPolicy
from .rules import CompositeRule, completeness_rule, pairing_rule


class Status(str, Enum):
    DRAFT = "Draft"
    OPEN = "Open"
    IN_PROGRESS = "In-Progress"
    IN_REVIEW = "In-Review"
    COMPLETED = "Completed"
    DELETED = "Deleted"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


STRING = "string"
NUMBER = "number"
STATUS = "status"
OBJECT = "object"
ARRAY = "array"


@dataclass(frozen=True)
class FieldSpec:
    """
    One declared field.

    ``mode_governed`` fields take their policy from the operation mode;
    all others use the fixed ``policy``. Objects list their ``members`` and
    attach composite ``rules``; arrays describe their entries with ``item``.
    """
    name: str
    value_type: str
    mode_governed: bool = False
    policy: FieldPolicy = FieldPolicy.OPTIONAL_PRESERVING
    default: Optional[Any] = None
    minimum: Optional[float] = None
    members: Tuple["FieldSpec", ...] = ()
    rules: Tuple[CompositeRule, ...] = ()
    item: Optional["FieldSpec"] = None
    min_items: int = 0
    # Integers are accepted and stored as their decimal string
    integer_as_string: bool = False

    @property
    def kind(self) -> FieldKind:
        return FieldKind.COMPOSITE if self.value_type == OBJECT else FieldKind.SCALAR

    def member_names(self) -> Tuple[str, ...]:
        return tuple(member.name for member in self.members)


@dataclass(frozen=True)
class RecordSchema:
    """A closed schema: an ordered set of field specs, nothing else is accepted."""
    name: str
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self):
        names = self.field_names()
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate field names in schema '{self.name}'")
        for spec in self.fields:
            if spec.value_type == OBJECT and not spec.members:
                raise ValueError(f"Object field '{spec.name}' declares no members")
            if spec.value_type == ARRAY and spec.item is None:
                raise ValueError(f"Array field '{spec.name}' declares no item spec")

    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def mode_dependent(self) -> bool:
        return any(spec.mode_governed for spec in self.fields)


def _governed(name: str, value_type: str = STRING, **kwargs) -> FieldSpec:
    return FieldSpec(name, value_type, mode_governed=True, **kwargs)


def _optional(name: str, value_type: str = STRING, **kwargs) -> FieldSpec:
    return FieldSpec(name, value_type, **kwargs)


def _required(name: str, value_type: str = STRING, **kwargs) -> FieldSpec:
    return FieldSpec(name, value_type, policy=FieldPolicy.REQUIRED, **kwargs)


DISCORD_USER_MEMBERS = (
    _optional("discordHandle"),
    _optional("discordId", integer_as_string=True),
)

# Lenient pair: checked for consistency only, never mandatory on its own
DISCORD_USER_RULE = pairing_rule("discordId", "discordHandle")

# Strict pair used for the creator; required on create via the field policy
REQUIRED_DISCORD_USER_RULE = pairing_rule(
    "discordId", "discordHandle", message="Missing one of [discordId, discordHandle] in {path}"
)

REWARD_MEMBERS = (
    _optional("amount", NUMBER, minimum=0),
    _optional("currency", default=get_default_currency()),
    _optional("scale", NUMBER, default=get_default_scale()),
    _optional("amountWithoutScale", NUMBER),
)

REWARD_RULE = completeness_rule(
    ("amount", "currency", "scale", "amountWithoutScale"),
    numeric_fields=("amount", "scale", "amountWithoutScale"),
)

STATUS_HISTORY_ENTRY = FieldSpec(
    "statusHistory[]",
    OBJECT,
    members=(_optional("status", STATUS), _optional("modifiedAt")),
)


def _discord_user(name: str, required: bool = False, governed: bool = False) -> FieldSpec:
    return FieldSpec(
        name,
        OBJECT,
        mode_governed=governed,
        policy=FieldPolicy.REQUIRED if required else FieldPolicy.OPTIONAL_CLEARABLE,
        members=DISCORD_USER_MEMBERS,
        rules=(REQUIRED_DISCORD_USER_RULE if governed else DISCORD_USER_RULE,),
    )


BOUNTY_SCHEMA = RecordSchema(
    name="bounty",
    fields=(
        _optional("_id"),
        _governed("title"),
        _governed("description"),
        _governed("criteria"),
        _governed("customerId"),
        _governed("status", STATUS),
        _governed("dueAt"),
        _governed("reward", OBJECT, members=REWARD_MEMBERS, rules=(REWARD_RULE,)),
        _optional("statusHistory", ARRAY, item=STATUS_HISTORY_ENTRY),
        _optional("discordMessageId"),
        _optional("submissionNotes"),
        _optional("submissionUrl"),
        _governed("createdAt"),
        _optional("claimedAt"),
        _optional("submittedAt"),
        _optional("reviewedAt"),
        _discord_user("createdBy", governed=True),
        _discord_user("claimedBy"),
        _discord_user("submittedBy"),
        _discord_user("reviewedBy"),
    ),
)

CLAIM_SCHEMA = RecordSchema(
    name="bounty_claim",
    fields=(
        _required("submissionNotes"),
        _discord_user("claimedBy", required=True),
        _required("status", STATUS),
        _required("statusHistory", ARRAY, item=STATUS_HISTORY_ENTRY, min_items=1),
    ),
)
