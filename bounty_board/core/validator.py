"""
Bounty validation core.
Record validator - composes field policies and composite rules into a full record check.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import is_validation_audit_enabled
from .errors import (
    BountyValidationError,
    Violation,
    ViolationCode,
    invalid_enum,
    invalid_type,
    missing_required,
    out_of_range,
    unknown_field,
)
from .policy import FieldPolicy, OperationMode, resolve_policy
from .rules import is_number, is_set
from .schema import (
    ARRAY,
    BOUNTY_SCHEMA,
    CLAIM_SCHEMA,
    NUMBER,
    OBJECT,
    STATUS,
    STRING,
    FieldSpec,
    RecordSchema,
    Status,
)
from ..util.logging import logger


@dataclass(frozen=True)
class ValidationResult:
    """Either a normalized record or the full, ordered set of violations."""
    schema: str
    mode: Optional[OperationMode]
    record: Optional[Dict[str, Any]] = None
    violations: Tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.violations

    def raise_for_violations(self) -> Dict[str, Any]:
        """Return the normalized record, or raise BountyValidationError."""
        if self.violations:
            raise BountyValidationError(self.violations)
        return self.record

    def summary(self) -> str:
        """Combine every violation into one user-facing message."""
        if self.ok:
            return "Valid"
        return "; ".join(v.message for v in self.violations)


class RecordValidator:
    """
    Validates candidate records against a closed schema.

    The operation mode is passed explicitly to every call. All violations are
    collected in a single pass; invalid input never raises.
    """

    def __init__(self, schema: RecordSchema):
        self.schema = schema
        self._names = frozenset(schema.field_names())

    def validate(self, candidate: Any, mode: Union[OperationMode, str, None] = None) -> ValidationResult:
        """
        Validate ``candidate`` for ``mode`` and return a ValidationResult.

        Any candidate value produces a result, never an exception. The mode is
        a caller contract, not input data: an unknown mode name, or no mode
        for a mode-dependent schema, raises ValueError before validation starts.
        """
        mode = self._coerce_mode(mode)
        violations: List[Violation] = []
        record: Dict[str, Any] = {}

        if not isinstance(candidate, Mapping):
            violations.append(invalid_type("", candidate, "object"))
            return self._finish(mode, None, violations)

        for key, value in candidate.items():
            if key not in self._names:
                violations.append(unknown_field(str(key), value))

        for spec in self.schema.fields:
            policy = self._policy_for(spec, mode)
            mentioned = spec.name in candidate
            value = candidate.get(spec.name)

            if spec.value_type == OBJECT:
                self._check_object(spec, policy, mode, mentioned, value, record, violations)
            elif spec.value_type == ARRAY:
                self._check_array(spec, policy, mode, mentioned, value, record, violations)
            elif value is None:
                self._absent(spec, policy, mode, mentioned, record, violations)
            else:
                problems = _check_scalar(spec, value, spec.name)
                if problems:
                    violations.extend(problems)
                else:
                    record[spec.name] = _normalize_scalar(spec, value)

        return self._finish(mode, record, violations, candidate)

    def _coerce_mode(self, mode):
        if isinstance(mode, str):
            mode = OperationMode(mode.lower())
        if mode is None and self.schema.mode_dependent:
            raise ValueError(f"Schema '{self.schema.name}' requires an operation mode")
        return mode

    def _policy_for(self, spec: FieldSpec, mode: Optional[OperationMode]) -> FieldPolicy:
        if spec.mode_governed:
            return resolve_policy(mode, spec.kind)
        return spec.policy

    def _absent(self, spec, policy, mode, mentioned, record, violations):
        if policy is FieldPolicy.REQUIRED:
            violations.append(missing_required(spec.name))
        elif spec.default is not None and mode is not OperationMode.UPDATE:
            record[spec.name] = copy.deepcopy(spec.default)
        elif policy is FieldPolicy.OPTIONAL_CLEARABLE and mentioned:
            # Explicit clear, stored as a single null rather than merged
            record[spec.name] = None

    def _check_object(self, spec, policy, mode, mentioned, value, record, violations):
        if value is not None and not isinstance(value, Mapping):
            violations.append(invalid_type(spec.name, value, "object"))
            return

        value = value or {}
        problems, normalized = _check_members(spec, value, spec.name)
        violations.extend(problems)

        if not any(is_set(value.get(name)) for name in spec.member_names()):
            # An object with nothing set is the same as an absent one
            self._absent(spec, policy, mode, mentioned, record, violations)
            return
        if problems:
            return

        failed = False
        for rule in spec.rules:
            violation = rule.check(spec.name, normalized)
            if violation is not None:
                violations.append(violation)
                failed = True
        if not failed:
            record[spec.name] = normalized

    def _check_array(self, spec, policy, mode, mentioned, value, record, violations):
        if value is None:
            self._absent(spec, policy, mode, mentioned, record, violations)
            return
        if not isinstance(value, (list, tuple)):
            violations.append(invalid_type(spec.name, value, "array"))
            return
        if len(value) < spec.min_items:
            violations.append(Violation(
                ViolationCode.MISSING_REQUIRED_FIELD,
                spec.name,
                f"{spec.name} field must have at least {spec.min_items} items",
                list(value),
            ))
            return

        entries = []
        problems: List[Violation] = []
        for index, entry in enumerate(value):
            path = f"{spec.name}[{index}]"
            if not isinstance(entry, Mapping):
                problems.append(invalid_type(path, entry, "object"))
                continue
            entry_problems, normalized = _check_members(spec.item, entry, path)
            problems.extend(entry_problems)
            entries.append(normalized)

        if problems:
            violations.extend(problems)
        else:
            record[spec.name] = entries

    def _finish(self, mode, record, violations, candidate=None) -> ValidationResult:
        mode_label = mode.value if mode else "fixed"
        if violations:
            if is_validation_audit_enabled():
                logger.log_validation_error(
                    self.schema.name, mode_label, violations, source_record=candidate
                )
            return ValidationResult(self.schema.name, mode, None, tuple(violations))

        if is_validation_audit_enabled():
            logger.log_validation_success(self.schema.name, mode_label, sorted(record))
        return ValidationResult(self.schema.name, mode, record, ())


class ClaimValidator(RecordValidator):
    """Fixed-requirement validator for claiming a bounty; the mode is ignored."""

    def __init__(self, schema: RecordSchema = CLAIM_SCHEMA):
        super().__init__(schema)

    def validate(self, candidate: Any, mode: Union[OperationMode, str, None] = None) -> ValidationResult:
        return super().validate(candidate, None)


def _check_scalar(spec: FieldSpec, value: Any, path: str) -> List[Violation]:
    if spec.value_type == STRING:
        if spec.integer_as_string and _is_integer(value):
            return []
        if not isinstance(value, str):
            return [invalid_type(path, value, "string")]
    elif spec.value_type == NUMBER:
        if not is_number(value):
            return [invalid_type(path, value, "number")]
        if spec.minimum is not None and value < spec.minimum:
            return [out_of_range(path, value, spec.minimum)]
    elif spec.value_type == STATUS:
        if not isinstance(value, str) or value not in Status.values():
            return [invalid_enum(path, value, Status.values())]
    return []


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _normalize_scalar(spec: FieldSpec, value: Any) -> Any:
    if spec.integer_as_string and _is_integer(value):
        return str(value)
    return value


def _check_members(spec: FieldSpec, value: Mapping, path: str):
    """Check the members of an object value, applying member defaults."""
    problems: List[Violation] = []
    normalized: Dict[str, Any] = {}
    members = spec.member_names()

    for key, member_value in value.items():
        if key not in members:
            problems.append(unknown_field(f"{path}.{key}", member_value))

    for member in spec.members:
        member_value = value.get(member.name)
        if member_value is None:
            if member.default is not None:
                normalized[member.name] = copy.deepcopy(member.default)
            continue
        member_problems = _check_scalar(member, member_value, f"{path}.{member.name}")
        if member_problems:
            problems.extend(member_problems)
        else:
            normalized[member.name] = _normalize_scalar(member, member_value)

    return problems, normalized


def apply_update(stored: Mapping[str, Any], normalized: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a normalized update to a stored record.

    Each mentioned key replaces the stored value wholesale, so composite
    objects are never merged field by field. Keys normalized to None are
    cleared. Anything not mentioned keeps its stored value.
    """
    updated = copy.deepcopy(dict(stored))
    for key, value in normalized.items():
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = copy.deepcopy(value)
    return updated


def build_bounty_validator() -> RecordValidator:
    return RecordValidator(BOUNTY_SCHEMA)


def build_claim_validator() -> ClaimValidator:
    return ClaimValidator(CLAIM_SCHEMA)
