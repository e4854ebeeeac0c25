"""
Bounty Board record validation.
Mode-aware schema validation for bounty records and bounty claims.
"""

from .core.policy import OperationMode, FieldKind, FieldPolicy, resolve_policy
from .core.errors import Violation, ViolationCode, BountyValidationError
from .core.schema import Status, BOUNTY_SCHEMA, CLAIM_SCHEMA
from .core.validator import (
    RecordValidator,
    ClaimValidator,
    ValidationResult,
    apply_update,
    build_bounty_validator,
    build_claim_validator,
)

__all__ = [
    'OperationMode',
    'FieldKind',
    'FieldPolicy',
    'resolve_policy',
    'Violation',
    'ViolationCode',
    'BountyValidationError',
    'Status',
    'BOUNTY_SCHEMA',
    'CLAIM_SCHEMA',
    'RecordValidator',
    'ClaimValidator',
    'ValidationResult',
    'apply_update',
    'build_bounty_validator',
    'build_claim_validator',
]
