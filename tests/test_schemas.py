"""
Schema tests - declared field tables and validation report models.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError as PydanticValidationError

from bounty_board.api.schemas import (
    ValidationErrorResponse,
    ValidationFieldError,
    ValidationSuccessResponse,
)
from bounty_board.core.policy import FieldKind, FieldPolicy, OperationMode
from bounty_board.core.schema import (
    BOUNTY_SCHEMA,
    CLAIM_SCHEMA,
    OBJECT,
    FieldSpec,
    RecordSchema,
    Status,
)
from bounty_board.core.validator import build_bounty_validator


class TestDeclaredSchemas:
    """Test the bounty and claim field tables."""

    def test_bounty_is_mode_dependent(self):
        assert BOUNTY_SCHEMA.mode_dependent is True
        assert CLAIM_SCHEMA.mode_dependent is False

    def test_bounty_field_order(self):
        names = BOUNTY_SCHEMA.field_names()
        assert names[0] == "_id"
        assert names[-4:] == ("createdBy", "claimedBy", "submittedBy", "reviewedBy")
        assert len(names) == 20

    def test_composite_kinds(self):
        kinds = {spec.name: spec.kind for spec in BOUNTY_SCHEMA.fields}
        assert kinds["reward"] is FieldKind.COMPOSITE
        assert kinds["createdBy"] is FieldKind.COMPOSITE
        assert kinds["title"] is FieldKind.SCALAR

    def test_claim_fields_required(self):
        assert all(spec.policy is FieldPolicy.REQUIRED for spec in CLAIM_SCHEMA.fields)

    def test_status_values(self):
        assert Status.values() == ("Draft", "Open", "In-Progress", "In-Review", "Completed", "Deleted")

    def test_duplicate_fields_rejected(self):
        with pytest.raises(ValueError):
            RecordSchema("dupes", (FieldSpec("a", "string"), FieldSpec("a", "string")))

    def test_object_without_members_rejected(self):
        with pytest.raises(ValueError):
            RecordSchema("bad", (FieldSpec("reward", OBJECT),))

    def test_specs_are_immutable(self):
        with pytest.raises(AttributeError):
            BOUNTY_SCHEMA.fields[1].name = "renamed"


class TestReportModels:
    """Test the pydantic report models."""

    def test_error_response_from_result(self):
        result = build_bounty_validator().validate({"bogus": 1}, OperationMode.UPDATE)
        response = ValidationErrorResponse.from_result(result)

        assert isinstance(response, ValidationErrorResponse)
        assert response.error_type == "VALIDATION_ERROR"
        assert response.message == "bogus is not a known field"
        assert response.errors[0].field == "bogus"
        assert response.errors[0].code == "UNKNOWN_FIELD"
        assert isinstance(response.timestamp, datetime)

    def test_explicit_timestamp_kept(self):
        ts = datetime(2024, 1, 1)
        response = ValidationErrorResponse(message="m", errors=[], timestamp=ts)
        assert response.timestamp == ts

    def test_empty_field_message_rejected(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            ValidationFieldError(field="title", code="INVALID_TYPE", message=" ")
        assert "message cannot be empty" in str(exc_info.value)

    def test_success_response(self):
        response = ValidationSuccessResponse(schema_name="bounty", mode="update", record={"title": "x"})
        assert response.success is True
        assert response.model_dump()["record"] == {"title": "x"}

    def test_error_response_needs_violations(self):
        result = build_bounty_validator().validate({}, OperationMode.UPDATE)
        assert result.ok
        with pytest.raises(ValueError, match="has no violations"):
            ValidationErrorResponse.from_result(result)

    def test_success_response_from_result(self):
        result = build_bounty_validator().validate({"title": "New title"}, OperationMode.UPDATE)
        response = ValidationSuccessResponse.from_result(result, "update")

        assert response.schema_name == "bounty"
        assert response.mode == "update"
        assert response.record == {"title": "New title"}
