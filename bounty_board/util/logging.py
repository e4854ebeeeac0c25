"""
Structured audit logging for bounty validation.
Violation values are never logged, only their codes and field paths.
"""

import logging
from typing import Any, Dict, List, Mapping

from ..core.config import LOG_LEVEL

SENSITIVE_FIELDS = ['value', 'submissionNotes', 'discordId', 'discordHandle']


class StructuredLogger:
    """Structured logger for validation operations."""

    def __init__(self, name: str = "bounty_board"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_validation_success(self, schema: str, mode: str, fields: List[str] = None):
        """Log a record that passed validation."""
        log_details = {
            "schema": schema,
            "mode": mode,
            "field_count": len(fields) if fields else 0,
        }
        if fields:
            log_details["fields"] = fields
        self.log_operation("validation.success", "validated", log_details)

    def log_validation_error(self, schema: str, mode: str, violations: List[Any],
                             source_record: Mapping[str, Any] = None):
        """Log rejected records with sanitized violation details."""
        sanitized = []
        for violation in violations:
            if hasattr(violation, "to_dict"):
                entry = violation.to_dict()
                if "value" in entry:
                    entry["value"] = "[REDACTED]"
                sanitized.append(entry)
            else:
                sanitized.append(str(violation)[:100])  # Limit message length

        log_details = {
            "schema": schema,
            "mode": mode,
            "errors": sanitized,
            "error_count": len(sanitized),
        }

        if source_record is not None:
            # Identities and notes never reach the log
            log_details["candidate"] = sanitize_payload(source_record)

        self.log_operation("validation.error", "rejected", log_details)

    def error(self, message: str) -> None:
        self.logger.error(message)


# Global logger instance
logger = StructuredLogger()


def sanitize_payload(payload: Any, reveal_sensitive: bool = False, sensitive_fields: List[str] = None) -> Any:
    """Sanitize a candidate record for audit logging."""
    if sensitive_fields is None:
        sensitive_fields = SENSITIVE_FIELDS

    if isinstance(payload, Mapping):
        sanitized = {}
        for k, v in payload.items():
            if reveal_sensitive or k not in sensitive_fields:
                sanitized[k] = sanitize_payload(v, reveal_sensitive, sensitive_fields)
            else:
                sanitized[k] = "[REDACTED]"
        return sanitized
    elif isinstance(payload, str):
        # Truncate long strings
        return payload[:100] + "..." if len(payload) > 100 else payload
    elif isinstance(payload, (list, tuple)):
        return [sanitize_payload(item, reveal_sensitive, sensitive_fields) for item in payload]
    else:
        return payload
