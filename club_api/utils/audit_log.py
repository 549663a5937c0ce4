"""
Audit logging for data-changing operations.

Every create, update and delete of a player or team is logged here, as are
requests rejected for pointing at records that do not exist.
"""

import logging
from typing import Optional
from fastapi import Request

# Configure audit logger
audit_logger = logging.getLogger("audit")
audit_logger.setLevel(logging.INFO)

# Create handler if not already configured
if not audit_logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        '%(asctime)s - AUDIT - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    audit_logger.addHandler(handler)
    audit_logger.propagate = False


class AuditLogger:
    """
    Centralized audit logging for store changes.
    """

    @staticmethod
    def _get_client_ip(request: Optional[Request]) -> str:
        """Extract client IP from request."""
        if not request:
            return "unknown"

        # Check for forwarded IP (if behind proxy)
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        return request.client.host if request.client else "unknown"

    @staticmethod
    def log_record_change(
        operation: str,
        entity: str,
        entity_id: int,
        request: Optional[Request] = None,
        details: Optional[str] = None
    ):
        """
        Log a create, update or delete.

        Args:
            operation: create, update or delete
            entity: player or team
            entity_id: Id of the affected record
            request: FastAPI request object for IP extraction
            details: Additional details about the change
        """
        ip = AuditLogger._get_client_ip(request)

        message = (
            f"RECORD_CHANGE | {operation.upper()} | "
            f"{entity.lower()}:{entity_id} | ip={ip}"
        )

        if details:
            message += f" | details={details}"

        audit_logger.info(message)

    @staticmethod
    def log_invalid_reference(
        operation: str,
        entity: str,
        entity_id: Optional[int],
        reason: str,
        request: Optional[Request] = None
    ):
        """
        Log a request rejected because it referenced a missing record.

        Args:
            operation: Operation attempted
            entity: Type of record being written
            entity_id: Id of the record being written, None on create
            reason: Error message returned to the client
            request: FastAPI request object
        """
        ip = AuditLogger._get_client_ip(request)

        message = (
            f"INVALID_REFERENCE | {operation.upper()} | "
            f"{entity.lower()}:{entity_id if entity_id is not None else 'new'} | "
            f"ip={ip} | reason={reason}"
        )

        audit_logger.warning(message)


# Convenience functions
def log_record_change(
    operation: str,
    entity: str,
    entity_id: int,
    request: Optional[Request] = None,
    details: Optional[str] = None
):
    """Convenience wrapper for AuditLogger.log_record_change."""
    AuditLogger.log_record_change(operation, entity, entity_id, request, details)


def log_invalid_reference(
    operation: str,
    entity: str,
    entity_id: Optional[int],
    reason: str,
    request: Optional[Request] = None
):
    """Convenience wrapper for AuditLogger.log_invalid_reference."""
    AuditLogger.log_invalid_reference(operation, entity, entity_id, reason, request)
