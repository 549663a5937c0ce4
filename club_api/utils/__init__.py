"""
Utility modules for the Player Club Signing API.
"""

from .audit_log import AuditLogger, log_record_change, log_invalid_reference

__all__ = [
    "AuditLogger",
    "log_record_change",
    "log_invalid_reference"
]
