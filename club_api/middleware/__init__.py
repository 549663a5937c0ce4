"""
Middleware modules for the Player Club Signing API.
"""

from .request_log import RequestLogMiddleware

__all__ = [
    "RequestLogMiddleware"
]
