"""
Player Club Signing API.

In-memory CRUD service for players and teams of a fictional rugby union.
"""

__version__ = "1.0.0"
