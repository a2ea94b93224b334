"""
Pydantic schemas for measurement progress reports.
"""

from .snapshot import ClientInfo, Snapshot

__all__ = ["ClientInfo", "Snapshot"]
