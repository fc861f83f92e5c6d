"""Frontend user repository implementations."""

from .user_record_repository import SQLUserRecordRepository

__all__ = ["SQLUserRecordRepository"]
