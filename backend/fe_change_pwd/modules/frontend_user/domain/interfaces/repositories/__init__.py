"""Repository interfaces."""

from .user_record_repository import IUserRecordRepository

__all__ = ["IUserRecordRepository"]
