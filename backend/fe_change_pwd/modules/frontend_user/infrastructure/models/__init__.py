"""Frontend user persistence models."""

from .user_record_model import FrontendUserModel

__all__ = ["FrontendUserModel"]
