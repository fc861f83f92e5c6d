"""
Bootstrap module for wiring the password change services.
"""

from .frontend_user_bootstrap import FrontendUserBootstrap, FrontendUserContainer

__all__ = ["FrontendUserBootstrap", "FrontendUserContainer"]
