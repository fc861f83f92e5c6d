"""
fe_change_pwd

Password change handling for frontend users: forced and expiry based
password changes, password complexity validation and password updates.
"""

__version__ = "1.0.0"
