"""
Frontend User Module

Password change handling for frontend users of the host CMS.
"""
