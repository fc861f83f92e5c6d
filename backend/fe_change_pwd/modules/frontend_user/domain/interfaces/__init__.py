"""
Domain interfaces for the frontend user module.

Repository contracts live in ``repositories``, ports implemented by
infrastructure adapters in ``services``.
"""
