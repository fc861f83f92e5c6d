"""Frontend user application layer."""
