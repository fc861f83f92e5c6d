"""Frontend user infrastructure layer."""
