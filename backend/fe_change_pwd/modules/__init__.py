"""Plugin modules."""
