"""Service layer: the per-source processing loop and its results."""
