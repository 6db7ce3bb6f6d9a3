"""Filesystem and standard-stream access."""
