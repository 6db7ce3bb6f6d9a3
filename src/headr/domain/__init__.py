"""Pure parsing rules with no I/O."""
