"""Tree rules."""
