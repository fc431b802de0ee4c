"""Builtin primitives registered into the root environment."""
