"""Runtime value types for Jlisp."""
