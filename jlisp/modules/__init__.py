"""Loading Jlisp source files."""
