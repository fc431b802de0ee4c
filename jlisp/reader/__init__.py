"""Reader: source text to parse tree, parse tree to values."""
