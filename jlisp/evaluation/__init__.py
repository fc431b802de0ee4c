"""Evaluation: S-expression reduction and function application."""
