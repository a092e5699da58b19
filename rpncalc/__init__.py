"""Reverse Polish Notation calculator: a bounded stack, an evaluator and a command-line loop."""

__version__ = "0.1.0"
__all__ = ["stack", "rpn", "cli"]