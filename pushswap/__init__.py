"""Sort integers on two stacks with a restricted set of operations."""

__version__ = "0.1.0"