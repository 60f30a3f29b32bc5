"""A small untyped lambda-calculus interpreter: parser, evaluator and command line."""

__version__ = "0.1.6"
__all__ = ["ast", "parser", "interpreter", "cli"]