"""Tokenizing, word expansion, environment, builtins, redirections and program running for a small shell."""

__version__ = "0.1.0"