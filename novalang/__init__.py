"""Compiler for the Nova toy language, from source text to x86-64 assembly."""

__version__ = "0.1.0"