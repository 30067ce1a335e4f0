"""
Input handling.

This package contains the code that turns an input file or standard
input into a stream of lines for the parser.
"""

from .reader import describe_source, open_input, read_lines

__all__ = ["describe_source", "open_input", "read_lines"]
