"""
Utility functions for socialnet.

Low-level helpers shared by the loader and the composition root.
No domain logic should live here.
"""

from socialnet.utils.text import (
    tokenize,
    split_lines,
    parse_characteristics,
    label_set,
    parse_int,
)

__all__ = [
    "tokenize",
    "split_lines",
    "parse_characteristics",
    "label_set",
    "parse_int",
]
