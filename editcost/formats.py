"""
editcost.formats — Turn caller input into code-point sequences.

The engine compares sequences of Unicode code points, never bytes:

    to_sequence("héllo")              → ('h', 'é', 'l', 'l', 'o')
    to_sequence("héllo".encode())     → ('h', 'é', 'l', 'l', 'o')
    to_sequence(["a", "b"])           → ('a', 'b')

so "é" (two bytes in UTF-8) is one unit for every cost call.
"""

import logging
from typing import Iterable, Union


logger = logging.getLogger(__name__)

Sequence = tuple[str, ...]
TextLike = Union[str, bytes, bytearray, Iterable[str]]


def to_sequence(text: TextLike) -> Sequence:
    """
    Convert text into a tuple of single code points.

    Accepts:
        str              → split into code points
        bytes/bytearray  → decoded as UTF-8 (strict), then split
        iterable of str  → each element must be exactly one code point

    Raises UnicodeDecodeError for invalid UTF-8, TypeError for
    non-string elements, ValueError for multi-character elements.
    """
    if isinstance(text, str):
        return tuple(text)
    if isinstance(text, (bytes, bytearray)):
        return tuple(bytes(text).decode("utf-8"))

    seq = tuple(text)
    for item in seq:
        if not isinstance(item, str):
            logger.debug("rejecting sequence element %r", item)
            raise TypeError(f"sequence elements must be str, got {type(item).__name__}")
        if len(item) != 1:
            logger.debug("rejecting sequence element %r", item)
            raise ValueError(f"sequence elements must be single code points, got {item!r}")
    return seq


def sequence_to_string(seq: Iterable[str]) -> str:
    """Join a code-point sequence back into a string.  Inverse of to_sequence."""
    return "".join(seq)
