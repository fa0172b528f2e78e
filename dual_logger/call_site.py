"""
Call-site capture

Resolves the (file, line) of the code that called a logging helper so the
core only ever receives an already resolved location.
"""

import sys
from typing import NamedTuple, Optional


class SourceLocation(NamedTuple):
    """File path and line number of a call site."""

    file: Optional[str]
    line: Optional[int]


UNKNOWN_LOCATION = SourceLocation(None, None)


def caller_location(stacklevel: int = 1) -> SourceLocation:
    """
    Return the location of a caller further up the stack.

    Args:
        stacklevel: 0 is the function calling ``caller_location``, 1 its
                    caller, and so on

    Returns:
        SourceLocation, or UNKNOWN_LOCATION when the stack is shallower
        than requested
    """
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return UNKNOWN_LOCATION

    try:
        return SourceLocation(frame.f_code.co_filename, frame.f_lineno)
    finally:
        del frame
