"""Renders a block into a string instead of the main output stream."""

from collections.abc import Callable

from quire.core.buffer import OutputBuffer

Block = Callable[[OutputBuffer], object]


def capture(block: Block) -> str:
    """Run ``block`` against a fresh buffer and return what it produced.

    The block may write to the buffer it receives, return a string, or both;
    a returned string is appended after anything written.
    """
    buffer = OutputBuffer()
    result = block(buffer)
    if isinstance(result, str):
        buffer.append(result)
    return buffer.getvalue()
