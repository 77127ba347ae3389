"""Append-only text sink used as the output stream of a render call."""

from __future__ import annotations

import io


class OutputBuffer:
    """Accumulates rendered text.

    Helpers that emit output receive the buffer explicitly rather than
    reaching into the enclosing template scope.
    """

    def __init__(self, initial: str = "") -> None:
        self._io = io.StringIO()
        if initial:
            self._io.write(initial)

    def append(self, text: str) -> OutputBuffer:
        self._io.write(text)
        return self

    def write(self, text: str) -> int:
        return self._io.write(text)

    def getvalue(self) -> str:
        return self._io.getvalue()

    def __len__(self) -> int:
        return len(self._io.getvalue())

    def __str__(self) -> str:
        return self._io.getvalue()

    def __repr__(self) -> str:
        return f"OutputBuffer({self.getvalue()!r})"
