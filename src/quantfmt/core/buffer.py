"""Fixed-capacity output buffer with truncating, NUL-terminated writes."""

from __future__ import annotations

from typing import Optional

# Enough for any single cascade result ("99.9k", "infty")
MIN_CAPACITY = 6
# Enough for a full "<days> days, <h> hrs, <m> min, <s> sec" breakdown
TIME_DELTA_CAPACITY = 48


class OutputBuffer:
    """A caller-owned text buffer of fixed capacity.

    Every write replaces the previous contents. At most ``capacity - 1``
    bytes of text are kept and the byte after them is always NUL, so the
    last byte of the buffer is NUL no matter how long the input was.

    Args:
        capacity: Total size in bytes, terminator included.

    Example:
        >>> buf = OutputBuffer(4)
        >>> buf.write("infty")
        'inf'
    """

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Buffer capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.raw = bytearray(capacity)

    def write(self, text: str) -> str:
        """Store ``text``, truncated to fit, and return what was stored."""
        data = text.encode("ascii")[: self.capacity - 1]
        self.raw[:] = data + bytes(self.capacity - len(data))
        return self.value

    @property
    def value(self) -> str:
        return bytes(self.raw).split(b"\0", 1)[0].decode("ascii")

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"OutputBuffer(capacity={self.capacity}, value={self.value!r})"


def emit(text: str, capacity: Optional[int] = None, buf: Optional[OutputBuffer] = None) -> str:
    """Deliver formatted text through the caller's buffer or capacity.

    With ``buf`` the text is written in place; with only ``capacity`` a
    fresh buffer of that size is used; with neither the text is returned
    unchanged. When both are given, ``capacity`` is ignored.
    """
    if buf is not None:
        return buf.write(text)
    if capacity is not None:
        return OutputBuffer(capacity).write(text)
    return text
