"""A bump allocator over one fixed-size buffer, with mark and pop."""

from __future__ import annotations

_ALIGN = 4


class ArenaOverflowError(MemoryError):
    """Raised when a request does not fit in the arena's remaining space."""


class Arena:
    """Fixed-size scratch memory handed out in 4-byte aligned slices.

    ``push`` returns a writable view of the requested size; ``mark`` and
    ``pop`` release everything pushed since a saved point.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("arena size must be non-negative")
        self._buffer = bytearray(size)
        self.allocated = size
        self.used = 0

    def push(self, size: int) -> memoryview:
        """Reserve ``size`` bytes and return a view of them.

        The arena advances by ``size`` rounded up to a multiple of 4.
        """
        if size < 0:
            raise ValueError("push size must be non-negative")
        start = self.used
        aligned = (size + _ALIGN - 1) & ~(_ALIGN - 1)
        if start + aligned > self.allocated:
            raise ArenaOverflowError(
                f"arena overflow: size {aligned}, used {start}, allocated {self.allocated}"
            )
        self.used = start + aligned
        return memoryview(self._buffer)[start:start + size]

    def push_zeroed(self, size: int) -> memoryview:
        """Like :meth:`push`, but the returned bytes are set to zero."""
        view = self.push(size)
        view[:] = bytes(size)
        return view

    def mark(self) -> int:
        """Return the current fill level, for a later :meth:`pop`."""
        return self.used

    def pop(self, mark: int) -> None:
        """Release everything pushed since ``mark`` was taken."""
        if not 0 <= mark <= self.allocated:
            raise ValueError(f"mark {mark} is outside the arena of {self.allocated} bytes")
        self.used = mark