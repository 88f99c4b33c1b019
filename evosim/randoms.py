"""Buffered random numbers of fixed widths."""

from __future__ import annotations

import random
from typing import Callable, List, Optional

BUFFER_SIZE = 65536


class _Pool:
    """A block of random values refilled whenever the cursor wraps to zero."""

    def __init__(self, fill: Callable[[], List[int]]) -> None:
        self._fill = fill
        self._values = fill()
        self._cursor = 0

    def next(self) -> int:
        if self._cursor == 0:
            self._values = self._fill()
        value = self._values[self._cursor]
        self._cursor = (self._cursor + 1) % BUFFER_SIZE
        return value


class Randoms:
    """Source of 8, 16, 32 and 64 bit random numbers drawn from blocks."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._pool8 = _Pool(self._block8)
        self._pool16 = _Pool(self._block16)
        self._pool32 = _Pool(self._block32)
        self._pool64 = _Pool(self._block64)

    def _block8(self) -> List[int]:
        return list(self._rng.randbytes(BUFFER_SIZE))

    def _block16(self) -> List[int]:
        return memoryview(self._rng.randbytes(BUFFER_SIZE * 2)).cast("H").tolist()

    def _block32(self) -> List[int]:
        return memoryview(self._rng.randbytes(BUFFER_SIZE * 4)).cast("I").tolist()

    def _block64(self) -> List[int]:
        return memoryview(self._rng.randbytes(BUFFER_SIZE * 8)).cast("Q").tolist()

    def rand8(self) -> int:
        """Return a random integer in [0, 2**8)."""
        return self._pool8.next()

    def rand16(self) -> int:
        """Return a random integer in [0, 2**16)."""
        return self._pool16.next()

    def rand32(self) -> int:
        """Return a random integer in [0, 2**32)."""
        return self._pool32.next()

    def rand64(self) -> int:
        """Return a random integer in [0, 2**64)."""
        return self._pool64.next()