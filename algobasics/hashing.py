"""Open-addressing hash table for integer keys."""

from __future__ import annotations

import enum
from typing import Optional

DEFAULT_SIZE = 10
_SECONDARY_MODULUS = 5


class Probing(enum.Enum):
    """Collision resolution strategy."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    DOUBLE = "double"


class TableFullError(Exception):
    """Raised when probing finds no free slot for a key."""

    def __init__(self, key: int) -> None:
        super().__init__(
            f"Could not insert key {key}. Table might be full or probing failed."
        )
        self.key = key


class HashTable:
    """Fixed-size table of integer keys using the chosen probing scheme."""

    def __init__(self, probing: Probing = Probing.LINEAR, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.probing = Probing(probing)
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    def _linear(self, key: int):
        index = key % self.size
        for _ in range(self.size):
            yield index
            index = (index + 1) % self.size

    def _quadratic(self, key: int):
        index = key % self.size
        yield index
        for i in range(1, self.size - 1):
            index = (index + i * i) % self.size
            yield index

    def _double(self, key: int):
        base = key % self.size
        step = 1 + key % _SECONDARY_MODULUS
        for i in range(self.size):
            yield (base + i * step) % self.size

    def _probe(self, key: int):
        if self.probing is Probing.LINEAR:
            return self._linear(key)
        if self.probing is Probing.QUADRATIC:
            return self._quadratic(key)
        return self._double(key)

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it landed in."""
        if key < 0:
            raise ValueError("keys must not be negative")
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(key)

    def slots(self) -> tuple[Optional[int], ...]:
        """Return the slot contents, ``None`` marking an empty slot."""
        return tuple(self._slots)

    def render(self) -> str:
        """Return one ``Index i: ...`` line per slot."""
        return "\n".join(
            f"Index {i}: {'Empty' if key is None else key}"
            for i, key in enumerate(self._slots)
        )

    def __len__(self) -> int:
        return sum(key is not None for key in self._slots)

    def __contains__(self, key: object) -> bool:
        return key is not None and key in self._slots