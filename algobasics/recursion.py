"""Classic recursive exercises: Fibonacci, Josephus, Hanoi and friends."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_BIT_WIDTH = 4


def _require_at_least(name: str, value: int, minimum: int) -> None:
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    _require_at_least("n", n, 0)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers; none if ``count`` < 1."""
    series: list[int] = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        series.append(current)
        current, following = following, current + following
    return series


def josephus_every_second(n: int) -> int:
    """Survivor (1-based) when every second person of ``n`` is removed."""
    _require_at_least("n", n, 1)
    if n == 1:
        return 1
    half = josephus_every_second(n // 2)
    return 2 * half - 1 if n % 2 == 0 else 2 * half + 1


def to_four_bits(n: int) -> str:
    """Return the lowest four bits of ``n`` as a string of 0s and 1s."""
    _require_at_least("n", n, 0)
    return format(n % (1 << _BIT_WIDTH), f"0{_BIT_WIDTH}b")


def from_binary(bits: str) -> int:
    """Read ``bits`` as binary; any character other than '1' counts as 0."""
    return sum(1 << place for place, ch in enumerate(reversed(bits)) if ch == "1")


def josephus_binary(n: int) -> int:
    """Josephus by rotating the four-bit form of ``n`` left by one place.

    Agrees with :func:`josephus_every_second` when ``n`` uses all four bits.
    """
    bits = to_four_bits(n)
    return from_binary(bits[1:] + bits[:1])


def max_regions(lines: int) -> int:
    """Largest number of regions ``lines`` straight lines cut a plane into."""
    _require_at_least("lines", lines, 0)
    return 1 + lines * (lines + 1) // 2


def hanoi_move_count(disks: int) -> int:
    """Fewest moves that solve the Tower of Hanoi with ``disks`` disks."""
    _require_at_least("disks", disks, 1)
    return (1 << disks) - 1


def hanoi_moves(
    disks: int, source: str = "1", spare: str = "2", target: str = "3"
) -> list[tuple[str, str]]:
    """Return the ``(from, to)`` moves that carry ``disks`` disks to ``target``."""
    _require_at_least("disks", disks, 1)

    def solve(count: int, left: str, middle: str, right: str) -> Iterator[tuple[str, str]]:
        if count == 1:
            yield left, right
            return
        yield from solve(count - 1, left, right, middle)
        yield left, right
        yield from solve(count - 1, middle, left, right)

    return list(solve(disks, source, spare, target))


def is_palindrome_sequence(items: Sequence[Any]) -> bool:
    """Check whether ``items`` reads the same from both ends."""
    return all(items[i] == items[-1 - i] for i in range(len(items) // 2))


def josephus(n: int, k: int) -> int:
    """Survivor (1-based) of ``n`` people when every ``k``-th is removed."""
    _require_at_least("n", n, 1)
    _require_at_least("k", k, 1)
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position + 1


def collatz(n: int) -> list[int]:
    """Return the sequence from ``n``: halve evens, map odds to 3n+1, stop at 1."""
    _require_at_least("n", n, 1)
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``items``, each new item extending all earlier ones."""
    result: list[list[T]] = [[]]
    for item in items:
        result.extend([*subset, item] for subset in list(result))
    return result


def even_index_values(items: Sequence[T]) -> list[T]:
    """Values at even indices, from the last such index down to index 0."""
    return [items[i] for i in range(len(items) - 1, -1, -1) if i % 2 == 0]