"""Small stack and queue structures and the exercises built on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

DEFAULT_CAPACITY = 100
EMPTY_MESSAGE = "Empty!"


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("Stack Overflow!")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("Stack Underflow!")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise IndexError("Stack is empty!")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


class TwoStackQueue:
    """A FIFO queue kept in two stacks: one for arrivals, one for departures."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def pop(self) -> Any:
        """Remove and return the oldest item."""
        self._shift()
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the oldest item without removing it."""
        self._shift()
        return self._outbox[-1]

    def empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class QueueStack:
    """A LIFO stack kept in a queue whose front is always the newest item."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        fresh: deque[Any] = deque([value])
        fresh.extend(self._queue)
        self._queue = fresh

    def pop(self) -> Any:
        """Remove and return the newest item."""
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the newest item without removing it."""
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue[0]

    def empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


def run_queue_commands(commands: Iterable[Sequence[int]]) -> list[str]:
    """Run queue commands and return the lines they print.

    ``(1, n)`` enqueues ``n``, ``(2,)`` dequeues if possible and ``(3,)``
    reports the front item or ``Empty!``. Other command codes are ignored.
    """
    queue: deque[int] = deque()
    output: list[str] = []
    for command in commands:
        if not command:
            raise ValueError("empty command")
        code = command[0]
        if code == 1:
            if len(command) < 2:
                raise ValueError("enqueue command needs a value")
            queue.append(command[1])
        elif code == 2:
            if queue:
                queue.popleft()
        elif code == 3:
            output.append(str(queue[0]) if queue else EMPTY_MESSAGE)
    return output


def reverse_queue(items: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order, as a stack would hand them back."""
    stack = list(items)
    return [stack.pop() for _ in range(len(stack))]


def next_greater(heights: Sequence[int]) -> list[int]:
    """For each height, the first strictly greater height to its right, or -1."""
    result = [-1] * len(heights)
    pending: list[int] = []
    for position, height in enumerate(heights):
        while pending and heights[pending[-1]] < height:
            result[pending.pop()] = height
        pending.append(position)
    return result


def is_stack_permutation(source: Sequence[Any], target: Sequence[Any]) -> bool:
    """Check whether ``target`` can be produced from ``source`` with one stack."""
    if len(source) != len(target):
        raise ValueError("source and target must have the same length")
    wanted = deque(target)
    held: list[Any] = []
    for item in source:
        if wanted and item == wanted[0]:
            wanted.popleft()
            while held and wanted and held[-1] == wanted[0]:
                held.pop()
                wanted.popleft()
        else:
            held.append(item)
    return not held