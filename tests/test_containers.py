import pytest

from algobasics.containers import (
    BoundedStack,
    QueueStack,
    TwoStackQueue,
    is_stack_permutation,
    next_greater,
    reverse_queue,
    run_queue_commands,
)


def test_bounded_stack_example():
    stack = BoundedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.peek() == 30
    assert stack.pop() == 30
    assert stack.pop() == 20
    assert len(stack) == 1


def test_bounded_stack_default_capacity():
    stack = BoundedStack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(100)


def test_bounded_stack_underflow():
    stack = BoundedStack(2)
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_bounded_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)


def test_two_stack_queue_example():
    queue = TwoStackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert not queue.empty()


def test_two_stack_queue_keeps_fifo_order_across_refills():
    queue = TwoStackQueue()
    queue.push("a")
    queue.push("b")
    assert queue.pop() == "a"
    queue.push("c")
    assert [queue.pop(), queue.pop()] == ["b", "c"]
    assert queue.empty()
    with pytest.raises(IndexError):
        queue.pop()


def test_queue_stack_example():
    stack = QueueStack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert stack.pop() == 2
    assert not stack.empty()
    assert stack.pop() == 1
    assert stack.empty()
    with pytest.raises(IndexError):
        stack.top()


def test_run_queue_commands():
    commands = [(3,), (1, 5), (3,), (2,), (3,), (2,)]
    assert run_queue_commands(commands) == ["Empty!", "5", "Empty!"]


def test_run_queue_commands_needs_value_for_enqueue():
    with pytest.raises(ValueError):
        run_queue_commands([(1,)])


def test_reverse_queue_round_trip():
    items = [3, 1, 4, 1, 5]
    reversed_items = reverse_queue(items)
    assert reversed_items[0] == items[-1]
    assert reverse_queue(reversed_items) == items


def test_next_greater_pinned():
    assert next_greater([4, 5, 2, 25]) == [5, 25, 25, -1]


def test_next_greater_invariant():
    heights = [7, 3, 9, 9, 1, 8, 2, 10]
    result = next_greater(heights)
    assert len(result) == len(heights)
    for position, (height, found) in enumerate(zip(heights, result)):
        if found == -1:
            assert all(later <= height for later in heights[position + 1:])
        else:
            assert found > height
            assert found in heights[position + 1:]


def test_next_greater_descending_has_none():
    assert next_greater([5, 4, 3]) == [-1, -1, -1]


def test_stack_permutation_example():
    assert is_stack_permutation([1, 2, 3], [2, 1, 3])


def test_stack_permutation_identity_and_reverse():
    items = [1, 2, 3, 4]
    assert is_stack_permutation(items, items)
    assert is_stack_permutation(items, items[::-1])


def test_stack_permutation_impossible():
    assert not is_stack_permutation([1, 2, 3], [3, 1, 2])


def test_stack_permutation_length_mismatch():
    with pytest.raises(ValueError):
        is_stack_permutation([1, 2], [1])