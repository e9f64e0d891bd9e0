"""String manipulation helpers built on simple stack and queue ideas."""

from __future__ import annotations


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    _require_non_negative(start=start, length=length)
    return text[start:start + length]


def find_index(text: str, pattern: str) -> int:
    """Return the first position of ``pattern`` in ``text``, or -1 if absent."""
    return text.find(pattern)


def insert_substring(text: str, sub: str, position: int) -> str:
    """Insert ``sub`` into ``text`` before ``position``.

    Positions before the start insert at the front; positions past the end
    append.
    """
    position = max(position, 0)
    return text[:position] + sub + text[position:]


def delete_substring(text: str, start: int, length: int) -> str:
    """Remove ``length`` characters from ``text`` starting at ``start``."""
    _require_non_negative(start=start, length=length)
    return text[:start] + text[start + length:]


def replace_first(text: str, pattern: str, replacement: str) -> str:
    """Replace the first occurrence of ``pattern`` with ``replacement``."""
    return text.replace(pattern, replacement, 1)


def is_palindrome(text: str) -> bool:
    """Check for a palindrome over ASCII letters and digits, ignoring case."""
    cleaned = [ch.lower() for ch in text if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def is_letter_palindrome(text: str) -> bool:
    """Check for a palindrome over ASCII letters only, ignoring case."""
    letters = [ch.upper() for ch in text if ch.isascii() and ch.isalpha()]
    return all(a == b for a, b in zip(letters, reversed(letters)))


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly cancel equal neighbouring characters; may return ''."""
    stack: list[str] = []
    for ch in text:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def reverse_words(text: str) -> str:
    """Return the whitespace-separated words of ``text`` in reverse order."""
    return " ".join(reversed(text.split()))


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def remove_duplicate_letters(text: str) -> str:
    """Keep one of each character, giving the smallest result in order."""
    last_index = {ch: i for i, ch in enumerate(text)}
    stack: list[str] = []
    seen: set[str] = set()
    for i, ch in enumerate(text):
        if ch in seen:
            continue
        while stack and stack[-1] > ch and last_index[stack[-1]] > i:
            seen.discard(stack.pop())
        stack.append(ch)
        seen.add(ch)
    return "".join(stack)