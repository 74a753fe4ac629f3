"""Small classic algorithms over sequences, strings and numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

_U32_MAX = 2**32 - 1

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_SUBTRACTIVE = {"I": "VX", "X": "LC", "C": "DM"}

_BRACKET_PAIRS = {"(": ")", "{": "}", "[": "]"}


def search(arr: Sequence[int], target: int) -> int | None:
    """Binary search in a sorted sequence; return the index of target or None."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def contains_duplicate(nums: Sequence[Any]) -> bool:
    """Report whether any value repeats, using no extra memory."""
    return any(n in nums[i + 1 :] for i, n in enumerate(nums))


def contains_duplicate_hashed(nums: Iterable[Any]) -> bool:
    """Report whether any value repeats, in linear time using a set."""
    seen = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def count_chars(text: str) -> dict[str, int]:
    """Return how many times each character occurs in text."""
    return dict(Counter(text))


def fibonacci(n: int) -> list[int]:
    """Return the first n Fibonacci numbers (always at least [0, 1]).

    Values are limited to unsigned 32 bits; OverflowError is raised beyond that.
    """
    first, second = 0, 1
    series = [first, second]
    for _ in range(2, n):
        first, second = second, first + second
        if second > _U32_MAX:
            raise OverflowError("Fibonacci value exceeds 32-bit range")
        series.append(second)
    return series


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix = strs[0]
    for s in strs[1:]:
        length = 0
        for a, b in zip(prefix, s):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
    return prefix


def is_palindrome_text(text: str) -> bool:
    """Report whether text reads the same backwards."""
    return text == text[::-1]


def is_palindrome_number(x: int) -> bool:
    """Report whether the decimal digits of x read the same backwards."""
    if x < 0:
        return False
    reversed_value = 0
    remaining = x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return x == reversed_value


def repeated_string(s: str, n: int) -> int:
    """Count the letter 'a' in the first n characters of s repeated forever."""
    if not s:
        raise ValueError("the string to repeat must not be empty")
    repeats, extra = divmod(n, len(s))
    return s.count("a") * repeats + s[:extra].count("a")


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters are ignored."""
    value = 0
    for i, c in enumerate(s):
        amount = _ROMAN_VALUES.get(c)
        if amount is None:
            continue
        following = s[i + 1] if i + 1 < len(s) else ""
        if following and following in _ROMAN_SUBTRACTIVE.get(c, ""):
            value -= amount
        else:
            value += amount
    return value


def sock_pairs(ar: Iterable[int]) -> int:
    """Count the matching pairs among the given sock colours."""
    return sum(count // 2 for count in Counter(ar).values())


def insertion_sort(arr: MutableSequence[Any]) -> None:
    """Sort arr in place by insertion."""
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j] < arr[j - 1]:
            arr[j], arr[j - 1] = arr[j - 1], arr[j]
            j -= 1


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort arr in place by selection."""
    for i in range(len(arr)):
        smallest = min(range(i, len(arr)), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(int(d) for d in str(n))


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first pair of distinct indices whose values sum to target."""
    for i, n in enumerate(nums):
        for j, m in enumerate(nums):
            if i != j and n + m == target:
                return [i, j]
    return []


def is_valid_brackets(s: str) -> bool:
    """Report whether every bracket in s is closed in the right order."""
    if len(s) % 2:
        return False
    expected: list[str] = []
    for c in s:
        closing = _BRACKET_PAIRS.get(c)
        if closing is not None:
            expected.append(closing)
        elif not expected or expected.pop() != c:
            return False
    return not expected