"""String puzzles: weasel evolution, even substrings, sign layout and replacements."""

from __future__ import annotations

from typing import Iterable


def reduce_weasel(s: str) -> str:
    """Return the canonical form of s: B's moved to the end, equal neighbours cancelled."""
    b_count = s.count("B")
    letters = s.replace("B", "") + ("B" if b_count % 2 else "")
    stack: list[str] = []
    for letter in letters:
        if stack and stack[-1] == letter:
            stack.pop()
        else:
            stack.append(letter)
    return "".join(stack)


def weasels_equivalent(u: str, v: str) -> bool:
    """Return whether u can become v by inserting or deleting AA, BB, CC, ABAB or BCBC."""
    return reduce_weasel(u) == reduce_weasel(v)


def even_substring_witness(s: str) -> str | None:
    """Return a substring of s with an even number of distinct non-empty substrings.

    The last pair of equal neighbours is preferred, then the last run of three
    distinct letters; None when s alternates between two letters.
    """
    pair = None
    for i in range(len(s) - 1):
        if s[i] == s[i + 1]:
            pair = s[i : i + 2]
    if pair is not None:
        return pair
    triple = None
    for i in range(len(s) - 2):
        if len(set(s[i : i + 3])) == 3:
            triple = s[i : i + 3]
    return triple


def center_sign(words: Iterable[str], width: int) -> list[str]:
    """Centre each word in a line of the given width, padding with dots.

    When a word cannot be centred exactly, the extra dot goes to the right on
    the first such line, then alternates sides.
    """
    lines = []
    uneven = 0
    for word in words:
        remaining = width - len(word)
        if remaining < 0:
            raise ValueError(f"word {word!r} is wider than {width}")
        half = remaining // 2
        if remaining % 2 == 0:
            left = right = half
        else:
            left = half + uneven % 2
            right = half + 1 - uneven % 2
            uneven += 1
        lines.append("." * left + word + "." * right)
    return lines


def can_replace(given: str, orders: str) -> bool:
    """Return whether every order can replace an adjacent '01' or '10' in turn."""
    if len(orders) != max(len(given) - 1, 0):
        raise ValueError("orders must be one shorter than given")
    zeros = given.count("0")
    ones = given.count("1")
    for order in orders:
        if order not in "01":
            continue
        if zeros == 0 or ones == 0:
            return False
        if order == "0":
            ones -= 1
        else:
            zeros -= 1
    return True