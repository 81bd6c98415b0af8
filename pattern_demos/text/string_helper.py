from collections import Counter
from typing import Optional


def _same_ignoring_case(a: str, b: str) -> bool:
    # One code point against one: mappings that expand ("ß" -> "SS") don't count
    if a == b:
        return True
    upper_a, upper_b = a.upper(), b.upper()
    if len(upper_a) == 1 and upper_a == upper_b:
        return True
    lower_a, lower_b = a.lower(), b.lower()
    return len(lower_a) == 1 and lower_a == lower_b


def is_palindrome(value: Optional[str]) -> bool:
    """
    Case-insensitive palindrome check. None and "" are not palindromes.

    Characters are compared one code point at a time, so case mappings that
    expand a character never match. Reversal also works on code points,
    leaving combining marks detached from their base.
    """
    if not value:
        return False
    return all(_same_ignoring_case(a, b) for a, b in zip(value, reversed(value)))


def get_character_frequency(value: Optional[str]) -> Counter:
    """Count each character of value, case-sensitively."""
    if not value:
        return Counter()
    return Counter(value)
