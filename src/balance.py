"""Balance module – compares how often 'p' and 'y' appear in a piece of text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LetterCount:
    """Case-insensitive tallies of 'p' and 'y' in one string."""

    p: int = 0
    y: int = 0

    @property
    def balanced(self) -> bool:
        return self.p == self.y


def count_letters(text: str) -> LetterCount:
    """Count 'p' and 'y' in *text* in a single pass, ignoring case."""
    p_count = 0
    y_count = 0
    for ch in text.lower():
        if ch == "p":
            p_count += 1
        elif ch == "y":
            y_count += 1
    return LetterCount(p=p_count, y=y_count)


def is_balanced(text: str) -> bool:
    """Return True if *text* holds as many 'p' as 'y' (case-insensitive).

    Text with neither letter, including the empty string, is balanced.
    """
    return count_letters(text).balanced
