"""Various helper functions"""

from typing import FrozenSet

__all__ = ("WHITESPACE", "skip_chars", "rstrip_offset")

WHITESPACE: FrozenSet[str] = frozenset("\t\n\x0b\x0c\r ")


def skip_chars(text: str, pos: int, chars: FrozenSet[str]) -> int:
    """Return the first index at or after *pos* whose char is not in *chars*."""
    end = len(text)
    while pos < end and text[pos] in chars:
        pos += 1
    return pos


def rstrip_offset(text: str, begin: int, end: int) -> int:
    """Move *end* back over trailing whitespace, never past *begin*."""
    while end > begin and text[end - 1] in WHITESPACE:
        end -= 1
    return end
