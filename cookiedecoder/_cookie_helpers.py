"""
Internal cookie decoding helpers.

This module contains the single-candidate decoding pipeline shared by the
server and client decoders.  Nothing here logs or raises for bad input:
every rejection is returned as a :class:`~cookiedecoder.models.Skip`.
"""

from typing import FrozenSet, Optional

from .models import DecodedCookie, Skip, SkipReason
from .typedefs import DecodeResult

__all__ = (
    "decode_cookie",
    "first_invalid_cookie_name_octet",
    "first_invalid_cookie_value_octet",
    "unwrap_value",
)

# RFC 6265 section 4.1.1:
# cookie-octet = %x21 / %x23-2B / %x2D-3A / %x3C-5B / %x5D-7E
# i.e. US-ASCII excluding CTLs, whitespace, DQUOTE, comma, semicolon
# and backslash.
_COOKIE_OCTETS: FrozenSet[str] = frozenset(
    chr(i) for i in range(0x21, 0x7F)
) - frozenset('",;\\')
# "=" would end the name when the header is tokenized again.
_COOKIE_NAME_OCTETS: FrozenSet[str] = _COOKIE_OCTETS - frozenset("=")

_ABSENT = -1


def _first_invalid_octet(text: str, allowed: FrozenSet[str]) -> int:
    for i, char in enumerate(text):
        if char not in allowed:
            return i
    return -1


def first_invalid_cookie_name_octet(name: str) -> int:
    """Return the index of the first character not allowed in a cookie name.

    Returns -1 when the whole name is valid.
    """
    return _first_invalid_octet(name, _COOKIE_NAME_OCTETS)


def first_invalid_cookie_value_octet(value: str) -> int:
    """Return the index of the first character that is not a cookie-octet.

    The value must already be unwrapped.  Returns -1 when the whole value
    is valid.
    """
    return _first_invalid_octet(value, _COOKIE_OCTETS)


def unwrap_value(raw: str) -> Optional[str]:
    """Strip one layer of surrounding double quotes from a cookie value.

    Returns the value unchanged when it is not quoted at all and None when
    the quotes are unbalanced: a lone ``"``, or a quote on only one end.
    Quotes inside the value are left alone.
    """
    if not raw:
        return raw
    starts = raw[0] == '"'
    ends = raw[-1] == '"'
    if starts and ends and len(raw) >= 2:
        return raw[1:-1]
    if starts or ends:
        return None
    return raw


def _is_absent(offset: Optional[int]) -> bool:
    return offset is None or offset == _ABSENT


def decode_cookie(
    header: str,
    name_begin: Optional[int],
    name_end: Optional[int],
    value_begin: Optional[int],
    value_end: Optional[int],
    *,
    strict: bool,
) -> DecodeResult:
    """Decode one name/value candidate located inside *header*.

    Offsets are half-open ``[begin, end)`` indices into *header* and are
    trusted to be in range.  ``None`` (or -1) as a begin offset marks the
    name or the value as absent.  An empty name is rejected; an empty value
    is not.

    With *strict* the name and the unwrapped value are checked against the
    RFC 6265 grammar and the first offending character is reported.
    """
    if _is_absent(name_begin) or name_begin == name_end:
        return Skip(SkipReason.MISSING_NAME)

    assert name_begin is not None and name_end is not None
    name = header[name_begin:name_end]

    if _is_absent(value_begin):
        return Skip(SkipReason.MISSING_VALUE, name=name)

    assert value_begin is not None and value_end is not None
    raw_value = header[value_begin:value_end]
    value = unwrap_value(raw_value)
    if value is None:
        return Skip(SkipReason.UNBALANCED_QUOTES, name=name, value=raw_value)

    if strict:
        pos = first_invalid_cookie_name_octet(name)
        if pos >= 0:
            return Skip(
                SkipReason.INVALID_NAME_CHAR, name=name, char=name[pos], pos=pos
            )
        pos = first_invalid_cookie_value_octet(value)
        if pos >= 0:
            return Skip(
                SkipReason.INVALID_VALUE_CHAR,
                name=name,
                value=value,
                char=value[pos],
                pos=pos,
            )

    return DecodedCookie(name, value, len(value) != value_end - value_begin)
