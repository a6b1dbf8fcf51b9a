"""Records produced and consumed by the cookie decoder."""

import enum
from typing import Optional

import attr

__all__ = ("DecodePolicy", "DecodedCookie", "Skip", "SkipReason")


@attr.s(frozen=True, slots=True)
class DecodePolicy:
    strict = attr.ib(type=bool, default=True)
    report_failures = attr.ib(type=bool, default=False)


@attr.s(frozen=True, slots=True)
class DecodedCookie:
    """A cookie name/value pair taken from a header.

    ``wrapped`` tells whether the value was sent surrounded by double
    quotes; ``value`` never contains that outer pair.
    """

    name = attr.ib(type=str)
    value = attr.ib(type=str)
    wrapped = attr.ib(type=bool, default=False)


class SkipReason(enum.Enum):
    MISSING_NAME = "missing_name"
    MISSING_VALUE = "missing_value"
    UNBALANCED_QUOTES = "unbalanced_quotes"
    INVALID_NAME_CHAR = "invalid_name_char"
    INVALID_VALUE_CHAR = "invalid_value_char"


@attr.s(frozen=True, slots=True)
class Skip:
    """Why a cookie candidate was rejected.

    ``name`` and ``value`` hold whatever was extracted before the
    rejection. ``char`` and ``pos`` are only set for the invalid
    character reasons; ``pos`` indexes into the name or into the
    unwrapped value.
    """

    reason = attr.ib(type=SkipReason)
    name = attr.ib(type=Optional[str], default=None)
    value = attr.ib(type=Optional[str], default=None)
    char = attr.ib(type=Optional[str], default=None)
    pos = attr.ib(type=Optional[int], default=None)

    @property
    def message(self) -> str:
        reason = self.reason
        if reason is SkipReason.MISSING_NAME:
            return "Skipping cookie with null name"
        if reason is SkipReason.MISSING_VALUE:
            return f"Skipping cookie {self.name!r} with null value"
        if reason is SkipReason.UNBALANCED_QUOTES:
            return (
                "Skipping cookie because starting quotes are not properly "
                f"balanced in {self.value!r}"
            )
        if reason is SkipReason.INVALID_NAME_CHAR:
            return (
                f"Skipping cookie because name {self.name!r} contains "
                f"invalid char {self.char!r} at position {self.pos}"
            )
        return (
            f"Skipping cookie because value {self.value!r} contains "
            f"invalid char {self.char!r} at position {self.pos}"
        )
