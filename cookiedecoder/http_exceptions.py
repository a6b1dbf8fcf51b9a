"""Low-level http related exceptions."""

from textwrap import indent
from typing import TYPE_CHECKING, Optional, Union

from multidict import CIMultiDict

if TYPE_CHECKING:
    from .models import Skip

__all__ = ("HttpProcessingError", "BadHttpMessage", "CookieDecodeError")


class HttpProcessingError(Exception):
    """HTTP error.

    Shortcut for raising HTTP errors with custom code, message and headers.

    code: HTTP Error code.
    message: (optional) Error message.
    headers: (optional) Headers to be sent in response, a list of pairs
    """

    code = 0
    message = ""
    headers: Optional[Union[CIMultiDict[str], dict]] = None

    def __init__(
        self,
        *,
        code: Optional[int] = None,
        message: str = "",
        headers: Optional[Union[CIMultiDict[str], dict]] = None,
    ) -> None:
        if code is not None:
            self.code = code
        self.headers = headers
        self.message = message

    def __str__(self) -> str:
        msg = indent(self.message, "  ")
        return f"{self.code}, message:\n{msg}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.code}, message={self.message!r}>"


class BadHttpMessage(HttpProcessingError):
    code = 400
    message = "Bad Request"

    def __init__(
        self, message: str, *, headers: Optional[CIMultiDict[str]] = None
    ) -> None:
        super().__init__(message=message, headers=headers)
        self.args = (message,)


class CookieDecodeError(BadHttpMessage, ValueError):
    """A cookie candidate was rejected while failures are reported.

    Raised instead of silently skipping the candidate, so the enclosing
    header parse fails as a whole.
    """

    def __init__(self, skip: "Skip") -> None:
        super().__init__(skip.message)
        self.args = (skip,)
        self.skip = skip
