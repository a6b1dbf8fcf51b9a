"""Decoding of the ``Set-Cookie`` response header sent by servers."""

from typing import ClassVar, List, Optional

from . import hdrs
from .decoder import CookieDecoder
from .helpers import WHITESPACE, rstrip_offset, skip_chars
from .models import DecodedCookie
from .typedefs import DiagnosticSink, LooseHeaders

__all__ = ("ClientCookieDecoder",)


class ClientCookieDecoder:
    """Decodes the cookie carried by a ``Set-Cookie`` response header.

    Only the leading ``name=value`` pair is decoded; attributes following
    the first ``;`` are ignored.
    """

    __slots__ = ("_decoder",)

    STRICT: ClassVar["ClientCookieDecoder"]
    LAX: ClassVar["ClientCookieDecoder"]

    def __init__(
        self,
        strict: bool = True,
        report_failures: bool = False,
        *,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        self._decoder = CookieDecoder(strict, report_failures, sink=sink)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._decoder!r}>"

    @property
    def decoder(self) -> CookieDecoder:
        return self._decoder

    def decode(self, header: str) -> Optional[DecodedCookie]:
        """Return the cookie set by *header*, or None if it was skipped."""
        end = len(header)
        name_begin = pos = skip_chars(header, 0, WHITESPACE)
        while pos < end and header[pos] not in "=;":
            pos += 1
        name_end = rstrip_offset(header, name_begin, pos)

        value_begin: Optional[int] = None
        value_end: Optional[int] = None
        if pos < end and header[pos] == "=":
            value_begin = skip_chars(header, pos + 1, WHITESPACE)
            semi = header.find(";", value_begin)
            value_end = rstrip_offset(header, value_begin, end if semi < 0 else semi)

        result = self._decoder.decode(
            header, name_begin, name_end, value_begin, value_end
        )
        if isinstance(result, DecodedCookie):
            return result
        return None

    def decode_headers(self, headers: LooseHeaders) -> List[DecodedCookie]:
        """Decode every ``Set-Cookie`` field of response *headers*."""
        cookies: List[DecodedCookie] = []
        for header in headers.getall(hdrs.SET_COOKIE, ()):
            cookie = self.decode(header)
            if cookie is not None:
                cookies.append(cookie)
        return cookies


ClientCookieDecoder.STRICT = ClientCookieDecoder(strict=True)
ClientCookieDecoder.LAX = ClientCookieDecoder(strict=False)
