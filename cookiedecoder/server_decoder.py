"""Decoding of the ``Cookie`` request header sent by user agents."""

from typing import ClassVar, Iterator, List, Optional, Tuple

from multidict import MultiDict, MultiDictProxy

from . import hdrs
from .decoder import CookieDecoder
from .helpers import WHITESPACE, rstrip_offset, skip_chars
from .models import DecodedCookie
from .typedefs import DiagnosticSink, LooseHeaders

__all__ = ("ServerCookieDecoder",)

_PAIR_SEPARATORS = WHITESPACE | frozenset(",;")
_RFC2965_VERSION = "$version"

_Span = Tuple[int, int, Optional[int], Optional[int]]


def _iter_spans(header: str) -> Iterator[_Span]:
    end = len(header)
    pos = 0
    rfc2965_style = header[: len(_RFC2965_VERSION)].lower() == _RFC2965_VERSION
    if rfc2965_style:
        # Skip the leading "$Version=..." pair.
        semi = header.find(";")
        pos = end if semi < 0 else semi + 1

    while True:
        pos = skip_chars(header, pos, _PAIR_SEPARATORS)
        if pos == end:
            return

        name_begin = pos
        while pos < end and header[pos] not in "=;":
            pos += 1
        name_end = rstrip_offset(header, name_begin, pos)

        value_begin: Optional[int] = None
        value_end: Optional[int] = None
        if pos < end and header[pos] == "=":
            value_begin = pos + 1
            semi = header.find(";", value_begin)
            pos = end if semi < 0 else semi
            value_end = rstrip_offset(header, value_begin, pos)

        if rfc2965_style and header[name_begin] == "$":
            # $Path, $Domain and $Port belong to the preceding cookie.
            continue

        yield name_begin, name_end, value_begin, value_end


class ServerCookieDecoder:
    """Decodes the ``Cookie`` header a user agent sends with a request.

    Pairs are separated by ``;``; a value extends up to the next ``;``.
    Malformed pairs are dropped, or abort the whole header with
    :class:`~cookiedecoder.CookieDecodeError` when *report_failures* is set.
    """

    __slots__ = ("_decoder",)

    STRICT: ClassVar["ServerCookieDecoder"]
    LAX: ClassVar["ServerCookieDecoder"]

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

    def decode_all(self, header: str) -> List[DecodedCookie]:
        """Return every accepted cookie in header order, duplicates included."""
        cookies: List[DecodedCookie] = []
        if not header:
            return cookies
        for name_begin, name_end, value_begin, value_end in _iter_spans(header):
            result = self._decoder.decode(
                header, name_begin, name_end, value_begin, value_end
            )
            if isinstance(result, DecodedCookie):
                cookies.append(result)
        return cookies

    def decode(self, header: str) -> "MultiDictProxy[DecodedCookie]":
        """Return accepted cookies keyed by name.

        Lookups return the first cookie with a given name, which RFC 6265
        makes the most specific one; ``getall()`` returns every occurrence.
        """
        cookies: MultiDict[DecodedCookie] = MultiDict()
        for cookie in self.decode_all(header):
            cookies.add(cookie.name, cookie)
        return MultiDictProxy(cookies)

    def decode_headers(self, headers: LooseHeaders) -> "MultiDictProxy[DecodedCookie]":
        """Decode every ``Cookie`` field found in request *headers*."""
        cookies: MultiDict[DecodedCookie] = MultiDict()
        for header in headers.getall(hdrs.COOKIE, ()):
            for cookie in self.decode_all(header):
                cookies.add(cookie.name, cookie)
        return MultiDictProxy(cookies)


ServerCookieDecoder.STRICT = ServerCookieDecoder(strict=True)
ServerCookieDecoder.LAX = ServerCookieDecoder(strict=False)
