import logging
from typing import Optional

from ._cookie_helpers import decode_cookie
from .http_exceptions import CookieDecodeError
from .log import decoder_logger, internal_logger
from .models import DecodePolicy, Skip
from .typedefs import DecodeResult, DiagnosticSink

__all__ = ("CookieDecoder",)


class CookieDecoder:
    """Decodes located cookie name/value candidates under a fixed policy.

    In strict mode names and values must follow the RFC 6265 grammar.
    A rejected candidate is returned as a :class:`Skip`, or raised as
    :class:`CookieDecodeError` when *report_failures* is set.

    *sink*, if given, is called with every :class:`Skip` before it is
    returned or raised.  It is purely informational; errors raised by the
    sink are logged and ignored.
    """

    __slots__ = ("_policy", "_sink")

    def __init__(
        self,
        strict: bool = True,
        report_failures: bool = False,
        *,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        self._policy = DecodePolicy(strict=strict, report_failures=report_failures)
        self._sink = sink

    def __repr__(self) -> str:
        return "<{} strict={} report_failures={}>".format(
            self.__class__.__name__,
            self._policy.strict,
            self._policy.report_failures,
        )

    @property
    def policy(self) -> DecodePolicy:
        return self._policy

    @property
    def strict(self) -> bool:
        return self._policy.strict

    @property
    def report_failures(self) -> bool:
        return self._policy.report_failures

    def decode(
        self,
        header: str,
        name_begin: Optional[int],
        name_end: Optional[int],
        value_begin: Optional[int],
        value_end: Optional[int],
    ) -> DecodeResult:
        result = decode_cookie(
            header,
            name_begin,
            name_end,
            value_begin,
            value_end,
            strict=self._policy.strict,
        )
        if isinstance(result, Skip):
            self._notify(result)
            if self._policy.report_failures:
                raise CookieDecodeError(result)
        return result

    def _notify(self, skip: Skip) -> None:
        if decoder_logger.isEnabledFor(logging.DEBUG):
            decoder_logger.debug("%s", skip.message)
        if self._sink is None:
            return
        try:
            self._sink(skip)
        except Exception:
            internal_logger.exception("Exception in cookie diagnostic sink")
