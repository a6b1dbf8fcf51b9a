__version__ = "1.0.0"

from typing import Tuple

from . import hdrs
from ._cookie_helpers import (
    decode_cookie,
    first_invalid_cookie_name_octet,
    first_invalid_cookie_value_octet,
    unwrap_value,
)
from .client_decoder import ClientCookieDecoder
from .decoder import CookieDecoder
from .http_exceptions import BadHttpMessage, CookieDecodeError, HttpProcessingError
from .models import DecodedCookie, DecodePolicy, Skip, SkipReason
from .server_decoder import ServerCookieDecoder
from .typedefs import DecodeResult, DiagnosticSink

__all__: Tuple[str, ...] = (
    "hdrs",
    # decoding
    "ClientCookieDecoder",
    "CookieDecoder",
    "ServerCookieDecoder",
    "decode_cookie",
    "first_invalid_cookie_name_octet",
    "first_invalid_cookie_value_octet",
    "unwrap_value",
    # models
    "DecodePolicy",
    "DecodeResult",
    "DecodedCookie",
    "DiagnosticSink",
    "Skip",
    "SkipReason",
    # exceptions
    "BadHttpMessage",
    "CookieDecodeError",
    "HttpProcessingError",
)
