from typing import TYPE_CHECKING, Callable, Union

from multidict import CIMultiDict, CIMultiDictProxy, MultiDict, MultiDictProxy

if TYPE_CHECKING:
    from .models import DecodedCookie, Skip

DecodeResult = Union["DecodedCookie", "Skip"]
DiagnosticSink = Callable[["Skip"], None]

LooseHeaders = Union[
    CIMultiDict[str],
    CIMultiDictProxy[str],
    MultiDict[str],
    MultiDictProxy[str],
]
