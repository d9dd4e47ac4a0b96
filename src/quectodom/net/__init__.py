"""Network collaborators: page URI resolution, JSON fetches and a fetch cache."""

from .cache import CachedFile
from .fetch import FetchError, FetchResponse, request, request_json
from .page import get_page_uri

__all__ = [
    "CachedFile",
    "FetchError",
    "FetchResponse",
    "get_page_uri",
    "request",
    "request_json",
]
