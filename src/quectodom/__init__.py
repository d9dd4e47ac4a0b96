"""quectodom: literate document-tree construction.

A small library for building document trees through fluent wrapper objects,
rendering sparse records as tables, formatting numbers and times for display,
and fetching JSON with a time-expiring cache.

Progressive API Disclosure:
- Level 1: Wrappers - ElementWrapper, TextWrapper
- Level 2: Tables - TableMaker with Heading declarations and cell shapes
- Level 3: Collaborators - formatting functions, request_json, CachedFile
"""

__version__ = "0.1.0"
__author__ = "quectodom contributors"

from .formatting import (
    NumberFormatter,
    format_float,
    format_int,
    format_time,
    format_unit,
    get_sign_of,
)
from .net import CachedFile, FetchError, get_page_uri, request, request_json
from .shared.config import QuectodomConfig
from .tree import (
    Decorated,
    ElementWrapper,
    Heading,
    Leaf,
    NodeCell,
    TableMaker,
    TextWrapper,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Wrappers
    "ElementWrapper",
    "TextWrapper",

    # Level 2: Tables
    "TableMaker",
    "Heading",
    "Leaf",
    "NodeCell",
    "Decorated",

    # Level 3: Collaborators
    "NumberFormatter",
    "format_float",
    "format_int",
    "format_time",
    "format_unit",
    "get_sign_of",
    "CachedFile",
    "FetchError",
    "get_page_uri",
    "request",
    "request_json",

    # Configuration
    "QuectodomConfig",
]
