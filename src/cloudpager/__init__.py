"""Public package exports for cloudpager."""

from .async_client import AsyncServiceClient
from .client import ServiceClient
from .config import ClientConfig, TransportConfig
from .constructors import (
    new_async_linked_pager,
    new_async_marker_pager,
    new_async_pager,
    new_async_single_pager,
    new_linked_pager,
    new_marker_pager,
    new_pager,
    new_single_pager,
)
from .core.async_pager import AsyncPager
from .core.auth import AuthProvider, NoAuthProvider, TokenAuthProvider
from .core.errors import (
    ClientClosedError,
    ConfigurationError,
    DecodeError,
    ExtractionError,
    PageUnavailableError,
    PagerError,
    PaginationLimitError,
    TransportError,
    UnexpectedStatusError,
)
from .core.pager import Pager
from .core.pages import LinkedPage, MarkerPage, Page, SinglePage
from .core.snapshot import ResponseSnapshot

__all__ = [
    "ServiceClient",
    "AsyncServiceClient",
    "ClientConfig",
    "TransportConfig",
    "AuthProvider",
    "NoAuthProvider",
    "TokenAuthProvider",
    "ResponseSnapshot",
    "Page",
    "SinglePage",
    "LinkedPage",
    "MarkerPage",
    "Pager",
    "AsyncPager",
    "new_pager",
    "new_single_pager",
    "new_linked_pager",
    "new_marker_pager",
    "new_async_pager",
    "new_async_single_pager",
    "new_async_linked_pager",
    "new_async_marker_pager",
    "PagerError",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
    "ExtractionError",
    "PageUnavailableError",
    "PaginationLimitError",
    "ClientClosedError",
    "ConfigurationError",
]
