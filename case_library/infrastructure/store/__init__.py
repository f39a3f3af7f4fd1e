from .http_store_transport import HttpStoreTransport
from .local_store_transport import LocalStoreTransport
from .factory import build_store_transport

__all__ = [
    "HttpStoreTransport",
    "LocalStoreTransport",
    "build_store_transport",
]
