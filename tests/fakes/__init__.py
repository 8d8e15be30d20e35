"""Exports for test fakes."""

from .filesystem import InMemoryFileSystem
from .gateway import FakeCompanyDataGateway
from .http import FakeHttpClient

__all__ = [
    "FakeCompanyDataGateway",
    "FakeHttpClient",
    "InMemoryFileSystem",
]
