"""Concrete infrastructure implementations and shared helpers."""

from .gateway import CompaniesHouseGateway, JsonFileGateway
from .io.filesystem import LocalFileSystem
from .io.http import RequestsJsonClient, build_registry_client

__all__ = [
    "CompaniesHouseGateway",
    "JsonFileGateway",
    "LocalFileSystem",
    "RequestsJsonClient",
    "build_registry_client",
]
