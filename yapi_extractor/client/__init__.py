"""Clients for the YApi platform HTTP API."""

from yapi_extractor.client.advmock import MockRegistrar
from yapi_extractor.client.http import YapiHttpClient, YapiResponse
from yapi_extractor.client.interfaces import InterfaceFetcher
from yapi_extractor.client.session import YapiSession

__all__ = [
    "InterfaceFetcher",
    "MockRegistrar",
    "YapiHttpClient",
    "YapiResponse",
    "YapiSession",
]
