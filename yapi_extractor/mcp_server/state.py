from __future__ import annotations

from typing import Optional

from yapi_extractor.client import MockRegistrar, YapiSession
from yapi_extractor.extraction import InterfaceExtractor
from yapi_extractor.mcp_server.components import ServerComponents
from yapi_extractor.storage import FilePersister

components: Optional[ServerComponents] = None


def set_components(value: Optional[ServerComponents]) -> None:
    global components
    components = value


def require_components() -> None:
    if components is None:
        raise RuntimeError("Server components have not been initialised")


def get_components() -> Optional[ServerComponents]:
    return components


def ensure_session() -> YapiSession:
    require_components()
    assert components is not None
    return components.session


def ensure_extractor() -> InterfaceExtractor:
    require_components()
    assert components is not None
    return components.extractor


def ensure_persister() -> FilePersister:
    require_components()
    assert components is not None
    return components.persister


def ensure_registrar() -> MockRegistrar:
    require_components()
    assert components is not None
    return components.registrar
