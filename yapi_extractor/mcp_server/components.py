"""Component initialization for the MCP server.

This module centralizes construction of the YApi clients, the extraction
pipeline and the file persister used by tool handlers. Everything that
issues authenticated calls shares the single ``YapiSession``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import httpx

from yapi_extractor.client import InterfaceFetcher, MockRegistrar, YapiHttpClient, YapiSession
from yapi_extractor.config import PROJECT_ROOT, YapiSettings
from yapi_extractor.extraction import InterfaceExtractor
from yapi_extractor.logger import Logger
from yapi_extractor.storage import FilePersister


@dataclass
class ServerComponents:
    settings: YapiSettings
    http: YapiHttpClient
    session: YapiSession
    fetcher: InterfaceFetcher
    extractor: InterfaceExtractor
    persister: FilePersister
    registrar: MockRegistrar


def initialize_components(
    *,
    settings: YapiSettings,
    logger: Logger,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    anchor: Union[str, Path] = PROJECT_ROOT,
) -> ServerComponents:
    """Initialize all server components.

    Args:
        settings: Validated service settings
        logger: Logger
        transport: Optional httpx transport override (tests)
        anchor: Base directory for a relative OUTPUT_DIR
    """
    http = YapiHttpClient(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        verify_tls=settings.verify_tls,
        transport=transport,
        logger=logger,
    )
    session = YapiSession(
        http=http,
        email=settings.email,
        password=settings.password,
        login_path=settings.login_path,
        logger=logger,
    )
    fetcher = InterfaceFetcher(http=http, session=session, logger=logger)
    extractor = InterfaceExtractor(
        session=session,
        fetcher=fetcher,
        save_files=settings.save_files,
        output_dir=settings.output_dir,
        logger=logger,
    )
    persister = FilePersister(output_dir=settings.output_dir, anchor=anchor, logger=logger)
    registrar = MockRegistrar(http=http, session=session, logger=logger)
    logger.info("Server components initialized", base_url=settings.base_url)

    return ServerComponents(
        settings=settings,
        http=http,
        session=session,
        fetcher=fetcher,
        extractor=extractor,
        persister=persister,
        registrar=registrar,
    )
