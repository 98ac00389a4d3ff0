"""Extraction pipeline: session, fetch, normalize, instruction."""

from typing import Optional

from yapi_extractor.client.interfaces import InterfaceFetcher
from yapi_extractor.client.session import YapiSession
from yapi_extractor.exceptions import SessionExpiredError
from yapi_extractor.logger import Logger, server_logger
from yapi_extractor.prompting.builder import build_instruction
from yapi_extractor.schema.normalizer import extract_business_schema, parse_schema
from yapi_extractor.validation.models import (
    ExtractInterfaceOutput,
    GenerateType,
    InterfaceRecord,
    ResponseSchemas,
)


class InterfaceExtractor:
    """Produces the schema and generation instruction for one interface."""

    def __init__(
        self,
        session: YapiSession,
        fetcher: InterfaceFetcher,
        save_files: bool,
        output_dir: Optional[str],
        logger: Optional[Logger] = None,
    ):
        self.session = session
        self.fetcher = fetcher
        self.save_files = save_files
        self.output_dir = output_dir
        self.logger: Logger = logger or server_logger

    async def fetch_with_reauth(self, interface_id: str) -> InterfaceRecord:
        """Fetch the interface, logging in again once if the session expired.

        The fetcher invalidates the session on expiry, so the second
        ensure_session() performs a fresh login. A second expiry propagates.
        """
        await self.session.ensure_session()
        try:
            return await self.fetcher.fetch_interface(interface_id)
        except SessionExpiredError:
            self.logger.info("Retrying fetch after re-login", interface_id=interface_id)
            await self.session.ensure_session()
            return await self.fetcher.fetch_interface(interface_id)

    async def extract(
        self, interface_id: str, generate_type: GenerateType = GenerateType.BOTH
    ) -> ExtractInterfaceOutput:
        record = await self.fetch_with_reauth(interface_id)

        full_schema = parse_schema(record.res_body)
        business_schema = extract_business_schema(full_schema)

        prompt = build_instruction(record, business_schema, generate_type, self.save_files)
        self.logger.info(
            "Interface extracted",
            interface_id=interface_id,
            generate_type=GenerateType(generate_type).value,
            prompt_length=len(prompt),
        )

        return ExtractInterfaceOutput(
            interface_id=interface_id,
            project_id=str(record.project_id),
            interface_name=record.title,
            method=record.method,
            path=record.path,
            schemas=ResponseSchemas(response=business_schema),
            prompt=prompt,
            should_save_files=self.save_files,
            output_dir=self.output_dir,
        )
