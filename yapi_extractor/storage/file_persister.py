"""Write generated mock data and type definitions to disk.

Files land in ``{output_dir}/{interface_id}-mock.json`` and
``{output_dir}/{interface_id}-types.ts``. The two writes are independent;
there is no transaction across them.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from yapi_extractor.config import PROJECT_ROOT
from yapi_extractor.exceptions import ConfigurationError, PersistenceError
from yapi_extractor.logger import Logger, server_logger

MOCK_FILE_SUFFIX = "-mock.json"
TYPES_FILE_SUFFIX = "-types.ts"


def resolve_output_dir(output_dir: Union[str, Path], anchor: Union[str, Path]) -> Path:
    """Resolve the output directory without looking at the working directory.

    Absolute paths are used as-is; every other path, including one starting
    with ``~``, is joined to ``anchor``.
    """
    path = Path(output_dir)
    if path.is_absolute():
        return path
    return (Path(anchor) / path).resolve()


def check_interface_id(interface_id: str) -> None:
    """Reject ids that would not stay a plain file name prefix."""
    if (
        not interface_id
        or interface_id in (".", "..")
        or "/" in interface_id
        or "\\" in interface_id
        or "\0" in interface_id
    ):
        raise PersistenceError(
            f"Interface id {interface_id!r} cannot be used as a file name",
            code="INVALID_INTERFACE_ID",
            details={"interface_id": interface_id},
        )


class FilePersister:
    """Saves generated artifacts for an interface."""

    def __init__(
        self,
        output_dir: Optional[str],
        anchor: Union[str, Path] = PROJECT_ROOT,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            output_dir: Configured output directory (absolute or relative to anchor)
            anchor: Base directory for relative output directories
            logger: Logger instance
        """
        self.output_dir = output_dir
        self.anchor = Path(anchor)
        self.logger: Logger = logger or server_logger

    def persist(
        self,
        interface_id: str,
        mock_data: Optional[str] = None,
        type_definitions: Optional[str] = None,
    ) -> List[Path]:
        """Write whichever artifacts were provided.

        Returns:
            Paths of the files written

        Raises:
            ConfigurationError: If no output directory is configured
            PersistenceError: If the interface id is not a plain name, the mock
                data is not JSON or a write fails
        """
        if not self.output_dir:
            raise ConfigurationError(
                "OUTPUT_DIR is not configured",
                code="OUTPUT_DIR_NOT_SET",
            )
        check_interface_id(interface_id)

        base_dir = resolve_output_dir(self.output_dir, self.anchor)

        # Parse before touching the disk so bad input leaves nothing behind
        formatted_mock: Optional[str] = None
        if mock_data:
            try:
                formatted_mock = json.dumps(json.loads(mock_data), indent=2, ensure_ascii=False)
            except ValueError as exc:
                raise PersistenceError(
                    f"Mock data is not valid JSON: {exc}",
                    code="INVALID_MOCK_DATA",
                    details={"interface_id": interface_id},
                    cause=exc,
                ) from exc

        written: List[Path] = []
        try:
            base_dir.mkdir(parents=True, exist_ok=True)

            if formatted_mock is not None:
                mock_path = base_dir / f"{interface_id}{MOCK_FILE_SUFFIX}"
                mock_path.write_text(formatted_mock, encoding="utf-8")
                written.append(mock_path)

            if type_definitions:
                types_path = base_dir / f"{interface_id}{TYPES_FILE_SUFFIX}"
                types_path.write_text(type_definitions, encoding="utf-8")
                written.append(types_path)
        except OSError as exc:
            self.logger.error(
                "Failed to write generated files",
                directory=str(base_dir),
                error=str(exc),
            )
            raise PersistenceError(
                f"Failed to write files to {base_dir}: {exc}",
                details={"directory": str(base_dir), "written": [str(p) for p in written]},
                cause=exc,
            ) from exc

        self.logger.info(
            "Generated files saved",
            interface_id=interface_id,
            directory=str(base_dir),
            files=[path.name for path in written],
        )
        return written
