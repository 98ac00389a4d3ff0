"""Local storage for generated artifacts."""

from yapi_extractor.storage.file_persister import FilePersister, resolve_output_dir

__all__ = ["FilePersister", "resolve_output_dir"]
