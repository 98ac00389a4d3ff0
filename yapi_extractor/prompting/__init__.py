from yapi_extractor.prompting.builder import build_instruction

__all__ = ["build_instruction"]
