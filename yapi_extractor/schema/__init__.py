from yapi_extractor.schema.normalizer import extract_business_schema, parse_schema

__all__ = ["extract_business_schema", "parse_schema"]
