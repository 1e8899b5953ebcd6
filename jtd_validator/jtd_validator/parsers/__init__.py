from .schema_parser import parse_schema, schema_to_definition
