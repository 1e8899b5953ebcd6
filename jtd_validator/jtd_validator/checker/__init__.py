from .validity_checker import SchemaIssue, check_schema, find_schema_issues
